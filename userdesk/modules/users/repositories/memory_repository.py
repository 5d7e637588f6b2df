"""
In-Memory User Repository

Keeps users in an insertion-ordered list for the lifetime of the process.
Every operation runs under one lock so concurrent handlers never share an id
or observe a half-applied edit.
"""
import logging
import threading
from typing import List, Optional, Union

from userdesk.modules.users.domain.outcomes import NotFound, Ok, Outcome
from userdesk.modules.users.domain.user import User, UserFields
from userdesk.modules.users.repositories.user_repository import UserRepository

logger = logging.getLogger("userdesk.users.repository")


class InMemoryUserRepository(UserRepository):
    """Repository backed by a Python list. Nothing survives a restart."""

    def __init__(self):
        self._users: List[User] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def _find(self, user_id: int) -> Optional[User]:
        # Linear scan; caller must hold the lock.
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def add(self, user: User) -> int:
        """Assign the next id to a copy of ``user`` and store it."""
        with self._lock:
            user_id = self._next_id
            self._users.append(user.with_id(user_id))
            self._next_id += 1
        logger.debug(f"[InMemoryUserRepository.add] user_id={user_id}")
        return user_id

    def remove(self, user_id: int) -> Outcome[None]:
        with self._lock:
            user = self._find(user_id)
            if user is None:
                return NotFound(user_id)
            self._users = [u for u in self._users if u is not user]
        logger.debug(f"[InMemoryUserRepository.remove] user_id={user_id}")
        return Ok(None)

    def get_by_id(self, user_id: int) -> Outcome[User]:
        with self._lock:
            user = self._find(user_id)
            if user is None:
                return NotFound(user_id)
            return Ok(user.copy())

    def edit(self, user_id: int, replacement: Union[UserFields, User]) -> Outcome[None]:
        """Overwrite name, age and email; any id on ``replacement`` is ignored."""
        with self._lock:
            user = self._find(user_id)
            if user is None:
                return NotFound(user_id)
            user.apply(replacement)
        logger.debug(f"[InMemoryUserRepository.edit] user_id={user_id}")
        return Ok(None)

    def list_all(self) -> List[User]:
        with self._lock:
            return [user.copy() for user in self._users]
