"""
User Repository

Storage contract for users. Handlers depend on this interface only, so a
persistent backing can replace the in-memory one without touching callers.
"""
from abc import ABC, abstractmethod
from typing import List, Union

from userdesk.modules.users.domain.outcomes import Outcome
from userdesk.modules.users.domain.user import User, UserFields


class UserRepository(ABC):
    """Abstract CRUD interface for users."""

    @abstractmethod
    def add(self, user: User) -> int:
        """Store a new user and return the id assigned to it."""

    @abstractmethod
    def remove(self, user_id: int) -> Outcome[None]:
        """Delete the user with the given id."""

    @abstractmethod
    def get_by_id(self, user_id: int) -> Outcome[User]:
        """Return a snapshot of the user with the given id."""

    @abstractmethod
    def edit(self, user_id: int, replacement: Union[UserFields, User]) -> Outcome[None]:
        """Overwrite name, age and email of a stored user. The id never changes."""

    @abstractmethod
    def list_all(self) -> List[User]:
        """Return snapshots of all stored users in insertion order."""
