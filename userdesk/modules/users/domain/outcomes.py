"""
Repository Outcomes

Explicit result values returned by repository operations. A missing id is
reported as ``NotFound`` instead of being raised, so callers branch on the
returned value.
"""
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying the operation's value (None for mutations)."""
    value: T = None


@dataclass(frozen=True)
class NotFound:
    """The referenced user id is not currently held by the repository."""
    user_id: int

    @property
    def message(self) -> str:
        return f"User with ID {self.user_id} not found."


Outcome = Union[Ok[T], NotFound]
