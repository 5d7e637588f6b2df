"""
User Domain Model

Pure data model representing a managed user.
"""
from dataclasses import dataclass, replace
from typing import Optional


@dataclass
class UserFields:
    """Editable fields of a user, used as the replacement payload for edits."""
    name: str
    age: int
    email: str


@dataclass
class User:
    """User domain model. ``id`` stays None until a repository stores the user."""
    name: str
    age: int
    email: str
    id: Optional[int] = None

    def to_dict(self) -> dict:
        """Convert User to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "age": self.age,
            "email": self.email,
        }

    def with_id(self, user_id: int) -> "User":
        return replace(self, id=user_id)

    def apply(self, fields: UserFields) -> None:
        """Overwrite name, age and email in place. The id is left untouched."""
        self.name = fields.name
        self.age = fields.age
        self.email = fields.email

    def copy(self) -> "User":
        return replace(self)
