"""
Domain Models

Pure data models for the user entity and repository outcomes.
"""

from .user import User, UserFields
from .outcomes import NotFound, Ok, Outcome

__all__ = [
    "User",
    "UserFields",
    "Ok",
    "NotFound",
    "Outcome",
]
