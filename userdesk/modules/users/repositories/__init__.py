"""
Data Access Layer (Repositories)

Repositories own the live set of users and id assignment.
"""

from .user_repository import UserRepository
from .memory_repository import InMemoryUserRepository

__all__ = [
    "UserRepository",
    "InMemoryUserRepository",
]
