"""
HTTP Handlers

Thin request layer that parses form input and delegates to the repository.
"""

from .user_pages import router as user_router

__all__ = [
    "user_router",
]
