"""
Request Dependencies

FastAPI dependencies resolving the objects created by the application factory.
"""
from fastapi import Request

from userdesk.config import Settings
from userdesk.modules.users.repositories.user_repository import UserRepository


def get_user_repository(request: Request) -> UserRepository:
    return request.app.state.user_repository


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
