import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from userdesk.config import Settings, load_settings
from userdesk.modules.users.api.user_pages import router as user_router
from userdesk.modules.users.repositories.memory_repository import InMemoryUserRepository
from userdesk.modules.users.repositories.user_repository import UserRepository

logger = logging.getLogger("userdesk.app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"userdesk started with {len(app.state.user_repository.list_all())} user(s)")
    yield
    # Shutdown: in-memory users are discarded with the process
    logger.info("userdesk stopped")


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[UserRepository] = None,
) -> FastAPI:
    """
    Build the application.

    The repository created here is the only one the handlers see; it lives as
    long as the returned app.
    """
    settings = settings or load_settings()
    app = FastAPI(title="userdesk", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.user_repository = repository if repository is not None else InMemoryUserRepository()

    app.include_router(user_router)
    return app
