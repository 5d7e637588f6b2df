import pytest
from fastapi.testclient import TestClient

from userdesk.app import create_app
from userdesk.config import Settings
from userdesk.modules.users.repositories.memory_repository import InMemoryUserRepository


@pytest.fixture
def repository():
    return InMemoryUserRepository()


@pytest.fixture
def client(repository):
    app = create_app(settings=Settings(page_title="All Users"), repository=repository)
    with TestClient(app) as test_client:
        yield test_client
