import pytest

from userdesk.config import Settings, load_settings


def test_defaults_when_environment_is_empty():
    assert load_settings({}) == Settings()


def test_values_are_read_from_environment():
    settings = load_settings({
        "USERDESK_HOST": "0.0.0.0",
        "USERDESK_PORT": "9000",
        "USERDESK_LOG_LEVEL": "debug",
        "USERDESK_PAGE_TITLE": "Staff",
    })

    assert settings == Settings(host="0.0.0.0", port=9000, log_level="DEBUG", page_title="Staff")


def test_invalid_port_raises():
    with pytest.raises(ValueError, match="USERDESK_PORT"):
        load_settings({"USERDESK_PORT": "eighty"})


def test_page_title_reaches_listing():
    from fastapi.testclient import TestClient
    from userdesk.app import create_app

    app = create_app(settings=Settings(page_title="Staff"))
    with TestClient(app) as client:
        assert "<h1>Staff</h1>" in client.get("/").text
