"""
Configuration

Settings come from environment variables, optionally loaded from a .env file.
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    page_title: str = "All Users"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from ``environ``.

    When ``environ`` is not given, .env is loaded into the process environment
    first and os.environ is read.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    defaults = Settings()
    raw_port = environ.get("USERDESK_PORT", str(defaults.port))
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"USERDESK_PORT must be an integer, got {raw_port!r}")

    return Settings(
        host=environ.get("USERDESK_HOST", defaults.host),
        port=port,
        log_level=environ.get("USERDESK_LOG_LEVEL", defaults.log_level).upper(),
        page_title=environ.get("USERDESK_PAGE_TITLE", defaults.page_title),
    )
