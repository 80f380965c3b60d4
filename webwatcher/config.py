from __future__ import annotations

from pydantic_settings import BaseSettings

from webwatcher import __version__


class Settings(BaseSettings):
    """Central configuration loaded from environment / .env file."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # Default HTTP executor
    watcher_user_agent: str = f"webwatcher/{__version__}"
    watcher_default_timeout: float = 30.0  # seconds, used when a check sets none
    watcher_follow_redirects: bool = True

    # Logging
    log_level: str = "INFO"


settings = Settings()
