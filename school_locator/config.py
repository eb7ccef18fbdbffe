"""Environment-driven settings for the school locator service."""

import os
from functools import lru_cache

from pydantic import BaseModel


class Settings(BaseModel):
    """Runtime settings read from the process environment."""

    redis_host: str = "redis"
    redis_port: int = 6379
    redis_db: int = 0
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables.

    Returns:
        Settings populated from the environment, falling back to defaults.
    """
    return Settings(
        redis_host=os.getenv("REDIS_HOST", "redis"),
        redis_port=int(os.getenv("REDIS_PORT", "6379")),
        redis_db=int(os.getenv("REDIS_DB", "0")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
