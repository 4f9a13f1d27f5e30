"""Configuration settings for the session composer."""
import os
from typing import List, Literal


EnvironmentType = Literal["development", "staging", "production"]

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:3001"


class Settings:
    """Application settings."""

    # Environment
    ENVIRONMENT: EnvironmentType = "development"

    # Logging
    LOG_LEVEL: str = "INFO"

    # HTTP
    CORS_ORIGINS: List[str] = []

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"

        # Logging
        level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.LOG_LEVEL = level if level in _LOG_LEVELS else "INFO"

        # HTTP
        origins = os.getenv("CORS_ORIGINS", _DEFAULT_CORS_ORIGINS)
        self.CORS_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]


settings = Settings()
