"""
Bookkeeper settings.

Values come from the process environment, after a local .env
file (if any) has been loaded into it.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Settings:
    """Environment-backed settings for the bookkeeping service."""

    APP_NAME: str = "Bookkeeper"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    DEBUG: bool = _flag("DEBUG")

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    # Ledger store; PostgreSQL needs the "postgres" extra installed
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./bookkeeper.db")
    # Log every SQL statement through the sqlalchemy.engine logger
    SQL_ECHO: bool = _flag("SQL_ECHO", "true" if DEBUG else "false")

    # New owners get the default chart of accounts unless they opt out
    SEED_DEFAULT_ACCOUNTS: bool = _flag("SEED_DEFAULT_ACCOUNTS", "true")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO")
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "console" if ENVIRONMENT == "development" else "json",
    )

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
