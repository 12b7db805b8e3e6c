"""
Subscriptions API — Application Configuration
===============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the database layer, the app factory and the entry point.
When:  Loaded once at module import time. Invalid values raise immediately,
       so a misconfigured process never starts.

Connection string:
    The database is described by its parts (host, port, credentials, name)
    and composed into one SQLAlchemy URL by `connection_string`.
    DATABASE_URL, when set, replaces the composed URL entirely
    (the test suite points it at SQLite).
"""

from typing import Optional
from urllib.parse import quote_plus

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have development defaults. Production deployments override
    the database credentials through the environment.
    """

    # ── Application ───────────────────────────────────────────────────────
    application_host: str = Field(default="127.0.0.1")
    application_port: int = Field(default=8000, ge=1, le=65535)

    # ── Database ──────────────────────────────────────────────────────────
    database_host: str = Field(default="localhost")
    database_port: int = Field(default=5432, ge=1, le=65535)
    database_username: str = Field(default="postgres")
    database_password: str = Field(default="password")
    database_name: str = Field(default="newsletter")

    # Full URL override, e.g. sqlite+aiosqlite:///./local.db
    database_url: Optional[str] = Field(default=None)

    # ── Logging ───────────────────────────────────────────────────────────
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @property
    def connection_string_without_db(self) -> str:
        """Server-level asyncpg URL (no database name)."""
        return (
            f"postgresql+asyncpg://{quote_plus(self.database_username)}:"
            f"{quote_plus(self.database_password)}@{self.database_host}:{self.database_port}"
        )

    @property
    def connection_string(self) -> str:
        """
        What: SQLAlchemy URL the engine connects with.
        How:  DATABASE_URL if set, otherwise composed from the DATABASE_* parts.
        """
        if self.database_url:
            return self.database_url
        return f"{self.connection_string_without_db}/{self.database_name}"

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DATABASE_HOST and database_host both work
    }


# Singleton instance, imported throughout the application
settings = Settings()
