"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass


def resolve_database_url() -> str:
    """Resolve the connection string of the local counter store.

    Priority:
      1) DATABASE_URL (explicit)
      2) Fallback to a sqlite file next to the process
    """

    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit
    return "sqlite:///./quiniela.db"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")

    # Where the sequence counter lives: "sql" | "mongo"
    DB_BACKEND: str = os.getenv("DB_BACKEND", "sql").lower().strip()

    # SQL backend (local counter store)
    DATABASE_URL: str = resolve_database_url()

    # Mongo (agent directory, bet records and optionally the counter)
    MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    MONGODB_DB: str = os.getenv("MONGODB_DB", "quiniela")
    MONGODB_TIMEOUT_MS: int = _int_env("MONGODB_TIMEOUT_MS", 5000)

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Ticket
    TERMINAL_ID: str = os.getenv("TERMINAL_ID", "72-0005")
    TIMEZONE: str = os.getenv("TIMEZONE", "America/Argentina/Buenos_Aires")
    SEQUENCE_KEY: str = os.getenv("SEQUENCE_KEY", "secuenciaCounter")
    SEQUENCE_START: int = _int_env("SEQUENCE_START", 10000)
    SEQUENCE_WIDTH: int = _int_env("SEQUENCE_WIDTH", 9)


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    return DevelopmentConfig
