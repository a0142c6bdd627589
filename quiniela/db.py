"""Store handles: SQLAlchemy for the local counter, MongoDB for documents.

The SQL engine is only created for the ``sql`` counter backend. The Mongo
client is always registered; pymongo connects lazily on first use.
"""

from __future__ import annotations

from flask import Flask, current_app
from pymongo import MongoClient
from pymongo.database import Database
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from quiniela.models.base import Base


def create_app_engine(database_url: str) -> Engine:
    return create_engine(database_url, pool_pre_ping=True, future=True)


def create_mongo_client(uri: str, timeout_ms: int = 5000) -> MongoClient:
    return MongoClient(uri, serverSelectionTimeoutMS=int(timeout_ms), tz_aware=True)


def init_db(app: Flask) -> None:
    """Initialize store handles on the app."""

    backend = str(app.config.get("DB_BACKEND", "sql")).lower().strip()
    if backend not in ("sql", "mongo"):
        raise RuntimeError(f"Unsupported DB_BACKEND: {backend!r}")
    app.config["DB_BACKEND"] = backend

    if backend == "sql":
        engine = create_app_engine(str(app.config["DATABASE_URL"]))
        session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

        # Create tables for the counter (single key-value table, no migrations).
        Base.metadata.create_all(bind=engine)

        app.extensions["engine"] = engine
        app.extensions["session_factory"] = session_factory

    client = create_mongo_client(
        str(app.config["MONGODB_URI"]),
        int(app.config.get("MONGODB_TIMEOUT_MS", 5000)),
    )
    app.extensions["mongo_client"] = client
    app.extensions["mongo_db"] = client[str(app.config["MONGODB_DB"])]


def get_db_backend() -> str:
    """Counter backend of the current app: "sql" | "mongo"."""

    return str(current_app.config.get("DB_BACKEND", "sql"))


def get_session_factory() -> sessionmaker[Session]:
    factory: sessionmaker[Session] | None = current_app.extensions.get("session_factory")
    if factory is None:
        raise RuntimeError("SQL session factory not initialized")
    return factory


def get_mongo_db() -> Database:
    db: Database | None = current_app.extensions.get("mongo_db")
    if db is None:
        raise RuntimeError("MongoDB not initialized")
    return db
