"""Repository layer for the persisted sequence counter."""

from __future__ import annotations

from sqlalchemy.orm import Session, sessionmaker

from quiniela.db import get_db_backend, get_mongo_db, get_session_factory
from quiniela.models.sequence_counter import SequenceCounter


class CounterRepository:
    """Read/write a named counter stored as decimal text.

    Every write is its own committed transaction, so an issued number is
    durable before the caller sees it.
    """

    def __init__(self, session_factory: sessionmaker[Session] | None = None) -> None:
        self._session_factory = session_factory

    def _factory(self) -> sessionmaker[Session]:
        return self._session_factory or get_session_factory()

    def get(self, key: str) -> str | None:
        if self._session_factory is None and get_db_backend() == "mongo":
            doc = get_mongo_db()["counters"].find_one({"_id": key})
            if not doc or doc.get("value") is None:
                return None
            return str(doc["value"])

        with self._factory()() as session:
            row = session.get(SequenceCounter, key)
            return None if row is None else row.value

    def set(self, key: str, value: str) -> None:
        if self._session_factory is None and get_db_backend() == "mongo":
            get_mongo_db()["counters"].update_one(
                {"_id": key},
                {"$set": {"value": str(value)}},
                upsert=True,
            )
            return

        with self._factory().begin() as session:
            session.merge(SequenceCounter(key=key, value=str(value)))
