"""Repository layer for saved bets (one collection per agent)."""

from __future__ import annotations

from typing import Any

from pymongo.database import Database

from quiniela.db import get_mongo_db


def collection_name_for(pasador_name: str) -> str:
    return f"JUGADAS DE {pasador_name}"


class JugadaRepository:
    """Write operations for bet records."""

    def __init__(self, db: Database | None = None) -> None:
        self._db = db

    def insert(self, pasador_name: str, document: dict[str, Any]) -> str:
        db = self._db if self._db is not None else get_mongo_db()
        result = db[collection_name_for(pasador_name)].insert_one(dict(document))
        return str(result.inserted_id)
