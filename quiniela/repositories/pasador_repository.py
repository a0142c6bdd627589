"""Repository layer for the agent (pasador) directory."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from bson import ObjectId
from pymongo.collection import Collection
from pymongo.database import Database

from quiniela.db import get_mongo_db


@dataclass(frozen=True)
class PasadorRecord:
    id: str
    display_id: str
    name: str
    trade_name: str

    @property
    def label(self) -> str:
        return f"{self.display_id} - {self.trade_name or self.name}"


def _to_record(doc: dict[str, Any]) -> PasadorRecord:
    return PasadorRecord(
        id=str(doc.get("_id")),
        display_id=str(doc.get("displayId") or ""),
        name=str(doc.get("nombre") or ""),
        trade_name=str(doc.get("nombreFantasia") or ""),
    )


class PasadorRepository:
    """Read operations for agents. The directory is maintained elsewhere."""

    collection = "pasadores"

    def __init__(self, db: Database | None = None) -> None:
        self._db = db

    def _col(self) -> Collection:
        db = self._db if self._db is not None else get_mongo_db()
        return db[self.collection]

    def list_all(self) -> Sequence[PasadorRecord]:
        cur = self._col().find({}).sort("displayId", 1)
        return [_to_record(d) for d in cur]

    def get_by_id(self, pasador_id: str) -> PasadorRecord | None:
        candidates: list[object] = [str(pasador_id)]
        if ObjectId.is_valid(str(pasador_id)):
            candidates.append(ObjectId(str(pasador_id)))

        doc = self._col().find_one({"_id": {"$in": candidates}})
        if not doc:
            return None
        return _to_record(doc)
