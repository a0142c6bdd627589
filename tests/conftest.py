from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest
from pymongo.errors import PyMongoError

from quiniela import create_app
from quiniela.repositories.pasador_repository import PasadorRecord
from quiniela.services.sequence_service import SequenceGenerator
from quiniela.services.ticket_service import TicketService


class MemoryCounterStore:
    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(values or {})
        self.writes: list[tuple[str, str]] = []

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.writes.append((key, value))
        self.values[key] = value


class FakePasadorRepository:
    def __init__(self, records: Sequence[PasadorRecord]) -> None:
        self.records = list(records)

    def list_all(self) -> Sequence[PasadorRecord]:
        return list(self.records)

    def get_by_id(self, pasador_id: str) -> PasadorRecord | None:
        for record in self.records:
            if record.id == pasador_id:
                return record
        return None


class FakeJugadaRepository:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.saved: list[tuple[str, dict[str, Any]]] = []

    def insert(self, pasador_name: str, document: dict[str, Any]) -> str:
        if self.fail:
            raise PyMongoError("write refused")
        self.saved.append((pasador_name, document))
        return f"doc-{len(self.saved)}"


PASADORES = [
    PasadorRecord(id="p1", display_id="001", name="Juan Perez", trade_name="La Suerte"),
    PasadorRecord(id="p2", display_id="002", name="Ana Gomez", trade_name=""),
]


@pytest.fixture()
def counter_store() -> MemoryCounterStore:
    return MemoryCounterStore()


@pytest.fixture()
def sequence(counter_store: MemoryCounterStore) -> SequenceGenerator:
    return SequenceGenerator(counter_store)


@pytest.fixture()
def pasadores() -> FakePasadorRepository:
    return FakePasadorRepository(PASADORES)


@pytest.fixture()
def jugadas() -> FakeJugadaRepository:
    return FakeJugadaRepository()


@pytest.fixture()
def app(tmp_path, pasadores, jugadas):
    app = create_app(
        {
            "TESTING": True,
            "DB_BACKEND": "sql",
            "DATABASE_URL": f"sqlite:///{tmp_path / 'counter.db'}",
            "TERMINAL_ID": "72-0005",
            "TIMEZONE": "America/Argentina/Buenos_Aires",
            "SEQUENCE_START": 10000,
        }
    )
    app.extensions["ticket_service"] = TicketService(
        app.extensions["sequence_generator"],
        pasadores=pasadores,
        jugadas=jugadas,
        terminal_id=app.config["TERMINAL_ID"],
    )
    yield app
    app.extensions["mongo_client"].close()
    app.extensions["engine"].dispose()


@pytest.fixture()
def client(app):
    return app.test_client()
