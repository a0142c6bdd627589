"""Receipt sequence numbers (secuencia)."""

from __future__ import annotations

import logging
from typing import Protocol

from quiniela.errors import SequenceError

logger = logging.getLogger(__name__)


class CounterStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class SequenceGenerator:
    """Issue zero-padded, strictly increasing sequence numbers.

    The counter is read from the store on every call and the incremented
    value is written back before the number is handed out, so a number is
    never issued twice under sequential use. There is no locking: one active
    terminal session per store is assumed.
    """

    def __init__(
        self,
        store: CounterStore,
        key: str = "secuenciaCounter",
        start: int = 10000,
        width: int = 9,
    ) -> None:
        if width < 1:
            raise ValueError("width must be positive")
        if start < 0:
            raise ValueError("start must be non-negative")
        self._store = store
        self._key = key
        self._start = int(start)
        self._width = int(width)

    @property
    def max_value(self) -> int:
        return 10**self._width - 1

    def load(self) -> int:
        """Current counter value (the next number to issue)."""

        raw = self._store.get(self._key)
        if raw is None or str(raw).strip() == "":
            return self._start
        try:
            value = int(str(raw).strip())
        except ValueError as exc:
            raise SequenceError(
                message="Stored sequence counter is not a number",
                details={"key": self._key, "value": str(raw)},
            ) from exc
        if value < 0:
            raise SequenceError(
                message="Stored sequence counter is negative",
                details={"key": self._key, "value": value},
            )
        return value

    def persist(self, value: int) -> None:
        self._store.set(self._key, str(int(value)))

    def format(self, value: int) -> str:
        return str(int(value)).zfill(self._width)

    def next(self) -> str:
        current = self.load()
        if current > self.max_value:
            raise SequenceError(
                message=f"Sequence counter exhausted ({self._width} digits)",
                details={"key": self._key, "value": current},
            )

        self.persist(current + 1)
        sequence = self.format(current)
        logger.info("Issued sequence %s", sequence)
        return sequence
