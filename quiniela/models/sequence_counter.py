"""Persisted sequence counter.

One row per named counter. The value is kept as decimal text, the same
representation the terminal used in local storage.
"""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from quiniela.models.base import Base


class SequenceCounter(Base):
    """Named counter (key -> decimal text)."""

    __tablename__ = "sequence_counters"

    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[str] = mapped_column(String(32), nullable=False)
