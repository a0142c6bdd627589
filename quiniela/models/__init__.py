"""ORM models."""

from quiniela.models.sequence_counter import SequenceCounter

__all__ = ["SequenceCounter"]
