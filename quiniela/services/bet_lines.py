"""Bet lines (jugadas) and the ticket total."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from quiniela.services.catalog import distinct_codes

ZERO = Decimal("0")
CENTS = Decimal("0.01")


@dataclass(frozen=True)
class BetLine:
    number: str
    position: str
    amount: str

    @property
    def is_valid(self) -> bool:
        return bool(self.number.strip() and self.position.strip() and self.amount.strip())

    @property
    def parsed_amount(self) -> Decimal:
        return parse_amount(self.amount)

    @classmethod
    def from_mapping(cls, data: dict) -> "BetLine":
        return cls(
            number=_text(data.get("numero")),
            position=_text(data.get("posicion")),
            amount=_text(data.get("importe")),
        )


def _text(value: object) -> str:
    return "" if value is None else str(value).strip()


# Leading number of the text, as typed in the form ("10,5" -> 10, "10.5$" -> 10.5).
_LEADING_NUMBER = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_amount(raw: object) -> Decimal:
    """Parse the leading number of a stake.

    Text without a leading number, non-finite or negative values count as zero.
    """

    if raw is None:
        return ZERO
    match = _LEADING_NUMBER.match(str(raw))
    if match is None:
        return ZERO
    try:
        value = Decimal(match.group(0).strip())
    except InvalidOperation:
        return ZERO
    if not value.is_finite() or value < 0:
        return ZERO
    return value


def format_money(value: Decimal) -> str:
    return str(Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP))


def valid_lines(lines: Iterable[BetLine]) -> list[BetLine]:
    return [line for line in lines if line.is_valid]


def compute_total(lines: Sequence[BetLine], region_codes: Iterable[str]) -> Decimal:
    """Each line is played once per selected lottery."""

    regions = len(distinct_codes(region_codes))
    return sum((line.parsed_amount * regions for line in lines), ZERO)
