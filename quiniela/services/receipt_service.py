"""Fixed-width ticket text for the 80mm receipt printer."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from quiniela.errors import ValidationError
from quiniela.services.bet_lines import BetLine, format_money, valid_lines
from quiniela.services.catalog import code_value, distinct_codes, draw_abbreviation, region_abbreviation

RECEIPT_WIDTH = 32
SEPARATOR = "-" * RECEIPT_WIDTH
TIMESTAMP_FORMAT = "%d/%m/%y %H:%M"


@dataclass(frozen=True)
class ReceiptInput:
    passer_name: str
    draw_code: str
    region_codes: Sequence[str]
    bet_lines: Sequence[BetLine]
    total: Decimal
    sequence: str
    timestamp: datetime
    terminal_id: str


class ReceiptFormatter:
    """Render a ticket.

    Line layout (every line ends with a newline)::

        TICKET
        FECHA/HORA 19/10/26 14:05
        TERMINAL   72-0005
        PASADOR    <name>
        SORTEO     <draw code>
        --------------------------------
        <draw abbreviation>
        SECUENCIA  000010000
        LOTERIAS: N P
        NUMERO UBIC   IMPORTE
        1234   5   $10.50          (one per bet line)
        --------------------------------
                          TOTAL: $21.00
    """

    def _check(self, data: ReceiptInput) -> None:
        missing: dict[str, list[str]] = {}
        if not str(data.passer_name or "").strip():
            missing["pasador"] = ["Missing passer name"]
        if not code_value(data.draw_code or "").strip():
            missing["sorteo"] = ["Missing draw code"]
        if not distinct_codes(data.region_codes or ()):
            missing["loterias"] = ["Select at least one lottery"]
        if not valid_lines(data.bet_lines or ()):
            missing["jugadas"] = ["No valid bet lines to print"]
        if missing:
            raise ValidationError(message="Cannot format ticket", details=missing)

    @staticmethod
    def format_bet_line(line: BetLine) -> str:
        return f"{line.number.rjust(4)}  {line.position.rjust(2)}   ${format_money(line.parsed_amount)}"

    def format(self, data: ReceiptInput) -> str:
        self._check(data)

        draw = code_value(data.draw_code)
        regions = distinct_codes(region_abbreviation(c) for c in distinct_codes(data.region_codes))

        lines = [
            "TICKET",
            f"FECHA/HORA {data.timestamp.strftime(TIMESTAMP_FORMAT)}",
            f"TERMINAL   {data.terminal_id}",
            f"PASADOR    {data.passer_name}",
            f"SORTEO     {draw}",
            SEPARATOR,
            draw_abbreviation(draw),
            f"SECUENCIA  {data.sequence}",
            f"LOTERIAS: {' '.join(regions)}",
            "NUMERO UBIC   IMPORTE",
        ]
        lines.extend(self.format_bet_line(line) for line in valid_lines(data.bet_lines))
        lines.append(SEPARATOR)
        lines.append(f"TOTAL: ${format_money(data.total)}".rjust(RECEIPT_WIDTH))

        return "".join(f"{line}\n" for line in lines)
