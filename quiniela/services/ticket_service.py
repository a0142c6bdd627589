"""Use-case: load a passer's bets, issue a ticket and save the record."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from bson.decimal128 import Decimal128
from pymongo.errors import PyMongoError

from quiniela.errors import NotFoundError, PersistenceError, ValidationError
from quiniela.repositories.jugada_repository import JugadaRepository
from quiniela.repositories.pasador_repository import PasadorRecord, PasadorRepository
from quiniela.services.bet_lines import BetLine, compute_total, format_money, valid_lines
from quiniela.services.catalog import code_value, distinct_codes
from quiniela.services.receipt_service import ReceiptFormatter, ReceiptInput
from quiniela.services.sequence_service import SequenceGenerator

logger = logging.getLogger(__name__)

RECORD_TYPE = "NUEVA JUGADA"


@dataclass(frozen=True)
class IssuedTicket:
    sequence: str
    total: Decimal
    text: str
    record_id: str
    issued_at: datetime


class TicketService:
    """Validate a submission, number it, render its ticket and store it.

    Nothing that can be rejected is checked after the sequence is issued:
    an invalid submission never consumes a number.
    """

    def __init__(
        self,
        sequence: SequenceGenerator,
        *,
        terminal_id: str,
        pasadores: PasadorRepository | None = None,
        jugadas: JugadaRepository | None = None,
        formatter: ReceiptFormatter | None = None,
        tz: Any = timezone.utc,
    ) -> None:
        self._sequence = sequence
        self._pasadores = pasadores or PasadorRepository()
        self._jugadas = jugadas or JugadaRepository()
        self._formatter = formatter or ReceiptFormatter()
        self._terminal_id = terminal_id
        self._tz = tz

    def list_agents(self) -> Sequence[PasadorRecord]:
        return self._pasadores.list_all()

    def preview_total(self, bet_lines: Sequence[BetLine], region_codes: Sequence[str]) -> Decimal:
        return compute_total(valid_lines(bet_lines), region_codes)

    def submit(
        self,
        pasador_id: str,
        draw_code: str,
        region_codes: Sequence[str],
        bet_lines: Sequence[BetLine],
        now: datetime | None = None,
    ) -> IssuedTicket:
        draw = code_value(draw_code or "").strip()
        regions = distinct_codes(c for c in (region_codes or ()) if code_value(c).strip())
        pasador_id = str(pasador_id or "").strip()

        missing: dict[str, list[str]] = {}
        if not bet_lines:
            missing["jugadas"] = ["Missing bet lines"]
        if not pasador_id:
            missing["pasador_id"] = ["Select a passer"]
        if not regions:
            missing["loterias"] = ["Select at least one lottery"]
        if not draw:
            missing["sorteo"] = ["Select a draw"]
        if missing:
            raise ValidationError(message="Missing data to save bets", details=missing)

        pasador = self._pasadores.get_by_id(pasador_id)
        if pasador is None:
            raise NotFoundError(message=f"Passer {pasador_id} not found")
        if not pasador.name.strip():
            raise ValidationError(
                message="Passer has no name to print",
                details={"pasador_id": [f"Passer {pasador_id} has no name"]},
            )

        lines = valid_lines(bet_lines)
        if not lines:
            raise ValidationError(
                message="No valid bets to save",
                details={"jugadas": ["Each bet needs number, position and amount"]},
            )

        total = compute_total(lines, regions)
        issued_at = (now or datetime.now(self._tz)).astimezone(self._tz)

        sequence = self._sequence.next()
        text = self._formatter.format(
            ReceiptInput(
                passer_name=pasador.name,
                draw_code=draw,
                region_codes=regions,
                bet_lines=lines,
                total=total,
                sequence=sequence,
                timestamp=issued_at,
                terminal_id=self._terminal_id,
            )
        )

        document = build_record(
            pasador=pasador,
            draw_code=draw,
            region_codes=regions,
            bet_lines=lines,
            total=total,
            sequence=sequence,
            issued_at=issued_at,
        )
        try:
            record_id = self._jugadas.insert(pasador.name, document)
        except PyMongoError as exc:
            logger.warning("Failed to save bets for sequence %s", sequence, exc_info=exc)
            raise PersistenceError(details={"secuencia": sequence}) from exc

        logger.info(
            "Saved %s bets for %s (sequence %s, total %s)",
            len(lines),
            pasador.display_id or pasador.id,
            sequence,
            format_money(total),
        )
        return IssuedTicket(
            sequence=sequence,
            total=total,
            text=text,
            record_id=record_id,
            issued_at=issued_at,
        )


def build_record(
    *,
    pasador: PasadorRecord,
    draw_code: str,
    region_codes: Sequence[str],
    bet_lines: Sequence[BetLine],
    total: Decimal,
    sequence: str,
    issued_at: datetime,
) -> dict[str, Any]:
    """Document stored in the passer's bet collection."""

    regions = list(region_codes)
    line_time = issued_at.astimezone(timezone.utc).isoformat()
    return {
        "fechaHora": datetime.now(timezone.utc),
        "id": sequence,
        "jugadas": [
            {
                "decompositionStep": 0,
                "fechaHora": line_time,
                "loteria": draw_code,
                "monto": line.amount,
                "montoTotal": Decimal128(line.parsed_amount),
                "numero": line.number,
                "numeros": [line.number],
                "originalNumero": line.number,
                "originalPosicion": line.position,
                "posicion": line.position,
                "provincias": regions,
                "secuencia": sequence,
                "tipo": RECORD_TYPE,
            }
            for line in bet_lines
        ],
        "loteria": draw_code,
        "monto": format_money(total),
        "numero": bet_lines[0].number,
        "numeros": [line.number for line in bet_lines],
        "pasadorId": pasador.id,
        "provincias": regions,
        "secuencia": sequence,
        "tipo": RECORD_TYPE,
        "totalMonto": Decimal128(total),
    }
