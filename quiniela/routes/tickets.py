"""Bet loading routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from quiniela.schemas.ticket import (
    TicketRequestSchema,
    TicketResponseSchema,
    TotalRequestSchema,
    TotalResponseSchema,
)
from quiniela.services.ticket_service import TicketService
from quiniela.utils.responses import created, ok

tickets_bp = Blueprint("tickets", __name__)

_request_schema = TicketRequestSchema()
_total_schema = TotalRequestSchema()
_response_schema = TicketResponseSchema()
_total_response_schema = TotalResponseSchema()


def _service() -> TicketService:
    return current_app.extensions["ticket_service"]


@tickets_bp.post("/jugadas/total")
def preview_total():
    """Total for the bets currently typed in the form."""

    payload = request.get_json(silent=True) or {}
    data = _total_schema.load(payload)

    total = _service().preview_total(data["jugadas"], data["loterias"])
    return ok(_total_response_schema.dump({"total": total}))


@tickets_bp.post("/jugadas")
def submit_jugadas():
    """Issue a ticket for the submitted bets and save them."""

    payload = request.get_json(silent=True) or {}
    data = _request_schema.load(payload)

    ticket = _service().submit(
        pasador_id=data["pasador_id"],
        draw_code=data["sorteo"],
        region_codes=data["loterias"],
        bet_lines=data["jugadas"],
    )
    return created(_response_schema.dump(ticket))
