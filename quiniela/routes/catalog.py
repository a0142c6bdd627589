"""Selection-list routes: draws, lotteries and passers."""

from __future__ import annotations

from flask import Blueprint, current_app

from quiniela.schemas.pasador import PasadorSchema
from quiniela.services.catalog import catalog
from quiniela.services.ticket_service import TicketService
from quiniela.utils.responses import ok

catalog_bp = Blueprint("catalog", __name__)

_pasadores_schema = PasadorSchema(many=True)


def _service() -> TicketService:
    return current_app.extensions["ticket_service"]


@catalog_bp.get("/catalog")
def get_catalog():
    """Draw time slots and regional lotteries."""

    return ok(catalog())


@catalog_bp.get("/pasadores")
def list_pasadores():
    """Agent directory with selection labels."""

    return ok(_pasadores_schema.dump(_service().list_agents()))
