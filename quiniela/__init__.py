"""Flask application package for the quiniela bet-loading terminal."""

from __future__ import annotations

import logging
from typing import Any
from zoneinfo import ZoneInfo

from flask import Flask

try:
    from dotenv import load_dotenv
except Exception:  # pragma: no cover
    load_dotenv = None  # type: ignore[assignment]

logger = logging.getLogger(__name__)


def create_app(overrides: dict[str, Any] | None = None) -> Flask:
    """Application factory.

    Args:
        overrides: Config values applied on top of the environment config.

    Returns:
        Configured Flask application.
    """
    if load_dotenv is not None:
        load_dotenv()

    from quiniela.config import get_config
    from quiniela.db import init_db
    from quiniela.error_handlers import register_error_handlers
    from quiniela.logging_config import configure_logging
    from quiniela.repositories.counter_repository import CounterRepository
    from quiniela.routes.catalog import catalog_bp
    from quiniela.routes.health import health_bp
    from quiniela.routes.tickets import tickets_bp
    from quiniela.routes.web import web_bp
    from quiniela.services.sequence_service import SequenceGenerator
    from quiniela.services.ticket_service import TicketService

    app = Flask(__name__)
    app.config.from_object(get_config())
    if overrides:
        app.config.update(overrides)

    configure_logging(app)
    init_db(app)
    register_error_handlers(app)

    sequence = SequenceGenerator(
        CounterRepository(app.extensions.get("session_factory")),
        key=str(app.config["SEQUENCE_KEY"]),
        start=int(app.config["SEQUENCE_START"]),
        width=int(app.config["SEQUENCE_WIDTH"]),
    )
    app.extensions["sequence_generator"] = sequence
    app.extensions["ticket_service"] = TicketService(
        sequence,
        terminal_id=str(app.config["TERMINAL_ID"]),
        tz=ZoneInfo(str(app.config["TIMEZONE"])),
    )

    if app.config["DB_BACKEND"] == "sql":
        logger.info("Sequence counter at %s", sequence.format(sequence.load()))

    app.register_blueprint(health_bp)
    app.register_blueprint(web_bp)
    app.register_blueprint(catalog_bp, url_prefix="/api")
    app.register_blueprint(tickets_bp, url_prefix="/api")

    return app
