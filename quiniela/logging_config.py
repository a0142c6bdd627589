"""Logging configuration."""

from __future__ import annotations

import logging
from flask import Flask


def configure_logging(app: Flask) -> None:
    """Configure plain line-oriented logs for the terminal service.

    Note: Using stdlib logging only (no extra deps).
    """

    level_name = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger("quiniela").setLevel(level)

    # Driver chatter drowns the issuance log at INFO.
    for name in ("sqlalchemy.engine", "pymongo"):
        logging.getLogger(name).setLevel(logging.WARNING)
