"""Print view for issued tickets."""

from __future__ import annotations

from flask import Blueprint, render_template, request

from quiniela.errors import ValidationError

web_bp = Blueprint("web", __name__)


@web_bp.post("/tickets/print")
def print_ticket():
    """Printable page for the 80mm receipt printer.

    Accepts JSON ``{"ticket": "..."}`` or a form field named ``ticket``.
    """

    payload = request.get_json(silent=True) or {}
    text = payload.get("ticket") if isinstance(payload, dict) else None
    if text is None:
        text = request.form.get("ticket")
    if not isinstance(text, str) or not text.strip():
        raise ValidationError(message="Nothing to print", details={"ticket": ["Missing ticket text"]})

    return render_template("ticket_print.html", ticket=text)
