"""Schemas for the bet loading API."""

from __future__ import annotations

from decimal import ROUND_HALF_UP

from marshmallow import Schema, ValidationError, fields, post_load

from quiniela.services.bet_lines import BetLine


class TextOrNumber(fields.Field):
    """Accept form values typed as text or sent as JSON numbers."""

    def _deserialize(self, value, attr, data, **kwargs):  # type: ignore[no-untyped-def]
        if value is None:
            return ""
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise ValidationError("Not a valid string or number.")
        return str(value).strip()


class BetLineSchema(Schema):
    numero = TextOrNumber(required=False, load_default="")
    posicion = TextOrNumber(required=False, load_default="")
    importe = TextOrNumber(required=False, load_default="")

    @post_load
    def _make_line(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return BetLine.from_mapping(data)


class TotalRequestSchema(Schema):
    loterias = fields.List(fields.String(), required=False, load_default=list)
    jugadas = fields.List(fields.Nested(BetLineSchema), required=False, load_default=list)


class TicketRequestSchema(TotalRequestSchema):
    # Presence is checked by the service so that missing fields are
    # reported together, before any sequence number is issued.
    pasador_id = fields.String(required=False, load_default="")
    sorteo = fields.String(required=False, load_default="")


class TicketResponseSchema(Schema):
    secuencia = fields.String(attribute="sequence")
    total = fields.Decimal(places=2, rounding=ROUND_HALF_UP, as_string=True)
    ticket = fields.String(attribute="text")
    record_id = fields.String()
    fecha_hora = fields.DateTime(attribute="issued_at")


class TotalResponseSchema(Schema):
    total = fields.Decimal(places=2, rounding=ROUND_HALF_UP, as_string=True)
