"""Marshmallow schemas for the agent directory."""

from __future__ import annotations

from marshmallow import Schema, fields


class PasadorSchema(Schema):
    """Serialize PasadorRecord."""

    id = fields.Str(required=True)
    displayId = fields.Str(attribute="display_id")
    nombre = fields.Str(attribute="name")
    nombreFantasia = fields.Str(attribute="trade_name")
    label = fields.Str()
