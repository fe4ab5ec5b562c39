"""Marshmallow schemas for tickets and game rules."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

from lottery_generator.services.ticket_service import MAX_TICKETS_PER_REQUEST, get_game


class GenerateRequestSchema(Schema):
    count = fields.Integer(
        required=False,
        load_default=1,
        validate=validate.Range(min=1, max=MAX_TICKETS_PER_REQUEST),
    )


class GameRulesSchema(Schema):
    key = fields.String()
    name = fields.String()
    number_count = fields.Integer()
    number_min = fields.Integer()
    number_max = fields.Integer()
    special_min = fields.Integer()
    special_max = fields.Integer()
    multiplier_options = fields.List(fields.Integer())
    special_label = fields.String()
    multiplier_label = fields.String()


class TicketSchema(Schema):
    """Serialize a Ticket together with its game's display labels."""

    game = fields.String(required=True)
    name = fields.Function(lambda t: get_game(t.game).name)
    numbers = fields.List(fields.Integer(), required=True)
    special_number = fields.Integer(required=True)
    special_label = fields.Function(lambda t: get_game(t.game).special_label)
    multiplier = fields.Integer(required=True)
    multiplier_label = fields.Function(lambda t: get_game(t.game).multiplier_label)
    multiplier_display = fields.Function(lambda t: f"{t.multiplier}x")
