"""Ticket API routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from lottery_generator.schemas.ticket import GameRulesSchema, GenerateRequestSchema, TicketSchema
from lottery_generator.services.ticket_service import GAMES
from lottery_generator.session_state import get_board, get_ticket_service
from lottery_generator.utils.responses import ok

tickets_bp = Blueprint("tickets", __name__)

_request_schema = GenerateRequestSchema()
_tickets_schema = TicketSchema(many=True)
_games_schema = GameRulesSchema(many=True)


def _dump_board() -> dict[str, list[dict]]:
    return {game: _tickets_schema.dump(tickets) for game, tickets in get_board().all().items()}


@tickets_bp.get("/games")
def list_games():
    """List supported games and their number rules."""

    return ok(_games_schema.dump(list(GAMES.values())))


@tickets_bp.post("/tickets/<game>")
def generate_tickets(game: str):
    """Generate tickets and prepend them to the session board."""

    payload = request.get_json(silent=True) or {}
    data = _request_schema.load(payload)

    tickets = get_ticket_service().generate_many(game, count=int(data["count"]))
    get_board().add(tickets)

    return ok({"tickets": _tickets_schema.dump(tickets), "count": len(tickets)}, status_code=201)


@tickets_bp.get("/tickets")
def list_tickets():
    """Current board, newest first per game."""

    return ok(_dump_board())


@tickets_bp.delete("/tickets")
def clear_tickets():
    get_board().clear()
    return ok(_dump_board())
