"""Request-scoped access to the ticket service and the session's board."""

from __future__ import annotations

from flask import current_app, session

from lottery_generator.services.ticket_board import TicketBoard
from lottery_generator.services.ticket_service import TicketService


def get_ticket_service() -> TicketService:
    """Get the app-wide ticket service."""

    service: TicketService | None = current_app.extensions.get("ticket_service")
    if service is None:
        raise RuntimeError("Ticket service not initialized")
    return service


def get_board() -> TicketBoard:
    """Get the current browser session's ticket board."""

    return TicketBoard(session, max_per_game=int(current_app.config.get("MAX_BOARD_TICKETS", 10)))
