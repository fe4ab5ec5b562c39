"""Display list of generated tickets, newest first."""

from __future__ import annotations

import logging
from collections.abc import Iterable, MutableMapping
from typing import Any

from lottery_generator.services.ticket_service import GAMES, Ticket

logger = logging.getLogger(__name__)

SESSION_KEY = "ticket_board"


def _pack(ticket: Ticket) -> list[Any]:
    # Compact row so a full board stays well under the 4 KB cookie limit.
    return [list(ticket.numbers), ticket.special_number, ticket.multiplier]


def _unpack(game: str, row: list[Any]) -> Ticket:
    numbers, special_number, multiplier = row
    return Ticket(
        game=game,
        numbers=tuple(int(n) for n in numbers),
        special_number=int(special_number),
        multiplier=int(multiplier),
    )


class TicketBoard:
    """Per-game ticket lists kept in a session mapping.

    Nothing outlives the browser session: the board is only as durable as the
    mapping it is given (Flask's signed session cookie in the app).
    """

    def __init__(self, store: MutableMapping[str, Any], max_per_game: int = 10) -> None:
        self._store = store
        self._max_per_game = max(int(max_per_game), 1)

    def _rows(self) -> dict[str, list[list[Any]]]:
        raw = self._store.get(SESSION_KEY) or {}
        return {key: list(raw.get(key) or []) for key in GAMES}

    def add(self, tickets: Iterable[Ticket]) -> None:
        """Prepend tickets in generation order, so the last generated comes first."""

        rows = self._rows()
        for ticket in tickets:
            rows[ticket.game].insert(0, _pack(ticket))

        for game, current in rows.items():
            evicted = len(current) - self._max_per_game
            if evicted > 0:
                logger.debug("Evicting %d old %s tickets", evicted, game)
                del current[self._max_per_game:]

        self._store[SESSION_KEY] = rows

    def tickets(self, game: str) -> list[Ticket]:
        return [_unpack(game, row) for row in self._rows()[game]]

    def all(self) -> dict[str, list[Ticket]]:
        return {game: self.tickets(game) for game in GAMES}

    def is_empty(self) -> bool:
        return not any(self._rows().values())

    def clear(self) -> None:
        logger.info("Clearing ticket board")
        self._store[SESSION_KEY] = {key: [] for key in GAMES}
