"""Business logic for assembling Powerball and Mega Millions tickets."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from lottery_generator.errors import NotFoundError, ValidationError
from lottery_generator.services.random_source import RandomSource, create_random_source
from lottery_generator.services.sampling import choose_option, generate_unique_numbers, sample_number

logger = logging.getLogger(__name__)

MAX_TICKETS_PER_REQUEST = 50


@dataclass(frozen=True)
class GameRules:
    key: str
    name: str
    number_count: int
    number_min: int
    number_max: int
    special_min: int
    special_max: int
    multiplier_options: tuple[int, ...]
    special_label: str
    multiplier_label: str


@dataclass(frozen=True)
class Ticket:
    game: str
    numbers: tuple[int, ...]
    special_number: int
    multiplier: int


POWERBALL = GameRules(
    key="powerball",
    name="Powerball",
    number_count=5,
    number_min=1,
    number_max=69,
    special_min=1,
    special_max=26,
    multiplier_options=(2, 3, 4, 5, 10),
    special_label="Powerball",
    multiplier_label="Power Play",
)

MEGA_MILLIONS = GameRules(
    key="mega_millions",
    name="Mega Millions",
    number_count=5,
    number_min=1,
    number_max=70,
    special_min=1,
    special_max=25,
    multiplier_options=(2, 3, 4, 5),
    special_label="Mega Ball",
    multiplier_label="Megaplier",
)

GAMES: dict[str, GameRules] = {rules.key: rules for rules in (POWERBALL, MEGA_MILLIONS)}


def get_game(key: str) -> GameRules:
    try:
        return GAMES[key]
    except KeyError as exc:
        raise NotFoundError(
            message=f"Unknown game '{key}'",
            details={"game": [f"Must be one of {'|'.join(GAMES)}"]},
        ) from exc


def generate_ticket(source: RandomSource, rules: GameRules) -> Ticket:
    """Assemble one ticket.

    Draw order is fixed: main numbers, then the special number, then the
    multiplier index. Deterministic sources rely on it.
    """

    numbers = generate_unique_numbers(source, rules.number_count, rules.number_min, rules.number_max)
    special_number = sample_number(source, rules.special_min, rules.special_max)
    multiplier = choose_option(source, rules.multiplier_options)
    return Ticket(
        game=rules.key,
        numbers=tuple(numbers),
        special_number=special_number,
        multiplier=multiplier,
    )


def generate_powerball_ticket(source: RandomSource) -> Ticket:
    """5 of 1-69, Powerball 1-26, Power Play 2/3/4/5/10x."""

    return generate_ticket(source, POWERBALL)


def generate_mega_millions_ticket(source: RandomSource) -> Ticket:
    """5 of 1-70, Mega Ball 1-25, Megaplier 2/3/4/5x."""

    return generate_ticket(source, MEGA_MILLIONS)


class TicketService:
    """Generate tickets from a bound random source."""

    def __init__(self, source: RandomSource | None = None) -> None:
        self._source = source if source is not None else create_random_source()

    def generate(self, game: str) -> Ticket:
        rules = get_game(game)
        ticket = generate_ticket(self._source, rules)
        logger.debug("Generated %s ticket %s", rules.key, ticket)
        return ticket

    def generate_many(self, game: str, count: int = 1) -> list[Ticket]:
        if count < 1:
            raise ValidationError(
                message="Invalid count",
                details={"count": ["Must be >= 1"]},
            )
        if count > MAX_TICKETS_PER_REQUEST:
            raise ValidationError(
                message="Invalid count",
                details={"count": [f"Must be <= {MAX_TICKETS_PER_REQUEST}"]},
            )

        return [self.generate(game) for _ in range(int(count))]
