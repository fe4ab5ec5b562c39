import dataclasses
import random

import pytest

from lottery_generator.errors import NotFoundError, ValidationError
from lottery_generator.services.ticket_service import (
    MEGA_MILLIONS,
    POWERBALL,
    Ticket,
    TicketService,
    generate_mega_millions_ticket,
    generate_powerball_ticket,
    get_game,
)


def test_powerball_ticket_from_fixed_sequence(fixed_source):
    source = fixed_source(5, 12, 23, 45, 67, 15, 3)

    ticket = generate_powerball_ticket(source)

    assert ticket == Ticket(game="powerball", numbers=(5, 12, 23, 45, 67), special_number=15, multiplier=5)
    assert source.calls == [(1, 69)] * 5 + [(1, 26), (0, 4)]


def test_mega_millions_ticket_from_fixed_sequence(fixed_source):
    source = fixed_source(70, 1, 35, 1, 2, 69, 25, 0)

    ticket = generate_mega_millions_ticket(source)

    assert ticket.numbers == (1, 2, 35, 69, 70)
    assert ticket.special_number == 25
    assert ticket.multiplier == 2
    assert source.calls == [(1, 70)] * 6 + [(1, 25), (0, 3)]


def test_powerball_invariants():
    rng = random.Random(99)
    for _ in range(2000):
        ticket = generate_powerball_ticket(rng)
        assert len(ticket.numbers) == 5
        assert all(a < b for a, b in zip(ticket.numbers, ticket.numbers[1:]))
        assert all(1 <= n <= 69 for n in ticket.numbers)
        assert 1 <= ticket.special_number <= 26
        assert ticket.multiplier in {2, 3, 4, 5, 10}


def test_mega_millions_invariants():
    rng = random.Random(99)
    for _ in range(2000):
        ticket = generate_mega_millions_ticket(rng)
        assert len(ticket.numbers) == 5
        assert all(a < b for a, b in zip(ticket.numbers, ticket.numbers[1:]))
        assert all(1 <= n <= 70 for n in ticket.numbers)
        assert 1 <= ticket.special_number <= 25
        assert ticket.multiplier in {2, 3, 4, 5}


def test_ticket_is_immutable():
    ticket = generate_powerball_ticket(random.Random(1))
    with pytest.raises(dataclasses.FrozenInstanceError):
        ticket.multiplier = 10  # type: ignore[misc]


def test_same_seed_gives_same_tickets():
    first = TicketService(random.Random(42)).generate_many("powerball", count=10)
    second = TicketService(random.Random(42)).generate_many("powerball", count=10)
    assert first == second


def test_get_game():
    assert get_game("powerball") is POWERBALL
    assert get_game("mega_millions") is MEGA_MILLIONS
    with pytest.raises(NotFoundError):
        get_game("euromillions")


def test_service_generates_requested_game(fixed_source):
    service = TicketService(fixed_source(1, 2, 3, 4, 5, 25, 3))
    ticket = service.generate("mega_millions")
    assert ticket.game == "mega_millions"
    assert ticket.multiplier == 5


@pytest.mark.parametrize("count", [0, 51])
def test_service_rejects_out_of_range_count(count):
    with pytest.raises(ValidationError):
        TicketService(random.Random()).generate_many("powerball", count=count)


def test_service_unknown_game():
    with pytest.raises(NotFoundError):
        TicketService(random.Random()).generate("lotto")
