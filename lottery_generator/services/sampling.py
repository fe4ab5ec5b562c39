"""Random number sampling primitives used to build tickets."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from lottery_generator.errors import InvalidParametersError
from lottery_generator.services.random_source import RandomSource

T = TypeVar("T")


def sample_number(source: RandomSource, minimum: int, maximum: int) -> int:
    """Draw one integer uniformly from ``[minimum, maximum]``."""

    if minimum > maximum:
        raise InvalidParametersError(
            message="Invalid bounds",
            details={"minimum": minimum, "maximum": maximum},
        )
    return int(source.randint(minimum, maximum))


def generate_unique_numbers(source: RandomSource, count: int, minimum: int, maximum: int) -> list[int]:
    """Draw ``count`` distinct integers from ``[minimum, maximum]``, ascending.

    Rejection sampling: keep drawing and drop duplicates until the set is full.
    The pool is checked up front so an impossible request fails instead of
    looping forever.
    """

    pool_size = maximum - minimum + 1
    if count < 0 or count > pool_size:
        raise InvalidParametersError(
            message=f"Cannot draw {count} unique numbers from a pool of {max(pool_size, 0)}",
            details={"count": count, "minimum": minimum, "maximum": maximum},
        )

    seen: set[int] = set()
    while len(seen) < count:
        seen.add(sample_number(source, minimum, maximum))
    return sorted(seen)


def choose_option(source: RandomSource, options: Sequence[T]) -> T:
    """Pick one element of ``options`` uniformly via an index draw."""

    if not options:
        raise InvalidParametersError(message="No options to choose from")
    return options[sample_number(source, 0, len(options) - 1)]
