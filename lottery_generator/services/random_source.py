"""Pluggable source of uniform random integers."""

from __future__ import annotations

import random
from typing import Protocol


class RandomSource(Protocol):
    """Anything with an inclusive ``randint(a, b)``.

    ``random.Random`` satisfies this directly; tests pass a fixed sequence.
    """

    def randint(self, a: int, b: int) -> int: ...


def create_random_source(seed: int | None = None) -> RandomSource:
    """Build the default source, seeded when ``seed`` is given."""

    return random.Random(seed)
