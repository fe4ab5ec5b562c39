from __future__ import annotations

from collections.abc import Iterable

import pytest

from lottery_generator import create_app


class FixedSequenceSource:
    """Random source that replays a fixed list of values, ignoring bounds."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        if len(self.calls) >= len(self._values):
            raise RuntimeError("fixed sequence exhausted")
        value = self._values[len(self.calls)]
        self.calls.append((a, b))
        return value


@pytest.fixture
def fixed_source():
    def _make(*values: int) -> FixedSequenceSource:
        return FixedSequenceSource(values)

    return _make


@pytest.fixture
def app():
    app = create_app({"TESTING": True, "SECRET_KEY": "test", "RNG_SEED": 1234, "MAX_BOARD_TICKETS": 5})
    return app


@pytest.fixture
def client(app):
    return app.test_client()
