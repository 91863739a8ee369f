"""Shared test fixtures: deterministic random sources and small dictionaries."""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest


class SequenceRandom:
    """Random source that returns scripted values in order.

    Fails loudly when drawn more often than scripted, so tests also pin
    down how many draws a pass makes.
    """

    def __init__(self, values: Sequence[float] = ()) -> None:
        self._values = list(values)
        self.calls = 0

    def __call__(self) -> float:
        if self.calls >= len(self._values):
            raise AssertionError(
                f"random source drawn {self.calls + 1} times, "
                f"only {len(self._values)} values scripted"
            )
        value = self._values[self.calls]
        self.calls += 1
        return value


def constant(value: float) -> Callable[[], float]:
    """Random source that always returns *value*."""
    return lambda: value


@pytest.fixture
def high() -> Callable[[], float]:
    """Every probabilistic branch declines."""
    return constant(0.99)


@pytest.fixture
def low() -> Callable[[], float]:
    """Every probabilistic branch fires."""
    return constant(0.0)


@pytest.fixture
def no_draws() -> SequenceRandom:
    """Fails if anything draws randomness."""
    return SequenceRandom()


@pytest.fixture
def slang() -> dict[str, str]:
    return {"gw": "aku", "kmn": "kemana", "ok": "oke", "makasih": "terima kasih"}


@pytest.fixture
def dictionary_file(tmp_path: Path, slang: dict[str, str]) -> Path:
    path = tmp_path / "kamus.json"
    path.write_text(json.dumps(slang), encoding="utf-8")
    return path
