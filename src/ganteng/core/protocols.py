"""Structural type protocols for injected collaborators."""

from typing import Protocol


class RandomSource(Protocol):
    """Zero-argument callable returning a float in ``[0, 1)``.

    ``random.random`` and ``random.Random(seed).random`` both satisfy it.
    """

    def __call__(self) -> float: ...
