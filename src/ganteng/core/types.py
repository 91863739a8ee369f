"""Core data types shared across ganteng modules."""

import enum
from dataclasses import dataclass


class LoadState(enum.Enum):
    """Dictionary load state gating the transform entry point."""

    NOT_LOADED = "not-loaded"
    LOADED = "loaded"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class PassResult:
    """Text as it stands after one pipeline pass."""

    name: str
    text: str
