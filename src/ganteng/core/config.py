"""Frozen configuration dataclass for the randomized transform passes."""

from dataclasses import dataclass, fields
from typing import Any

from ganteng.core.constants import (
    DEFAULT_EMOJI,
    DEFAULT_EMOJI_AFTER_PUNCTUATION_PROBABILITY,
    DEFAULT_EMOJI_PROBABILITY,
    DEFAULT_SOFTEN_U_PROBABILITY,
    DEFAULT_TILDE_PROBABILITY,
)

_PROBABILITY_FIELDS = (
    "soften_u_probability",
    "tilde_probability",
    "emoji_probability",
    "emoji_after_punctuation_probability",
)


@dataclass(frozen=True, slots=True)
class TransformConfig:
    """Tunable knobs for the probabilistic passes."""

    soften_u_probability: float = DEFAULT_SOFTEN_U_PROBABILITY
    tilde_probability: float = DEFAULT_TILDE_PROBABILITY
    emoji_probability: float = DEFAULT_EMOJI_PROBABILITY
    emoji_after_punctuation_probability: float = (
        DEFAULT_EMOJI_AFTER_PUNCTUATION_PROBABILITY
    )
    capitalize_sentences: bool = False
    emoji: str = DEFAULT_EMOJI


DEFAULT_TRANSFORM_CONFIG = TransformConfig()


def _filter_fields(cls: type, raw: dict[str, Any]) -> dict[str, Any]:
    """Keep only keys that match dataclass fields."""
    valid = {f.name for f in fields(cls)}
    return {k: v for k, v in raw.items() if k in valid}


def make_transform_config(raw: dict[str, Any]) -> TransformConfig:
    """Factory: build a TransformConfig from a raw mapping.

    Unknown keys are ignored. Probabilities are coerced to float and must
    lie in ``[0, 1]``; anything else raises ``ValueError``.
    """
    values = _filter_fields(TransformConfig, raw)
    for name in _PROBABILITY_FIELDS:
        if name not in values:
            continue
        value = float(values[name])
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"{name} must be between 0 and 1, got {value}")
        values[name] = value
    if "capitalize_sentences" in values:
        values["capitalize_sentences"] = bool(values["capitalize_sentences"])
    if "emoji" in values:
        values["emoji"] = str(values["emoji"])
    return TransformConfig(**values)
