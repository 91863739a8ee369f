"""Application-level configuration.

Reads ``~/.config/ganteng/config.json``::

    {
      "dictionary": {"source": "kamus.json", "extra": {"anjir": "astaga"}},
      "transform": {"tilde_probability": 0.5, "capitalize_sentences": true},
      "seed": 7
    }

Every section is optional.
"""

from __future__ import annotations

import json
import os
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ganteng.core.config import (
    DEFAULT_TRANSFORM_CONFIG,
    TransformConfig,
    make_transform_config,
)
from ganteng.core.constants import (
    DEFAULT_CONFIG_DIR,
    DEFAULT_CONFIG_DIR_ENV,
    DEFAULT_CONFIG_FILE,
)
from ganteng.core.dictionary import is_url
from ganteng.core.env import LOGGER
from ganteng.core.protocols import RandomSource


# ---------------------------------------------------------------------------
# Nested config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class DictionaryConfig:
    """Where to load the dictionary from, plus local overrides."""

    source: str | None = None
    extra: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class GantengConfig:
    """Top-level configuration loaded from ~/.config/ganteng/config.json."""

    dictionary: DictionaryConfig = field(default_factory=DictionaryConfig)
    transform: TransformConfig = DEFAULT_TRANSFORM_CONFIG
    seed: int | None = None

    def make_rng(self) -> RandomSource:
        """Seeded random source when ``seed`` is set, else the global one."""
        if self.seed is None:
            return random.random
        return random.Random(self.seed).random


# ---------------------------------------------------------------------------
# Config loading helpers
# ---------------------------------------------------------------------------


def config_dir() -> Path:
    """Config directory, honouring ``GANTENG_CONFIG_DIR``."""
    return Path(
        os.environ.get(DEFAULT_CONFIG_DIR_ENV, "") or DEFAULT_CONFIG_DIR,
    ).expanduser()


def _resolve_source(directory: Path, source: str) -> str:
    """Resolve a dictionary source relative to *directory*. URLs and absolute paths used as-is."""
    if is_url(source):
        return source
    p = Path(source).expanduser()
    if p.is_absolute():
        return str(p)
    return str(directory / p)


def _parse_dictionary_section(directory: Path, raw: Any) -> DictionaryConfig:
    if not isinstance(raw, dict):
        return DictionaryConfig()
    source = raw.get("source")
    extra_raw = raw.get("extra", {})
    extra: dict[str, str] = {}
    if isinstance(extra_raw, dict):
        extra = {str(k): str(v) for k, v in extra_raw.items()}
    else:
        LOGGER.debug("Ignoring non-object 'dictionary.extra' in config")
    return DictionaryConfig(
        source=_resolve_source(directory, str(source)) if source else None,
        extra=extra,
    )


# ---------------------------------------------------------------------------
# Public loader
# ---------------------------------------------------------------------------


def load_config(path: str | None = None) -> GantengConfig:
    """Load ganteng configuration from a JSON file.

    Reads ``~/.config/ganteng/config.json`` (or *path*). Relative dictionary
    sources are resolved against the directory holding the config file.

    Returns a default config if the file does not exist or its top level is
    not a JSON object. Invalid probabilities raise ``ValueError``.
    """
    config_path = (
        Path(path).expanduser() if path else config_dir() / DEFAULT_CONFIG_FILE
    )

    if not config_path.exists():
        return GantengConfig()

    with open(config_path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        LOGGER.debug("Config %s is not a JSON object; using defaults", config_path)
        return GantengConfig()

    dictionary = _parse_dictionary_section(
        config_path.parent, data.get("dictionary", {}),
    )

    transform_raw = data.get("transform", {})
    transform = (
        make_transform_config(transform_raw)
        if isinstance(transform_raw, dict)
        else DEFAULT_TRANSFORM_CONFIG
    )

    raw_seed = data.get("seed")
    seed = int(raw_seed) if isinstance(raw_seed, int) else None

    return GantengConfig(dictionary=dictionary, transform=transform, seed=seed)
