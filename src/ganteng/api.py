"""Public API for ganteng text stylizing.

The engine owns the loaded dictionary and its load state. Until a
dictionary has loaded successfully, :meth:`TypingGanteng.transform`
refuses to run and returns :data:`NOT_READY_MESSAGE`.

Typical usage::

    from ganteng.api import TypingGanteng

    engine = TypingGanteng()
    engine.load()
    print(engine.transform("gw mau kmn"))
"""

from __future__ import annotations

import random
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from ganteng.core.config import DEFAULT_TRANSFORM_CONFIG, TransformConfig
from ganteng.core.constants import NOT_READY_MESSAGE
from ganteng.core.dictionary import (
    DictionaryLoadError,
    load_dictionary,
    load_dictionary_async,
    merge_dictionaries,
)
from ganteng.core.env import LOGGER
from ganteng.core.protocols import RandomSource
from ganteng.core.transform import iter_passes, transform
from ganteng.core.types import LoadState, PassResult

_EMPTY: Mapping[str, str] = MappingProxyType({})


class TypingGanteng:
    """Transformer gated on dictionary load state.

    Load failures are captured in :attr:`state` and :attr:`error` rather
    than raised, so a front-end can keep running and show the problem.
    """

    __slots__ = ("config", "_rng", "_dictionary", "_state", "_error")

    def __init__(
        self,
        config: TransformConfig | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self.config = config or DEFAULT_TRANSFORM_CONFIG
        self._rng: RandomSource = rng or random.random
        self._dictionary: Mapping[str, str] = _EMPTY
        self._state = LoadState.NOT_LOADED
        self._error = ""

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is LoadState.LOADED

    @property
    def error(self) -> str:
        return self._error

    @property
    def dictionary(self) -> Mapping[str, str]:
        """Read-only view of the loaded dictionary."""
        return self._dictionary

    def use_dictionary(
        self,
        dictionary: Mapping[str, str],
        extra: Mapping[str, str] | None = None,
    ) -> LoadState:
        """Install an already-loaded dictionary, plus optional overrides."""
        merged = merge_dictionaries(dictionary, extra or {})
        self._dictionary = MappingProxyType(merged)
        self._state = LoadState.LOADED
        self._error = ""
        return self._state

    def _fail(self, exc: DictionaryLoadError) -> LoadState:
        LOGGER.error("Dictionary load failed: %s", exc)
        self._dictionary = _EMPTY
        self._state = LoadState.ERROR
        self._error = str(exc)
        return self._state

    def load(
        self,
        source: str | Path | None = None,
        extra: Mapping[str, str] | None = None,
    ) -> LoadState:
        """Load a dictionary (bundled when *source* is None).

        Returns the resulting state; on failure :attr:`error` holds the
        reason and the engine refuses to transform.
        """
        try:
            dictionary = load_dictionary(source)
        except DictionaryLoadError as exc:
            return self._fail(exc)
        return self.use_dictionary(dictionary, extra)

    async def load_async(
        self,
        source: str | Path | None = None,
        extra: Mapping[str, str] | None = None,
    ) -> LoadState:
        """Async variant of :meth:`load`; the fetch runs in a worker thread."""
        try:
            dictionary = await load_dictionary_async(source)
        except DictionaryLoadError as exc:
            return self._fail(exc)
        return self.use_dictionary(dictionary, extra)

    def transform(self, text: str) -> str:
        """Stylize *text*, or return NOT_READY_MESSAGE before a successful load."""
        if not self.is_ready:
            return NOT_READY_MESSAGE
        return transform(text, self._dictionary, self._rng, self.config)

    def trace(self, text: str) -> list[PassResult]:
        """Return the text after each pass; empty when not ready."""
        if not self.is_ready:
            return []
        return list(iter_passes(text, self._dictionary, self._rng, self.config))
