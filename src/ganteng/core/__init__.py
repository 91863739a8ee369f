"""Core text pipeline: no UI dependencies.

Re-exports key symbols for convenience.
"""

from ganteng.core.config import (
    DEFAULT_TRANSFORM_CONFIG,
    TransformConfig,
    make_transform_config,
)
from ganteng.core.dictionary import (
    DictionaryLoadError,
    load_dictionary,
    load_dictionary_async,
    merge_dictionaries,
)
from ganteng.core.protocols import RandomSource
from ganteng.core.text import InvalidPatternError, apply_dictionary
from ganteng.core.transform import iter_passes, transform
from ganteng.core.types import LoadState, PassResult

__all__ = [
    "DEFAULT_TRANSFORM_CONFIG",
    "DictionaryLoadError",
    "InvalidPatternError",
    "LoadState",
    "PassResult",
    "RandomSource",
    "TransformConfig",
    "apply_dictionary",
    "iter_passes",
    "load_dictionary",
    "load_dictionary_async",
    "make_transform_config",
    "merge_dictionaries",
    "transform",
]
