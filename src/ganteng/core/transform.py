"""Pipeline composition: run every text pass, in order, over one string."""

import random
from collections.abc import Iterator, Mapping

from ganteng.core.config import DEFAULT_TRANSFORM_CONFIG, TransformConfig
from ganteng.core.protocols import RandomSource
from ganteng.core.text import (
    add_emoji,
    add_terminal_punctuation,
    apply_dictionary,
    capitalize,
    clean_punctuation,
    collapse_repeats,
    final_cleanup,
    normalize_input,
    soften_vowels,
)
from ganteng.core.types import PassResult


def iter_passes(
    text: str,
    dictionary: Mapping[str, str],
    rng: RandomSource = random.random,
    config: TransformConfig = DEFAULT_TRANSFORM_CONFIG,
) -> Iterator[PassResult]:
    """Yield the text after each pass of the pipeline.

    Empty or whitespace-only input yields nothing and draws no randomness.
    The dictionary is only read, never mutated.
    """
    text = normalize_input(text or "")
    if not text:
        return
    yield PassResult("normalize", text)

    text = apply_dictionary(text, dictionary)
    yield PassResult("dictionary", text)

    text = collapse_repeats(text)
    yield PassResult("repeats", text)

    text = soften_vowels(text, rng, config)
    yield PassResult("soften", text)

    text = clean_punctuation(text)
    yield PassResult("punctuation", text)

    text = add_terminal_punctuation(text, rng, config)
    yield PassResult("terminal", text)

    text = capitalize(text, sentences=config.capitalize_sentences)
    yield PassResult("capitalize", text)

    text = add_emoji(text, rng, config)
    yield PassResult("emoji", text)

    yield PassResult("cleanup", final_cleanup(text))


def transform(
    text: str,
    dictionary: Mapping[str, str],
    rng: RandomSource = random.random,
    config: TransformConfig = DEFAULT_TRANSFORM_CONFIG,
) -> str:
    """Rewrite *text* into the ganteng style. Returns ``""`` for empty input."""
    result = ""
    for step in iter_passes(text, dictionary, rng, config):
        result = step.text
    return result
