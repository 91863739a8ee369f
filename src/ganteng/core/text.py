"""Text passes for the ganteng pipeline.

Every pass is a pure ``str -> str`` function. The randomized passes also
take a RandomSource, called a fixed number of times per match, so tests can
drive each branch exactly.
"""

import functools
import re
from collections.abc import Mapping

from ganteng.core.config import DEFAULT_TRANSFORM_CONFIG, TransformConfig
from ganteng.core.constants import (
    LAUGHTER_TOKENS,
    POLITE_CLOSINGS,
    SOFTEN_A_WORDS,
    SOFTEN_U_WORDS,
    TERMINAL_PUNCTUATION,
)
from ganteng.core.env import LOGGER
from ganteng.core.protocols import RandomSource


class InvalidPatternError(ValueError):
    """A dictionary key that cannot form a word-boundary pattern."""


_REPEATED_LETTER = re.compile(r"([a-zA-Z])\1{2,}")
_LAUGHTER_RULES = (
    (re.compile(r"wkwk[wk]*", re.IGNORECASE), "wkwk"),
    (re.compile(r"hehe[he]*", re.IGNORECASE), "hehe"),
    (re.compile(r"haha[ha]*", re.IGNORECASE), "haha"),
    (re.compile(r"hihi[hi]*", re.IGNORECASE), "hehe"),
    (re.compile(r"xixi[xi]*", re.IGNORECASE), "hehe"),
)

# The lookahead also leaves already-lengthened forms ("iyaa", "kamuu") alone.
_SOFTEN_WORD = re.compile(
    r"\b(" + "|".join(SOFTEN_A_WORDS + SOFTEN_U_WORDS) + r")(?![a-z])",
    re.IGNORECASE | re.ASCII,
)

_REPEATED_MARK = re.compile(r"([,?!~;:])\1+")
_DOT_RUN = re.compile(r"\.(?:\s*\.)+")
# A punctuation cluster touching whitespace on either side.
_PUNCT_SPACING = re.compile(r"\s*([.,?!~;:]+)\s+|\s+([.,?!~;:]+)\s*")

_LAUGHTER_END = re.compile(
    r"(?:" + "|".join(LAUGHTER_TOKENS) + r")$", re.IGNORECASE
)
_POLITE_END = re.compile(
    r"\b(?:" + "|".join(re.escape(p) for p in POLITE_CLOSINGS) + r")$",
    re.IGNORECASE,
)
_SENTENCE_START = re.compile(r"([.?!…]\s+)([a-z])")
_WHITESPACE = re.compile(r"\s+")


def normalize_input(text: str) -> str:
    """Lowercase and trim."""
    return text.lower().strip()


@functools.lru_cache(maxsize=4096)
def word_pattern(key: str) -> re.Pattern[str]:
    """Compile a case-insensitive whole-word pattern for a dictionary key.

    Word boundaries use ASCII ``\\b`` semantics. Raises
    :class:`InvalidPatternError` for keys that cannot form a usable pattern
    (empty keys would match at every boundary).
    """
    if not key:
        raise InvalidPatternError("empty dictionary key")
    try:
        return re.compile(rf"\b{re.escape(key)}\b", re.IGNORECASE | re.ASCII)
    except (re.error, TypeError) as exc:
        raise InvalidPatternError(f"invalid dictionary key {key!r}: {exc}") from exc


def apply_dictionary(text: str, dictionary: Mapping[str, str]) -> str:
    """Replace whole-word occurrences of each key with its value.

    Entries are applied in the mapping's iteration order, so a later key
    may match text produced by an earlier replacement. Values are inserted
    literally. A key that cannot be compiled is logged and skipped.
    """
    for key, value in dictionary.items():
        try:
            pattern = word_pattern(key)
        except InvalidPatternError as exc:
            LOGGER.debug("Skipping dictionary entry: %s", exc)
            continue
        text = pattern.sub(lambda _m, value=value: value, text)
    return text


def collapse_repeats(text: str) -> str:
    """Cap letter runs at two, then squash laughter to a canonical token."""
    text = _REPEATED_LETTER.sub(r"\1\1", text)
    for pattern, replacement in _LAUGHTER_RULES:
        text = pattern.sub(replacement, text)
    return text


def _matching_case(letter: str, word: str) -> str:
    return letter.upper() if word.isupper() else letter


def soften_vowels(
    text: str,
    rng: RandomSource,
    config: TransformConfig = DEFAULT_TRANSFORM_CONFIG,
) -> str:
    """Lengthen the final vowel of a few conversational words.

    "iya"-style words always gain an "a"; "kamu"-style words gain a "u"
    with ``config.soften_u_probability``, drawing once per match.
    """

    def _soften(match: re.Match[str]) -> str:
        word = match.group(0)
        lowered = word.lower()
        if lowered in SOFTEN_A_WORDS:
            return word + _matching_case("a", word)
        if rng() < config.soften_u_probability:
            return word + _matching_case("u", word)
        return word

    return _SOFTEN_WORD.sub(_soften, text)


def _space_cluster(match: re.Match[str]) -> str:
    return (match.group(1) or match.group(2)) + " "


def clean_punctuation(text: str) -> str:
    """Collapse repeated marks, standardize ellipses and fix spacing.

    Idempotent: ``clean_punctuation(clean_punctuation(s)) == clean_punctuation(s)``.
    """
    text = _REPEATED_MARK.sub(r"\1", text)
    text = _DOT_RUN.sub("...", text)
    text = _PUNCT_SPACING.sub(_space_cluster, text)
    return text.strip()


def ends_with_laughter(text: str) -> bool:
    return _LAUGHTER_END.search(text.rstrip()) is not None


def ends_with_terminal(text: str) -> bool:
    stripped = text.rstrip()
    return bool(stripped) and stripped[-1] in TERMINAL_PUNCTUATION


def add_terminal_punctuation(
    text: str,
    rng: RandomSource,
    config: TransformConfig = DEFAULT_TRANSFORM_CONFIG,
) -> str:
    """Close the text with "." or "~" unless it already ends properly.

    Polite closings always get a period; otherwise "~" is chosen with
    ``config.tilde_probability``.
    """
    text = text.strip()
    if not text or ends_with_terminal(text) or ends_with_laughter(text):
        return text
    if _POLITE_END.search(text):
        return text + "."
    if rng() < config.tilde_probability:
        return text + "~"
    return text + "."


def capitalize(text: str, sentences: bool = False) -> str:
    """Uppercase the first character, and optionally each sentence start."""
    if not text:
        return text
    text = text[0].upper() + text[1:]
    if sentences:
        text = _SENTENCE_START.sub(
            lambda m: m.group(1) + m.group(2).upper(), text
        )
    return text


def add_emoji(
    text: str,
    rng: RandomSource,
    config: TransformConfig = DEFAULT_TRANSFORM_CONFIG,
) -> str:
    """Occasionally append the configured emoji.

    Text ending in laughter is left alone. After terminal punctuation a
    second draw must also pass.
    """
    if not text or ends_with_laughter(text):
        return text
    if rng() >= config.emoji_probability:
        return text
    if ends_with_terminal(text) and rng() >= config.emoji_after_punctuation_probability:
        return text
    return f"{text} {config.emoji}"


def final_cleanup(text: str) -> str:
    """Collapse whitespace runs to one space and trim."""
    return _WHITESPACE.sub(" ", text).strip()
