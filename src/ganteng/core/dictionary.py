"""Slang dictionary loading.

A dictionary is a JSON object mapping lowercase words or phrases to their
replacements. It can come from the bundled resource, a local file, or an
``http(s)://`` URL. Every failure surfaces as :class:`DictionaryLoadError`.

``requests`` is imported lazily so that offline use never pays for it.
"""

import asyncio
import json
from collections.abc import Mapping
from importlib import resources
from pathlib import Path
from typing import Any

from ganteng.core.constants import DEFAULT_DICTIONARY_RESOURCE, DEFAULT_FETCH_TIMEOUT
from ganteng.core.env import LOGGER


class DictionaryLoadError(Exception):
    """The dictionary resource could not be fetched or parsed."""


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def parse_dictionary(data: Any) -> dict[str, str]:
    """Validate decoded JSON and return it as an ordered ``dict``.

    Raises :class:`DictionaryLoadError` if the top level is not an object
    or any key or value is not a string.
    """
    if not isinstance(data, dict):
        raise DictionaryLoadError(
            f"dictionary must be a JSON object, got {type(data).__name__}"
        )
    entries: dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise DictionaryLoadError(
                f"dictionary entry {key!r} must map a string to a string"
            )
        entries[key] = value
    return entries


def _read_bundled() -> str:
    return resources.files("ganteng").joinpath(DEFAULT_DICTIONARY_RESOURCE).read_text(
        encoding="utf-8"
    )


def _fetch(url: str, timeout: float) -> str:
    import requests  # deferred import

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise DictionaryLoadError(f"could not fetch dictionary from {url}: {exc}") from exc
    return response.text


def load_dictionary(
    source: str | Path | None = None,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
) -> dict[str, str]:
    """Load a dictionary from *source*.

    Args:
        source: ``None`` for the bundled dictionary, an ``http(s)://`` URL,
            or a path to a JSON file.
        timeout: Network timeout in seconds for URL sources.

    Returns:
        The entries in file order.

    Raises:
        DictionaryLoadError: The resource is unreachable, not valid JSON,
            or does not match the ``{word: replacement}`` schema.
    """
    if source is None:
        label = "bundled dictionary"
        raw = _read_bundled()
    elif isinstance(source, str) and is_url(source):
        label = source
        raw = _fetch(source, timeout)
    else:
        path = Path(source).expanduser()
        label = str(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DictionaryLoadError(f"could not read dictionary {path}: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DictionaryLoadError(f"{label} is not valid JSON: {exc}") from exc

    entries = parse_dictionary(data)
    LOGGER.debug("Loaded %d dictionary entries from %s", len(entries), label)
    return entries


async def load_dictionary_async(
    source: str | Path | None = None,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
) -> dict[str, str]:
    """Run :func:`load_dictionary` in a worker thread."""
    return await asyncio.to_thread(load_dictionary, source, timeout)


def merge_dictionaries(*dictionaries: Mapping[str, str]) -> dict[str, str]:
    """Merge dictionaries left to right.

    Overridden keys keep their original position; new keys are appended.
    """
    merged: dict[str, str] = {}
    for dictionary in dictionaries:
        merged.update(dictionary)
    return merged
