"""
Configuration JSON Codec.

Translates a ConfigStore to and from a flat JSON object whose member names
are canonical key names:

    {"NORMALIZE_GAS_CONSTANTS": true, "CRITICAL_SPLINES_ENABLED": true}

Decoding never adds keys to a store and is all-or-nothing: every member is
resolved and type-checked before any entry is updated.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Tuple, Union

from loguru import logger

from fluidconf.config.errors import (
    ConfigInvalidStateError,
    ConfigParseError,
    ConfigurationError,
)
from fluidconf.config.keys import config_string_to_key
from fluidconf.config.store import ConfigStore
from fluidconf.config.value import ConfigValue


def encode(store: ConfigStore) -> Dict[str, Any]:
    """
    Build the JSON object for every entry of a store.

    Members appear in key declaration order.
    """
    document: Dict[str, Any] = {}
    for _, value in store.all():
        value.encode_into(document)
    return document


def decode(store: ConfigStore, document: Mapping[str, Any]) -> None:
    """
    Update existing store entries from a JSON object.

    Args:
        store: Store whose entries are updated in place.
        document: Parsed JSON object (a mapping of canonical names to values).

    Raises:
        ConfigParseError: If the document is not a JSON object.
        ConfigUnknownKeyError: If a member name is not a known key.
        ConfigKeyNotFoundError: If a member's key has no entry in the store.
        ConfigValidationError: If a member's JSON kind does not match the
            entry's type.
    """
    if not isinstance(document, Mapping):
        raise ConfigParseError(
            f"Configuration document must be a JSON object, "
            f"got {type(document).__name__}"
        )

    staged: List[Tuple[ConfigValue, Any]] = []
    try:
        for name, raw in document.items():
            value = store.get(config_string_to_key(name))
            value.check_json(raw)
            staged.append((value, raw))
    except ConfigurationError as e:
        logger.warning(f"Configuration document rejected, store unchanged: {e}")
        raise

    for value, raw in staged:
        value.decode_from(raw)
    logger.debug(f"Decoded {len(staged)} configuration entries")


def to_text(store: ConfigStore, indent: int | None = None) -> str:
    """
    Serialize a store as standard JSON text.

    Raises:
        ConfigInvalidStateError: If an entry cannot be written as standard
            JSON (a non-finite double).
    """
    try:
        return json.dumps(encode(store), indent=indent, allow_nan=False)
    except ValueError as e:
        raise ConfigInvalidStateError(
            f"Configuration is not representable as JSON text: {e}"
        ) from e


def from_text(store: ConfigStore, text: Union[str, bytes]) -> None:
    """
    Parse JSON text and decode it into a store.

    Raises:
        ConfigParseError: If the text is not a well-formed JSON object.
        ConfigurationError: Any error raised by :func:`decode`.
    """
    document = parse_text(text)
    decode(store, document)


def parse_text(text: Union[str, bytes]) -> Dict[str, Any]:
    """
    Parse configuration text into a JSON object without touching any store.

    ``NaN`` and ``Infinity`` literals are rejected, as standard JSON does.
    Bytes input must be UTF-8 encoded.
    """
    try:
        document = json.loads(text, parse_constant=_reject_constant)
    except ConfigParseError:
        raise
    except (ValueError, TypeError, RecursionError) as e:
        # ValueError covers JSONDecodeError and UnicodeDecodeError on bytes input
        raise ConfigParseError(f"Failed to parse configuration JSON: {e}") from e

    if not isinstance(document, dict):
        raise ConfigParseError(
            f"Configuration JSON must contain an object, "
            f"got {type(document).__name__}"
        )
    return document


def _reject_constant(literal: str) -> Any:
    raise ConfigParseError(f"Failed to parse configuration JSON: {literal} is not valid JSON")
