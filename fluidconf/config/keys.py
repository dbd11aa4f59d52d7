"""
Configuration Key Registry.

The closed set of configuration keys. Each key has exactly one canonical
string name, used as the member name in the JSON form of the store.
Declaration order is the order in which keys are encoded.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict

from fluidconf.config.errors import ConfigUnknownKeyError


class ConfigKey(Enum):
    """Known configuration keys."""

    NORMALIZE_GAS_CONSTANTS = "NORMALIZE_GAS_CONSTANTS"
    CRITICAL_SPLINES_ENABLED = "CRITICAL_SPLINES_ENABLED"


_KEYS_BY_NAME: Dict[str, ConfigKey] = {key.value: key for key in ConfigKey}


def config_key_to_string(key: ConfigKey) -> str:
    """Return the canonical name of a configuration key."""
    return ConfigKey(key).value


def config_string_to_key(name: str) -> ConfigKey:
    """
    Resolve a canonical name back to its configuration key.

    Args:
        name: Canonical key name, e.g. "CRITICAL_SPLINES_ENABLED".

    Returns:
        The matching ConfigKey.

    Raises:
        ConfigUnknownKeyError: If no key has that canonical name.
    """
    try:
        return _KEYS_BY_NAME[name]
    except (KeyError, TypeError):
        raise ConfigUnknownKeyError(name) from None
