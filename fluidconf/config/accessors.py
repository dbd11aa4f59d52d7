"""
Process-wide Configuration Accessors.

The Configuration class owns one ConfigStore behind a single re-entrant lock
and exposes typed getters/setters plus JSON export/import. The library shares
one lazily created instance, reached through ``get_configuration()`` and the
``get_config_*`` / ``set_config_*`` functions below.

Thread Safety:
    Every Configuration method holds the instance lock for its whole
    duration, so a JSON load is never observed half-applied.
"""

from __future__ import annotations

import threading
from typing import Any, Dict, Mapping, Optional

from loguru import logger

from fluidconf.config import codec
from fluidconf.config.errors import ConfigTypeMismatchError
from fluidconf.config.keys import ConfigKey
from fluidconf.config.store import ConfigStore
from fluidconf.config.value import ConfigType, ConfigValue


class Configuration:
    """
    Lock-guarded configuration store with typed accessors.

    Usage::

        config = Configuration()
        if config.get_bool(ConfigKey.CRITICAL_SPLINES_ENABLED):
            ...

        config.load_json_text('{"NORMALIZE_GAS_CONSTANTS": false}')

    Setters keep each key's type fixed: once a key holds a value of one type,
    setting it through another type raises ConfigTypeMismatchError.
    """

    def __init__(self, store: Optional[ConfigStore] = None) -> None:
        """
        Initialize the configuration.

        Args:
            store: Store to wrap. Defaults to a new store with built-in defaults.
        """
        self._lock = threading.RLock()
        self._store = store if store is not None else ConfigStore.with_defaults()

    @property
    def store(self) -> ConfigStore:
        """The wrapped store. Not synchronized; prefer the methods below."""
        return self._store

    # ------------------------------------------------------------------
    # Getters
    # ------------------------------------------------------------------

    def get_bool(self, key: ConfigKey) -> bool:
        with self._lock:
            return self._store.get(key).as_bool()

    def get_integer(self, key: ConfigKey) -> int:
        with self._lock:
            return self._store.get(key).as_integer()

    def get_double(self, key: ConfigKey) -> float:
        with self._lock:
            return self._store.get(key).as_double()

    def get_string(self, key: ConfigKey) -> str:
        with self._lock:
            return self._store.get(key).as_string()

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_bool(self, key: ConfigKey, value: bool) -> None:
        self._set(ConfigValue.from_bool(key, value))

    def set_integer(self, key: ConfigKey, value: int) -> None:
        self._set(ConfigValue.from_integer(key, value))

    def set_double(self, key: ConfigKey, value: float) -> None:
        self._set(ConfigValue.from_double(key, value))

    def set_string(self, key: ConfigKey, value: str) -> None:
        self._set(ConfigValue.from_string(key, value))

    def _set(self, value: ConfigValue) -> None:
        with self._lock:
            if value.key in self._store:
                current = self._store.get(value.key)
                if current.type is not value.type:
                    raise ConfigTypeMismatchError(value.key, current.type, value.type)
            self._store.insert(value)
        logger.debug(f"Configuration set: {value.key.name} = {value.payload!r}")

    # ------------------------------------------------------------------
    # JSON
    # ------------------------------------------------------------------

    def as_json(self) -> Dict[str, Any]:
        """Return the whole configuration as a JSON object (dict)."""
        with self._lock:
            return codec.encode(self._store)

    def as_json_text(self, indent: Optional[int] = None) -> str:
        """Return the whole configuration as JSON text."""
        with self._lock:
            return codec.to_text(self._store, indent=indent)

    def load_json(self, document: Mapping[str, Any]) -> None:
        """Update existing entries from a JSON object; all-or-nothing."""
        with self._lock:
            codec.decode(self._store, document)
        logger.info(f"Configuration loaded from JSON: {sorted(document)}")

    def load_json_text(self, text: str) -> None:
        """Parse JSON text and update existing entries; all-or-nothing."""
        document = codec.parse_text(text)
        self.load_json(document)

    def reset(self) -> None:
        """Restore every built-in default."""
        with self._lock:
            self._store.set_defaults()
        logger.info("Configuration reset to defaults")

    def type_of(self, key: ConfigKey) -> ConfigType:
        """Return the type tag currently held by a key."""
        with self._lock:
            return self._store.get(key).type


# ----------------------------------------------------------------------
# Shared instance
# ----------------------------------------------------------------------

_shared: Optional[Configuration] = None
_shared_lock = threading.Lock()


def get_configuration() -> Configuration:
    """Return the process-wide Configuration, creating it on first use."""
    global _shared
    if _shared is None:
        with _shared_lock:
            if _shared is None:
                _shared = Configuration()
                logger.info("Process-wide configuration initialized with defaults")
    return _shared


def reset_configuration() -> None:
    """Restore the built-in defaults on the process-wide Configuration."""
    get_configuration().reset()


def get_config_bool(key: ConfigKey) -> bool:
    """Return a boolean configuration value."""
    return get_configuration().get_bool(key)


def get_config_integer(key: ConfigKey) -> int:
    """Return an integer configuration value."""
    return get_configuration().get_integer(key)


def get_config_double(key: ConfigKey) -> float:
    """Return a floating-point configuration value."""
    return get_configuration().get_double(key)


def get_config_string(key: ConfigKey) -> str:
    """Return a string configuration value."""
    return get_configuration().get_string(key)


def set_config_bool(key: ConfigKey, value: bool) -> None:
    """Set a boolean configuration value."""
    get_configuration().set_bool(key, value)


def set_config_integer(key: ConfigKey, value: int) -> None:
    """Set an integer configuration value."""
    get_configuration().set_integer(key, value)


def set_config_double(key: ConfigKey, value: float) -> None:
    """Set a floating-point configuration value."""
    get_configuration().set_double(key, value)


def set_config_string(key: ConfigKey, value: str) -> None:
    """Set a string configuration value."""
    get_configuration().set_string(key, value)


def get_config_as_json() -> Dict[str, Any]:
    """Return the process-wide configuration as a JSON object (dict)."""
    return get_configuration().as_json()


def get_config_as_json_string(indent: Optional[int] = None) -> str:
    """Return the process-wide configuration as JSON text."""
    return get_configuration().as_json_text(indent=indent)


def set_config_json(document: Mapping[str, Any]) -> None:
    """Update the process-wide configuration from a JSON object."""
    get_configuration().load_json(document)


def set_config_as_json_string(text: str) -> None:
    """Update the process-wide configuration from JSON text."""
    get_configuration().load_json_text(text)
