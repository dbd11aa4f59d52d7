"""
Configuration Store Module.

Maps each configuration key to at most one ConfigValue. A store created with
``ConfigStore.with_defaults()`` holds every built-in default before anything
else can see it. The store itself is not synchronized; the shared instance in
``fluidconf.config.accessors`` wraps it in a lock.
"""

from __future__ import annotations

import copy
from typing import Dict, Iterator, List, Tuple

from loguru import logger

from fluidconf.config.errors import ConfigKeyNotFoundError
from fluidconf.config.keys import ConfigKey
from fluidconf.config.value import ConfigType, ConfigValue, Payload


# Built-in defaults, in key declaration order
DEFAULT_VALUES: Tuple[Tuple[ConfigKey, Payload], ...] = (
    (ConfigKey.NORMALIZE_GAS_CONSTANTS, True),
    (ConfigKey.CRITICAL_SPLINES_ENABLED, True),
)


class ConfigStore:
    """
    In-memory map from ConfigKey to ConfigValue.

    Usage::

        store = ConfigStore.with_defaults()
        store.get(ConfigKey.CRITICAL_SPLINES_ENABLED).as_bool()  # True

        store.insert(ConfigValue(ConfigKey.NORMALIZE_GAS_CONSTANTS, False))
    """

    def __init__(self) -> None:
        self._items: Dict[ConfigKey, ConfigValue] = {}

    @classmethod
    def with_defaults(cls) -> "ConfigStore":
        """Create a store populated with the built-in default values."""
        store = cls()
        store.set_defaults()
        logger.debug(f"ConfigStore created with {len(store)} default entries")
        return store

    def set_defaults(self) -> None:
        """(Re)insert every built-in default, replacing current entries."""
        for key, payload in DEFAULT_VALUES:
            self.insert(ConfigValue(key, payload))

    def insert(self, value: ConfigValue) -> None:
        """
        Insert a value, replacing any existing entry for the same key.

        The replacement is unconditional, including a change of type tag;
        callers that must keep a key's type fixed check before inserting.
        """
        self._items[value.key] = value

    def get(self, key: ConfigKey) -> ConfigValue:
        """
        Return the live entry for a key.

        Raises:
            ConfigKeyNotFoundError: If the store holds no entry for the key.
        """
        try:
            return self._items[key]
        except KeyError:
            logger.debug(f"Configuration lookup failed for key: {key}")
            raise ConfigKeyNotFoundError(key) from None

    def all(self) -> List[Tuple[ConfigKey, ConfigValue]]:
        """
        Return every (key, value) pair in key declaration order.

        The values are the stored objects, so decoding into them updates
        the store.
        """
        return [(key, self._items[key]) for key in ConfigKey if key in self._items]

    def snapshot(self) -> Dict[ConfigKey, Tuple[ConfigType, Payload]]:
        """Return a plain ``{key: (type, payload)}`` copy of the contents."""
        return {key: (value.type, value.payload) for key, value in self.all()}

    def copy(self) -> "ConfigStore":
        """Return an independent copy of this store."""
        clone = ConfigStore()
        clone._items = copy.deepcopy(self._items)
        return clone

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ConfigKey]:
        return (key for key, _ in self.all())

    def __repr__(self) -> str:
        entries = ", ".join(repr(value) for _, value in self.all())
        return f"ConfigStore([{entries}])"
