"""
Configuration Value Module.

A ConfigValue holds exactly one typed configuration datum together with the
key it belongs to. The type tag is fixed at construction; reading the payload
through any other type raises instead of converting.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Dict, Union

from fluidconf.config.errors import (
    ConfigInvalidStateError,
    ConfigTypeMismatchError,
    ConfigValidationError,
)
from fluidconf.config.keys import ConfigKey, config_key_to_string


Payload = Union[bool, int, float, str]


class ConfigType(Enum):
    """Type tag of a configuration value."""

    UNDEFINED = "undefined"
    BOOL = "bool"
    DOUBLE = "double"
    INTEGER = "integer"
    STRING = "string"


# Name of the JSON kind each type tag is written as
JSON_KINDS: Dict[ConfigType, str] = {
    ConfigType.BOOL: "boolean",
    ConfigType.INTEGER: "integer number",
    ConfigType.DOUBLE: "floating-point number",
    ConfigType.STRING: "string",
}


class ConfigValue:
    """
    One entry of the configuration store.

    Build values with ``ConfigValue(key, payload)``, which picks the type tag
    from the Python type of the payload, or with the explicit ``from_*``
    factories when the tag must not depend on the literal (for example a
    double written as ``1``).

    Attributes:
        key: The configuration key this value belongs to (read-only).
        type: The ConfigType tag (read-only).
    """

    def __init__(self, key: ConfigKey, value: Payload) -> None:
        if isinstance(value, bool):
            config_type = ConfigType.BOOL
        elif isinstance(value, int):
            config_type = ConfigType.INTEGER
        elif isinstance(value, float):
            if not math.isfinite(value):
                raise ValueError(
                    f"Non-finite double for {ConfigKey(key).name}: {value!r}"
                )
            config_type = ConfigType.DOUBLE
        elif isinstance(value, str):
            config_type = ConfigType.STRING
        else:
            raise TypeError(
                f"Unsupported configuration value type for {ConfigKey(key).name}: "
                f"{type(value).__name__}"
            )
        self._key = ConfigKey(key)
        self._type = config_type
        self._payload: Payload = value

    @classmethod
    def from_bool(cls, key: ConfigKey, value: bool) -> "ConfigValue":
        if not isinstance(value, bool):
            raise TypeError(f"Expected bool, got {type(value).__name__}")
        return cls(key, value)

    @classmethod
    def from_integer(cls, key: ConfigKey, value: int) -> "ConfigValue":
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Expected int, got {type(value).__name__}")
        return cls(key, value)

    @classmethod
    def from_double(cls, key: ConfigKey, value: float) -> "ConfigValue":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"Expected float, got {type(value).__name__}")
        return cls(key, float(value))

    @classmethod
    def from_string(cls, key: ConfigKey, value: str) -> "ConfigValue":
        if not isinstance(value, str):
            raise TypeError(f"Expected str, got {type(value).__name__}")
        return cls(key, value)

    @property
    def key(self) -> ConfigKey:
        return self._key

    @property
    def type(self) -> ConfigType:
        return self._type

    @property
    def payload(self) -> Payload:
        """The raw payload, typed according to ``type``."""
        return self._payload

    # ------------------------------------------------------------------
    # Typed access
    # ------------------------------------------------------------------

    def as_bool(self) -> bool:
        """Return the payload of a BOOL value."""
        return self._read(ConfigType.BOOL)

    def as_integer(self) -> int:
        """Return the payload of an INTEGER value."""
        return self._read(ConfigType.INTEGER)

    def as_double(self) -> float:
        """Return the payload of a DOUBLE value."""
        return self._read(ConfigType.DOUBLE)

    def as_string(self) -> str:
        """Return the payload of a STRING value."""
        return self._read(ConfigType.STRING)

    def _read(self, requested: ConfigType) -> Any:
        if requested is not self._type:
            raise ConfigTypeMismatchError(self._key, requested, self._type)
        return self._payload

    # ------------------------------------------------------------------
    # JSON
    # ------------------------------------------------------------------

    def encode_into(self, document: Dict[str, Any]) -> None:
        """
        Add this value to a JSON object as ``{canonical_name: payload}``.

        Args:
            document: The JSON object (a dict) being built.

        Raises:
            ConfigInvalidStateError: If the value carries no usable type tag.
        """
        if self._type not in JSON_KINDS:
            raise ConfigInvalidStateError(
                f"Cannot encode {self._key.name}: type is {self._type.value}",
                key=self._key,
            )
        document[config_key_to_string(self._key)] = self._payload

    def check_json(self, raw: Any) -> None:
        """
        Check that a decoded JSON value has the JSON kind of this value's type.

        Integral numbers only match INTEGER and finite floating numbers only
        match DOUBLE; JSON booleans never count as numbers.

        Raises:
            ConfigValidationError: If the JSON kind does not match.
        """
        if self._type is ConfigType.BOOL:
            valid = isinstance(raw, bool)
        elif self._type is ConfigType.INTEGER:
            valid = isinstance(raw, int) and not isinstance(raw, bool)
        elif self._type is ConfigType.DOUBLE:
            valid = isinstance(raw, float) and math.isfinite(raw)
        elif self._type is ConfigType.STRING:
            valid = isinstance(raw, str)
        else:
            raise ConfigInvalidStateError(
                f"Cannot decode into {self._key.name}: type is {self._type.value}",
                key=self._key,
            )

        if not valid:
            raise ConfigValidationError(self._key, JSON_KINDS[self._type], raw)

    def decode_from(self, raw: Any) -> None:
        """
        Replace the payload with a JSON value of the matching kind.

        The key and type tag are never changed.

        Raises:
            ConfigValidationError: If the JSON kind does not match the type.
        """
        self.check_json(raw)
        self._payload = raw

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigValue):
            return NotImplemented
        return (
            self._key is other._key
            and self._type is other._type
            and self._payload == other._payload
        )

    def __hash__(self) -> int:
        # Payload is mutable through decode_from
        return hash((self._key, self._type))

    def __repr__(self) -> str:
        return (
            f"ConfigValue({self._key.name}, {self._type.value}={self._payload!r})"
        )
