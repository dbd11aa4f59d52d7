"""
Configuration Errors.

Every failure of the configuration store is raised synchronously as a
subclass of ConfigurationError, so a loader can treat any of them as a
fatal configuration error or catch a specific kind.
"""

from __future__ import annotations

from typing import Any, Optional


class ConfigurationError(Exception):
    """Base class for all configuration store failures."""

    pass


class ConfigKeyNotFoundError(ConfigurationError, KeyError):
    """Raised when a key has no entry in the store."""

    def __init__(self, key: Any) -> None:
        super().__init__(f"Configuration key not found in store: {_name(key)}")
        self.key = key

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class ConfigUnknownKeyError(ConfigurationError, KeyError):
    """Raised when a name does not map to any configuration key."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown configuration key name: {name!r}")
        self.name = name

    def __str__(self) -> str:
        return str(self.args[0])


class ConfigTypeMismatchError(ConfigurationError, TypeError):
    """
    Raised when a value is read or overwritten through the wrong type.

    Attributes:
        key: The configuration key involved.
        expected: The type the caller asked for on a read, or the type the
            key already holds when a setter is rejected.
        actual: The type the stored value has on a read, or the type the
            rejected setter tried to write.
    """

    def __init__(self, key: Any, expected: Any, actual: Any) -> None:
        super().__init__(
            f"Type mismatch for {_name(key)}: "
            f"expected {_name(expected)}, got {_name(actual)}"
        )
        self.key = key
        self.expected = expected
        self.actual = actual


class ConfigValidationError(ConfigurationError, ValueError):
    """Raised when a JSON value does not match the type of its target entry."""

    def __init__(self, key: Any, expected: str, got: Optional[Any] = None) -> None:
        message = f"Invalid JSON value for {_name(key)}: expected a JSON {expected}"
        if got is not None:
            message += f", got {type(got).__name__} {got!r}"
        super().__init__(message)
        self.key = key
        self.expected = expected


class ConfigParseError(ConfigurationError, ValueError):
    """Raised when configuration text is not a well-formed JSON object."""

    pass


class ConfigInvalidStateError(ConfigurationError):
    """Raised when an entry cannot be encoded in its current state."""

    def __init__(self, message: str, key: Optional[Any] = None) -> None:
        super().__init__(message)
        self.key = key


def _name(item: Any) -> str:
    """Return the enum member name of *item*, or its str() otherwise."""
    return getattr(item, "name", str(item))
