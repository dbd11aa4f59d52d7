"""
Configuration Store Module.

Handles the runtime configuration of the library:
- A closed set of keys with canonical names.
- Typed values with checked access.
- A key -> value store seeded with built-in defaults.
- JSON export/import of the whole store.
- A shared, lock-guarded configuration with typed getters/setters.
"""

from fluidconf.config.accessors import (
    Configuration,
    get_config_as_json,
    get_config_as_json_string,
    get_config_bool,
    get_config_double,
    get_config_integer,
    get_config_string,
    get_configuration,
    reset_configuration,
    set_config_as_json_string,
    set_config_bool,
    set_config_double,
    set_config_integer,
    set_config_json,
    set_config_string,
)
from fluidconf.config.errors import (
    ConfigInvalidStateError,
    ConfigKeyNotFoundError,
    ConfigParseError,
    ConfigTypeMismatchError,
    ConfigUnknownKeyError,
    ConfigurationError,
    ConfigValidationError,
)
from fluidconf.config.keys import ConfigKey, config_key_to_string, config_string_to_key
from fluidconf.config.store import ConfigStore
from fluidconf.config.value import ConfigType, ConfigValue

__all__ = [
    "ConfigInvalidStateError",
    "ConfigKey",
    "ConfigKeyNotFoundError",
    "ConfigParseError",
    "ConfigStore",
    "ConfigType",
    "ConfigTypeMismatchError",
    "ConfigUnknownKeyError",
    "ConfigValidationError",
    "ConfigValue",
    "Configuration",
    "ConfigurationError",
    "config_key_to_string",
    "config_string_to_key",
    "get_config_as_json",
    "get_config_as_json_string",
    "get_config_bool",
    "get_config_double",
    "get_config_integer",
    "get_config_string",
    "get_configuration",
    "reset_configuration",
    "set_config_as_json_string",
    "set_config_bool",
    "set_config_double",
    "set_config_integer",
    "set_config_json",
    "set_config_string",
]
