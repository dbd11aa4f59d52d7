"""
Root conftest.py - Shared Pytest fixtures.

Provides fixtures for:
- A freshly defaulted ConfigStore.
- A store whose entries cover every value type.
- An isolated Configuration wrapping its own store.
- Resetting the process-wide configuration around each test.
"""

from __future__ import annotations

from typing import Generator

import pytest

from fluidconf.config.accessors import Configuration, get_configuration
from fluidconf.config.keys import ConfigKey
from fluidconf.config.store import ConfigStore
from fluidconf.config.value import ConfigValue


# ---------------------------------------------------------------------------
# Store fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def default_store() -> ConfigStore:
    """Return a store holding only the built-in defaults."""
    return ConfigStore.with_defaults()


@pytest.fixture
def mixed_store() -> ConfigStore:
    """
    Return a store with a DOUBLE and a STRING entry.

    The built-in keys are both boolean, so other types are exercised by
    inserting directly into a bare store.
    """
    store = ConfigStore()
    store.insert(ConfigValue(ConfigKey.NORMALIZE_GAS_CONSTANTS, 8.314462618))
    store.insert(ConfigValue(ConfigKey.CRITICAL_SPLINES_ENABLED, "linear"))
    return store


@pytest.fixture
def integer_store() -> ConfigStore:
    """Return a store with INTEGER entries."""
    store = ConfigStore()
    store.insert(ConfigValue(ConfigKey.NORMALIZE_GAS_CONSTANTS, 3))
    store.insert(ConfigValue(ConfigKey.CRITICAL_SPLINES_ENABLED, -7))
    return store


# ---------------------------------------------------------------------------
# Configuration fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def configuration() -> Configuration:
    """Return an isolated Configuration with the built-in defaults."""
    return Configuration()


@pytest.fixture
def mixed_configuration(mixed_store: ConfigStore) -> Configuration:
    """Return an isolated Configuration wrapping the mixed-type store."""
    return Configuration(mixed_store)


@pytest.fixture
def shared_configuration() -> Generator[Configuration, None, None]:
    """Yield the process-wide Configuration, restoring defaults afterwards."""
    config = get_configuration()
    config.reset()
    yield config
    config.reset()
