"""
fluidconf - Runtime Configuration Store.

This package contains the process-wide configuration registry consulted by
the thermophysical property library:
- Keys: the closed set of configuration keys and their canonical names.
- Values: typed configuration entries (bool, integer, double, string).
- Store: the key -> value map, seeded with built-in defaults.
- Codec: JSON document / JSON text import and export.
- Accessors: the shared, lock-guarded configuration and typed getters/setters.
"""

__version__ = "0.1.0"
