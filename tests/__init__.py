"""
fluidconf - Test Suite Package.

Contains Pytest-based unit tests, one module per configuration component:
keys, values, store, JSON codec and the shared accessors.
"""
