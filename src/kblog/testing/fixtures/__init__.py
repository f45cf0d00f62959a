"""Testing fixtures – pytest fixtures for diagnostics tests.

Enable in ``conftest.py``::

    pytest_plugins = ["kblog.testing.fixtures"]
"""
try:
    import pytest  # noqa: F401

    from kblog.testing.fixtures.world import aborts, log_world, recording_handler

except ImportError:
    pass

__all__ = [
    "aborts",
    "log_world",
    "recording_handler",
]
