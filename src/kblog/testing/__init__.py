"""Testing support – handler fakes and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["kblog.testing.fixtures"]
"""

from kblog.testing.fakes import RecordingHandler, RecordingLevelHandler

__all__ = [
    "RecordingHandler",
    "RecordingLevelHandler",
]
