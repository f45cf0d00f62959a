"""Testing fixtures – log_world, recording_handler, aborts."""
from __future__ import annotations

try:
    import pytest

    @pytest.fixture
    def log_world():
        """Pytest fixture: a fresh :class:`World` with default settings, closed after the test."""
        from kblog.config import DiagnosticsSettings
        from kblog.diagnostics import World

        world = World(DiagnosticsSettings(), name="test")
        yield world
        world.close()

    @pytest.fixture
    def recording_handler(log_world):
        """Pytest fixture: a consuming :class:`RecordingHandler` installed on ``log_world``."""
        from kblog.testing.fakes import RecordingHandler

        handler = RecordingHandler()
        log_world.set_generic_handler(handler)
        return handler

    @pytest.fixture
    def aborts(monkeypatch):
        """Pytest fixture: replaces ``os.abort`` and records calls instead."""
        calls: list[None] = []
        monkeypatch.setattr("kblog.diagnostics.dispatcher.os.abort", lambda: calls.append(None))
        return calls

except ImportError:
    pass
