"""Testing fakes – in-memory handler doubles."""
from kblog.testing.fakes.handlers import RecordingHandler, RecordingLevelHandler

__all__ = ["RecordingHandler", "RecordingLevelHandler"]
