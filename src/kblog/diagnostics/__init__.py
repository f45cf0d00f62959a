"""Diagnostics – leveled, facility-tagged log events and their routing."""
from kblog.diagnostics.dispatcher import emit, emit_simple, fatal
from kblog.diagnostics.event import (
    LogEvent,
    build_event,
    message_code,
    message_facility,
    message_level,
    message_locator,
    message_message,
)
from kblog.diagnostics.handlers import RaisingHandler, StructlogForwarder, SuppressingHandler
from kblog.diagnostics.levels import (
    UNCLASSIFIED,
    Facility,
    Level,
    facility_name,
    level_name,
)
from kblog.diagnostics.locator import Locator
from kblog.diagnostics.render import format_default_line, render_message
from kblog.diagnostics.world import (
    GenericHandler,
    HandlerRegistration,
    HandlerSlot,
    LevelHandler,
    World,
)

__all__ = [
    "UNCLASSIFIED",
    "Facility",
    "GenericHandler",
    "HandlerRegistration",
    "HandlerSlot",
    "Level",
    "LevelHandler",
    "Locator",
    "LogEvent",
    "RaisingHandler",
    "StructlogForwarder",
    "SuppressingHandler",
    "World",
    "build_event",
    "emit",
    "emit_simple",
    "facility_name",
    "fatal",
    "format_default_line",
    "level_name",
    "message_code",
    "message_facility",
    "message_level",
    "message_locator",
    "message_message",
    "render_message",
]
