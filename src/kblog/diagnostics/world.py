"""Diagnostics – World, the logging context that owns handler registration.

Every emission names its world explicitly; there is no process-global
registration, so independent worlds can coexist in one process.
"""
from __future__ import annotations

import dataclasses
import threading
from typing import TYPE_CHECKING, Any, Callable, NamedTuple

from kblog.config.settings import DiagnosticsSettings, load_diagnostics_settings
from kblog.diagnostics import dispatcher
from kblog.diagnostics.levels import Facility, Level
from kblog.kernel.errors import InvalidHandlerLevelError, WorldClosedError

if TYPE_CHECKING:
    from kblog.diagnostics.event import LogEvent

LevelHandler = Callable[[Any, str, tuple[Any, ...]], Any]
"""``(user_data, format, args)``; a truthy result consumes the event."""

GenericHandler = Callable[[Any, "LogEvent"], Any]
"""``(user_data, event)``; a truthy result consumes the event."""


class HandlerSlot(NamedTuple):
    handler: Callable[..., Any]
    user_data: Any = None


@dataclasses.dataclass
class HandlerRegistration:
    """The three handler slots of a world. Empty slots mean default policy."""

    warning: HandlerSlot | None = None
    error: HandlerSlot | None = None
    generic: HandlerSlot | None = None

    def level_slot(self, level: Level) -> HandlerSlot | None:
        if level is Level.WARN:
            return self.warning
        if level is Level.ERROR:
            return self.error
        return None

    def clear(self) -> None:
        self.warning = None
        self.error = None
        self.generic = None


class World:
    """A logging context.

    Handlers are registered here and read by :mod:`kblog.diagnostics.dispatcher`
    on every emission.  Re-registering a slot replaces its handler; passing
    ``None`` clears it.  Without explicit *settings* they are read from the
    ``KBLOG_*`` environment when the world is created.

    Usage::

        with World() as world:
            world.set_generic_handler(lambda _, event: print(event.message) or 1)
            world.emit(0, Level.INFO, Facility.STORAGE, None, "opened %s", path)
    """

    def __init__(self, settings: DiagnosticsSettings | None = None, *, name: str = "world") -> None:
        self.settings = settings if settings is not None else load_diagnostics_settings()
        self.name = name
        self.registration = HandlerRegistration()
        self._lock = threading.Lock()
        self._closed = False

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"World(name={self.name!r}, {state})"

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    def ensure_open(self) -> None:
        if self._closed:
            raise WorldClosedError(self.name)

    def close(self) -> None:
        """Drop all handlers; later emissions raise :class:`WorldClosedError`."""
        with self._lock:
            self.registration.clear()
            self._closed = True

    def __enter__(self) -> World:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def set_level_handler(
        self,
        level: Level,
        handler: LevelHandler | None,
        user_data: Any = None,
    ) -> None:
        """Install *handler* for exactly *level*, which must be WARN or ERROR."""
        if level not in (Level.WARN, Level.ERROR):
            raise InvalidHandlerLevelError(level)
        slot = None if handler is None else HandlerSlot(handler, user_data)
        self.ensure_open()
        with self._lock:
            if level == Level.WARN:
                self.registration.warning = slot
            else:
                self.registration.error = slot

    def set_warning_handler(self, handler: LevelHandler | None, user_data: Any = None) -> None:
        self.set_level_handler(Level.WARN, handler, user_data)

    def set_error_handler(self, handler: LevelHandler | None, user_data: Any = None) -> None:
        self.set_level_handler(Level.ERROR, handler, user_data)

    def set_generic_handler(self, handler: GenericHandler | None, user_data: Any = None) -> None:
        """Install the catch-all handler that sees every built event."""
        slot = None if handler is None else HandlerSlot(handler, user_data)
        self.ensure_open()
        with self._lock:
            self.registration.generic = slot

    # ------------------------------------------------------------------
    # Emission shortcuts
    # ------------------------------------------------------------------

    def emit(
        self,
        code: int,
        level: Level | int,
        facility: Facility | int | str,
        locator: Any,
        fmt: str,
        *args: Any,
    ) -> None:
        dispatcher.emit(self, code, level, facility, locator, fmt, *args)

    def emit_simple(
        self,
        code: int,
        level: Level | int,
        facility: Facility | int | str,
        locator: Any,
        text: str,
    ) -> None:
        dispatcher.emit_simple(self, code, level, facility, locator, text)

    def fatal(self, facility: Facility | int | str, message: str, **location: Any) -> None:
        location.setdefault("stacklevel", 2)
        dispatcher.fatal(self, facility, message, **location)

    def debug(self, facility: Facility | int | str, fmt: str, *args: Any) -> None:
        dispatcher.emit(self, 0, Level.DEBUG, facility, None, fmt, *args)

    def info(self, facility: Facility | int | str, fmt: str, *args: Any) -> None:
        dispatcher.emit(self, 0, Level.INFO, facility, None, fmt, *args)

    def warning(self, facility: Facility | int | str, fmt: str, *args: Any) -> None:
        dispatcher.emit(self, 0, Level.WARN, facility, None, fmt, *args)

    def error(self, facility: Facility | int | str, fmt: str, *args: Any) -> None:
        dispatcher.emit(self, 0, Level.ERROR, facility, None, fmt, *args)


__all__ = [
    "GenericHandler",
    "HandlerRegistration",
    "HandlerSlot",
    "LevelHandler",
    "World",
]
