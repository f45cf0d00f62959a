"""Diagnostics – ready-made generic handlers.

Each handler is a callable with the generic-handler shape
``handler(user_data, event) -> int`` and can be installed directly::

    world.set_generic_handler(StructlogForwarder())
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from kblog.diagnostics.event import LogEvent
from kblog.diagnostics.levels import Facility, Level, facility_key
from kblog.kernel.errors import DiagnosticError
from kblog.observability.logging import Logger, get_logger

_METHODS = {
    Level.NONE: "debug",
    Level.DEBUG: "debug",
    Level.INFO: "info",
    Level.WARN: "warning",
    Level.ERROR: "error",
    Level.FATAL: "critical",
}


class StructlogForwarder:
    """Redirect events to a structlog logger.

    Parameters
    ----------
    logger:
        Target logger. Defaults to ``get_logger("kblog")``.
    consume:
        Return 1 so the default stderr line is skipped.
    consume_fatal:
        Also consume FATAL events.  Off by default, so a fatal event is
        forwarded and then still aborts the process.
    """

    def __init__(
        self,
        logger: Logger | None = None,
        *,
        consume: bool = True,
        consume_fatal: bool = False,
    ) -> None:
        self._logger = logger if logger is not None else get_logger("kblog")
        self._consume = consume
        self._consume_fatal = consume_fatal

    def __call__(self, user_data: Any, event: LogEvent) -> int:
        fields: dict[str, Any] = {"facility": event.facility_name}
        if event.has_code:
            fields["code"] = event.code
        if event.locator is not None:
            fields["locator"] = str(event.locator)
        getattr(self._logger, _METHODS[event.level])(event.message, **fields)

        if event.level is Level.FATAL:
            return int(self._consume and self._consume_fatal)
        return int(self._consume)


class SuppressingHandler:
    """Silence events below a severity or from chosen facilities.

    Facilities may be given as members, their values or their names
    (``"parser"`` matches ``Facility.PARSER``).  Everything else is left
    unconsumed for the default policy.
    """

    def __init__(
        self,
        below: Level = Level.WARN,
        facilities: Iterable[Facility | int | str] = (),
    ) -> None:
        self.below = Level.coerce(below)
        self.facilities = frozenset(facility_key(f) for f in facilities)

    def __call__(self, user_data: Any, event: LogEvent) -> int:
        if event.level < self.below:
            return 1
        if facility_key(event.facility) in self.facilities:
            return 1
        return 0


class RaisingHandler:
    """Turn events at or above *threshold* into :class:`DiagnosticError`."""

    def __init__(self, threshold: Level = Level.ERROR) -> None:
        self.threshold = Level.coerce(threshold)

    def __call__(self, user_data: Any, event: LogEvent) -> int:
        if event.level >= self.threshold:
            raise DiagnosticError(event)
        return 0


__all__ = ["RaisingHandler", "StructlogForwarder", "SuppressingHandler"]
