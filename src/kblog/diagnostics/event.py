"""Diagnostics – the LogEvent message model.

A :class:`LogEvent` exists for exactly one dispatch.  Handlers may read it
but must not keep its ``locator`` once they return: the producer owns it.
"""
from __future__ import annotations

import dataclasses
from typing import Any

from kblog.diagnostics.levels import Facility, Level, coerce_facility, facility_name


@dataclasses.dataclass(frozen=True)
class LogEvent:
    """One rendered diagnostic."""

    code: int
    level: Level
    facility: Facility | int | str
    message: str
    locator: Any = None

    @property
    def level_name(self) -> str:
        return self.level.label

    @property
    def facility_name(self) -> str:
        return facility_name(self.facility)

    @property
    def has_code(self) -> bool:
        return self.code != 0


def build_event(
    code: int,
    level: Level | int | str,
    facility: Facility | int | str,
    locator: Any,
    message: str | None,
) -> LogEvent:
    """Construct a :class:`LogEvent`.

    ``Level.NONE`` is normalized to ``Level.DEBUG`` and a ``None`` message to
    ``""``.  Integer facilities outside :class:`Facility` are kept as-is.

    Raises:
        InvalidLevelError: *level* is not a level.
    """
    return LogEvent(
        code=int(code),
        level=Level.coerce(level),
        facility=coerce_facility(facility),
        message="" if message is None else str(message),
        locator=locator,
    )


def message_code(event: LogEvent) -> int:
    return event.code


def message_level(event: LogEvent) -> Level:
    return event.level


def message_facility(event: LogEvent) -> Facility | int | str:
    return event.facility


def message_message(event: LogEvent) -> str:
    return event.message


def message_locator(event: LogEvent) -> Any:
    return event.locator


__all__ = [
    "LogEvent",
    "build_event",
    "message_code",
    "message_facility",
    "message_level",
    "message_locator",
    "message_message",
]
