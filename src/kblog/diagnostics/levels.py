"""Diagnostics – severity levels and originating facilities.

Both enumerations keep the numeric values of the Redland ``librdf_log_level``
and ``librdf_log_facility`` tables so codes read from C bindings or old logs
map one-to-one.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Any

from kblog.kernel.errors import InvalidLevelError


class Level(IntEnum):
    """Strictly ordered severity. ``NONE`` is an unset sentinel only."""

    NONE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5

    @property
    def label(self) -> str:
        return _LEVEL_NAMES[self]

    @classmethod
    def coerce(cls, value: Any) -> Level:
        """Return the member for *value*, mapping ``NONE`` to ``DEBUG``.

        Accepts members, their integer values and case-insensitive names
        (``"warn"`` and ``"warning"`` are both accepted).

        Raises:
            InvalidLevelError: *value* names no level.
        """
        if isinstance(value, str):
            key = value.strip().upper()
            key = _LEVEL_ALIASES.get(key, key)
            try:
                level = cls[key]
            except KeyError:
                raise InvalidLevelError(value) from None
        elif isinstance(value, int) and not isinstance(value, bool):
            try:
                level = cls(value)
            except ValueError:
                raise InvalidLevelError(value) from None
        else:
            raise InvalidLevelError(value)
        return cls.DEBUG if level is cls.NONE else level


_LEVEL_NAMES = {
    Level.NONE: "none",
    Level.DEBUG: "debug",
    Level.INFO: "info",
    Level.WARN: "warning",
    Level.ERROR: "error",
    Level.FATAL: "fatal",
}

_LEVEL_ALIASES = {"WARNING": "WARN", "CRITICAL": "FATAL"}


class Facility(IntEnum):
    """Subsystem that produced an event.

    New producers may pass values outside this table; see :func:`facility_name`.
    """

    NONE = 0
    CONCEPTS = 1
    DIGEST = 2
    FILES = 3
    HASH = 4
    INIT = 5
    ITERATOR = 6
    LIST = 7
    MODEL = 8
    NODE = 9
    PARSER = 10
    QUERY = 11
    SERIALIZER = 12
    STATEMENT = 13
    STORAGE = 14
    STREAM = 15
    URI = 16
    UTF8 = 17
    MEMORY = 18
    RAPTOR = 19


UNCLASSIFIED = "unclassified"


def coerce_facility(value: Any) -> Any:
    """Map integers naming a known facility onto :class:`Facility`.

    Anything else is returned untouched and stays an opaque tag.
    """
    if isinstance(value, Facility):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Facility(value)
        except ValueError:
            return value
    return value


def facility_key(value: Any) -> Any:
    """Comparison key for a facility tag.

    Like :func:`coerce_facility`, but strings naming a member
    (case-insensitively) also map onto that member.  Other strings are
    lowered so ad-hoc tags compare without regard to case.
    """
    if isinstance(value, str):
        try:
            return Facility[value.strip().upper()]
        except KeyError:
            return value.lower()
    return coerce_facility(value)


def facility_name(value: Any) -> str:
    """Printable name for a facility tag; never raises."""
    if isinstance(value, Facility):
        return value.name.lower()
    if isinstance(value, str) and value:
        return value.lower()
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Facility(value).name.lower()
        except ValueError:
            return UNCLASSIFIED
    return UNCLASSIFIED


def level_name(value: Any) -> str:
    """Printable name for a level; ``"none"`` for anything unrecognised."""
    try:
        return _LEVEL_NAMES[Level(value)]
    except (ValueError, TypeError):
        return _LEVEL_NAMES[Level.NONE]


__all__ = [
    "UNCLASSIFIED",
    "Facility",
    "Level",
    "coerce_facility",
    "facility_key",
    "facility_name",
    "level_name",
]
