"""Diagnostics – message rendering and the default stderr line."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from kblog.diagnostics.event import LogEvent
from kblog.observability.logging import get_logger

_log = get_logger(__name__)


def render_message(fmt: str, args: tuple[Any, ...]) -> str:
    """Expand a printf-style *fmt* against *args* with ``%`` formatting.

    A single mapping argument is used for ``%(name)s`` lookups, as in
    :mod:`logging`.  With no arguments *fmt* is returned verbatim.  Any
    failure while expanding is reported through structlog and the text is
    rendered as ``"<fmt> <args!r>"``; this function never raises.
    """
    if not args:
        return fmt
    values: Any = args
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values = args[0]
    try:
        return fmt % values
    except Exception as exc:  # noqa: BLE001
        _log.warning("diagnostic.render_failed", format=fmt, error=f"{type(exc).__name__}: {exc}")
        return f"{fmt} {_safe_repr(args)}"


def _safe_repr(args: tuple[Any, ...]) -> str:
    try:
        return repr(args)
    except Exception:  # noqa: BLE001
        return "(<unprintable arguments>)"


def format_default_line(event: LogEvent, prefix: str = "") -> str:
    """Render *event* as the default-policy diagnostic line.

    ``[prefix ][facility] level[ code][ (locator)]: message``
    """
    head = f"[{event.facility_name}] {event.level_name}"
    if prefix:
        head = f"{prefix} {head}"
    if event.has_code:
        head = f"{head} {event.code}"
    if event.locator is not None:
        where = str(event.locator)
        if where:
            head = f"{head} ({where})"
    return f"{head}: {event.message}"


__all__ = ["format_default_line", "render_message"]
