"""Diagnostics – routing of log events to handlers and the default policy.

Per emission::

    build event
      -> level handler   (WARN / ERROR only, exact match)   consumed? stop
      -> generic handler                                     consumed? stop
      -> default policy: one stderr line, then os.abort() if FATAL

A handler consumes an event by returning a truthy value.  Exceptions raised
by handlers propagate to the producer unchanged.
"""
from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, Any

from kblog.diagnostics.event import LogEvent, build_event
from kblog.diagnostics.levels import Facility, Level
from kblog.diagnostics.render import format_default_line, render_message

if TYPE_CHECKING:
    from kblog.diagnostics.world import World


def emit(
    world: World,
    code: int,
    level: Level | int | str,
    facility: Facility | int | str,
    locator: Any,
    fmt: str,
    *args: Any,
) -> None:
    """Emit a printf-style message through both handler tiers.

    The level handler for WARN or ERROR receives the unrendered *fmt* and the
    raw *args* tuple; the generic handler receives the built :class:`LogEvent`.
    """
    world.ensure_open()
    event = build_event(code, level, facility, locator, render_message(fmt, args))

    slot = world.registration.level_slot(event.level)
    if slot is not None and slot.handler(slot.user_data, fmt, args):
        return

    _dispatch(world, event)


def emit_simple(
    world: World,
    code: int,
    level: Level | int | str,
    facility: Facility | int | str,
    locator: Any,
    text: str,
) -> None:
    """Emit an already rendered message; level handlers are not consulted."""
    world.ensure_open()
    _dispatch(world, build_event(code, level, facility, locator, text))


def fatal(
    world: World,
    facility: Facility | int | str,
    message: str,
    *,
    file: str | None = None,
    line: int | None = None,
    function: str | None = None,
    stacklevel: int = 1,
) -> None:
    """Report an unrecoverable internal error.

    The location defaults to the caller's frame (*stacklevel* frames up).
    Unless a generic handler consumes the event the process aborts.
    """
    if file is None or line is None or function is None:
        frame = sys._getframe(stacklevel)
        file = frame.f_code.co_filename if file is None else file
        line = frame.f_lineno if line is None else line
        function = frame.f_code.co_name if function is None else function
    text = f"{file}:{line}:{function}: fatal error: {message}"
    emit_simple(world, 0, Level.FATAL, facility, None, text)


def _dispatch(world: World, event: LogEvent) -> None:
    slot = world.registration.generic
    if slot is not None and slot.handler(slot.user_data, event):
        return
    _apply_default_policy(world, event)


def _apply_default_policy(world: World, event: LogEvent) -> None:
    # an unwritable stderr must not cancel the abort
    try:
        stream = sys.stderr
        if stream is not None:
            stream.write(format_default_line(event, world.settings.line_prefix) + "\n")
            stream.flush()
    finally:
        if event.level is Level.FATAL:
            os.abort()


__all__ = ["emit", "emit_simple", "fatal"]
