"""Application-layer errors: misuse of a logging context and escalated events."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any

from kblog.kernel.errors.base import BaseError

if TYPE_CHECKING:
    from kblog.diagnostics.event import LogEvent


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class WorldClosedError(ApplicationError):
    """A logging context was used after :meth:`World.close`."""

    default_code = "world_closed"

    def __init__(self, name: str = "world", **kwargs: Any) -> None:
        super().__init__(f"Logging context '{name}' is closed", **kwargs)
        self.name = name


class DiagnosticError(ApplicationError):
    """A log event escalated to a Python exception by a handler.

    The locator belongs to the producer, so ``event`` is a copy without it;
    its text survives in ``detail["locator"]``.
    """

    default_code = "diagnostic"

    def __init__(self, event: LogEvent, **kwargs: Any) -> None:
        detail: dict[str, Any] = {
            "code": event.code,
            "level": event.level_name,
            "facility": event.facility_name,
        }
        if event.locator is not None:
            detail["locator"] = str(event.locator)
        kwargs.setdefault("detail", detail)
        super().__init__(event.message, **kwargs)
        self.event = dataclasses.replace(event, locator=None)


__all__ = [
    "ApplicationError",
    "DiagnosticError",
    "WorldClosedError",
]
