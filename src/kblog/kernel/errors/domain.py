"""Domain errors: invalid values handed to the diagnostics core."""

from __future__ import annotations

from typing import Any

from kblog.kernel.errors.base import BaseError


class DomainError(BaseError):
    """A caller broke a rule of the diagnostics model."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """A value was rejected; ``detail["field"]`` names what was being set."""

    default_code = "validation_error"


class InvalidLevelError(ValidationError):
    """A value that is not a log level was used where one is required."""

    default_code = "invalid_level"

    def __init__(self, value: Any, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"field": "level", "value": repr(value)})
        super().__init__(f"{value!r} is not a log level", **kwargs)
        self.value = value


class InvalidHandlerLevelError(ValidationError):
    """Level handlers exist only for the warning and error levels."""

    default_code = "invalid_handler_level"

    def __init__(self, level: Any, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"field": "level", "value": repr(level)})
        super().__init__(f"No level handler slot for {level!r}; use WARN or ERROR", **kwargs)
        self.level = level


__all__ = [
    "DomainError",
    "InvalidHandlerLevelError",
    "InvalidLevelError",
    "ValidationError",
]
