"""Root error class for the kblog error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the kblog error hierarchy.

    Every error carries a stable ``code`` slug beside its message and a
    ``detail`` mapping of plain values.  :meth:`log_fields` flattens both
    into keyword fields for a structlog call.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to the class ``default_code``).
        detail: Extra context; copied, never shared with the caller.
    """

    default_code: str = "kblog_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "type": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "detail": dict(self.detail),
        }
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload

    def log_fields(self) -> dict[str, Any]:
        """``error_code`` plus the detail entries, ready for ``log.error(msg, **fields)``."""
        return {"error_code": self.code, **self.detail}


__all__ = ["BaseError"]
