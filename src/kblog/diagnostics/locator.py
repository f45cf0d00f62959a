"""Diagnostics – source positions attached to parser events."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class Locator:
    """Position in a parsed document.

    Unknown numeric parts are ``-1``.  The dispatcher never looks inside a
    locator; it only calls ``str()`` on it for the default stderr line, so
    producers may attach any object with a useful ``__str__`` instead.
    """

    uri: str | None = None
    file: str | None = None
    line: int = -1
    column: int = -1
    byte: int = -1

    @property
    def source(self) -> str | None:
        return self.file or self.uri

    def __str__(self) -> str:
        parts: list[str] = []
        if self.source:
            parts.append(self.source)
        if self.line >= 0:
            parts.append(str(self.line))
        text = ":".join(parts)
        if self.column >= 0:
            text = f"{text} column {self.column}" if text else f"column {self.column}"
        return text


__all__ = ["Locator"]
