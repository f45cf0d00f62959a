"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for settings read from ``<PREFIX>_<FIELD>`` variables.

    Subclasses set ``_prefix`` and may override :meth:`_validate`, which runs
    after every construction, whichever loader supplied the values.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable carrying *field_name* (``log_level`` -> ``KBLOG_LOG_LEVEL``)."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def required_fields(cls) -> tuple[str, ...]:
        """Names of the fields that have no default."""
        return tuple(
            field.name
            for field in dataclasses.fields(cls)
            if field.default is dataclasses.MISSING
            and field.default_factory is dataclasses.MISSING
        )

    def _validate(self) -> None:
        """Override to normalise values or reject them."""


__all__ = ["Settings"]
