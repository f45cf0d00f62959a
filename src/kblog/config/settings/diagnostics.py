"""Config settings – DiagnosticsSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import Any, ClassVar

from kblog.config.settings.base import Settings
from kblog.config.settings.factory import SettingsFactory
from kblog.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from kblog.config.validation import InvalidSettingValueError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclasses.dataclass
class DiagnosticsSettings(Settings):
    """Settings read from ``KBLOG_*`` environment variables.

    ``line_prefix`` is written in front of every default-policy stderr line;
    ``log_level`` and ``json_logs`` configure kblog's own structlog output.
    """

    _prefix: ClassVar[str] = "KBLOG"

    line_prefix: str = ""
    log_level: str = "INFO"
    json_logs: bool = False

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {', '.join(_LOG_LEVELS)}"
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def load_diagnostics_settings(env_file: str | None = None, **overrides: Any) -> DiagnosticsSettings:
    """Read :class:`DiagnosticsSettings` from the environment.

    With *env_file* the ``.env`` file is loaded first (needs the ``dotenv``
    extra).  Invalid variables are logged and the defaults are kept, so a
    bad environment never prevents a logging context from being created.
    Keyword *overrides* win over the environment.
    """
    loader: SettingsLoader = EnvSettingsLoader() if env_file is None else DotenvSettingsLoader(env_file)
    return SettingsFactory.create(DiagnosticsSettings, [loader], overrides or None)


__all__ = ["DiagnosticsSettings", "load_diagnostics_settings"]
