"""Config settings – SettingsFactory."""
from __future__ import annotations

from typing import Any, Sequence, TypeVar

from kblog.config.settings.base import Settings
from kblog.config.settings.loaders import SettingsLoader
from kblog.config.validation.errors import (
    ConfigError,
    MissingRequiredSettingError,
)
from kblog.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

_log = get_logger(__name__)


class SettingsFactory:
    """Build a settings dataclass from several loaders plus overrides.

    Later loaders win on overlapping fields and *overrides* win over all
    of them.  A loader that fails with :class:`ConfigError` is logged and
    skipped; the others still contribute.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Parameters
        ----------
        settings_cls:
            The :class:`~kblog.config.settings.base.Settings` subclass to
            construct.
        loaders:
            Ordered sequence of loaders.
        overrides:
            Field values applied after all loaders.

        Raises
        ------
        MissingRequiredSettingError
            A required field is still absent after merging.
        ConfigError
            Construction or validation of the merged values failed.
        """
        merged: dict[str, Any] = {}
        for loader in loaders or ():
            try:
                loaded = loader.load(settings_cls)
            except ConfigError as exc:
                _log.warning(
                    "settings.loader_skipped",
                    loader=type(loader).__name__,
                    settings=settings_cls.__name__,
                    **exc.log_fields(),
                )
                continue
            merged.update(vars(loaded))

        merged.update(overrides or {})

        missing = [name for name in settings_cls.required_fields() if name not in merged]
        if missing:
            raise MissingRequiredSettingError(missing[0], env_key=settings_cls.env_key(missing[0]))

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc


__all__ = ["SettingsFactory"]
