"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from kblog.config.settings.base import Settings
from kblog.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"", "0", "false", "no", "off"})


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Build settings from ``<PREFIX>_<FIELD>`` environment variables.

    Unset variables leave the field at its default.  Conversion failures
    and ``_validate`` rejections are reported with the variable's name.
    """

    def load(self, settings_class: type[T]) -> T:
        required = settings_class.required_fields()
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = settings_class.env_key(field.name)
            raw = os.environ.get(env_key)
            if raw is None:
                if field.name in required:
                    raise MissingRequiredSettingError(field.name, env_key=env_key)
                continue
            try:
                values[field.name] = _convert(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(field.name, raw, str(exc), env_key=env_key) from exc

        try:
            return settings_class(**values)
        except InvalidSettingValueError as exc:
            if exc.env_key is not None or exc.setting_name not in values:
                raise
            raise InvalidSettingValueError(
                exc.setting_name,
                exc.value,
                exc.reason,
                env_key=settings_class.env_key(exc.setting_name),
            ) from exc
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}") from exc


def _convert(raw: str, type_hint: Any) -> Any:
    if type_hint is bool or type_hint == "bool":
        word = raw.strip().lower()
        if word in _TRUTHY:
            return True
        if word in _FALSY:
            return False
        raise ValueError(f"expected one of {', '.join(sorted(_TRUTHY | _FALSY - {''}))}")
    if type_hint is int or type_hint == "int":
        return int(raw)
    if type_hint is float or type_hint == "float":
        return float(raw)
    return raw


class DotenvSettingsLoader(SettingsLoader):
    """Load a ``.env`` file into the environment, then defer to :class:`EnvSettingsLoader`."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        try:
            from dotenv import load_dotenv
        except ImportError as exc:
            raise ImportError("Install 'kblog[dotenv]' to use DotenvSettingsLoader") from exc
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
