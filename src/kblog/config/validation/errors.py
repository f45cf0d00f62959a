"""Config validation errors.

Both setting errors name the dataclass field; when the value came from the
environment they also name the variable, so the message points at what the
operator has to change.
"""
from __future__ import annotations

from kblog.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or failed validation."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A settings field without a default received no value."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, *, env_key: str | None = None) -> None:
        hint = f" (set {env_key})" if env_key else ""
        super().__init__(
            f"Setting '{setting_name}' is required{hint}",
            detail={"setting": setting_name, "env_key": env_key},
        )
        self.setting_name = setting_name
        self.env_key = env_key


class InvalidSettingValueError(ConfigError):
    """A setting's value could not be coerced or failed validation."""

    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        env_key: str | None = None,
    ) -> None:
        source = env_key or setting_name
        super().__init__(
            f"{source}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "env_key": env_key, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.env_key = env_key
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
