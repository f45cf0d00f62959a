"""Config settings – environment-based configuration."""
from kblog.config.settings.base import Settings
from kblog.config.settings.diagnostics import DiagnosticsSettings, load_diagnostics_settings
from kblog.config.settings.factory import SettingsFactory
from kblog.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DiagnosticsSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "load_diagnostics_settings",
]
