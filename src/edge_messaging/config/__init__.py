"""Config – environment-driven settings and their loaders."""

from edge_messaging.config.settings import (
    EnvSettingsLoader,
    MessagingSettings,
    Settings,
    SettingsLoader,
)
from edge_messaging.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MessagingSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
