"""Config settings – base class, loaders and the extension's settings."""
from edge_messaging.config.settings.base import Settings
from edge_messaging.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from edge_messaging.config.settings.messaging import DEFAULT_SENSITIVE_FIELDS, MessagingSettings

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "EnvSettingsLoader",
    "MessagingSettings",
    "Settings",
    "SettingsLoader",
]
