"""Errors raised while loading messaging settings at startup.

Each error carries the offending variable name in ``detail["setting"]`` so
the structured log line names it without echoing the raw value.
"""
from edge_messaging.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Messaging settings could not be loaded."""
    default_code = "messaging_config_error"


class MissingRequiredSettingError(ConfigError):
    """A settings field without a default has no environment variable."""
    default_code = "messaging_setting_missing"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A variable is set but cannot be coerced or fails ``_validate``."""
    default_code = "messaging_setting_invalid"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
