"""Config settings – MessagingSettings for the messaging extension."""
from __future__ import annotations

import dataclasses
import logging

from edge_messaging.config.settings.base import Settings
from edge_messaging.config.validation import InvalidSettingValueError

DEFAULT_SENSITIVE_FIELDS: tuple[str, ...] = ("token", "pushidentifier", "ecid", "mid")


@dataclasses.dataclass
class MessagingSettings(Settings):
    """Ambient settings read from ``MESSAGING_*`` environment variables.

    Example::

        settings = EnvSettingsLoader().load(MessagingSettings)
    """

    _prefix = "MESSAGING"

    log_level: str = "INFO"
    json_logs: bool = True
    bundle_identifier: str = ""
    sensitive_fields: list[str] = dataclasses.field(
        default_factory=lambda: list(DEFAULT_SENSITIVE_FIELDS)
    )

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise InvalidSettingValueError(self.env_key("log_level"), self.log_level, "unknown logging level")

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)

    @property
    def sensitive_field_set(self) -> frozenset[str]:
        return frozenset(f.lower() for f in self.sensitive_fields)


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "MessagingSettings"]
