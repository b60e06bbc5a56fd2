"""Host adapter – HostApplication served from MessagingSettings."""
from __future__ import annotations

from edge_messaging.config import MessagingSettings

__all__ = ["SettingsHostApplication"]


class SettingsHostApplication:
    """Reports the bundle identifier configured via ``MESSAGING_BUNDLE_IDENTIFIER``."""

    def __init__(self, settings: MessagingSettings) -> None:
        self._settings = settings

    def bundle_identifier(self) -> str | None:
        return self._settings.bundle_identifier or None
