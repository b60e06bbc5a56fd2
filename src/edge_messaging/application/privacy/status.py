from __future__ import annotations

import enum

__all__ = ["PrivacyStatus"]


class PrivacyStatus(enum.StrEnum):
    """Global privacy status as published in the configuration shared state."""

    OPTED_IN = "optedin"
    OPTED_OUT = "optedout"
    UNKNOWN = "optunknown"

    @classmethod
    def parse(cls, value: object) -> PrivacyStatus | None:
        """Return the matching member, or ``None`` for anything unrecognised."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None
