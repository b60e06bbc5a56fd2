"""Domain errors — malformed events and payload build failures."""

from __future__ import annotations

from typing import Any

from edge_messaging.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised or returned when an event cannot be turned into a payload."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Event or shared-state data does not meet the payload requirements.

    ``field`` names the offending key path when one is known.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        if self.field is not None:
            base["field"] = self.field
        return base


class MissingFieldError(ValidationError):
    """A required field is absent, empty or of the wrong type."""

    default_code = "missing_field"

    def __init__(self, field: str, source: str = "event", **kwargs: Any) -> None:
        super().__init__(f"Required {source} field '{field}' is missing or invalid", field=field, **kwargs)
        self.source = source


__all__ = [
    "DomainError",
    "MissingFieldError",
    "ValidationError",
]
