"""Kernel messaging – the Event record and typed accessors for its payload."""
from __future__ import annotations

import dataclasses
import itertools
from datetime import UTC, datetime
from typing import Any, Mapping
from uuid import uuid4

from edge_messaging.constants import (
    AdobeTrackingKeys,
    ConfigurationKeys,
    EventDataKeys,
    EventSource,
    EventType,
)

type EventId = str

_sequence = itertools.count(1)


def _next_sequence() -> int:
    return next(_sequence)


def read_string(data: Mapping[str, Any] | None, key: str) -> str | None:
    """Return ``data[key]`` when it is a string, else ``None``."""
    if not data:
        return None
    value = data.get(key)
    return value if isinstance(value, str) else None


def read_mapping(data: Mapping[str, Any] | None, key: str) -> Mapping[str, Any] | None:
    """Return ``data[key]`` when it is a mapping, else ``None``."""
    if not data:
        return None
    value = data.get(key)
    return value if isinstance(value, Mapping) else None


@dataclasses.dataclass(frozen=True)
class Event:
    """Immutable event delivered by (or handed to) the event bus.

    ``sequence`` is assigned from a process-wide counter at creation and
    defines the total FIFO order used to scope shared-state lookups.
    """

    name: str
    type: str
    source: str
    data: Mapping[str, Any] | None = None
    id: EventId = dataclasses.field(default_factory=lambda: str(uuid4()))
    sequence: int = dataclasses.field(default_factory=_next_sequence)
    timestamp: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))

    def __hash__(self) -> int:
        # data is a plain mapping; id is unique per event
        return hash(self.id)

    # -- routing predicates ---------------------------------------------------

    @property
    def is_configuration_response(self) -> bool:
        return self.type == EventType.CONFIGURATION and self.source == EventSource.RESPONSE_CONTENT

    @property
    def is_generic_identity_request(self) -> bool:
        return self.type == EventType.GENERIC_IDENTITY and self.source == EventSource.REQUEST_CONTENT

    @property
    def is_messaging_request(self) -> bool:
        return self.type == EventType.MESSAGING and self.source == EventSource.REQUEST_CONTENT

    # -- payload accessors ----------------------------------------------------

    @property
    def global_privacy_status(self) -> str | None:
        return read_string(self.data, ConfigurationKeys.GLOBAL_PRIVACY)

    @property
    def token(self) -> str | None:
        return read_string(self.data, EventDataKeys.PUSH_IDENTIFIER)

    @property
    def tracking_event_type(self) -> str | None:
        return read_string(self.data, EventDataKeys.EVENT_TYPE)

    @property
    def message_id(self) -> str | None:
        return read_string(self.data, EventDataKeys.MESSAGE_ID)

    @property
    def action_id(self) -> str | None:
        return read_string(self.data, EventDataKeys.ACTION_ID)

    @property
    def application_opened(self) -> bool:
        return bool(self.data) and self.data.get(EventDataKeys.APPLICATION_OPENED) is True  # type: ignore[union-attr]

    @property
    def adobe_xdm(self) -> Mapping[str, Any] | None:
        return read_mapping(self.data, EventDataKeys.ADOBE_XDM)

    @property
    def mixins(self) -> Mapping[str, Any] | None:
        return read_mapping(self.adobe_xdm, AdobeTrackingKeys.MIXINS)

    @property
    def cjm(self) -> Mapping[str, Any] | None:
        return read_mapping(self.adobe_xdm, AdobeTrackingKeys.CJM)


__all__ = ["Event", "EventId", "read_mapping", "read_string"]
