"""Testing generators – factories for the inbound events the extension listens to."""
from __future__ import annotations

from typing import Any

from edge_messaging.constants import (
    ConfigurationKeys,
    EventDataKeys,
    EventSource,
    EventType,
)
from edge_messaging.kernel.messaging import Event

_UNSET: Any = object()


def configuration_response(privacy: Any = _UNSET, **extra: Any) -> Event:
    """Configuration response event; omit *privacy* to leave the field out."""
    data = dict(extra)
    if privacy is not _UNSET:
        data[ConfigurationKeys.GLOBAL_PRIVACY] = privacy
    return Event(
        name="Configuration Response",
        type=EventType.CONFIGURATION,
        source=EventSource.RESPONSE_CONTENT,
        data=data,
    )


def push_identifier_request(token: Any = "tok-abc") -> Event:
    return Event(
        name="Set Push Identifier",
        type=EventType.GENERIC_IDENTITY,
        source=EventSource.REQUEST_CONTENT,
        data={EventDataKeys.PUSH_IDENTIFIER: token},
    )


def tracking_request(
    event_type: str | None = "pushTracking.applicationOpened",
    message_id: str | None = "msg-1",
    *,
    action_id: str | None = None,
    application_opened: bool = True,
    adobe_xdm: dict[str, Any] | None = None,
) -> Event:
    data: dict[str, Any] = {EventDataKeys.APPLICATION_OPENED: application_opened}
    if event_type is not None:
        data[EventDataKeys.EVENT_TYPE] = event_type
    if message_id is not None:
        data[EventDataKeys.MESSAGE_ID] = message_id
    if action_id is not None:
        data[EventDataKeys.ACTION_ID] = action_id
    if adobe_xdm is not None:
        data[EventDataKeys.ADOBE_XDM] = adobe_xdm
    return Event(
        name="Push Tracking",
        type=EventType.MESSAGING,
        source=EventSource.REQUEST_CONTENT,
        data=data,
    )


__all__ = ["configuration_response", "push_identifier_request", "tracking_request"]
