"""Dispatch emitter – wraps built payloads into edge request events."""
from __future__ import annotations

from typing import Any

from edge_messaging.constants import EventName, EventSource, EventType
from edge_messaging.kernel.messaging import Event, EventBus
from edge_messaging.observability.logging import get_logger

__all__ = ["DispatchEmitter"]

logger = get_logger(__name__)


class DispatchEmitter:
    """Hands edge request-content events to the bus; delivery is the bus's concern."""

    def __init__(self, bus: EventBus) -> None:
        self._bus = bus

    def emit(self, name: str, payload: dict[str, Any]) -> Event:
        event = Event(
            name=name,
            type=EventType.EDGE,
            source=EventSource.REQUEST_CONTENT,
            data=payload,
        )
        self._bus.dispatch(event)
        logger.debug("Dispatched edge event", event_id=event.id, event_name=name)
        return event

    def emit_push_profile(self, payload: dict[str, Any]) -> Event:
        return self.emit(EventName.PUSH_PROFILE_EDGE, payload)

    def emit_push_tracking(self, payload: dict[str, Any]) -> Event:
        return self.emit(EventName.PUSH_TRACKING_EDGE, payload)
