"""Kernel messaging – events, shared state and collaborator ports."""
from edge_messaging.kernel.messaging.event import Event, EventId, read_mapping, read_string
from edge_messaging.kernel.messaging.ports import (
    EventBus,
    EventQueue,
    ExtensionRuntime,
    HostApplication,
    Listener,
    SharedStateProvider,
)
from edge_messaging.kernel.messaging.shared_state import SharedStateSnapshot, SharedStateStatus

__all__ = [
    "Event",
    "EventBus",
    "EventId",
    "EventQueue",
    "ExtensionRuntime",
    "HostApplication",
    "Listener",
    "SharedStateProvider",
    "SharedStateSnapshot",
    "SharedStateStatus",
    "read_mapping",
    "read_string",
]
