"""Kernel messaging – ports onto the collaborators hosting the extension.

The core never implements these; a host runtime (or the fakes in
:mod:`edge_messaging.testing.fakes`) supplies them.
"""
from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

from edge_messaging.kernel.messaging.event import Event
from edge_messaging.kernel.messaging.shared_state import SharedStateSnapshot

#: Callback registered for an (event type, event source) pair.
type Listener = Callable[[Event], None]


@runtime_checkable
class EventBus(Protocol):
    """Port: serialized event delivery and fire-and-forget dispatch."""

    def dispatch(self, event: Event) -> None: ...

    def register_listener(self, event_type: str, event_source: str, listener: Listener) -> None: ...


@runtime_checkable
class SharedStateProvider(Protocol):
    """Port: point-in-time lookup of another extension's shared state.

    Returns the latest snapshot published at or before *event*, or
    ``None`` when nothing was ever published.
    """

    def get_shared_state(self, extension_name: str, event: Event) -> SharedStateSnapshot | None: ...


@runtime_checkable
class EventQueue(Protocol):
    """Port: start/stop intake of the extension's event queue."""

    def start(self) -> None: ...

    def stop(self) -> None: ...


@runtime_checkable
class HostApplication(Protocol):
    """Port: facts about the application embedding the extension."""

    def bundle_identifier(self) -> str | None: ...


@runtime_checkable
class ExtensionRuntime(EventBus, SharedStateProvider, EventQueue, Protocol):
    """Everything the host hands to an extension instance."""


__all__ = [
    "EventBus",
    "EventQueue",
    "ExtensionRuntime",
    "HostApplication",
    "Listener",
    "SharedStateProvider",
]
