"""Testing fakes – in-memory doubles for kernel ports."""
from edge_messaging.testing.fakes.bus import InMemoryEventBus
from edge_messaging.testing.fakes.host import StaticHostApplication
from edge_messaging.testing.fakes.queue import FakeEventQueue
from edge_messaging.testing.fakes.runtime import FakeRuntime
from edge_messaging.testing.fakes.shared_state import InMemorySharedStateStore

__all__ = [
    "FakeEventQueue",
    "FakeRuntime",
    "InMemoryEventBus",
    "InMemorySharedStateStore",
    "StaticHostApplication",
]
