"""Application dispatch – outbound edge events."""
from edge_messaging.application.dispatch.emitter import DispatchEmitter

__all__ = ["DispatchEmitter"]
