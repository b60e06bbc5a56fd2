"""Application tracking – push interaction tracking payloads."""
from edge_messaging.application.tracking.payload import (
    TrackingPayloadBuilder,
    add_adobe_data,
    add_application_data,
    base_schema,
    message_profile,
)

__all__ = [
    "TrackingPayloadBuilder",
    "add_adobe_data",
    "add_application_data",
    "base_schema",
    "message_profile",
]
