"""Testing generators – inbound event factories."""
from edge_messaging.testing.generators.events import (
    configuration_response,
    push_identifier_request,
    tracking_request,
)

__all__ = ["configuration_response", "push_identifier_request", "tracking_request"]
