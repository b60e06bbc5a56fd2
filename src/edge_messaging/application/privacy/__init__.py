"""Application privacy – privacy status and the queue-gating controller."""
from edge_messaging.application.privacy.controller import PrivacyController
from edge_messaging.application.privacy.status import PrivacyStatus

__all__ = ["PrivacyController", "PrivacyStatus"]
