"""Privacy controller – starts and stops the event queue on privacy changes."""
from __future__ import annotations

from edge_messaging.application.privacy.status import PrivacyStatus
from edge_messaging.kernel.messaging import Event, EventQueue
from edge_messaging.observability.logging import get_logger

__all__ = ["PrivacyController"]

logger = get_logger(__name__)


class PrivacyController:
    """Two-way state machine over :class:`PrivacyStatus`.

    ``UNKNOWN`` is only the initial state.  A configuration response whose
    privacy value is exactly ``optedin`` moves to ``OPTED_IN`` and starts
    the queue; any other non-empty string moves to ``OPTED_OUT`` and stops
    it.  A missing or empty value leaves state and queue untouched.
    """

    def __init__(self, queue: EventQueue) -> None:
        self._queue = queue
        self._status = PrivacyStatus.UNKNOWN

    @property
    def status(self) -> PrivacyStatus:
        return self._status

    def handle_configuration_response(self, event: Event) -> PrivacyStatus:
        value = event.global_privacy_status
        if not value:
            logger.warning(
                "Privacy status does not exist. All requests to sync with profile will fail.",
                event_id=event.id,
            )
            return self._status

        if PrivacyStatus.parse(value) is PrivacyStatus.OPTED_IN:
            logger.debug("Privacy is optedIn, starting the events processing.", event_id=event.id)
            self._status = PrivacyStatus.OPTED_IN
            self._queue.start()
        else:
            logger.debug(
                "Privacy is not optedIn, stopping the events processing.",
                event_id=event.id,
                privacy=value,
            )
            self._status = PrivacyStatus.OPTED_OUT
            self._queue.stop()
        return self._status
