"""Readiness gate – blocks event processing until configuration and identity resolve."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from edge_messaging.constants import ConfigurationKeys, IdentityKeys
from edge_messaging.kernel.messaging import Event, SharedStateProvider
from edge_messaging.observability.logging import get_logger

__all__ = ["NotReady", "Readiness", "ReadinessGate", "Ready"]

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class Ready:
    """Both dependencies resolved; carries their data."""

    configuration: Mapping[str, Any]
    identity: Mapping[str, Any]


@dataclasses.dataclass(frozen=True)
class NotReady:
    """A dependency is missing or still pending."""

    extension: str
    reason: str


type Readiness = Ready | NotReady


class ReadinessGate:
    """Looks up the configuration and identity snapshots scoped to an event.

    The gate never retries; the bus re-offers the event once the shared
    states are published.
    """

    def __init__(self, shared_state: SharedStateProvider) -> None:
        self._shared_state = shared_state

    def check(self, event: Event) -> Readiness:
        resolved: dict[str, Mapping[str, Any]] = {}
        for extension in (ConfigurationKeys.NAME, IdentityKeys.NAME):
            snapshot = self._shared_state.get_shared_state(extension, event)
            if snapshot is None:
                reason = "missing"
            elif not snapshot.is_set:
                reason = str(snapshot.status)
            else:
                resolved[extension] = snapshot.data
                continue
            logger.debug(
                "Event processing is paused, waiting for valid shared state",
                event_id=event.id,
                extension=extension,
                reason=reason,
            )
            return NotReady(extension=extension, reason=reason)

        return Ready(
            configuration=resolved[ConfigurationKeys.NAME],
            identity=resolved[IdentityKeys.NAME],
        )

    def is_ready(self, event: Event) -> bool:
        return isinstance(self.check(event), Ready)
