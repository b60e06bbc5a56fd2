"""Event router – classifies inbound events into a processing route.

:func:`classify` is pure apart from logging: it inspects the event's
type, source and payload together with the resolved configuration and
never triggers a side effect.
"""
from __future__ import annotations

import enum
from typing import Any, Mapping

from edge_messaging.application.privacy.status import PrivacyStatus
from edge_messaging.constants import ConfigurationKeys
from edge_messaging.kernel.messaging import Event, read_string
from edge_messaging.observability.logging import get_logger

__all__ = ["Route", "classify", "dataset_id"]

logger = get_logger(__name__)


class Route(enum.Enum):
    PUSH_TOKEN_SYNC = "push_token_sync"
    TRACKING = "tracking"
    IGNORE = "ignore"


def dataset_id(configuration: Mapping[str, Any]) -> str | None:
    """Experience event dataset id, or ``None`` when absent or empty."""
    return read_string(configuration, ConfigurationKeys.EXPERIENCE_EVENT_DATASET) or None


def classify(event: Event, configuration: Mapping[str, Any]) -> Route:
    if event.data is None:
        return Route.IGNORE

    if event.is_generic_identity_request:
        privacy = PrivacyStatus.parse(configuration.get(ConfigurationKeys.GLOBAL_PRIVACY))
        if privacy is None:
            logger.warning(
                "Configuration has invalid privacy status, ignoring event.",
                event_id=event.id,
            )
            return Route.IGNORE
        return Route.PUSH_TOKEN_SYNC if privacy is PrivacyStatus.OPTED_IN else Route.IGNORE

    if event.is_messaging_request and dataset_id(configuration) is not None:
        return Route.TRACKING

    return Route.IGNORE
