"""Tracking payload – XDM experience event for push notification interactions.

The payload is assembled in layers, each merged override-wins over the
previous one:

1. base schema (event type, message id, provider, optional custom action)
2. application data (``application.launches.value``)
3. Adobe enrichment (``adobe_xdm.mixins`` or ``adobe_xdm.cjm``), plus the
   default message profile merged into
   ``experience.customerJourneyManagement`` when present

Only the first layer is mandatory; layer 3 degrades to a logged warning.
"""
from __future__ import annotations

import copy
import functools
import json
from typing import Any, Mapping

from edge_messaging.application.push.token_sync import platform_for
from edge_messaging.application.routing.router import dataset_id
from edge_messaging.constants import (
    AdobeTrackingKeys,
    ConfigurationKeys,
    EventDataKeys,
    XDMDataKeys,
)
from edge_messaging.kernel.errors import MissingFieldError, ValidationError
from edge_messaging.kernel.messaging import Event
from edge_messaging.kernel.types import Err, Ok, Result, merge, merge_into
from edge_messaging.observability.logging import get_logger

__all__ = [
    "TrackingPayloadBuilder",
    "add_adobe_data",
    "add_application_data",
    "base_schema",
    "message_profile",
]

logger = get_logger(__name__)


@functools.cache
def _parsed_message_profile() -> dict[str, Any]:
    return json.loads(AdobeTrackingKeys.MESSAGE_PROFILE_JSON)


def message_profile() -> dict[str, Any]:
    """Fresh copy of the default message profile record."""
    return copy.deepcopy(_parsed_message_profile())


def base_schema(event: Event, configuration: Mapping[str, Any]) -> Result[dict[str, Any], ValidationError]:
    event_type = event.tracking_event_type
    if not event_type:
        return Err(MissingFieldError(EventDataKeys.EVENT_TYPE))
    message_id = event.message_id
    if not message_id:
        return Err(MissingFieldError(EventDataKeys.MESSAGE_ID))

    tracking: dict[str, Any] = {
        XDMDataKeys.PUSH_PROVIDER_MESSAGE_ID: message_id,
        XDMDataKeys.PUSH_PROVIDER: platform_for(configuration),
    }
    action_id = event.action_id
    if action_id is not None:
        tracking[XDMDataKeys.CUSTOM_ACTION] = {XDMDataKeys.ACTION_ID: action_id}

    return Ok({
        XDMDataKeys.EVENT_TYPE: event_type,
        XDMDataKeys.PUSH_NOTIFICATION_TRACKING: tracking,
    })


def add_application_data(application_opened: bool, xdm: Mapping[str, Any]) -> dict[str, Any]:
    return merge(xdm, {
        AdobeTrackingKeys.APPLICATION: {
            AdobeTrackingKeys.LAUNCHES: {
                AdobeTrackingKeys.LAUNCHES_VALUE: 1 if application_opened else 0,
            },
        },
    })


def add_adobe_data(event: Event, xdm: Mapping[str, Any]) -> dict[str, Any]:
    """Merge the event's Adobe XDM data into *xdm*; returns *xdm* unchanged on any miss."""
    result = dict(xdm)
    if event.adobe_xdm is None:
        logger.warning("Failed to update Adobe tracking information. Adobe data is invalid.", event_id=event.id)
        return result

    mixins = event.mixins if event.mixins is not None else event.cjm
    if mixins is None:
        logger.warning("Failed to send Adobe data with the tracking data, Adobe data is malformed.", event_id=event.id)
        return result

    merge_into(result, copy.deepcopy(dict(mixins)))

    experience = result.get(AdobeTrackingKeys.EXPERIENCE)
    if not isinstance(experience, Mapping):
        logger.warning("Failed to send cjm xdm data with the tracking, required keys are missing.", event_id=event.id)
        return result

    cjm = experience.get(AdobeTrackingKeys.CUSTOMER_JOURNEY_MANAGEMENT)
    if isinstance(cjm, Mapping):
        experience = merge(experience, {
            AdobeTrackingKeys.CUSTOMER_JOURNEY_MANAGEMENT: merge(cjm, message_profile()),
        })
        result[AdobeTrackingKeys.EXPERIENCE] = experience
    else:
        logger.warning(
            "Failed to send cjm xdm data with the tracking, customerJourneyManagement is missing.",
            event_id=event.id,
        )
    return result


class TrackingPayloadBuilder:
    """Builds the edge event data for a push tracking (click-through) event."""

    def build(self, event: Event, configuration: Mapping[str, Any]) -> Result[dict[str, Any], ValidationError]:
        dataset = dataset_id(configuration)
        if dataset is None:
            return Err(MissingFieldError(ConfigurationKeys.EXPERIENCE_EVENT_DATASET, source="configuration"))

        schema = base_schema(event, configuration)
        if isinstance(schema, Err):
            return schema

        xdm = add_application_data(event.application_opened, schema.value)
        xdm = add_adobe_data(event, xdm)

        return Ok({
            XDMDataKeys.XDM: xdm,
            XDMDataKeys.META: {
                XDMDataKeys.COLLECT: {XDMDataKeys.DATASET_ID: dataset},
            },
        })
