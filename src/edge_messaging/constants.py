"""Messaging constants – extension identity, event routing keys and XDM field names."""
from __future__ import annotations

from typing import Final

EXTENSION_NAME: Final = "com.adobe.messaging"
FRIENDLY_NAME: Final = "Messaging"


class EventType:
    CONFIGURATION: Final = "com.adobe.eventType.configuration"
    GENERIC_IDENTITY: Final = "com.adobe.eventType.generic.identity"
    MESSAGING: Final = "com.adobe.eventType.messaging"
    EDGE: Final = "com.adobe.eventType.edge"


class EventSource:
    REQUEST_CONTENT: Final = "com.adobe.eventSource.requestContent"
    RESPONSE_CONTENT: Final = "com.adobe.eventSource.responseContent"


class EventName:
    PUSH_PROFILE_EDGE: Final = "Push notification profile edge event"
    PUSH_TRACKING_EDGE: Final = "Push tracking edge event"


class ConfigurationKeys:
    """Shared state published by the configuration extension."""

    NAME: Final = "com.adobe.module.configuration"
    GLOBAL_PRIVACY: Final = "global.privacy"
    USE_SANDBOX: Final = "messaging.useSandbox"
    EXPERIENCE_EVENT_DATASET: Final = "messaging.eventDataset"


class IdentityKeys:
    """Shared state published by the identity extension."""

    NAME: Final = "com.adobe.module.identity"
    ECID: Final = "mid"


class EventDataKeys:
    """Inbound event payload keys."""

    PUSH_IDENTIFIER: Final = "pushidentifier"
    EVENT_TYPE: Final = "eventType"
    MESSAGE_ID: Final = "id"
    ACTION_ID: Final = "actionId"
    APPLICATION_OPENED: Final = "applicationOpened"
    ADOBE_XDM: Final = "adobe_xdm"


class AdobeTrackingKeys:
    MIXINS: Final = "mixins"
    CJM: Final = "cjm"
    EXPERIENCE: Final = "experience"
    CUSTOMER_JOURNEY_MANAGEMENT: Final = "customerJourneyManagement"
    APPLICATION: Final = "application"
    LAUNCHES: Final = "launches"
    LAUNCHES_VALUE: Final = "value"
    # merged into experience.customerJourneyManagement of every cjm tracking payload
    MESSAGE_PROFILE_JSON: Final = """
    {
        "messageProfile": {
            "channel": {
                "_id": "https://ns.adobe.com/xdm/channels/push"
            }
        },
        "pushChannelContext": {
            "platform": "apns"
        }
    }
    """


class XDMDataKeys:
    XDM: Final = "xdm"
    META: Final = "meta"
    COLLECT: Final = "collect"
    DATASET_ID: Final = "datasetId"
    DATA: Final = "data"
    EVENT_TYPE: Final = "eventType"
    PUSH_NOTIFICATION_TRACKING: Final = "pushNotificationTracking"
    PUSH_PROVIDER_MESSAGE_ID: Final = "pushProviderMessageId"
    PUSH_PROVIDER: Final = "pushProvider"
    CUSTOM_ACTION: Final = "customAction"
    ACTION_ID: Final = "actionId"


class PushNotificationDetails:
    PUSH_NOTIFICATION_DETAILS: Final = "pushNotificationDetails"
    APP_ID: Final = "appID"
    TOKEN: Final = "token"
    PLATFORM: Final = "platform"
    DENYLISTED: Final = "denylisted"
    IDENTITY: Final = "identity"
    NAMESPACE: Final = "namespace"
    CODE: Final = "code"
    ID: Final = "id"


class Platform:
    APNS: Final = "apns"
    APNS_SANDBOX: Final = "apnsSandbox"


ECID_NAMESPACE_CODE: Final = "ECID"


__all__ = [
    "AdobeTrackingKeys",
    "ConfigurationKeys",
    "ECID_NAMESPACE_CODE",
    "EXTENSION_NAME",
    "EventDataKeys",
    "EventName",
    "EventSource",
    "EventType",
    "FRIENDLY_NAME",
    "IdentityKeys",
    "Platform",
    "PushNotificationDetails",
    "XDMDataKeys",
]
