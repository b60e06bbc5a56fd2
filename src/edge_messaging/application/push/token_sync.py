"""Push-token sync – binds the device push token to the ECID in the profile."""
from __future__ import annotations

from typing import Any, Mapping

from edge_messaging.constants import (
    ECID_NAMESPACE_CODE,
    ConfigurationKeys,
    EventDataKeys,
    IdentityKeys,
    Platform,
    PushNotificationDetails,
    XDMDataKeys,
)
from edge_messaging.kernel.errors import MissingFieldError, ValidationError
from edge_messaging.kernel.messaging import Event, HostApplication, read_string
from edge_messaging.kernel.types import Err, Ok, Result

__all__ = ["PushTokenSyncBuilder", "platform_for"]


def platform_for(configuration: Mapping[str, Any]) -> str:
    """``apnsSandbox`` when ``messaging.useSandbox`` is ``True``, else ``apns``."""
    use_sandbox = configuration.get(ConfigurationKeys.USE_SANDBOX)
    return Platform.APNS_SANDBOX if use_sandbox is True else Platform.APNS


class PushTokenSyncBuilder:
    """Builds the profile-update payload for a push identifier event."""

    def __init__(self, host_app: HostApplication) -> None:
        self._host_app = host_app

    def build(
        self,
        identity: Mapping[str, Any],
        configuration: Mapping[str, Any],
        event: Event,
    ) -> Result[dict[str, Any], ValidationError]:
        ecid = read_string(identity, IdentityKeys.ECID)
        if not ecid:
            return Err(MissingFieldError(IdentityKeys.ECID, source="identity"))

        token = event.token
        if not token:
            return Err(MissingFieldError(EventDataKeys.PUSH_IDENTIFIER))

        app_id = self._host_app.bundle_identifier()
        if not app_id:
            return Err(ValidationError("App bundle identifier is invalid", field=PushNotificationDetails.APP_ID))

        details = {
            PushNotificationDetails.APP_ID: app_id,
            PushNotificationDetails.TOKEN: token,
            PushNotificationDetails.PLATFORM: platform_for(configuration),
            PushNotificationDetails.DENYLISTED: False,
            PushNotificationDetails.IDENTITY: {
                PushNotificationDetails.NAMESPACE: {
                    PushNotificationDetails.CODE: ECID_NAMESPACE_CODE,
                },
                PushNotificationDetails.ID: ecid,
            },
        }
        return Ok({
            XDMDataKeys.DATA: {
                PushNotificationDetails.PUSH_NOTIFICATION_DETAILS: [details],
            },
        })
