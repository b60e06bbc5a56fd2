"""Application push – push-token sync payloads."""
from edge_messaging.application.push.token_sync import PushTokenSyncBuilder, platform_for

__all__ = ["PushTokenSyncBuilder", "platform_for"]
