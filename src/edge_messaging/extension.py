"""MessagingExtension – wires the gate, privacy controller, router, builders and emitter.

Usage::

    settings = EnvSettingsLoader().load(MessagingSettings)
    extension = MessagingExtension(runtime, settings=settings)
    extension.on_registered()

The host delivers events one at a time and asks :meth:`ready_for_event`
before each delivery.  No handler raises for malformed event data: every
failure is logged and the single event is dropped.
"""
from __future__ import annotations

from typing import Any

import structlog

from edge_messaging import __version__
from edge_messaging.adapters.host import SettingsHostApplication
from edge_messaging.application.dispatch import DispatchEmitter
from edge_messaging.application.gate import NotReady, ReadinessGate
from edge_messaging.application.privacy import PrivacyController, PrivacyStatus
from edge_messaging.application.push import PushTokenSyncBuilder
from edge_messaging.application.routing import Route, classify
from edge_messaging.application.tracking import TrackingPayloadBuilder
from edge_messaging.config import MessagingSettings
from edge_messaging.constants import EXTENSION_NAME, FRIENDLY_NAME, EventSource, EventType
from edge_messaging.kernel.messaging import Event, ExtensionRuntime, HostApplication
from edge_messaging.kernel.types import Err
from edge_messaging.observability.logging import get_logger

__all__ = ["MessagingExtension"]

logger = get_logger(__name__)


class MessagingExtension:
    name = EXTENSION_NAME
    friendly_name = FRIENDLY_NAME
    version = __version__

    def __init__(
        self,
        runtime: ExtensionRuntime,
        host_app: HostApplication | None = None,
        *,
        settings: MessagingSettings | None = None,
    ) -> None:
        self.runtime = runtime
        self.settings = settings or MessagingSettings()
        self.metadata: dict[str, str] | None = None
        self._gate = ReadinessGate(runtime)
        self._privacy = PrivacyController(runtime)
        self._push = PushTokenSyncBuilder(host_app or SettingsHostApplication(self.settings))
        self._tracking = TrackingPayloadBuilder()
        self._emitter = DispatchEmitter(runtime)

    @property
    def privacy_status(self) -> PrivacyStatus:
        return self._privacy.status

    # -- lifecycle ------------------------------------------------------------

    def on_registered(self) -> None:
        self.runtime.register_listener(
            EventType.CONFIGURATION, EventSource.RESPONSE_CONTENT, self.handle_configuration_response
        )
        self.runtime.register_listener(
            EventType.GENERIC_IDENTITY, EventSource.REQUEST_CONTENT, self.handle_process_event
        )
        self.runtime.register_listener(
            EventType.MESSAGING, EventSource.REQUEST_CONTENT, self.handle_process_event
        )

    def on_unregistered(self) -> None:
        logger.info("Extension unregistered", friendly_name=self.friendly_name)

    def ready_for_event(self, event: Event) -> bool:
        return self._gate.is_ready(event)

    # -- listeners ------------------------------------------------------------

    def handle_configuration_response(self, event: Event) -> None:
        self._privacy.handle_configuration_response(event)

    def handle_process_event(self, event: Event) -> None:
        """Route *event* to the push-token sync or tracking path."""
        with structlog.contextvars.bound_contextvars(
            extension=self.name, event_id=event.id, event_type=event.type
        ):
            if event.data is None:
                logger.debug("Ignoring event with no data")
                return

            readiness = self._gate.check(event)
            if isinstance(readiness, NotReady):
                return

            route = classify(event, readiness.configuration)
            if route is Route.PUSH_TOKEN_SYNC:
                self._sync_push_token(event, readiness.identity, readiness.configuration)
            elif route is Route.TRACKING:
                self._track(event, readiness.configuration)
            else:
                logger.debug("Ignoring event", route=route.value)

    # -- paths ----------------------------------------------------------------

    def _sync_push_token(self, event: Event, identity: Any, configuration: Any) -> None:
        result = self._push.build(identity, configuration, event)
        if isinstance(result, Err):
            logger.warning("Failed to sync the push token", error=result.error.to_dict())
            return
        self._emitter.emit_push_profile(result.value)

    def _track(self, event: Event, configuration: Any) -> None:
        result = self._tracking.build(event, configuration)
        if isinstance(result, Err):
            logger.warning("Unable to track information", error=result.error.to_dict())
            return
        self._emitter.emit_push_tracking(result.value)
