"""Unit tests for the readiness gate."""

from __future__ import annotations

from typing import Any

import pytest

from edge_messaging.application.gate import NotReady, ReadinessGate, Ready
from edge_messaging.constants import ConfigurationKeys, IdentityKeys
from edge_messaging.kernel.messaging import SharedStateStatus
from edge_messaging.testing.fakes import FakeRuntime, InMemorySharedStateStore
from edge_messaging.testing.generators import push_identifier_request


class TestReadinessGate:
    def test_ready_when_both_set(self, ready_runtime: FakeRuntime, configuration: dict[str, Any]) -> None:
        result = ReadinessGate(ready_runtime).check(push_identifier_request())
        assert isinstance(result, Ready)
        assert result.configuration == configuration
        assert result.identity == {IdentityKeys.ECID: "ecid123"}

    def test_not_ready_without_any_state(self) -> None:
        result = ReadinessGate(InMemorySharedStateStore()).check(push_identifier_request())
        assert result == NotReady(extension=ConfigurationKeys.NAME, reason="missing")

    def test_not_ready_without_identity(self) -> None:
        store = InMemorySharedStateStore()
        store.publish(ConfigurationKeys.NAME, {"global.privacy": "optedin"})
        result = ReadinessGate(store).check(push_identifier_request())
        assert isinstance(result, NotReady)
        assert result.extension == IdentityKeys.NAME

    @pytest.mark.parametrize("status", [SharedStateStatus.PENDING, SharedStateStatus.NONE])
    @pytest.mark.parametrize("extension", [ConfigurationKeys.NAME, IdentityKeys.NAME])
    def test_unresolved_status_blocks(self, status: SharedStateStatus, extension: str) -> None:
        store = InMemorySharedStateStore()
        store.publish(ConfigurationKeys.NAME, {"global.privacy": "optedin"})
        store.publish(IdentityKeys.NAME, {"mid": "ecid123"})
        store.publish(extension, {}, status=status)
        gate = ReadinessGate(store)
        result = gate.check(push_identifier_request())
        assert result == NotReady(extension=extension, reason=str(status))
        assert gate.is_ready(push_identifier_request()) is False

    def test_pending_is_not_treated_as_absent(self) -> None:
        store = InMemorySharedStateStore()
        store.set_pending(ConfigurationKeys.NAME)
        store.publish(IdentityKeys.NAME, {"mid": "ecid123"})
        result = ReadinessGate(store).check(push_identifier_request())
        assert result == NotReady(extension=ConfigurationKeys.NAME, reason="pending")

    def test_snapshot_scoped_to_event(self) -> None:
        store = InMemorySharedStateStore()
        early = push_identifier_request()
        late = push_identifier_request()
        store.publish(ConfigurationKeys.NAME, {"global.privacy": "optedin"}, event=late)
        store.publish(IdentityKeys.NAME, {"mid": "ecid123"})
        gate = ReadinessGate(store)
        assert not gate.is_ready(early)
        assert gate.is_ready(late)

    def test_later_publication_supersedes(self) -> None:
        store = InMemorySharedStateStore()
        store.set_pending(ConfigurationKeys.NAME)
        store.publish(ConfigurationKeys.NAME, {"global.privacy": "optedout"})
        store.publish(IdentityKeys.NAME, {"mid": "ecid123"})
        result = ReadinessGate(store).check(push_identifier_request())
        assert isinstance(result, Ready)
        assert result.configuration["global.privacy"] == "optedout"
