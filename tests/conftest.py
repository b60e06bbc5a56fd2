"""Shared fixtures for the edge-messaging test suite."""
from __future__ import annotations

import json
import logging
from typing import Any, Callable, Iterator

import pytest
import structlog

from edge_messaging.constants import ConfigurationKeys, IdentityKeys
from edge_messaging.observability.logging import JsonLoggerFactory
from edge_messaging.testing.fakes import FakeRuntime
from edge_messaging.testing.fixtures import fake_runtime, host_app, messaging_extension  # noqa: F401


@pytest.fixture
def configuration() -> dict[str, Any]:
    return {
        ConfigurationKeys.GLOBAL_PRIVACY: "optedin",
        ConfigurationKeys.USE_SANDBOX: False,
        ConfigurationKeys.EXPERIENCE_EVENT_DATASET: "ds-42",
    }


@pytest.fixture
def identity() -> dict[str, Any]:
    return {IdentityKeys.ECID: "ecid123"}


@pytest.fixture
def ready_runtime(
    fake_runtime: FakeRuntime,  # noqa: F811
    configuration: dict[str, Any],
    identity: dict[str, Any],
) -> FakeRuntime:
    """Runtime whose configuration and identity shared states are both set."""
    fake_runtime.shared_state.publish(ConfigurationKeys.NAME, configuration)
    fake_runtime.shared_state.publish(IdentityKeys.NAME, identity)
    return fake_runtime


@pytest.fixture
def json_log_lines(capsys: pytest.CaptureFixture[str]) -> Iterator[Callable[[], list[dict[str, Any]]]]:
    """Configure JSON logging at DEBUG and return a reader for the emitted records."""
    JsonLoggerFactory.configure(logging.DEBUG)

    def read() -> list[dict[str, Any]]:
        return [json.loads(line) for line in capsys.readouterr().err.splitlines() if line.startswith("{")]

    yield read
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()
    logging.getLogger().setLevel(logging.WARNING)
