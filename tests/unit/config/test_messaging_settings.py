"""Unit tests for MessagingSettings and EnvSettingsLoader."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from edge_messaging.adapters.host import SettingsHostApplication
from edge_messaging.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MessagingSettings,
    MissingRequiredSettingError,
    Settings,
)


@dataclasses.dataclass
class _RequiredSettings(Settings):
    _prefix = "APP"

    endpoint: str
    retries: int = 3


class TestMessagingSettingsDefaults:
    def test_defaults(self) -> None:
        s = MessagingSettings()
        assert s.log_level == "INFO"
        assert s.level == logging.INFO
        assert s.json_logs is True
        assert s.bundle_identifier == ""
        assert "token" in s.sensitive_field_set

    def test_log_level_normalised(self) -> None:
        assert MessagingSettings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            MessagingSettings(log_level="chatty")
        assert exc_info.value.setting_name == "MESSAGING_LOG_LEVEL"

    def test_env_key_uses_prefix(self) -> None:
        assert MessagingSettings.env_key("bundle_identifier") == "MESSAGING_BUNDLE_IDENTIFIER"
        assert Settings.env_key("level") == "LEVEL"


class TestEnvSettingsLoader:
    def test_loads_prefixed_values(self) -> None:
        env = {
            "MESSAGING_LOG_LEVEL": "warning",
            "MESSAGING_JSON_LOGS": "false",
            "MESSAGING_BUNDLE_IDENTIFIER": "com.example.app",
            "MESSAGING_SENSITIVE_FIELDS": "token, mid",
        }
        s = EnvSettingsLoader(env).load(MessagingSettings)
        assert s.log_level == "WARNING"
        assert s.json_logs is False
        assert s.bundle_identifier == "com.example.app"
        assert s.sensitive_fields == ["token", "mid"]

    def test_empty_environment_uses_defaults(self) -> None:
        assert EnvSettingsLoader({}).load(MessagingSettings) == MessagingSettings()

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MESSAGING_BUNDLE_IDENTIFIER", "com.env.app")
        assert EnvSettingsLoader().load(MessagingSettings).bundle_identifier == "com.env.app"

    def test_invalid_log_level_raises_config_error(self) -> None:
        with pytest.raises(ConfigError):
            EnvSettingsLoader({"MESSAGING_LOG_LEVEL": "nope"}).load(MessagingSettings)

    def test_missing_required_setting(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(_RequiredSettings)
        assert exc_info.value.setting_name == "APP_ENDPOINT"

    def test_int_coercion(self) -> None:
        s = EnvSettingsLoader({"APP_ENDPOINT": "edge", "APP_RETRIES": "5"}).load(_RequiredSettings)
        assert s.retries == 5

    def test_bad_int_raises_invalid_value(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"APP_ENDPOINT": "edge", "APP_RETRIES": "many"}).load(_RequiredSettings)


class TestSettingsHostApplication:
    def test_returns_configured_bundle_id(self) -> None:
        host = SettingsHostApplication(MessagingSettings(bundle_identifier="com.example.app"))
        assert host.bundle_identifier() == "com.example.app"

    def test_empty_bundle_id_is_none(self) -> None:
        assert SettingsHostApplication(MessagingSettings()).bundle_identifier() is None
