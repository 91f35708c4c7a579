"""Tests for layered configuration loading."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from permalert.config import ConfigService, Settings
from permalert.errors import ConfigurationError


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("PERMALERT_"):
            monkeypatch.delenv(name)


@pytest.fixture()
def service(tmp_path: Path) -> ConfigService:
    """Config service isolated from the real home directory."""
    return ConfigService(
        user_config_path=tmp_path / "home" / "config.yaml",
        project_dir=tmp_path / "project",
    )


class TestDefaults:

    def test_defaults(self, service: ConfigService):
        settings = service.load()
        assert isinstance(settings, Settings)
        assert settings.alerts.locale == "en"
        assert settings.alerts.settings_url is None
        assert settings.alerts.present_denied_alert is True
        assert settings.general.verbosity == "info"


class TestLayers:

    def test_project_file_overrides_user_file(self, tmp_path: Path):
        user = tmp_path / "user.yaml"
        user.write_text("alerts:\n  app_name: FromUser\n  locale: fr\n", encoding="utf-8")
        project_dir = tmp_path / "project"
        project_dir.mkdir()
        (project_dir / "permalert.yaml").write_text(
            "alerts:\n  app_name: FromProject\n", encoding="utf-8"
        )

        settings = ConfigService(user, project_dir).load()
        assert settings.alerts.app_name == "FromProject"
        assert settings.alerts.locale == "fr"

    def test_environment_overrides_files(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        (tmp_path / "permalert.yaml").write_text(
            "alerts:\n  app_name: FromProject\n  locale: fr\n", encoding="utf-8"
        )
        monkeypatch.setenv("PERMALERT_ALERTS__APP_NAME", "FromEnv")
        monkeypatch.setenv("PERMALERT_ALERTS__PRESENT_DENIED_ALERT", "false")

        settings = ConfigService(tmp_path / "none.yaml", tmp_path).load()
        assert settings.alerts.app_name == "FromEnv"
        assert settings.alerts.present_denied_alert is False
        assert settings.alerts.locale == "fr"

    def test_overrides_beat_environment(
        self, service: ConfigService, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setenv("PERMALERT_ALERTS__APP_NAME", "FromEnv")
        settings = service.load({"alerts": {"app_name": "FromCli"}})
        assert settings.alerts.app_name == "FromCli"

    def test_explicit_overrides_win(self, service: ConfigService):
        settings = service.load({"alerts": {"settings_url": "app-settings:"}})
        assert settings.alerts.settings_url == "app-settings:"

    def test_get_caches_until_reload(self, service: ConfigService):
        first = service.get()
        assert service.get() is first
        assert service.reload() is not first


class TestEnvironment:

    def test_nested_keys(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PERMALERT_GENERAL__VERBOSITY", "debug")
        assert Settings().general.verbosity == "debug"

    def test_flat_keys_ignored(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PERMALERT_VERBOSITY", "debug")
        monkeypatch.setenv("PERMALERT_SKIP_TUI_TESTS", "1")
        assert Settings().general.verbosity == "info"

    def test_invalid_env_value(self, service: ConfigService, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PERMALERT_GENERAL__OUTPUT_FORMAT", "xml")
        with pytest.raises(ConfigurationError):
            service.load()


class TestInvalid:

    def test_invalid_value(self, service: ConfigService):
        with pytest.raises(ConfigurationError):
            service.load({"general": {"verbosity": "loud"}})

    def test_non_mapping_file(self, tmp_path: Path):
        user = tmp_path / "user.yaml"
        user.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            ConfigService(user, tmp_path).load()

    def test_empty_app_name_rejected(self, service: ConfigService):
        with pytest.raises(ConfigurationError):
            service.load({"alerts": {"app_name": ""}})
