"""
Tests for provider settings resolution.
"""
import json

import pytest

from opnsense_lib.config import ProviderSettings, SettingsError, load_settings
from opnsense_lib.config.settings import (
    ENV_ALLOW_INSECURE,
    ENV_API_KEY,
    ENV_API_SECRET,
    ENV_TIMEOUT,
    ENV_URI,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (ENV_URI, ENV_API_KEY, ENV_API_SECRET, ENV_ALLOW_INSECURE, ENV_TIMEOUT):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def no_file(tmp_path):
    return tmp_path / "missing.json"


def test_arguments(no_file):
    settings = load_settings(uri="https://fw", api_key="k", api_secret="s", settings_file=no_file)
    assert settings == ProviderSettings(uri="https://fw", api_key="k", api_secret="s")
    assert settings.api_url == "https://fw/api"


def test_api_url_strips_trailing_slash():
    settings = ProviderSettings(uri="https://fw/", api_key="k", api_secret="s")
    assert settings.api_url == "https://fw/api"


def test_environment(monkeypatch, no_file):
    monkeypatch.setenv(ENV_URI, "https://env")
    monkeypatch.setenv(ENV_API_KEY, "env-key")
    monkeypatch.setenv(ENV_API_SECRET, "env-secret")
    monkeypatch.setenv(ENV_ALLOW_INSECURE, "true")
    monkeypatch.setenv(ENV_TIMEOUT, "5")

    settings = load_settings(settings_file=no_file)

    assert settings.uri == "https://env"
    assert settings.api_key == "env-key"
    assert settings.api_secret == "env-secret"
    assert settings.allow_insecure is True
    assert settings.timeout == 5


def test_arguments_override_environment(monkeypatch, no_file):
    monkeypatch.setenv(ENV_URI, "https://env")
    monkeypatch.setenv(ENV_API_KEY, "env-key")
    monkeypatch.setenv(ENV_API_SECRET, "env-secret")

    settings = load_settings(uri="https://arg", settings_file=no_file)

    assert settings.uri == "https://arg"
    assert settings.api_key == "env-key"


def test_settings_file(monkeypatch, tmp_path):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps({
        "uri": "https://file",
        "api_key": "file-key",
        "api_secret": "file-secret",
        "allow_insecure": True,
        "timeout": 10,
    }))
    monkeypatch.setenv(ENV_API_KEY, "env-key")

    settings = load_settings(settings_file=settings_file)

    assert settings.uri == "https://file"
    assert settings.api_key == "env-key"
    assert settings.allow_insecure is True
    assert settings.timeout == 10


def test_missing_settings(no_file):
    with pytest.raises(SettingsError) as exc_info:
        load_settings(uri="https://fw", settings_file=no_file)
    assert ENV_API_KEY in str(exc_info.value)
    assert ENV_API_SECRET in str(exc_info.value)


def test_invalid_uri(no_file):
    with pytest.raises(SettingsError):
        load_settings(uri="fw.example.net", api_key="k", api_secret="s", settings_file=no_file)


@pytest.mark.parametrize("timeout", ["soon", "0", "-3"])
def test_invalid_timeout(monkeypatch, no_file, timeout):
    monkeypatch.setenv(ENV_TIMEOUT, timeout)
    with pytest.raises(SettingsError):
        load_settings(uri="https://fw", api_key="k", api_secret="s", settings_file=no_file)


def test_unreadable_settings_file(tmp_path):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text("{not json")
    with pytest.raises(SettingsError):
        load_settings(settings_file=settings_file)
