"""
Provider settings for the OPNsense API.

Settings are resolved per field from command line arguments, then the
environment, then the settings file, then defaults.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .constants import SETTINGS_FILE, DEFAULT_TIMEOUT


ENV_URI = "OPNSENSE_URI"
ENV_API_KEY = "OPNSENSE_API_KEY"
ENV_API_SECRET = "OPNSENSE_API_SECRET"
ENV_ALLOW_INSECURE = "OPNSENSE_ALLOW_INSECURE"
ENV_TIMEOUT = "OPNSENSE_TIMEOUT"


class SettingsError(Exception):
    """Raised when provider settings are missing or invalid."""
    pass


@dataclass
class ProviderSettings:
    """Connection settings for one OPNsense router."""
    uri: str
    api_key: str
    api_secret: str
    allow_insecure: bool = False
    timeout: int = DEFAULT_TIMEOUT

    @property
    def api_url(self) -> str:
        """Base URL of the JSON API."""
        return f"{self.uri.rstrip('/')}/api"


def load_settings_file(settings_file: Path = SETTINGS_FILE) -> dict:
    """Load settings from the JSON settings file, if present."""
    if not settings_file.exists():
        return {}
    try:
        with open(settings_file) as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        raise SettingsError(f"Unable to read settings file {settings_file}: {e}") from e
    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {settings_file} must contain a JSON object")
    return data


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _resolve(arg_value, env_name: str, file_data: dict, file_key: str, default=None):
    """Pick the first configured value: argument, environment, file, default."""
    if arg_value is not None:
        return arg_value
    if os.environ.get(env_name):
        return os.environ[env_name]
    if file_data.get(file_key) is not None:
        return file_data[file_key]
    return default


def load_settings(
    uri: Optional[str] = None,
    api_key: Optional[str] = None,
    api_secret: Optional[str] = None,
    allow_insecure: Optional[bool] = None,
    timeout: Optional[int] = None,
    settings_file: Path = SETTINGS_FILE,
) -> ProviderSettings:
    """
    Resolve provider settings.

    Args:
        uri: Router base URI (e.g. https://192.168.1.1)
        api_key: API key
        api_secret: API secret
        allow_insecure: Skip TLS certificate verification
        timeout: Per-request timeout in seconds
        settings_file: JSON file with "uri", "api_key", "api_secret",
            "allow_insecure" and "timeout" keys

    Raises:
        SettingsError: If uri, api_key or api_secret cannot be resolved,
            or timeout is not a positive integer
    """
    file_data = load_settings_file(settings_file)

    resolved_uri = _resolve(uri, ENV_URI, file_data, "uri")
    resolved_key = _resolve(api_key, ENV_API_KEY, file_data, "api_key")
    resolved_secret = _resolve(api_secret, ENV_API_SECRET, file_data, "api_secret")

    missing = []
    if not resolved_uri:
        missing.append(f"uri ({ENV_URI})")
    if not resolved_key:
        missing.append(f"api_key ({ENV_API_KEY})")
    if not resolved_secret:
        missing.append(f"api_secret ({ENV_API_SECRET})")
    if missing:
        raise SettingsError(f"Missing provider settings: {', '.join(missing)}")

    if not str(resolved_uri).startswith(("http://", "https://")):
        raise SettingsError(f"Invalid uri '{resolved_uri}': must start with http:// or https://")

    insecure = _parse_bool(_resolve(allow_insecure, ENV_ALLOW_INSECURE, file_data, "allow_insecure", False))

    raw_timeout = _resolve(timeout, ENV_TIMEOUT, file_data, "timeout", DEFAULT_TIMEOUT)
    try:
        resolved_timeout = int(raw_timeout)
    except (TypeError, ValueError) as e:
        raise SettingsError(f"Invalid timeout '{raw_timeout}': must be an integer") from e
    if resolved_timeout <= 0:
        raise SettingsError(f"Invalid timeout '{raw_timeout}': must be positive")

    return ProviderSettings(
        uri=str(resolved_uri),
        api_key=str(resolved_key),
        api_secret=str(resolved_secret),
        allow_insecure=insecure,
        timeout=resolved_timeout,
    )
