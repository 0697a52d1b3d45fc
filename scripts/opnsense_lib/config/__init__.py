"""
opnsense_lib.config - Provider configuration for the OPNsense OSPF tools.

This package contains:
- constants: Path constants (SETTINGS_FILE, DESIRED_FILE, STATE_FILE, etc.)
- settings: ProviderSettings and its resolution from args, env and file
"""

from .constants import (
    SETTINGS_FILE,
    DESIRED_FILE,
    STATE_FILE,
    PROVIDER_TYPE_NAME,
    DEFAULT_TIMEOUT,
)

from .settings import (
    SettingsError,
    ProviderSettings,
    load_settings_file,
    load_settings,
)

__all__ = [
    # Constants
    'SETTINGS_FILE',
    'DESIRED_FILE',
    'STATE_FILE',
    'PROVIDER_TYPE_NAME',
    'DEFAULT_TIMEOUT',
    # Settings
    'SettingsError',
    'ProviderSettings',
    'load_settings_file',
    'load_settings',
]
