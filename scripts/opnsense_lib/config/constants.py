"""
Configuration constants for the OPNsense OSPF tools.

Paths and default values used across the configuration system.
"""

from pathlib import Path


# Settings, desired state and state file paths
SETTINGS_FILE = Path.home() / ".config" / "opnsense-ospf" / "settings.json"
DESIRED_FILE = Path("ospf-interfaces.yaml")
STATE_FILE = Path("ospf-interfaces.state.json")

# Provider type name prefixed to every exposed type
PROVIDER_TYPE_NAME = "opnsense"

# HTTP defaults
DEFAULT_TIMEOUT = 30
