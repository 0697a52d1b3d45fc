"""
Desired state loader.

Desired OSPF interfaces are written in YAML:

    interfaces:
      lan:
        interfacename: lan
        area: 0.0.0.0
        authkey_id: 1
"""

import re
from pathlib import Path

import yaml

from .serialization import StateError


NAME_PATTERN = re.compile(r'^[a-z][a-z0-9_-]*$')


def parse_desired(data) -> dict[str, dict]:
    """
    Validate the structure of a desired-state document.
    Attribute values are validated later against the resource schema.
    """
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise StateError(f"Desired state must be a mapping, got {type(data).__name__}")

    unknown = [k for k in data if k != 'interfaces']
    if unknown:
        raise StateError(f"Unknown top-level keys in desired state: {', '.join(sorted(unknown))}")

    interfaces = data.get('interfaces') or {}
    if not isinstance(interfaces, dict):
        raise StateError("'interfaces' must be a mapping of name to settings")

    errors = []
    result = {}
    for name, settings in interfaces.items():
        if not isinstance(name, str) or not NAME_PATTERN.match(name):
            errors.append(f"Invalid name '{name}': must start with lowercase letter, contain only a-z, 0-9, _, -")
            continue
        if not isinstance(settings, dict):
            errors.append(f"interfaces.{name}: settings must be a mapping")
            continue
        result[name] = dict(settings)

    if errors:
        raise StateError("Desired state is invalid:\n  " + "\n  ".join(errors))
    return result


def load_desired(desired_file: Path) -> dict[str, dict]:
    """
    Load desired interfaces from a YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        StateError: If the YAML is malformed
    """
    if not desired_file.exists():
        raise FileNotFoundError(f"Desired state not found: {desired_file}")

    with open(desired_file) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise StateError(f"YAML syntax error in {desired_file}: {e}") from e

    return parse_desired(data)
