"""
Tracked state serialization.

Functions for saving and loading the tracked state of managed OSPF
interfaces to/from JSON.
"""

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path


STATE_VERSION = 1


class StateError(Exception):
    """Raised when state or desired-state files are invalid."""
    pass


@dataclass
class TrackedState:
    """Last known router-side settings of every managed interface, by name."""
    version: int = STATE_VERSION
    resources: dict[str, dict] = field(default_factory=dict)


def to_dict(obj):
    """Convert dataclasses to dicts recursively."""
    if hasattr(obj, '__dataclass_fields__'):
        return {k: to_dict(v) for k, v in asdict(obj).items()}
    elif isinstance(obj, list):
        return [to_dict(i) for i in obj]
    else:
        return obj


def save_state(state: TrackedState, state_file: Path, quiet: bool = False) -> None:
    """Save tracked state to a JSON file."""
    from opnsense_lib.common import log

    state_file.parent.mkdir(parents=True, exist_ok=True)

    data = to_dict(state)

    # Write then rename so an interrupted save never truncates the state
    tmp_file = state_file.with_name(state_file.name + ".tmp")
    with open(tmp_file, 'w') as f:
        json.dump(data, f, indent=2, sort_keys=True)
        f.write("\n")
    tmp_file.replace(state_file)

    if not quiet:
        log(f"State saved to {state_file}")


def load_state(state_file: Path) -> TrackedState:
    """Load tracked state from a JSON file. A missing file is an empty state."""
    if not state_file.exists():
        return TrackedState()

    try:
        with open(state_file) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise StateError(f"State file {state_file} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise StateError(f"State file {state_file} must contain a JSON object")

    version = data.get('version', STATE_VERSION)
    if version != STATE_VERSION:
        raise StateError(f"Unsupported state version {version} in {state_file}")

    resources = data.get('resources', {})
    if not isinstance(resources, dict):
        raise StateError(f"State file {state_file}: 'resources' must be an object")
    for name, record in resources.items():
        if not isinstance(record, dict) or not record.get('id'):
            raise StateError(f"State file {state_file}: resource '{name}' has no id")

    return TrackedState(version=version, resources=resources)
