"""
Drive the OSPF interface resource through planned changes.

Each resource is handled independently: a failure is reported and leaves
that resource's tracked state as it was.
"""

from typing import List

from opnsense_lib.common import log, warn, error
from opnsense_lib.ospf import OperationError, OSPFInterfaceResource, SchemaValidationError

from .desired import NAME_PATTERN
from .plan import PlanAction
from .serialization import StateError, TrackedState


def apply_actions(
    resource: OSPFInterfaceResource,
    actions: List[PlanAction],
    desired: dict[str, dict],
    state: TrackedState,
) -> int:
    """
    Apply planned actions, updating state in place.

    Returns:
        Number of failed actions
    """
    failures = 0

    for action in actions:
        try:
            if action.action == "create":
                model = resource.create(desired[action.name])
                state.resources[action.name] = model.to_dict()
                log(f"Created {action.name} ({model.id})")

            elif action.action == "update":
                model = resource.update(desired[action.name], state.resources[action.name])
                state.resources[action.name] = model.to_dict()
                log(f"Updated {action.name}: {', '.join(action.changed)}")

            elif action.action == "delete":
                resource.delete(state.resources[action.name])
                del state.resources[action.name]
                log(f"Deleted {action.name}")

        except (SchemaValidationError, OperationError) as e:
            error(f"{action.name}: {e}")
            failures += 1

    return failures


def refresh_state(resource: OSPFInterfaceResource, state: TrackedState) -> int:
    """
    Re-read every tracked interface from the router.

    Interfaces the router no longer has are dropped from state.

    Returns:
        Number of failed reads
    """
    failures = 0

    for name, record in list(state.resources.items()):
        try:
            model = resource.read(record)
        except OperationError as e:
            error(f"{name}: {e}")
            failures += 1
            continue

        if model is None:
            del state.resources[name]
            warn(f"Removed {name} from state")
        else:
            state.resources[name] = model.to_dict()

    return failures


def import_resource(resource: OSPFInterfaceResource, state: TrackedState, name: str, identifier: str) -> None:
    """
    Start tracking an interface that already exists on the router.

    Raises:
        StateError: If name is invalid or already tracked
        OperationError: If the interface cannot be read
    """
    if not NAME_PATTERN.match(name):
        raise StateError(f"Invalid name '{name}': must start with lowercase letter, contain only a-z, 0-9, _, -")
    if name in state.resources:
        raise StateError(f"'{name}' is already managed (id {state.resources[name].get('id')})")

    model = resource.read(resource.import_state(identifier))
    if model is None:
        raise OperationError(
            "Cannot import non-existent remote object",
            f"No ospf interface with id {identifier} exists on the router",
        )

    state.resources[name] = model.to_dict()
    log(f"Imported {name} ({identifier})")
