"""
Plan computation: which interfaces need to be created, updated or deleted.
"""

from dataclasses import dataclass, field
from typing import List

from opnsense_lib.ospf import RESOURCE_SCHEMA, SchemaValidationError, apply_defaults, validate_config

from .serialization import TrackedState


@dataclass
class PlanAction:
    """One planned change."""
    name: str
    action: str  # "create", "update", "delete", "noop"
    changed: List[str] = field(default_factory=list)  # Attributes that differ (update only)


def diff_attributes(desired: dict, tracked: dict) -> List[str]:
    """Names of attributes whose defaults-applied desired value differs from tracked state."""
    full = apply_defaults(RESOURCE_SCHEMA, desired)
    changed = []
    for schema_field in RESOURCE_SCHEMA.fields:
        if schema_field.computed:
            continue
        if full.get(schema_field.name) != tracked.get(schema_field.name):
            changed.append(schema_field.name)
    return changed


def compute_plan(desired: dict[str, dict], state: TrackedState) -> List[PlanAction]:
    """
    Compare desired interfaces with tracked state.

    Desired entries are planned in file order, followed by deletions of
    tracked entries that are no longer desired.

    Raises:
        SchemaValidationError: If any desired entry does not satisfy the schema
    """
    errors = []
    for name, settings in desired.items():
        errors.extend(f"interfaces.{name}: {e}" for e in validate_config(RESOURCE_SCHEMA, settings))
    if errors:
        raise SchemaValidationError(errors)

    actions = []

    for name, settings in desired.items():
        tracked = state.resources.get(name)
        if tracked is None:
            actions.append(PlanAction(name=name, action="create"))
            continue
        changed = diff_attributes(settings, tracked)
        actions.append(PlanAction(name=name, action="update" if changed else "noop", changed=changed))

    for name in state.resources:
        if name not in desired:
            actions.append(PlanAction(name=name, action="delete"))

    return actions


def destroy_plan(state: TrackedState) -> List[PlanAction]:
    """Delete every tracked interface."""
    return [PlanAction(name=name, action="delete") for name in state.resources]
