"""
opnsense_lib.state - Desired and tracked state for OSPF interfaces.

This package contains:
- serialization: TrackedState JSON save/load
- desired: desired-state YAML loading
- plan: create/update/delete plan computation
- apply: driving the resource through a plan, refresh and import
"""

from .serialization import (
    STATE_VERSION,
    StateError,
    TrackedState,
    to_dict,
    save_state,
    load_state,
)

from .desired import (
    parse_desired,
    load_desired,
)

from .plan import (
    PlanAction,
    diff_attributes,
    compute_plan,
    destroy_plan,
)

from .apply import (
    apply_actions,
    refresh_state,
    import_resource,
)

__all__ = [
    # Serialization
    'STATE_VERSION',
    'StateError',
    'TrackedState',
    'to_dict',
    'save_state',
    'load_state',
    # Desired state
    'parse_desired',
    'load_desired',
    # Plan
    'PlanAction',
    'diff_attributes',
    'compute_plan',
    'destroy_plan',
    # Apply
    'apply_actions',
    'refresh_state',
    'import_resource',
]
