#!/usr/bin/env python3
"""
opnsense_ospf.py - Manage OPNsense OSPF interface settings declaratively

Desired interfaces are read from a YAML file and reconciled against the
router through its API. What has been created is recorded in a JSON state
file so later runs can update or delete it.

Usage:
    opnsense_ospf.py plan                   # Show what apply would change
    opnsense_ospf.py apply [--auto-approve] # Create/update/delete interfaces
    opnsense_ospf.py refresh                # Re-read tracked interfaces
    opnsense_ospf.py import NAME UUID       # Track an existing interface
    opnsense_ospf.py show UUID              # Look up any interface
    opnsense_ospf.py destroy                # Delete every tracked interface
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from opnsense_lib.api import ApiClient, QuaggaClient
from opnsense_lib.common import log, warn, error, info, set_debug
from opnsense_lib.common.display import print_interface, print_plan
from opnsense_lib.common.prompts import prompt_yes_no
from opnsense_lib.config import (
    DESIRED_FILE,
    STATE_FILE,
    SETTINGS_FILE,
    PROVIDER_TYPE_NAME,
    SettingsError,
    load_settings,
)
from opnsense_lib.ospf import (
    OperationError,
    OSPFInterfaceResource,
    OSPFInterfaceDataSource,
    SchemaValidationError,
)
from opnsense_lib.state import (
    StateError,
    apply_actions,
    compute_plan,
    destroy_plan,
    import_resource,
    load_desired,
    load_state,
    refresh_state,
    save_state,
)


# =============================================================================
# Client setup
# =============================================================================

def build_client(args) -> QuaggaClient:
    """Resolve settings and build the Quagga client."""
    settings = load_settings(
        uri=args.uri,
        api_key=args.api_key,
        api_secret=args.api_secret,
        allow_insecure=True if args.insecure else None,
        timeout=args.timeout,
        settings_file=args.settings_file,
    )
    if settings.allow_insecure:
        warn("TLS certificate verification is disabled")
    return QuaggaClient(ApiClient(settings))


def confirm(question: str, auto_approve: bool) -> bool:
    if auto_approve:
        return True
    return bool(prompt_yes_no(question))


# =============================================================================
# Commands
# =============================================================================

def cmd_plan(args, client: QuaggaClient) -> int:
    """Show the changes apply would make."""
    desired = load_desired(args.desired)
    state = load_state(args.state)
    actions = compute_plan(desired, state)

    print_plan(actions)
    pending = [a for a in actions if a.action != "noop"]
    if not pending:
        log("No changes. Router settings match the desired state.")
    else:
        info(f"{len(pending)} change(s) planned")
    return 0


def cmd_apply(args, client: QuaggaClient) -> int:
    """Reconcile the router with the desired state."""
    desired = load_desired(args.desired)
    state = load_state(args.state)
    actions = compute_plan(desired, state)

    pending = [a for a in actions if a.action != "noop"]
    if not pending:
        log("No changes. Router settings match the desired state.")
        return 0

    print_plan(actions)
    if not confirm(f"Apply {len(pending)} change(s)?", args.auto_approve):
        warn("Apply cancelled")
        return 1

    resource = OSPFInterfaceResource(client)
    # Record every change that reached the router, even if a later one is interrupted
    try:
        failures = apply_actions(resource, pending, desired, state)
    finally:
        save_state(state, args.state)

    if failures:
        error(f"{failures} change(s) failed")
        return 1
    log("Apply complete")
    return 0


def cmd_refresh(args, client: QuaggaClient) -> int:
    """Re-read every tracked interface."""
    state = load_state(args.state)
    resource = OSPFInterfaceResource(client)
    failures = refresh_state(resource, state)
    save_state(state, args.state)
    return 1 if failures else 0


def cmd_import(args, client: QuaggaClient) -> int:
    """Track an interface that already exists on the router."""
    state = load_state(args.state)
    resource = OSPFInterfaceResource(client)
    import_resource(resource, state, args.name, args.uuid)
    save_state(state, args.state)
    return 0


def cmd_show(args, client: QuaggaClient) -> int:
    """Look up an interface by id."""
    data_source = OSPFInterfaceDataSource(client)
    model = data_source.read({'id': args.uuid})
    print_interface(data_source.metadata(PROVIDER_TYPE_NAME), model.to_dict())
    return 0


def cmd_destroy(args, client: QuaggaClient) -> int:
    """Delete every tracked interface from the router."""
    state = load_state(args.state)
    actions = destroy_plan(state)
    if not actions:
        log("Nothing to destroy")
        return 0

    print_plan(actions)
    if not confirm(f"Delete {len(actions)} interface(s) from the router?", args.auto_approve):
        warn("Destroy cancelled")
        return 1

    resource = OSPFInterfaceResource(client)
    try:
        failures = apply_actions(resource, actions, {}, state)
    finally:
        save_state(state, args.state)
    return 1 if failures else 0


COMMANDS = {
    "plan": cmd_plan,
    "apply": cmd_apply,
    "refresh": cmd_refresh,
    "import": cmd_import,
    "show": cmd_show,
    "destroy": cmd_destroy,
}


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage OPNsense OSPF interface settings")
    parser.add_argument("--uri", help="Router URI, e.g. https://192.168.1.1 (env: OPNSENSE_URI)")
    parser.add_argument("--api-key", help="API key (env: OPNSENSE_API_KEY)")
    parser.add_argument("--api-secret", help="API secret (env: OPNSENSE_API_SECRET)")
    parser.add_argument("--insecure", action="store_true",
                        help="Skip TLS certificate verification (env: OPNSENSE_ALLOW_INSECURE)")
    parser.add_argument("--timeout", type=int, help="Request timeout in seconds (env: OPNSENSE_TIMEOUT)")
    parser.add_argument("--settings-file", type=Path, default=SETTINGS_FILE,
                        help=f"Settings file (default: {SETTINGS_FILE})")
    parser.add_argument("--desired", type=Path, default=DESIRED_FILE,
                        help=f"Desired state YAML (default: {DESIRED_FILE})")
    parser.add_argument("--state", type=Path, default=STATE_FILE,
                        help=f"State file (default: {STATE_FILE})")
    parser.add_argument("--debug", action="store_true", help="Print API requests")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("plan", help="Show what apply would change")
    apply_parser = sub.add_parser("apply", help="Reconcile the router with the desired state")
    apply_parser.add_argument("--auto-approve", action="store_true", help="Do not ask for confirmation")
    sub.add_parser("refresh", help="Re-read tracked interfaces from the router")
    import_parser = sub.add_parser("import", help="Track an existing interface")
    import_parser.add_argument("name", help="Name to track the interface under")
    import_parser.add_argument("uuid", help="Interface UUID on the router")
    show_parser = sub.add_parser("show", help="Look up an interface by UUID")
    show_parser.add_argument("uuid", help="Interface UUID on the router")
    destroy_parser = sub.add_parser("destroy", help="Delete every tracked interface")
    destroy_parser.add_argument("--auto-approve", action="store_true", help="Do not ask for confirmation")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    if args.debug:
        set_debug(True)

    try:
        client = build_client(args)
    except SettingsError as e:
        error(str(e))
        return 2

    try:
        return COMMANDS[args.command](args, client)
    except (SchemaValidationError, OperationError, StateError, FileNotFoundError) as e:
        error(str(e))
        return 1
    except KeyboardInterrupt:
        print()
        warn("Interrupted")
        return 130
    finally:
        client.api.close()


if __name__ == "__main__":
    sys.exit(main())
