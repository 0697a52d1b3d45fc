"""
Rich rendering for OSPF interface records and plans.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from opnsense_lib.ospf import is_unset

console = Console()

ACTION_STYLES = {
    "create": "green",
    "update": "yellow",
    "delete": "red",
    "noop": "dim",
}


def render_value(value) -> Text:
    """Render a single attribute value."""
    if isinstance(value, bool):
        return Text("true" if value else "false", style="cyan")
    if value is None:
        return Text("(unknown)", style="dim")
    if value == "":
        return Text('""', style="dim")
    if isinstance(value, int) and is_unset(value):
        return Text("-1 (device default)", style="dim")
    return Text(str(value))


def interface_table(title: str, record: dict) -> Table:
    """Build a two-column attribute table for one interface record."""
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Attribute")
    table.add_column("Value")
    for key, value in record.items():
        table.add_row(key, render_value(value))
    return table


def plan_table(actions) -> Table:
    """Build a table summarising planned actions."""
    table = Table(title="Plan", show_header=True, header_style="bold")
    table.add_column("Name")
    table.add_column("Action")
    table.add_column("Changes")
    for action in actions:
        style = ACTION_STYLES.get(action.action, "")
        table.add_row(
            action.name,
            Text(action.action, style=style),
            ", ".join(action.changed) if action.changed else "",
        )
    return table


def print_interface(title: str, record: dict) -> None:
    console.print(interface_table(title, record))


def print_plan(actions) -> None:
    console.print(plan_table(actions))
