"""
Tests for console logging and display helpers.
"""
import pytest

from opnsense_lib.common import error, info, log, set_debug, trace, warn
from opnsense_lib.common.display import interface_table, plan_table, render_value
from opnsense_lib.state import PlanAction


@pytest.fixture
def debug():
    set_debug(True)
    yield
    set_debug(False)


def test_log_and_warn(capsys):
    log("Created lan")
    warn("Removed lan")
    out = capsys.readouterr().out
    assert "[+]" in out and "Created lan" in out
    assert "[!]" in out and "Removed lan" in out


def test_error_and_info(capsys):
    error("lan: Client Error")
    info("1 change(s) planned")
    out = capsys.readouterr().out
    assert "[ERROR]" in out and "lan: Client Error" in out
    assert "[i]" in out and "1 change(s) planned" in out


def test_trace_is_silent_by_default(capsys):
    set_debug(False)
    trace("created a resource", {"id": "abc-123"})
    assert capsys.readouterr().out == ""


def test_trace_when_debugging(capsys, debug):
    trace("created a resource", {"id": "abc-123"})
    out = capsys.readouterr().out
    assert "created a resource" in out
    assert "id: abc-123" in out


def test_render_value():
    assert render_value(True).plain == "true"
    assert render_value(-1).plain == "-1 (device default)"
    assert render_value("").plain == '""'
    assert render_value(40).plain == "40"


def test_tables():
    table = interface_table("lan", {"cost": 40, "id": "abc-123"})
    assert table.row_count == 2

    table = plan_table([PlanAction("lan", "update", ["cost"]), PlanAction("wan", "create")])
    assert table.row_count == 2
