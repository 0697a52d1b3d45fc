"""
Tests for the opnsense_ospf command line entry point.
"""
import json

import pytest
from unittest.mock import patch

import opnsense_ospf
from opnsense_lib.config.settings import ENV_API_KEY, ENV_API_SECRET, ENV_URI


DESIRED = """\
interfaces:
  lan:
    interfacename: lan
    area: 0.0.0.0
    authkey_id: 5
"""


@pytest.fixture
def files(tmp_path):
    desired = tmp_path / "desired.yaml"
    desired.write_text(DESIRED)
    return desired, tmp_path / "state.json"


@pytest.fixture
def run(files, fake_client):
    desired, state = files

    def _run(*argv):
        with patch.object(opnsense_ospf, "build_client", return_value=fake_client):
            return opnsense_ospf.main(["--desired", str(desired), "--state", str(state), *argv])
    return _run


def read_state(path):
    return json.loads(path.read_text())["resources"]


def test_plan_does_not_touch_router(run, files, fake_client, capsys):
    assert run("plan") == 0
    assert fake_client.calls == []
    assert not files[1].exists()
    assert "create" in capsys.readouterr().out


def test_apply(run, files, fake_client):
    assert run("apply", "--auto-approve") == 0

    resources = read_state(files[1])
    assert resources["lan"]["id"] == "abc-123"
    assert resources["lan"]["cost"] == 40
    assert fake_client.interfaces["abc-123"].interfacename.value == "lan"


def test_apply_twice_is_noop(run, fake_client):
    run("apply", "--auto-approve")
    assert run("apply", "--auto-approve") == 0
    assert [c[0] for c in fake_client.calls] == ["add"]


def test_apply_declined(run, files, fake_client):
    with patch.object(opnsense_ospf, "prompt_yes_no", return_value=False):
        assert run("apply") == 1
    assert fake_client.calls == []


def test_apply_invalid_desired(run, files, fake_client):
    files[0].write_text(DESIRED.replace("authkey_id: 5", "authkey_id: 256"))
    assert run("apply", "--auto-approve") == 1
    assert fake_client.calls == []
    assert not files[1].exists()


def test_plan_rejects_misspelled_attribute(run, files, fake_client, capsys):
    run("apply", "--auto-approve")
    files[0].write_text(DESIRED + "    hellointerva: 10\n")
    capsys.readouterr()

    assert run("plan") == 1
    assert "Unknown attribute: hellointerva" in capsys.readouterr().out


def test_interrupted_apply_keeps_created_ids(run, files, fake_client):
    files[0].write_text(DESIRED + "  wan:\n    interfacename: wan\n    authkey_id: 1\n")
    add = fake_client.add_ospf_interface

    def add_then_interrupt(iface):
        if fake_client.interfaces:
            raise KeyboardInterrupt
        return add(iface)

    with patch.object(fake_client, "add_ospf_interface", side_effect=add_then_interrupt):
        assert run("apply", "--auto-approve") == 130

    resources = read_state(files[1])
    assert list(resources) == ["lan"]
    assert resources["lan"]["id"] == "abc-123"

    assert run("apply", "--auto-approve") == 0
    assert list(fake_client.interfaces) == ["abc-123", "def-456"]


def test_refresh_drops_deleted(run, files, fake_client):
    run("apply", "--auto-approve")
    fake_client.interfaces.clear()

    assert run("refresh") == 0
    assert read_state(files[1]) == {}


def test_import_and_show(run, files, fake_client, lan_plan, capsys):
    from opnsense_lib.ospf import OSPFInterfaceResource
    uuid = OSPFInterfaceResource(fake_client).create(lan_plan).id

    assert run("import", "lan", uuid) == 0
    assert read_state(files[1])["lan"]["id"] == uuid

    capsys.readouterr()
    assert run("show", uuid) == 0
    out = capsys.readouterr().out
    assert "opnsense_quagga_ospf_interface" in out
    assert "0.0.0.0" in out


def test_show_missing(run):
    assert run("show", "missing") == 1


def test_destroy(run, files, fake_client):
    run("apply", "--auto-approve")
    assert run("destroy", "--auto-approve") == 0
    assert read_state(files[1]) == {}
    assert fake_client.interfaces == {}


def test_missing_settings(files, monkeypatch, tmp_path):
    for name in (ENV_URI, ENV_API_KEY, ENV_API_SECRET):
        monkeypatch.delenv(name, raising=False)
    desired, state = files
    code = opnsense_ospf.main([
        "--settings-file", str(tmp_path / "none.json"),
        "--desired", str(desired), "--state", str(state), "plan",
    ])
    assert code == 2
