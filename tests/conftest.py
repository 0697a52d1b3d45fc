"""
Test configuration and fixtures for the OPNsense OSPF tests.
"""
import pytest
from unittest.mock import Mock

from opnsense_lib.api import ApiError, NotFoundError, OSPFInterface, QuaggaClient
from opnsense_lib.config import ProviderSettings
from opnsense_lib.state import TrackedState


class FakeQuaggaClient(QuaggaClient):
    """In-memory stand-in for the router's OSPF interface endpoints."""

    def __init__(self, ids=None):
        self.api = Mock()
        self.interfaces: dict[str, OSPFInterface] = {}
        self.calls: list[tuple] = []
        self.fail_with = None  # ApiError raised by the next call
        self._ids = iter(ids or ["abc-123", "def-456", "ghi-789"])

    def _record(self, *call):
        self.calls.append(call)
        if self.fail_with is not None:
            err, self.fail_with = self.fail_with, None
            raise err

    def get_ospf_interface(self, uuid):
        self._record("get", uuid)
        if uuid not in self.interfaces:
            raise NotFoundError(f"OSPF interface {uuid} not found")
        return self.interfaces[uuid]

    def add_ospf_interface(self, iface):
        self._record("add", iface)
        uuid = next(self._ids)
        self.interfaces[uuid] = iface
        return uuid

    def update_ospf_interface(self, uuid, iface):
        self._record("update", uuid, iface)
        if uuid not in self.interfaces:
            raise ApiError(f"Unable to update OSPF interface {uuid}: result 'failed'")
        self.interfaces[uuid] = iface

    def delete_ospf_interface(self, uuid):
        self._record("delete", uuid)
        if uuid not in self.interfaces:
            raise NotFoundError(f"OSPF interface {uuid} not found")
        del self.interfaces[uuid]


@pytest.fixture
def fake_client():
    return FakeQuaggaClient()


@pytest.fixture
def settings():
    return ProviderSettings(
        uri="https://router.example.net",
        api_key="key",
        api_secret="secret",
    )


@pytest.fixture
def lan_plan():
    """Plan for the LAN interface with every optional attribute left unset."""
    return {
        "enabled": True,
        "interfacename": "lan",
        "authtype": "",
        "authkey": -1,
        "authkey_id": 5,
        "area": "0.0.0.0",
        "cost": 40,
        "cost_demoted": 65535,
        "hellointerval": -1,
        "deadinterval": -1,
        "retransmitinterval": -1,
        "retransmitdelay": -1,
        "transmitdelay": -1,
        "priority": -1,
        "bfd": False,
        "networktype": "",
    }


@pytest.fixture
def empty_state():
    return TrackedState()
