"""
Quagga/FRR OSPF interface endpoints of the OPNsense API.

The router stores OSPF interface entries under
/api/quagga/ospfsettings and applies them with /api/quagga/service/reconfigure.
"""

from dataclasses import dataclass, field

from opnsense_lib.common import trace

from .client import ApiClient
from .errors import ApiError, ConversionError, NotFoundError
from .selected import SelectedMap


OSPF_SETTINGS = "quagga/ospfsettings"
SERVICE_RECONFIGURE = "quagga/service/reconfigure"
INTERFACE_KEY = "interface"


@dataclass
class OSPFInterface:
    """An OSPF interface entry in the router's wire format (all strings)."""
    enabled: str = "1"
    interfacename: SelectedMap = field(default_factory=SelectedMap)
    authtype: SelectedMap = field(default_factory=SelectedMap)
    authkey: str = ""
    authkey_id: str = ""
    area: str = ""
    cost: str = ""
    cost_demoted: str = ""
    hellointerval: str = ""
    deadinterval: str = ""
    retransmitinterval: str = ""
    retransmitdelay: str = ""
    transmitdelay: str = ""
    priority: str = ""
    bfd: str = "0"
    networktype: SelectedMap = field(default_factory=SelectedMap)

    def to_api(self) -> dict:
        """Request body for add/set calls."""
        return {
            'enabled': self.enabled,
            'interfacename': self.interfacename.to_api(),
            'authtype': self.authtype.to_api(),
            'authkey': self.authkey,
            'authkey_id': self.authkey_id,
            'area': self.area,
            'cost': self.cost,
            'cost_demoted': self.cost_demoted,
            'hellointerval': self.hellointerval,
            'deadinterval': self.deadinterval,
            'retransmitinterval': self.retransmitinterval,
            'retransmitdelay': self.retransmitdelay,
            'transmitdelay': self.transmitdelay,
            'priority': self.priority,
            'bfd': self.bfd,
            'networktype': self.networktype.to_api(),
        }

    @classmethod
    def from_api(cls, data: dict) -> 'OSPFInterface':
        """Parse the "interface" object of a get response."""
        def text(key: str) -> str:
            value = data.get(key, "")
            if value is None:
                return ""
            if isinstance(value, (dict, list)):
                raise ConversionError(f"Unexpected value for '{key}': {value!r}")
            return str(value)

        return cls(
            enabled=text('enabled'),
            interfacename=SelectedMap.from_api(data.get('interfacename')),
            authtype=SelectedMap.from_api(data.get('authtype')),
            authkey=text('authkey'),
            authkey_id=text('authkey_id'),
            area=text('area'),
            cost=text('cost'),
            cost_demoted=text('cost_demoted'),
            hellointerval=text('hellointerval'),
            deadinterval=text('deadinterval'),
            retransmitinterval=text('retransmitinterval'),
            retransmitdelay=text('retransmitdelay'),
            transmitdelay=text('transmitdelay'),
            priority=text('priority'),
            bfd=text('bfd'),
            networktype=SelectedMap.from_api(data.get('networktype')),
        )


class QuaggaClient:
    """OSPF interface operations against the Quagga plugin."""

    def __init__(self, api: ApiClient):
        self.api = api

    @staticmethod
    def _require_id(uuid: str) -> None:
        # Without an id the router answers with a blank template
        if not uuid:
            raise ApiError("An OSPF interface identifier is required")

    def get_ospf_interface(self, uuid: str) -> OSPFInterface:
        """
        Fetch one OSPF interface.

        Raises:
            NotFoundError: If the router has no interface with this id
            ApiError: On any other failure
        """
        self._require_id(uuid)
        data = self.api.get(f"{OSPF_SETTINGS}/getInterface/{uuid}")

        body = data.get(INTERFACE_KEY) if isinstance(data, dict) else None
        if not isinstance(body, dict) or not body:
            raise NotFoundError(f"OSPF interface {uuid} not found")

        return OSPFInterface.from_api(body)

    def add_ospf_interface(self, iface: OSPFInterface) -> str:
        """Create an OSPF interface and return its id."""
        data = self.api.post(f"{OSPF_SETTINGS}/addInterface", {INTERFACE_KEY: iface.to_api()})
        self._check_result(data, "saved", "add OSPF interface")

        uuid = data.get("uuid")
        if not uuid:
            raise ApiError("Router did not return an id for the new OSPF interface")

        trace("added OSPF interface", {"uuid": uuid})
        self.reconfigure()
        return uuid

    def update_ospf_interface(self, uuid: str, iface: OSPFInterface) -> None:
        """Replace the settings of an existing OSPF interface."""
        self._require_id(uuid)
        data = self.api.post(f"{OSPF_SETTINGS}/setInterface/{uuid}", {INTERFACE_KEY: iface.to_api()})
        self._check_result(data, "saved", f"update OSPF interface {uuid}")
        self.reconfigure()

    def delete_ospf_interface(self, uuid: str) -> None:
        """Delete an OSPF interface."""
        self._require_id(uuid)
        data = self.api.post(f"{OSPF_SETTINGS}/delInterface/{uuid}")
        result = str(data.get("result", "")).lower() if isinstance(data, dict) else ""
        if result == "not found":
            raise NotFoundError(f"OSPF interface {uuid} not found")
        self._check_result(data, "deleted", f"delete OSPF interface {uuid}")
        self.reconfigure()

    def reconfigure(self) -> None:
        """Apply pending Quagga configuration on the router."""
        data = self.api.post(SERVICE_RECONFIGURE)
        status = str(data.get("status", "")).strip().lower() if isinstance(data, dict) else ""
        if status != "ok":
            raise ApiError(f"Quagga reconfigure failed with status '{status}'")

    @staticmethod
    def _check_result(data, expected: str, action: str) -> None:
        if not isinstance(data, dict):
            raise ApiError(f"Unable to {action}: unexpected response {data!r}")
        result = str(data.get("result", "")).lower()
        if result != expected:
            raise ApiError(
                f"Unable to {action}: result '{result}'",
                validations=data.get("validations") or {},
            )
