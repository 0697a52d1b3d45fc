"""
OSPF interface dataclasses.

These define the declarative shape of one OSPF interface entry as it is
written in desired state and recorded in tracked state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# Reserved integer meaning "no override, use the router default"
UNSET = -1


def is_unset(value: int) -> bool:
    return value == UNSET


class AuthType(str, Enum):
    """OSPF authentication method."""
    NONE = ""
    MESSAGE_DIGEST = "message-digest"
    PLAIN = "plain"


class NetworkType(str, Enum):
    """OSPF network type ("" keeps the router default)."""
    DEFAULT = ""
    BROADCAST = "broadcast"
    NON_BROADCAST = "non-broadcast"
    POINT_TO_MULTIPOINT = "point-to-multipoint"
    POINT_TO_POINT = "point-to-point"


@dataclass
class OSPFInterfaceModel:
    """Declarative settings for one interface's OSPF participation."""
    authkey_id: int  # MD5 key id (1-255), always required
    enabled: bool = True
    interfacename: str = ""  # Interface identifier, e.g. "lan" or "opt2"
    authtype: AuthType = AuthType.NONE
    authkey: int = UNSET
    area: str = ""  # Dotted area id, e.g. "0.0.0.0"
    cost: int = 40
    cost_demoted: int = 65535  # Cost while CARP backup
    hellointerval: int = UNSET
    deadinterval: int = UNSET
    retransmitinterval: int = UNSET
    retransmitdelay: int = UNSET
    transmitdelay: int = UNSET
    priority: int = UNSET
    bfd: bool = False
    networktype: NetworkType = NetworkType.DEFAULT
    id: Optional[str] = None  # Router-assigned UUID, set after create

    def to_dict(self) -> dict:
        """Schema-shaped dict with enums flattened to their string values."""
        return {
            'enabled': self.enabled,
            'interfacename': self.interfacename,
            'authtype': AuthType(self.authtype).value,
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
            'networktype': NetworkType(self.networktype).value,
            'id': self.id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'OSPFInterfaceModel':
        """Build a model from an already validated, defaults-applied dict."""
        return cls(
            enabled=data['enabled'],
            interfacename=data['interfacename'],
            authtype=AuthType(data['authtype']),
            authkey=data['authkey'],
            authkey_id=data['authkey_id'],
            area=data['area'],
            cost=data['cost'],
            cost_demoted=data['cost_demoted'],
            hellointerval=data['hellointerval'],
            deadinterval=data['deadinterval'],
            retransmitinterval=data['retransmitinterval'],
            retransmitdelay=data['retransmitdelay'],
            transmitdelay=data['transmitdelay'],
            priority=data['priority'],
            bfd=data['bfd'],
            networktype=NetworkType(data['networktype']),
            id=data.get('id'),
        )
