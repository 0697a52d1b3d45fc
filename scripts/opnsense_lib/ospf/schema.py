"""
Schemas for the OSPF interface resource and data source.

Each attribute is described by a SchemaField carrying its type, default
and constraints. Validation of user input happens against these
definitions before any request is sent to the router.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .dataclasses import UNSET, AuthType, NetworkType


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
UINT32_MAX = 4294967295

AUTH_TYPES = [t.value for t in AuthType]
NETWORK_TYPES = [t.value for t in NetworkType]


@dataclass
class SchemaField:
    """A single attribute in a schema."""
    name: str
    type: str  # "string", "integer", "boolean"
    description: str = ""
    default: Any = None
    required: bool = False
    computed: bool = False  # Set by the router, never by the user
    minimum: Optional[int] = None
    maximum: Optional[int] = None
    sentinel: Optional[int] = None  # Accepted even when outside minimum/maximum
    choices: List[str] = field(default_factory=list)


@dataclass
class Schema:
    """An ordered set of attributes."""
    description: str
    fields: List[SchemaField]

    @property
    def names(self) -> List[str]:
        return [f.name for f in self.fields]

    def get(self, name: str) -> Optional[SchemaField]:
        for schema_field in self.fields:
            if schema_field.name == name:
                return schema_field
        return None


def _interval(name: str, description: str) -> SchemaField:
    return SchemaField(
        name=name,
        type="integer",
        description=f"{description} Defaults to `-1` (router default).",
        default=UNSET,
        minimum=0,
        maximum=UINT32_MAX,
        sentinel=UNSET,
    )


RESOURCE_SCHEMA = Schema(
    description="Configure interface for OSPF",
    fields=[
        SchemaField(
            name="enabled",
            type="boolean",
            description="Enable this interface. Defaults to `true`.",
            default=True,
        ),
        SchemaField(
            name="interfacename",
            type="string",
            description="Interface these settings apply to, by identifier such as `lan` or `opt2`. Defaults to `\"\"`.",
            default="",
        ),
        SchemaField(
            name="authtype",
            type="string",
            description="Authentication method for OSPF exchanges: `\"\"` (none), `plain` or `message-digest`.",
            default="",
            choices=AUTH_TYPES,
        ),
        SchemaField(
            name="authkey",
            type="integer",
            description="Password or key used for plain or MD5 authentication. Defaults to `-1`.",
            default=UNSET,
        ),
        SchemaField(
            name="authkey_id",
            type="integer",
            description="Numeric identifier of the MD5 key.",
            required=True,
            minimum=1,
            maximum=255,
        ),
        SchemaField(
            name="area",
            type="string",
            description="OSPF area of the network, e.g. `0.0.0.0` for the backbone. Defaults to `\"\"`.",
            default="",
        ),
        SchemaField(
            name="cost",
            type="integer",
            description="Interface metric; lower costs are preferred within the area. Defaults to `40`.",
            default=40,
            minimum=1,
            maximum=65535,
        ),
        SchemaField(
            name="cost_demoted",
            type="integer",
            description="Metric used while the interface is a CARP backup. Defaults to `65535`.",
            default=65535,
            minimum=1,
            maximum=65535,
        ),
        _interval("hellointerval", "Seconds between Hello packets."),
        _interval("deadinterval", "Seconds without Hellos before a neighbor is declared down."),
        _interval("retransmitinterval", "Seconds to wait before resending an unacknowledged LSA."),
        _interval("retransmitdelay", "Hold time before LSAs are resent."),
        _interval("transmitdelay", "Estimated seconds to transmit an LSA on this link."),
        _interval("priority", "Designated Router election priority; higher wins."),
        SchemaField(
            name="bfd",
            type="boolean",
            description="Enable Bidirectional Forwarding Detection; requires peer configuration. Defaults to `false`.",
            default=False,
        ),
        SchemaField(
            name="networktype",
            type="string",
            description="OSPF network type, affecting adjacency and flooding. Defaults to `\"\"`.",
            default="",
            choices=NETWORK_TYPES,
        ),
        SchemaField(
            name="id",
            type="string",
            description="UUID of the interface.",
            computed=True,
        ),
    ],
)


def _data_source_field(resource_field: SchemaField) -> SchemaField:
    if resource_field.name == "id":
        return SchemaField(name="id", type="string", description="UUID of the resource.", required=True)
    return SchemaField(
        name=resource_field.name,
        type=resource_field.type,
        description=resource_field.description,
        computed=True,
    )


DATA_SOURCE_SCHEMA = Schema(
    description=RESOURCE_SCHEMA.description,
    fields=[_data_source_field(f) for f in RESOURCE_SCHEMA.fields],
)
