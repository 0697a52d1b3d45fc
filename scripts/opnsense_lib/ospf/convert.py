"""
Conversion between the declarative model and the router's wire format.

The router encodes every value as a string: integers in decimal, booleans
as "1"/"0" and option fields as the selected key. Unset integers travel
as the literal "-1".
"""

from opnsense_lib.api import ConversionError, OSPFInterface, SelectedMap

from .dataclasses import UNSET, AuthType, NetworkType, OSPFInterfaceModel


TRUE = "1"
FALSE = "0"


def bool_to_string(value: bool) -> str:
    if not isinstance(value, bool):
        raise ConversionError(f"Expected a boolean, got {value!r}")
    return TRUE if value else FALSE


def string_to_bool(value: str) -> bool:
    return value.strip() == TRUE


def int_to_string(value: int) -> str:
    """Encode a non-negative integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConversionError(f"Expected an integer, got {value!r}")
    if value < 0:
        raise ConversionError(f"Expected a non-negative integer, got {value}")
    return str(value)


def int_to_string_negative(value: int) -> str:
    """Encode an integer that may carry the unset sentinel."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConversionError(f"Expected an integer, got {value!r}")
    return str(value)


def string_to_int(value: str) -> int:
    """Decode an integer; an empty string is the unset sentinel."""
    text = value.strip()
    if not text:
        return UNSET
    try:
        return int(text, 10)
    except ValueError as e:
        raise ConversionError(f"Expected a decimal integer, got {value!r}") from e


def _enum(enum_cls, value: str, field_name: str):
    try:
        return enum_cls(value)
    except ValueError as e:
        raise ConversionError(f"Unsupported {field_name} '{value}'") from e


def to_remote(model: OSPFInterfaceModel) -> OSPFInterface:
    """
    Convert a model to its wire form. The id is never part of the body.

    Raises:
        ConversionError: If a field cannot be encoded
    """
    return OSPFInterface(
        enabled=bool_to_string(model.enabled),
        interfacename=SelectedMap(model.interfacename),
        authtype=SelectedMap(_enum(AuthType, model.authtype, "authtype").value),
        authkey=int_to_string_negative(model.authkey),
        authkey_id=int_to_string(model.authkey_id),
        area=model.area,
        cost=int_to_string(model.cost),
        cost_demoted=int_to_string(model.cost_demoted),
        hellointerval=int_to_string_negative(model.hellointerval),
        deadinterval=int_to_string_negative(model.deadinterval),
        retransmitinterval=int_to_string_negative(model.retransmitinterval),
        retransmitdelay=int_to_string_negative(model.retransmitdelay),
        transmitdelay=int_to_string_negative(model.transmitdelay),
        priority=int_to_string_negative(model.priority),
        bfd=bool_to_string(model.bfd),
        networktype=SelectedMap(_enum(NetworkType, model.networktype, "networktype").value),
    )


def from_remote(remote: OSPFInterface) -> OSPFInterfaceModel:
    """
    Convert a wire form entry back to a model.

    The returned model has no id; callers attach the id they requested.

    Raises:
        ConversionError: If a field cannot be decoded
    """
    return OSPFInterfaceModel(
        enabled=string_to_bool(remote.enabled),
        interfacename=str(remote.interfacename),
        authtype=_enum(AuthType, str(remote.authtype), "authtype"),
        authkey=string_to_int(remote.authkey),
        authkey_id=string_to_int(remote.authkey_id),
        area=remote.area,
        cost=string_to_int(remote.cost),
        cost_demoted=string_to_int(remote.cost_demoted),
        hellointerval=string_to_int(remote.hellointerval),
        deadinterval=string_to_int(remote.deadinterval),
        retransmitinterval=string_to_int(remote.retransmitinterval),
        retransmitdelay=string_to_int(remote.retransmitdelay),
        transmitdelay=string_to_int(remote.transmitdelay),
        priority=string_to_int(remote.priority),
        bfd=string_to_bool(remote.bfd),
        networktype=_enum(NetworkType, str(remote.networktype), "networktype"),
    )
