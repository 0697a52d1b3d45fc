"""
Shared wiring for the OSPF interface resource and data source.
"""

from typing import Optional

from opnsense_lib.api import ApiClient, ApiError, ConversionError, NotFoundError, QuaggaClient
from opnsense_lib.config import PROVIDER_TYPE_NAME

from .convert import from_remote
from .dataclasses import OSPFInterfaceModel
from .errors import OperationError


TYPE_SUFFIX = "_quagga_ospf_interface"


class QuaggaAdapter:
    """Holds the injected Quagga client and the exposed type name."""

    def __init__(self, client=None):
        self.client: Optional[QuaggaClient] = None
        self.configure(client)

    def metadata(self, provider_type_name: str = PROVIDER_TYPE_NAME) -> str:
        """Type name exposed to the declarative engine."""
        return provider_type_name + TYPE_SUFFIX

    def configure(self, provider_data) -> None:
        """
        Attach an already configured client.

        Accepts a QuaggaClient, or an ApiClient which is wrapped in one.
        None leaves the adapter unconfigured.
        """
        if provider_data is None:
            return
        if isinstance(provider_data, QuaggaClient):
            self.client = provider_data
        elif isinstance(provider_data, ApiClient):
            self.client = QuaggaClient(provider_data)
        else:
            raise OperationError(
                "Unexpected Resource Configure Type",
                f"Expected ApiClient or QuaggaClient, got: {type(provider_data).__name__}. "
                "Please report this issue to the provider developers.",
            )

    def _require_client(self) -> QuaggaClient:
        if self.client is None:
            raise OperationError("Unconfigured Client", "No OPNsense client has been configured")
        return self.client


def require_id(data: dict) -> str:
    uuid = data.get('id') if isinstance(data, dict) else None
    if not uuid or not isinstance(uuid, str):
        raise OperationError("Missing Identifier", "The OSPF interface has no id")
    return uuid


def fetch_interface(client: QuaggaClient, uuid: str) -> OSPFInterfaceModel:
    """
    Read one interface from the router and attach its id.

    NotFoundError propagates unchanged; every other failure becomes an
    OperationError.
    """
    try:
        remote = client.get_ospf_interface(uuid)
    except NotFoundError:
        raise
    except (ApiError, ConversionError) as e:
        raise OperationError("Client Error", f"Unable to read ospf interface, got error: {e}") from e

    try:
        model = from_remote(remote)
    except ConversionError as e:
        raise OperationError("Client Error", f"Unable to read ospf interface, got error: {e}") from e

    # The router never echoes the id, re-attach the one we asked for
    model.id = uuid
    return model
