"""
Managed OSPF interface resource.

Each lifecycle operation issues exactly one request to the router (plus
the reconfigure call the client makes after a change) and maps the
result back into the declarative model.
"""

from typing import Optional

from opnsense_lib.api import ApiError, ConversionError, NotFoundError
from opnsense_lib.common import trace, warn

from .base import QuaggaAdapter, fetch_interface, require_id
from .convert import to_remote
from .dataclasses import OSPFInterfaceModel
from .errors import OperationError
from .schema import RESOURCE_SCHEMA, Schema
from .validation import build_model


class OSPFInterfaceResource(QuaggaAdapter):
    """Create, read, update, delete and import OSPF interface entries."""

    def schema(self) -> Schema:
        return RESOURCE_SCHEMA

    def create(self, plan: dict) -> OSPFInterfaceModel:
        """
        Create the interface described by plan.

        Returns the planned model tagged with the id assigned by the router.

        Raises:
            SchemaValidationError: If plan is invalid (nothing is sent)
            OperationError: If the router call or a conversion fails
        """
        model = build_model(plan)
        client = self._require_client()

        try:
            ospf_interface = to_remote(model)
        except ConversionError as e:
            raise OperationError("Client Error", f"Unable to parse ospf interface, got error: {e}") from e

        try:
            uuid = client.add_ospf_interface(ospf_interface)
        except ApiError as e:
            raise OperationError("Client Error", f"Unable to create ospf interface, got error: {e}") from e

        model.id = uuid
        trace("created a resource", {"id": uuid})
        return model

    def read(self, state: dict) -> Optional[OSPFInterfaceModel]:
        """
        Refresh tracked state from the router.

        Returns None when the router no longer has the interface, meaning
        the caller should stop tracking it.
        """
        uuid = require_id(state)
        client = self._require_client()

        try:
            return fetch_interface(client, uuid)
        except NotFoundError:
            warn(f"ospf interface {uuid} not present in remote, removing from state")
            return None

    def update(self, plan: dict, state: dict) -> OSPFInterfaceModel:
        """
        Replace the settings of a tracked interface.

        The submitted plan, carrying the tracked id, becomes the new state.
        """
        model = build_model(plan)
        uuid = require_id(state)
        client = self._require_client()

        try:
            ospf_interface = to_remote(model)
        except ConversionError as e:
            raise OperationError("Client Error", f"Unable to parse ospf interface, got error: {e}") from e

        try:
            client.update_ospf_interface(uuid, ospf_interface)
        except ApiError as e:
            raise OperationError("Client Error", f"Unable to update ospf interface, got error: {e}") from e

        model.id = uuid
        trace("updated a resource", {"id": uuid})
        return model

    def delete(self, state: dict) -> None:
        """Delete a tracked interface. Any failure is terminal."""
        uuid = require_id(state)
        client = self._require_client()

        try:
            client.delete_ospf_interface(uuid)
        except ApiError as e:
            raise OperationError("Client Error", f"Unable to delete ospf interface, got error: {e}") from e

        trace("deleted a resource", {"id": uuid})

    def import_state(self, identifier: str) -> dict:
        """Stub state for an existing interface; read() fills in the rest."""
        if not identifier or not isinstance(identifier, str):
            raise OperationError("Invalid Import Identifier", "An OSPF interface UUID is required")
        return {'id': identifier}
