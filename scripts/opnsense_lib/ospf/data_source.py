"""
Read-only lookup of an OSPF interface by id.
"""

from opnsense_lib.api import NotFoundError

from .base import QuaggaAdapter, fetch_interface
from .dataclasses import OSPFInterfaceModel
from .errors import OperationError
from .schema import DATA_SOURCE_SCHEMA, Schema
from .validation import SchemaValidationError, validate_config


class OSPFInterfaceDataSource(QuaggaAdapter):
    """Looks up an existing OSPF interface without managing it."""

    def schema(self) -> Schema:
        return DATA_SOURCE_SCHEMA

    def read(self, config: dict) -> OSPFInterfaceModel:
        """
        Fetch every attribute of the interface whose id is given in config.

        Raises:
            SchemaValidationError: If config lacks an id or sets other attributes
            OperationError: If the interface is missing or the router call fails
        """
        errors = validate_config(DATA_SOURCE_SCHEMA, config)
        if errors:
            raise SchemaValidationError(errors)

        uuid = config['id']
        client = self._require_client()

        try:
            return fetch_interface(client, uuid)
        except NotFoundError as e:
            raise OperationError("Client Error", f"Unable to read ospf interface, got error: {e}") from e
