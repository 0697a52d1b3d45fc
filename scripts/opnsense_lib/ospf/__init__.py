"""
opnsense_lib.ospf - OSPF interface resource and data source.

This package contains:
- dataclasses: OSPFInterfaceModel, AuthType, NetworkType, UNSET
- schema: resource and data source schemas
- validation: schema validation and model construction
- convert: model <-> wire format conversion
- resource: OSPFInterfaceResource lifecycle
- data_source: OSPFInterfaceDataSource lookup
"""

from .dataclasses import (
    UNSET,
    is_unset,
    AuthType,
    NetworkType,
    OSPFInterfaceModel,
)

from .schema import (
    SchemaField,
    Schema,
    RESOURCE_SCHEMA,
    DATA_SOURCE_SCHEMA,
)

from .validation import (
    SchemaValidationError,
    validate_config,
    apply_defaults,
    build_model,
)

from .convert import (
    to_remote,
    from_remote,
)

from .errors import OperationError
from .base import TYPE_SUFFIX
from .resource import OSPFInterfaceResource
from .data_source import OSPFInterfaceDataSource

__all__ = [
    # Dataclasses
    'UNSET',
    'is_unset',
    'AuthType',
    'NetworkType',
    'OSPFInterfaceModel',
    # Schema
    'SchemaField',
    'Schema',
    'RESOURCE_SCHEMA',
    'DATA_SOURCE_SCHEMA',
    # Validation
    'SchemaValidationError',
    'validate_config',
    'apply_defaults',
    'build_model',
    # Conversion
    'to_remote',
    'from_remote',
    # Lifecycle
    'OperationError',
    'TYPE_SUFFIX',
    'OSPFInterfaceResource',
    'OSPFInterfaceDataSource',
]
