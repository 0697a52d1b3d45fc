"""
opnsense_lib.api - OPNsense API client.

This package contains:
- client: ApiClient, the authenticated HTTP transport
- errors: ApiError, NotFoundError, ConversionError
- selected: SelectedMap option values
- quagga: OSPFInterface wire format and QuaggaClient operations
"""

from .errors import ApiError, NotFoundError, ConversionError
from .client import ApiClient
from .selected import SelectedMap
from .quagga import OSPFInterface, QuaggaClient

__all__ = [
    'ApiError',
    'NotFoundError',
    'ConversionError',
    'ApiClient',
    'SelectedMap',
    'OSPFInterface',
    'QuaggaClient',
]
