"""
opnsense_lib - Shared library for the OPNsense OSPF interface tooling

This package contains the components used to manage Quagga/FRR OSPF
interface settings on an OPNsense router over its HTTP API, including the
API client, the declarative schema and the resource lifecycle.
"""

__version__ = "1.0.0"
