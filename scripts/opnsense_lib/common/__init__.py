"""
opnsense_lib.common - Shared utilities for the OPNsense OSPF tools

This module provides:
- colors: ANSI color codes and logging functions
- prompts: Interactive prompt utilities
- display: rich tables for interface records and plans
"""

from .colors import Colors, log, warn, error, info, trace, set_debug

__all__ = [
    'Colors', 'log', 'warn', 'error', 'info', 'trace', 'set_debug',
]
