"""
Console output for opnsense-ospf.

Every message is a single line with a coloured tag, e.g. ``[+] Created lan``.
Trace lines (API requests and bodies) are only printed with ``--debug`` or
OPNSENSE_OSPF_DEBUG=1.
"""

import os


class Colors:
    """ANSI escapes used for message tags."""
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[1;33m"
    CYAN = "\033[0;36m"
    MAGENTA = "\033[0;35m"
    DIM = "\033[2m"
    NC = "\033[0m"  # Reset


DEBUG_ENV = "OPNSENSE_OSPF_DEBUG"

_debug = os.environ.get(DEBUG_ENV, "").lower() in ("1", "true", "yes")


def set_debug(enabled: bool) -> None:
    """Enable or disable trace output."""
    global _debug
    _debug = enabled


def _emit(color: str, tag: str, msg: str) -> None:
    print(f"{color}[{tag}]{Colors.NC} {msg}")


def log(msg: str) -> None:
    """A change that went through."""
    _emit(Colors.GREEN, "+", msg)


def warn(msg: str) -> None:
    _emit(Colors.YELLOW, "!", msg)


def error(msg: str) -> None:
    _emit(Colors.RED, "ERROR", msg)


def info(msg: str) -> None:
    _emit(Colors.CYAN, "i", msg)


def trace(msg: str, fields: dict = None) -> None:
    """Print a request trace and its fields, indented, when debugging."""
    if not _debug:
        return
    _emit(Colors.MAGENTA, "trace", f"{Colors.DIM}{msg}{Colors.NC}")
    for key, value in (fields or {}).items():
        print(f"  {key}: {value}")
