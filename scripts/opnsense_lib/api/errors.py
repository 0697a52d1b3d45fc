"""
Exceptions raised by the OPNsense API layer.
"""

from typing import Optional


class ApiError(Exception):
    """Raised when an API request fails or the router rejects it."""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 validations: Optional[dict] = None):
        super().__init__(message)
        self.status_code = status_code
        self.validations = validations or {}

    def __str__(self) -> str:
        message = super().__str__()
        if self.validations:
            details = "; ".join(f"{k}: {v}" for k, v in sorted(self.validations.items()))
            return f"{message} ({details})"
        return message


class NotFoundError(ApiError):
    """Raised when the requested object does not exist on the router."""
    pass


class ConversionError(ValueError):
    """Raised when a field cannot be converted to or from its wire form."""
    pass
