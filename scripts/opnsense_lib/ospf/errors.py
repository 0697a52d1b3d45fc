"""
Operation-level errors for the OSPF interface resource and data source.
"""


class OperationError(Exception):
    """Raised when a lifecycle operation fails; the original error is chained."""

    def __init__(self, summary: str, detail: str):
        super().__init__(f"{summary}: {detail}")
        self.summary = summary
        self.detail = detail
