"""Errors raised by the record store and the store facade."""


class StoreError(Exception):
    """Raised when a record store operation fails (driver error, missing row, constraint violation)."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        self.message = f"Store operation '{operation}' failed: {reason}"
        super().__init__(self.message)
