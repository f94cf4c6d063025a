class ClaimClientError(Exception):
    """Base class for failures reported by the claims gateway."""

    def __init__(self, operation: str, message: str):
        super().__init__(message)
        self.operation = operation


class ClaimApiError(ClaimClientError):
    """The remote API answered with a non-2xx status."""

    def __init__(self, operation: str, status_code: int, body: str, reason: str = ""):
        super().__init__(
            operation,
            f"Error {operation}: {reason or 'HTTP error'} ({status_code}). Response: {body}",
        )
        self.status_code = status_code
        self.body = body


class ClaimIntegrityError(ClaimClientError):
    """The remote API answered 2xx but the body was missing or not a claim."""
