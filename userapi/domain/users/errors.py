"""
Errors for the users bounded context.

The set is closed: NotFound, InvalidInput and InternalError.
Each carries the message shown to the client and is mapped
to an HTTP response at the interface layer.
No framework imports allowed.
"""

NOT_FOUND_MESSAGE = "Data not found"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class ApiError(Exception):
    """Base error for every outcome that is rendered as an error envelope."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class NotFoundError(ApiError):
    """Raised when the requested data does not exist."""

    def __init__(self) -> None:
        super().__init__(NOT_FOUND_MESSAGE)


class InvalidInputError(ApiError):
    """Raised when the request carries input the service cannot accept."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InternalError(ApiError):
    """Raised when the service cannot produce a result."""

    def __init__(self) -> None:
        super().__init__(INTERNAL_ERROR_MESSAGE)
