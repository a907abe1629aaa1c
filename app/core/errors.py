"""Error taxonomy shared by services and routes; rendered as {"message": ...} by app.main."""

SERVER_ERROR_MESSAGE = "server error - contact support"


class LibraryApiError(Exception):
    """Base error carrying the client-facing message and HTTP status."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(LibraryApiError):
    """Malformed or missing input; raised before any query runs."""

    status_code = 400


class ConflictError(LibraryApiError):
    """A unique constraint rejected an insert."""

    status_code = 400


class NotFoundError(LibraryApiError):
    """No row matched where at least one was expected."""

    status_code = 404


class AuthenticationError(LibraryApiError):
    """Missing (401) or invalid (403) bearer token."""

    status_code = 401


class InternalError(LibraryApiError):
    """Database or unexpected failure. Detail is logged, never returned."""

    def __init__(self, message: str = SERVER_ERROR_MESSAGE) -> None:
        super().__init__(message, status_code=500)
