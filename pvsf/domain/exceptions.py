"""Domain exceptions for the PVSF API.

Each exception carries the HTTP status it should surface as
(``status_code``). The shared error responder reads that attribute, so
raising one of these anywhere inside a route yields the right envelope.
"""


class PvsfException(Exception):
    """Base exception for all PVSF application errors.

    Attributes:
        message: Human-readable error description (shown to clients for 4xx).
        status_code: HTTP status the error maps to.
    """

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationException(PvsfException):
    """Raised when a request parameter is missing or malformed."""

    status_code = 400

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class AuthenticationException(PvsfException):
    """Raised when no valid session accompanies the request."""

    status_code = 401

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class AuthorizationException(PvsfException):
    """Raised when the session lacks the required capability."""

    status_code = 403

    def __init__(self, message: str = "Admin access required") -> None:
        super().__init__(message)


class ResourceNotFoundException(PvsfException):
    """Raised when a requested document does not exist."""

    status_code = 404

    def __init__(self, resource_type: str, resource_id: str) -> None:
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(f"{resource_type} not found")
