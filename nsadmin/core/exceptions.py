"""
Custom Exceptions.

Exception classes for consistent error handling across the client and CLI.

Every NamespaceClient operation either returns its result or raises one of
the ClientError subclasses below:

    TransportError          - the request never produced a response
    RemoteError             - the server answered with a non-2xx status
    MalformedResponseError  - the response body has an unexpected shape
"""

from nsadmin.schemas.namespace import ServerError


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ClientError(ApplicationError):
    """Base exception for admin API client failures."""

    def __init__(self, message: str, code: str = "CLIENT_ERROR") -> None:
        super().__init__(message, code=code)


class TransportError(ClientError):
    """Raised when the HTTP request fails before a response arrives."""

    def __init__(self, message: str = "Request failed") -> None:
        super().__init__(message, code="CLIENT_TRANSPORT_ERROR")


class RemoteError(ClientError):
    """Raised when the server responds with a non-2xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(message, code="CLIENT_REMOTE_ERROR")

    def to_server_error(self) -> ServerError:
        """Return the error in its wire shape."""
        return ServerError(error=self.message)


class MalformedResponseError(ClientError):
    """Raised when a response body does not match the expected schema."""

    def __init__(self, message: str = "Unexpected response from server") -> None:
        super().__init__(message, code="CLIENT_MALFORMED_RESPONSE")
