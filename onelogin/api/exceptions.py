"""OneLogin-specific exceptions and error status types."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ErrorStatus:
    """Error recorded by the last public operation of a client.

    Attributes:
        code: HTTP status as a string, or "500" for transport and shape faults
        description: Message extracted from the response or the exception text
    """

    code: Optional[str] = None
    description: Optional[str] = None

    def __bool__(self) -> bool:
        return self.code is not None


NO_ERROR = ErrorStatus()


class OneLoginError(Exception):
    """Base exception for all OneLogin SDK operations."""
    pass


class ConfigurationError(OneLoginError):
    """Client built without the credentials it needs."""
    pass


class ApiError(OneLoginError):
    """Classified failure of a single API request.

    Attributes:
        code: Error code recorded in ErrorStatus
        description: Human-readable message
        endpoint: URL that failed (may be empty)
    """

    def __init__(self, code: str, description: str, endpoint: str = ""):
        self.code = code
        self.description = description
        self.endpoint = endpoint
        super().__init__(f"[{code}] {endpoint}: {description}" if endpoint else f"[{code}] {description}")

    def to_status(self) -> ErrorStatus:
        return ErrorStatus(self.code, self.description)


class TransportError(ApiError):
    """Connectivity, timeout or TLS failure before any HTTP status was received."""

    def __init__(self, description: str, endpoint: str = ""):
        super().__init__("500", description, endpoint)


class HttpStatusError(ApiError):
    """Non-200 response from the API."""

    def __init__(self, status_code: int, description: str, endpoint: str = ""):
        self.status_code = status_code
        super().__init__(str(status_code), description, endpoint)


class ResponseShapeError(ApiError):
    """A 200 response whose body does not match the expected envelope.

    This signals API contract drift and is raised to the caller instead of
    being folded into a default return value.
    """

    def __init__(self, description: str, endpoint: str = ""):
        super().__init__("500", description, endpoint)
