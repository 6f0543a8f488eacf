"""Error hierarchy for the Nad Balance Service.

Every failure surfaced to a client is a ``TokenProxyError`` carrying its
HTTP status. ``to_response()`` produces the ``{"error", "details"}``
envelope; ``details`` is omitted when there is nothing to add.
"""

import traceback

from app.models.responses import ErrorResponse

UNAUTHORIZED_MESSAGE = "Unauthorized. Invalid or missing API key."


class TokenProxyError(Exception):
    """Base exception for all errors returned to the caller."""

    http_status = 400

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_response(self) -> dict:
        """Convert to the JSON error envelope."""
        return ErrorResponse(error=self.message, details=self.details).model_dump(
            exclude_none=True
        )


class UnauthorizedError(TokenProxyError):
    """Missing or incorrect X-API-Key header."""

    http_status = 401

    def __init__(self):
        super().__init__(UNAUTHORIZED_MESSAGE)


class MissingAddressError(TokenProxyError):
    def __init__(self):
        super().__init__("Address parameter is required")


class ConfigurationError(TokenProxyError):
    """A required setting is absent at request time."""


class InvalidEndpointError(TokenProxyError):
    def __init__(self):
        super().__init__("Invalid endpoint")


class UpstreamAPIError(TokenProxyError):
    """Non-2xx response from the thirdweb Insight API."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Thirdweb API error: {status_code} - {body}")
        self.status_code = status_code
        self.body = body


class UnexpectedError(TokenProxyError):
    """Wraps any other exception raised while handling a request."""

    @classmethod
    def from_exception(cls, exc: Exception, include_traceback: bool = True) -> "UnexpectedError":
        message = str(exc) or "Unknown error"
        details = None
        if include_traceback:
            details = "".join(
                traceback.format_exception(type(exc), exc, exc.__traceback__)
            )
        return cls(message, details=details)
