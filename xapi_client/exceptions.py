"""
Domain specific exception hierarchy for the xapi_client package.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from xapi_client.auth import AuthenticationType


class XClientError(Exception):
    """Base exception for all library errors."""


class ConfigurationError(XClientError):
    """Raised when required configuration or credentials are missing."""


class AuthenticationError(XClientError):
    """Raised when authentication flow fails or tokens are invalid."""


class WrongAuthenticationType(AuthenticationError):
    """Raised when an endpoint needs a different credential mode than the client holds."""

    def __init__(self, needs: "AuthenticationType") -> None:
        super().__init__(f"This request requires '{needs.value}' authentication.")
        self.needs = needs


class OAuthTokenError(AuthenticationError):
    """Raised when user access tokens are unavailable mid-upload."""

    def __init__(self, message: str = "User access tokens are required to continue the upload.") -> None:
        super().__init__(message)


class TransportError(XClientError):
    """Raised when the HTTP request could not be completed."""


class ApiResponseError(XClientError):
    """Raised when the X API returns an error payload."""

    def __init__(
        self,
        message: str,
        *,
        code: int | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code


class UnknownError(ApiResponseError):
    """Raised when a media segment is rejected without further detail."""


class RateLimitExceeded(ApiResponseError):
    """Raised when the X API enforces a rate limit."""

    def __init__(self, message: str, *, reset_at: int | None = None) -> None:
        super().__init__(message, status_code=429)
        self.reset_at = reset_at


class MediaValidationError(XClientError):
    """Raised when media payloads do not satisfy upload requirements."""


class RangeOutOfBoundsError(XClientError, ValueError):
    """Raised when a numeric request parameter falls outside its allowed range."""

    def __init__(self, *, minimum: int, maximum: int, field_name: str, actual: int) -> None:
        super().__init__(
            f"'{field_name}' must be between {minimum} and {maximum} (got {actual})."
        )
        self.minimum = minimum
        self.maximum = maximum
        self.field_name = field_name
        self.actual = actual
