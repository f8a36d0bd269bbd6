"""Error taxonomy for the request orchestration layer.

Every failure a request can hit is one of these. Each carries the short
message and HTTP status the API returns; the exception handler registered
in ``app.main`` turns them into ``{"error": message}`` responses.
"""

from fastapi import status


class CareerGuideError(Exception):
    """
    Base class for request-scoped failures.

    Attributes:
        message: Short human-readable description, safe to return to clients
        status_code: HTTP status the failure maps to
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class DuplicateIdentity(CareerGuideError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Username or email already exists"


class InvalidCredentials(CareerGuideError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid email or password"


class Unauthenticated(CareerGuideError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required"


class Forbidden(CareerGuideError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid or expired token"


class BadRequest(CareerGuideError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request payload"


class ProviderError(CareerGuideError):
    """Upstream generation failed; the message never carries provider details."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Failed to generate content"


class PersistenceError(CareerGuideError):
    """Activity log write failed. Observed internally, never returned to callers."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Failed to save activity log"
