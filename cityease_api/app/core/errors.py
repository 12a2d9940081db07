"""
Application error types.

Services raise these exceptions; the handlers registered in
``main.create_app`` turn them into JSON responses of the form
``{"error": message}`` with the matching HTTP status.  Anything else
that escapes a handler is reported as a generic 500.
"""

from fastapi import status


class ApiError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ApiError):
    """A required field is missing."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Missing required fields"


class AuthError(ApiError):
    """Bad credentials or a missing, invalid or expired token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class ConflictError(ApiError):
    """A uniqueness constraint was violated (e.g. duplicate e‑mail)."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Already exists"


class InternalError(ApiError):
    """Unexpected store or runtime failure.  The message is generic."""
