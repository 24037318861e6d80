# File: onboard/core/errors.py

"""
API error classes.

Every error raised by a handler or service ends up in the same
{"success": false, "error": {"message": ...}} envelope; the subclass
only decides the HTTP status.
"""


class APIError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(APIError):
    """Malformed or missing request fields (400)."""

    status_code = 400


class UnauthorizedError(APIError):
    """Missing/invalid token or bad credentials (401)."""

    status_code = 401

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message)


class NotFoundError(APIError):
    """Referenced entity does not exist (404)."""

    status_code = 404

    def __init__(self, resource: str) -> None:
        super().__init__(f"{resource} not found")


class ConflictError(APIError):
    """Duplicate resource, e.g. an email that is already registered (409)."""

    status_code = 409


class InternalError(APIError):
    """Unexpected failure; the message is safe to show to clients (500)."""

    status_code = 500
