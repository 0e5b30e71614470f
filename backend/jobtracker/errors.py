"""
Error taxonomy shared by the services and the HTTP layer.

Services raise these; main.py registers a handler that turns them into
{"detail": message} responses with the matching status code.
"""
from typing import Dict, Optional


class TrackerError(Exception):
    """Base class for errors reported to the caller."""
    status_code = 500

    def __init__(self, message: str, headers: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.headers = headers


class UnauthenticatedError(TrackerError):
    """Missing, malformed, expired or forged credential."""
    status_code = 401

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class ConflictError(TrackerError):
    """Duplicate unique key."""
    status_code = 409


class NotFoundError(TrackerError):
    """Entity is absent or belongs to another user (indistinguishable)."""
    status_code = 404


class ValidationFailure(TrackerError):
    """Input passed schema validation but cannot be applied."""
    status_code = 400


class InternalError(TrackerError):
    """Unexpected store or infrastructure failure."""
    status_code = 500

    def __init__(self, message: str = "Server error"):
        super().__init__(message)
