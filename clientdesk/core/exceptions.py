# clientdesk/core/exceptions.py
"""
Domain errors raised by the service layer.
The message of every error is ready to be shown to the user as-is.
"""


class ServiceError(Exception):
    """Base class for every error raised by a repository service."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError, LookupError):
    """The requested id does not exist in the collection."""


class ValidationError(ServiceError, ValueError):
    """Required field missing or a field holds an invalid value."""


class DuplicateEmailError(ValidationError):
    """A client with the same email (case-insensitive) already exists."""
