"""Custom exceptions for the intake context."""

from typing import Any, Optional


class ProfileFetchError(Exception):
    """
    Exception raised when the profile source cannot deliver a result.

    Attributes:
        message: Human-readable description of the transport or query failure
        status_code: HTTP status returned by the backend, if any
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code

        if status_code is not None:
            super().__init__(f"{message} (HTTP {status_code})")
        else:
            super().__init__(message)


class ProfileValidationError(ValueError):
    """
    Exception raised when a fetched record cannot be turned into a Profile.

    Only structural problems raise this (record is not a mapping, or the full name
    is missing). Absent optional fields never do.
    """

    def __init__(self, message: str, record: Any = None):
        self.message = message
        self.record = record
        super().__init__(message)
