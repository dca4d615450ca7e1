"""
Exception hierarchy for the raid advisor.

Every failure of a single advice request is classified as one of three
kinds so the caller can log the detail and show one generic notification.
"""

from __future__ import annotations

from typing import Any


class AdvisorError(Exception):
    """Base exception for all advisor errors.

    Attributes:
        message: Human-readable error message
        details: Optional dictionary of additional error context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(AdvisorError):
    """A required query field is missing.

    Raised before any network call is attempted. The user is expected to
    complete the form and submit again.

    Attributes:
        missing_fields: Names of the query fields that were empty
    """

    def __init__(self, message: str, missing_fields: list[str] | None = None):
        super().__init__(message, details={"missing_fields": missing_fields or []})
        self.missing_fields = missing_fields or []


class NetworkError(AdvisorError):
    """Calling the generative-text service failed at the transport or API level."""


class FormatError(AdvisorError):
    """The service reply held no extractable array, or the array did not parse.

    Attributes:
        raw_text: The reply text that could not be parsed
    """

    def __init__(self, message: str, raw_text: str = ""):
        super().__init__(message, details={"raw_length": len(raw_text)})
        self.raw_text = raw_text


__all__ = [
    "AdvisorError",
    "ValidationError",
    "NetworkError",
    "FormatError",
]
