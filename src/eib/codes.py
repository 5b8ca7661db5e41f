"""Validation code constants for eib.api.validate().

These constants prevent stringly-typed error codes and ensure
client code uses the correct validation codes.
"""

from enum import Enum


class ValidationCode(str, Enum):
    """Validation error and warning codes."""

    # Errors (blocking)
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    FILE_UNREADABLE = "FILE_UNREADABLE"
    INVALID_STRUCTURE = "INVALID_STRUCTURE"

    # Warnings (non-blocking)
    UNKNOWN_ARCH = "UNKNOWN_ARCH"
