"""
Custom Exception Classes for Translink

This module defines the exceptions raised by the translation relationship
core so callers (admin screens, AJAX handlers, job runners) get consistent
error payloads.
"""

from typing import Any

from fastapi import status


class TranslinkException(Exception):
    """Base exception class for all translation-core exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Validation & Business Logic Exceptions
# ============================================================================


class ValidationError(TranslinkException):
    """Raised when input validation fails"""

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(message=message, status_code=status.HTTP_400_BAD_REQUEST, details=error_details)


class LanguageValidationError(ValidationError):
    """Raised when one or more language codes are not in the catalog"""

    def __init__(self, invalid_codes: list[str], field: str | None = None):
        joined = ", ".join(repr(code) for code in invalid_codes)
        super().__init__(
            message=f"Unsupported language code(s): {joined}",
            field=field,
            details={"invalid_codes": list(invalid_codes)},
        )
        self.invalid_codes = list(invalid_codes)


class InvalidStatusTransitionError(TranslinkException):
    """Raised when an invalid status transition is attempted"""

    def __init__(self, current_status: str, target_status: str, resource_type: str = "Translation"):
        super().__init__(
            message=f"Cannot transition {resource_type} from '{current_status}' to '{target_status}'",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"resource_type": resource_type, "current_status": current_status, "target_status": target_status},
        )


class InvalidOperationError(TranslinkException):
    """Raised when an operation is invalid in the current context"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message=message, status_code=status.HTTP_400_BAD_REQUEST, details=details or {})


# ============================================================================
# Storage Exceptions
# ============================================================================


class StorageError(TranslinkException):
    """Raised when the host attribute or option store fails.

    Recoverable: the core never retries, the caller decides.
    """

    def __init__(self, message: str = "A storage error occurred", operation: str | None = None):
        details = {"operation": operation} if operation else {}
        super().__init__(message=message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, details=details)
