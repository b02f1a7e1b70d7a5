"""Domain exceptions for payload offloading.

Defines the errors raised by the pointer codec and configuration layer.
Backend failures live in payload_offloading.infrastructure.exceptions and
share the same base class so callers can catch one type.
"""

from typing import Any


class PayloadOffloadingException(Exception):
    """Base exception for all payload offloading errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. bucket, key, reason).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class MalformedPointerError(PayloadOffloadingException):
    """Raised when text does not decode to a valid (bucket, key) pointer.

    Always raised before any backend call. Not retryable: the pointer
    itself is corrupt or was never a pointer.
    """

    def __init__(
        self,
        reason: str,
        message: str = "Failed to read the S3 object pointer from given string.",
    ) -> None:
        super().__init__(message, "MALFORMED_POINTER", {"reason": reason})


class EncodingError(PayloadOffloadingException):
    """Raised when a pointer cannot be serialized to text."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            "Failed to convert S3 object pointer to text.",
            "POINTER_ENCODING_ERROR",
            {"reason": reason},
        )


class ConfigurationException(PayloadOffloadingException):
    """Raised when storage configuration is missing or inconsistent."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "CONFIGURATION_ERROR", details)
