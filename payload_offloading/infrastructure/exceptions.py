"""Infrastructure exceptions for S3 operations.

BackendError extends PayloadOffloadingException so callers can handle
pointer, configuration and backend failures through one base class.
"""

from typing import Any

from payload_offloading.domain.exceptions import PayloadOffloadingException


class BackendError(PayloadOffloadingException):
    """Any failure reported by the S3 backend (network, auth, not found, partial batch).

    The original botocore exception is chained as __cause__. Its error code,
    when the backend reported one, is kept in details["backend_code"].
    """

    def __init__(
        self,
        operation_message: str,
        reason: str,
        bucket: str,
        key: str | None = None,
        keys: list[str] | None = None,
        backend_code: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        details: dict[str, Any] = {"bucket": bucket, "reason": reason}
        if key is not None:
            details["key"] = key
        if keys is not None:
            details["keys"] = keys
        if backend_code is not None:
            details["backend_code"] = backend_code
        if errors:
            details["errors"] = errors
        super().__init__(f"{operation_message} {reason}", "BACKEND_ERROR", details)

    @property
    def backend_code(self) -> str | None:
        """Error code reported by S3 (e.g. NoSuchKey), if any."""
        return self.details.get("backend_code")
