"""Blocking S3 accessor for offloaded payloads (boto3).

Wraps put_object / get_object / delete_object / delete_objects. Every
botocore failure is logged and re-raised as BackendError with the
original exception chained; nothing is retried here (boto3's own retry
configuration applies).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from payload_offloading.infrastructure.exceptions import BackendError
from payload_offloading.infrastructure.external.storage.encryption import (
    ServerSideEncryptionStrategy,
)
from payload_offloading.shared.enums import ObjectCannedACL
from payload_offloading.shared.telemetry.logging import get_logger
from payload_offloading.shared.utils.size import PAYLOAD_ENCODING, PAYLOAD_ENCODING_ERRORS

# S3 rejects DeleteObjects requests with more keys than this.
MAX_KEYS_PER_DELETE = 1000

GET_FAILED_MSG = "Failed to get the S3 object which contains the payload."
READ_FAILED_MSG = "Failure when handling the message which was read from S3 object."
STORE_FAILED_MSG = "Failed to store the message content in an S3 object."
DELETE_FAILED_MSG = "Failed to delete the S3 object which contains the payload."


def _backend_code(e: Exception) -> str | None:
    """Return the S3 error code of a ClientError (e.g. NoSuchKey), else None."""
    if isinstance(e, ClientError):
        return e.response.get("Error", {}).get("Code")
    return None


class S3Dao:
    """Synchronous S3 accessor.

    Holds a boto3 S3 client plus the encryption strategy and canned ACL
    applied to every put. Read-only after construction; safe to share
    between threads as far as the boto3 client is.
    """

    def __init__(
        self,
        s3_client: Any,
        server_side_encryption_strategy: ServerSideEncryptionStrategy | None = None,
        object_canned_acl: ObjectCannedACL | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize accessor.

        Args:
            s3_client: boto3 S3 client (boto3.client("s3")).
            server_side_encryption_strategy: Optional SSE decoration for puts.
            object_canned_acl: Optional canned ACL for puts.
            logger: Optional logger; defaults to this module's logger.
        """
        self._s3_client = s3_client
        self._server_side_encryption_strategy = server_side_encryption_strategy
        self._object_canned_acl = object_canned_acl
        self._logger = logger or get_logger(__name__)

    def get_text_from_s3(self, s3_bucket_name: str, s3_key: str) -> str:
        """Read the object and return its content as text.

        Raises:
            BackendError: S3 call failed (including NoSuchKey) or body was not UTF-8.
        """
        try:
            resp = self._s3_client.get_object(Bucket=s3_bucket_name, Key=s3_key)
        except (ClientError, BotoCoreError) as e:
            self._logger.error(GET_FAILED_MSG, exc_info=True)
            raise BackendError(
                GET_FAILED_MSG,
                str(e),
                bucket=s3_bucket_name,
                key=s3_key,
                backend_code=_backend_code(e),
            ) from e

        body = resp["Body"]
        try:
            return body.read().decode(PAYLOAD_ENCODING, PAYLOAD_ENCODING_ERRORS)
        except (BotoCoreError, UnicodeDecodeError, OSError) as e:
            self._logger.error(READ_FAILED_MSG, exc_info=True)
            raise BackendError(READ_FAILED_MSG, str(e), bucket=s3_bucket_name, key=s3_key) from e
        finally:
            body.close()

    def build_put_object_request(
        self, s3_bucket_name: str, s3_key: str, payload: str
    ) -> dict[str, Any]:
        """Return put_object keyword arguments with ACL and encryption applied."""
        request: dict[str, Any] = {
            "Bucket": s3_bucket_name,
            "Key": s3_key,
            "Body": payload.encode(PAYLOAD_ENCODING, PAYLOAD_ENCODING_ERRORS),
        }
        if self._object_canned_acl is not None:
            request["ACL"] = ObjectCannedACL(self._object_canned_acl).value
        # https://docs.aws.amazon.com/AmazonS3/latest/dev/kms-using-sdks.html
        if self._server_side_encryption_strategy is not None:
            self._logger.debug("Using SSE-KMS in put object request.")
            self._server_side_encryption_strategy.decorate(request)
        return request

    def store_text_in_s3(self, s3_bucket_name: str, s3_key: str, payload: str) -> None:
        """Write payload as the object's content.

        Raises:
            BackendError: S3 put failed.
        """
        request = self.build_put_object_request(s3_bucket_name, s3_key, payload)
        try:
            self._s3_client.put_object(**request)
        except (ClientError, BotoCoreError) as e:
            self._logger.error(STORE_FAILED_MSG, exc_info=True)
            raise BackendError(
                STORE_FAILED_MSG,
                str(e),
                bucket=s3_bucket_name,
                key=s3_key,
                backend_code=_backend_code(e),
            ) from e

    def delete_payload_from_s3(self, s3_bucket_name: str, s3_key: str) -> None:
        """Delete one object.

        Raises:
            BackendError: S3 delete failed.
        """
        try:
            self._s3_client.delete_object(Bucket=s3_bucket_name, Key=s3_key)
        except (ClientError, BotoCoreError) as e:
            self._logger.error(DELETE_FAILED_MSG, exc_info=True)
            raise BackendError(
                DELETE_FAILED_MSG,
                str(e),
                bucket=s3_bucket_name,
                key=s3_key,
                backend_code=_backend_code(e),
            ) from e
        self._logger.info(
            "S3 object deleted, Bucket name: %s, Object key: %s.", s3_bucket_name, s3_key
        )

    def delete_payloads_from_s3(self, s3_bucket_name: str, s3_keys: Iterable[str]) -> None:
        """Delete many objects of one bucket.

        Duplicate keys are sent once. Keys are sent in batches of
        MAX_KEYS_PER_DELETE (one request for typical batches). Per-key
        failures reported by S3 are raised as-is, not retried.

        Raises:
            BackendError: Request failed or S3 reported per-key errors.
        """
        keys = list(dict.fromkeys(s3_keys))
        for start in range(0, len(keys), MAX_KEYS_PER_DELETE):
            batch = keys[start : start + MAX_KEYS_PER_DELETE]
            try:
                resp = self._s3_client.delete_objects(
                    Bucket=s3_bucket_name,
                    Delete={"Objects": [{"Key": k} for k in batch], "Quiet": True},
                )
            except (ClientError, BotoCoreError) as e:
                self._logger.error(DELETE_FAILED_MSG, exc_info=True)
                raise BackendError(
                    DELETE_FAILED_MSG,
                    str(e),
                    bucket=s3_bucket_name,
                    keys=batch,
                    backend_code=_backend_code(e),
                ) from e

            errors = resp.get("Errors") or []
            if errors:
                failed = [
                    {"key": err.get("Key"), "code": err.get("Code"), "message": err.get("Message")}
                    for err in errors
                ]
                self._logger.error(
                    "%s Bucket name: %s, failed keys: %s",
                    DELETE_FAILED_MSG,
                    s3_bucket_name,
                    [f["key"] for f in failed],
                )
                raise BackendError(
                    DELETE_FAILED_MSG,
                    f"{len(failed)} of {len(batch)} objects could not be deleted",
                    bucket=s3_bucket_name,
                    keys=batch,
                    backend_code=failed[0]["code"],
                    errors=failed,
                )
            self._logger.info(
                "S3 object deleted, Bucket name: %s, Object keys: %s.", s3_bucket_name, batch
            )
