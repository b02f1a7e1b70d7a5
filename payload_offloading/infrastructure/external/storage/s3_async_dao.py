"""Async S3 accessor: boto3 (sync) via asyncio.to_thread.

Each coroutine runs exactly one blocking S3Dao call in a worker thread.
Calls are not queued or serialized; concurrent awaits run concurrently,
bounded only by the default executor and the boto3 connection pool.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import Any

from payload_offloading.infrastructure.external.storage.encryption import (
    ServerSideEncryptionStrategy,
)
from payload_offloading.infrastructure.external.storage.s3_dao import S3Dao
from payload_offloading.shared.enums import ObjectCannedACL
from payload_offloading.shared.telemetry.logging import get_logger


class S3AsyncDao:
    """Coroutine façade over S3Dao. Errors (BackendError) surface on await."""

    def __init__(
        self,
        s3_client: Any,
        server_side_encryption_strategy: ServerSideEncryptionStrategy | None = None,
        object_canned_acl: ObjectCannedACL | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize accessor.

        Args:
            s3_client: boto3 S3 client; shared with worker threads.
            server_side_encryption_strategy: Optional SSE decoration for puts.
            object_canned_acl: Optional canned ACL for puts.
            logger: Optional logger; defaults to this module's logger.
        """
        self._dao = S3Dao(
            s3_client,
            server_side_encryption_strategy=server_side_encryption_strategy,
            object_canned_acl=object_canned_acl,
            logger=logger or get_logger(__name__),
        )

    async def get_text_from_s3(self, s3_bucket_name: str, s3_key: str) -> str:
        """Read the object in a thread and return its text."""
        return await asyncio.to_thread(self._dao.get_text_from_s3, s3_bucket_name, s3_key)

    async def store_text_in_s3(self, s3_bucket_name: str, s3_key: str, payload: str) -> None:
        """Write payload in a thread."""
        await asyncio.to_thread(self._dao.store_text_in_s3, s3_bucket_name, s3_key, payload)

    async def delete_payload_from_s3(self, s3_bucket_name: str, s3_key: str) -> None:
        """Delete one object in a thread."""
        await asyncio.to_thread(self._dao.delete_payload_from_s3, s3_bucket_name, s3_key)

    async def delete_payloads_from_s3(
        self, s3_bucket_name: str, s3_keys: Iterable[str]
    ) -> None:
        """Batch-delete objects of one bucket in a thread."""
        keys = list(s3_keys)
        await asyncio.to_thread(self._dao.delete_payloads_from_s3, s3_bucket_name, keys)
