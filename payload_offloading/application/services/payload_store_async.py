"""S3-backed payload store (asyncio).

Same semantics as S3BackedPayloadStore. All methods are coroutines, so a
malformed pointer raises MalformedPointerError on await, through the same
path as a BackendError from S3.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from payload_offloading.application.interfaces.storage import IS3AsyncDao
from payload_offloading.application.services.payload_store import group_keys_by_bucket
from payload_offloading.domain.value_objects.payload_pointer import PayloadPointer
from payload_offloading.shared.telemetry.logging import get_logger
from payload_offloading.shared.utils.generators import generate_s3_key


class S3BackedPayloadStoreAsync:
    """IPayloadStoreAsync over a single configured bucket."""

    def __init__(
        self,
        s3_dao: IS3AsyncDao,
        s3_bucket_name: str,
        logger: logging.Logger | None = None,
    ) -> None:
        self._s3_dao = s3_dao
        self._s3_bucket_name = s3_bucket_name
        self._logger = logger or get_logger(__name__)

    @property
    def s3_bucket_name(self) -> str:
        return self._s3_bucket_name

    async def store_original_payload(self, payload: str, s3_key: str | None = None) -> str:
        if s3_key is None:
            s3_key = generate_s3_key()
        pointer = PayloadPointer(self._s3_bucket_name, s3_key)
        await self._s3_dao.store_text_in_s3(self._s3_bucket_name, s3_key, payload)
        self._logger.info(
            "S3 object created, Bucket name: %s, Object key: %s.", self._s3_bucket_name, s3_key
        )
        return pointer.to_json()

    async def get_original_payload(self, payload_pointer: str) -> str:
        pointer = PayloadPointer.from_json(payload_pointer)
        original_payload = await self._s3_dao.get_text_from_s3(
            pointer.s3_bucket_name, pointer.s3_key
        )
        self._logger.info(
            "S3 object read, Bucket name: %s, Object key: %s.",
            pointer.s3_bucket_name,
            pointer.s3_key,
        )
        return original_payload

    async def delete_original_payload(self, payload_pointer: str) -> None:
        pointer = PayloadPointer.from_json(payload_pointer)
        await self._s3_dao.delete_payload_from_s3(pointer.s3_bucket_name, pointer.s3_key)

    async def delete_original_payloads(self, payload_pointers: Iterable[str]) -> None:
        """Decode all pointers, then run one batch delete per bucket concurrently.

        Cancelling the awaiting task cancels the per-bucket deletes that
        have not finished; requests already sent to S3 are not aborted.
        The first BackendError is raised once it occurs.
        """
        pointers = [PayloadPointer.from_json(p) for p in payload_pointers]
        if not pointers:
            return
        await asyncio.gather(
            *(
                self._s3_dao.delete_payloads_from_s3(s3_bucket_name, s3_keys)
                for s3_bucket_name, s3_keys in group_keys_by_bucket(pointers).items()
            )
        )
