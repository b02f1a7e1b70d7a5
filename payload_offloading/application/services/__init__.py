"""Application services: S3-backed payload stores (blocking and asyncio)."""

from payload_offloading.application.services.payload_store import (
    S3BackedPayloadStore,
    group_keys_by_bucket,
)
from payload_offloading.application.services.payload_store_async import (
    S3BackedPayloadStoreAsync,
)

__all__ = [
    "S3BackedPayloadStore",
    "S3BackedPayloadStoreAsync",
    "group_keys_by_bucket",
]
