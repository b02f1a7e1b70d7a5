"""Payload store integration tests. Require a real bucket; objects are deleted after each test."""

import pytest

from payload_offloading.domain.value_objects import PayloadPointer
from payload_offloading.infrastructure.exceptions import BackendError
from payload_offloading.infrastructure.external.storage import StorageFactory


@pytest.mark.requires_s3
def test_store_get_delete(s3_configuration, live_s3_client) -> None:
    """Store a payload, read it back through the pointer, then delete it."""
    store = StorageFactory.create_payload_store(s3_configuration, live_s3_client)
    payload = "héllo " * 1000

    pointer = store.store_original_payload(payload)
    assert PayloadPointer.from_json(pointer).s3_bucket_name == s3_configuration.s3_bucket_name
    assert store.get_original_payload(pointer) == payload

    store.delete_original_payload(pointer)
    with pytest.raises(BackendError) as exc_info:
        store.get_original_payload(pointer)
    assert exc_info.value.backend_code == "NoSuchKey"


@pytest.mark.requires_s3
def test_delete_many(s3_configuration, live_s3_client) -> None:
    """Batch delete removes every stored object."""
    store = StorageFactory.create_payload_store(s3_configuration, live_s3_client)
    pointers = [store.store_original_payload(f"payload-{i}") for i in range(3)]

    store.delete_original_payloads(pointers)

    for pointer in pointers:
        with pytest.raises(BackendError):
            store.get_original_payload(pointer)


@pytest.mark.requires_s3
@pytest.mark.asyncio
async def test_async_store_get_delete(s3_configuration, live_s3_client) -> None:
    store = StorageFactory.create_payload_store_async(s3_configuration, live_s3_client)

    pointer = await store.store_original_payload("async payload")
    assert await store.get_original_payload(pointer) == "async payload"
    await store.delete_original_payloads([pointer])
