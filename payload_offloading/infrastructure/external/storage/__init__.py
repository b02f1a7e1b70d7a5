"""S3 storage: accessors, encryption strategies and factory.

S3Dao wraps boto3 directly; S3AsyncDao runs the same calls through
asyncio.to_thread. StorageFactory wires them from settings or from a
PayloadStorageConfiguration.
"""

from payload_offloading.infrastructure.external.storage.encryption import (
    AwsManagedCmk,
    CustomerKey,
    NoEncryption,
    ServerSideEncryptionFactory,
    ServerSideEncryptionStrategy,
)
from payload_offloading.infrastructure.external.storage.factory import StorageFactory
from payload_offloading.infrastructure.external.storage.s3_async_dao import S3AsyncDao
from payload_offloading.infrastructure.external.storage.s3_dao import S3Dao

__all__ = [
    "AwsManagedCmk",
    "CustomerKey",
    "NoEncryption",
    "S3AsyncDao",
    "S3Dao",
    "ServerSideEncryptionFactory",
    "ServerSideEncryptionStrategy",
    "StorageFactory",
]
