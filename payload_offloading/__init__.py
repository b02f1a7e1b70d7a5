"""Offload large message payloads to S3 and replace them with pointers.

Typical use:

    config = (
        PayloadStorageConfigurationBuilder()
        .with_payload_support_enabled("my-bucket")
        .build()
    )
    store = StorageFactory.create_payload_store(config, boto3.client("s3"))
    if config.requires_offload_text(body):
        body = store.store_original_payload(body)
"""

from payload_offloading.application.interfaces import IPayloadStore, IPayloadStoreAsync
from payload_offloading.application.services import (
    S3BackedPayloadStore,
    S3BackedPayloadStoreAsync,
)
from payload_offloading.core.constants import (
    DEFAULT_PAYLOAD_SIZE_THRESHOLD,
    LEGACY_RESERVED_ATTRIBUTE_NAME,
    MAX_ALLOWED_ATTRIBUTES,
    POINTER_CLASS_NAMES,
    RESERVED_ATTRIBUTE_NAME,
    __version__,
    get_user_agent_header,
)
from payload_offloading.core.storage_configuration import (
    PayloadStorageConfiguration,
    PayloadStorageConfigurationBuilder,
)
from payload_offloading.domain import (
    ConfigurationException,
    EncodingError,
    MalformedPointerError,
    PayloadOffloadingException,
    PayloadPointer,
    PointerParseResult,
)
from payload_offloading.infrastructure.exceptions import BackendError
from payload_offloading.infrastructure.external.storage import (
    S3AsyncDao,
    S3Dao,
    ServerSideEncryptionFactory,
    ServerSideEncryptionStrategy,
    StorageFactory,
)
from payload_offloading.shared.enums import ObjectCannedACL
from payload_offloading.shared.telemetry import setup_logging
from payload_offloading.shared.utils import get_string_size_in_bytes

__all__ = [
    "BackendError",
    "ConfigurationException",
    "DEFAULT_PAYLOAD_SIZE_THRESHOLD",
    "EncodingError",
    "IPayloadStore",
    "IPayloadStoreAsync",
    "LEGACY_RESERVED_ATTRIBUTE_NAME",
    "MAX_ALLOWED_ATTRIBUTES",
    "MalformedPointerError",
    "ObjectCannedACL",
    "PayloadOffloadingException",
    "PayloadPointer",
    "PayloadStorageConfiguration",
    "PayloadStorageConfigurationBuilder",
    "POINTER_CLASS_NAMES",
    "PointerParseResult",
    "RESERVED_ATTRIBUTE_NAME",
    "S3AsyncDao",
    "S3BackedPayloadStore",
    "S3BackedPayloadStoreAsync",
    "S3Dao",
    "ServerSideEncryptionFactory",
    "ServerSideEncryptionStrategy",
    "StorageFactory",
    "__version__",
    "get_string_size_in_bytes",
    "get_user_agent_header",
    "setup_logging",
]
