"""Application interfaces (ports): payload store and S3 accessor protocols.

No runtime imports from payload_offloading.infrastructure.
"""

from payload_offloading.application.interfaces.payload_store import (
    IPayloadStore,
    IPayloadStoreAsync,
)
from payload_offloading.application.interfaces.storage import IS3AsyncDao, IS3Dao

__all__ = [
    "IPayloadStore",
    "IPayloadStoreAsync",
    "IS3AsyncDao",
    "IS3Dao",
]
