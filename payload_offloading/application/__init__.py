"""Application layer: payload store and S3 accessor interfaces, store services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the accessor interfaces.
"""

from payload_offloading.application.interfaces import (
    IPayloadStore,
    IPayloadStoreAsync,
    IS3AsyncDao,
    IS3Dao,
)

__all__ = [
    "IPayloadStore",
    "IPayloadStoreAsync",
    "IS3AsyncDao",
    "IS3Dao",
]
