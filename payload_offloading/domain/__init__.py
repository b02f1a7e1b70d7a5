"""Domain layer: pointer value object and exceptions.

No dependencies on infrastructure. Used by application and
infrastructure layers.
"""

from payload_offloading.domain.exceptions import (
    ConfigurationException,
    EncodingError,
    MalformedPointerError,
    PayloadOffloadingException,
)
from payload_offloading.domain.value_objects import PayloadPointer, PointerParseResult

__all__ = [
    "ConfigurationException",
    "EncodingError",
    "MalformedPointerError",
    "PayloadOffloadingException",
    "PayloadPointer",
    "PointerParseResult",
]
