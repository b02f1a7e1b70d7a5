"""Domain value objects: immutable, self-validating, no identity."""

from payload_offloading.domain.value_objects.payload_pointer import (
    PayloadPointer,
    PointerParseResult,
)

__all__ = [
    "PayloadPointer",
    "PointerParseResult",
]
