"""Core constants: message attribute names, limits and pointer wire tags.

Single source of truth for literals shared with the messaging clients
that consume this library (DRY).
"""

__version__ = "2.2.0"

# Message attribute marking an offloaded payload; value is the original size in bytes.
RESERVED_ATTRIBUTE_NAME = "ExtendedPayloadSize"
# Attribute name written by older clients; still recognised by readers.
LEGACY_RESERVED_ATTRIBUTE_NAME = "SQSLargePayloadSize"

# One less than the SQS/SNS limit of 10 (one slot is taken by the reserved attribute).
MAX_ALLOWED_ATTRIBUTES = 10 - 1

DEFAULT_PAYLOAD_SIZE_THRESHOLD = 262144  # 256KB

# Type tag embedded in serialized pointers (kept for cross-client compatibility).
POINTER_CLASS_NAME = "software.amazon.payloadoffloading.PayloadS3Pointer"
# Type tags accepted on decode: current plus those written by older clients.
POINTER_CLASS_NAMES = frozenset(
    {
        POINTER_CLASS_NAME,
        "com.amazonaws.largepayloadoffloading.PayloadS3Pointer",
        "com.amazon.sqs.javamessaging.MessageS3Pointer",
    }
)
POINTER_BUCKET_FIELD = "s3BucketName"
POINTER_KEY_FIELD = "s3Key"


def get_user_agent_header(client_name: str) -> str:
    """Return user agent string '<client_name>/<library version>'."""
    return f"{client_name}/{__version__}"
