"""Payload size measurement without materializing the encoded payload."""

import codecs

CHUNK_SIZE = 64 * 1024  # characters per encode step

# Payloads are stored with the same codec they are measured with, so a lone
# surrogate is both counted and written as 3 bytes.
PAYLOAD_ENCODING = "utf-8"
PAYLOAD_ENCODING_ERRORS = "surrogatepass"


class CountingSink:
    """Write-only sink that keeps a running byte count and discards the data."""

    def __init__(self) -> None:
        self.total_size = 0

    def write(self, data: bytes) -> int:
        self.total_size += len(data)
        return len(data)


def get_string_size_in_bytes(text: str) -> int:
    """Return the UTF-8 encoded length of text.

    Encodes CHUNK_SIZE characters at a time through an incremental encoder,
    so at most one chunk's worth of bytes is alive at once. Lone surrogates
    are counted as 3 bytes (surrogatepass) instead of raising.

    Args:
        text: Payload to measure.

    Returns:
        Number of bytes text occupies when encoded as UTF-8.
    """
    encoder = codecs.getincrementalencoder(PAYLOAD_ENCODING)(errors=PAYLOAD_ENCODING_ERRORS)
    sink = CountingSink()
    for start in range(0, len(text), CHUNK_SIZE):
        sink.write(encoder.encode(text[start : start + CHUNK_SIZE]))
    sink.write(encoder.encode("", final=True))
    return sink.total_size
