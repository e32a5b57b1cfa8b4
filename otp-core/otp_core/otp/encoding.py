"""
Counter Encoding
================
Fixed-width big-endian packing for HOTP counters and truncated digests.
"""

import struct

from .models import COUNTER_BYTES, TRUNCATED_BYTES

_UINT64_MASK = (1 << 64) - 1


def encode_counter(counter: int) -> bytes:
    """
    Encode a counter as an 8-byte big-endian unsigned integer.

    Counters outside the uint64 range wrap modulo 2**64.

    Args:
        counter: Moving factor (event count or time step)

    Returns:
        8 bytes, most significant byte first
    """
    return struct.pack(">Q", counter & _UINT64_MASK)


def decode_counter(buf: bytes) -> int:
    """Decode an 8-byte big-endian unsigned integer."""
    if len(buf) != COUNTER_BYTES:
        raise ValueError(f"Expected {COUNTER_BYTES} bytes, got {len(buf)}")
    return struct.unpack(">Q", buf)[0]


def decode_uint32(buf: bytes) -> int:
    """Decode a 4-byte big-endian unsigned integer."""
    if len(buf) != TRUNCATED_BYTES:
        raise ValueError(f"Expected {TRUNCATED_BYTES} bytes, got {len(buf)}")
    return struct.unpack(">I", buf)[0]
