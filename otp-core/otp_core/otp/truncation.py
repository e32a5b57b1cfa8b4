"""
Dynamic Truncation
==================
RFC 4226 section 5.3: select a 4-byte window from the digest using the
digest's own trailing nibble, then clear the sign bit.
"""

from .encoding import decode_uint32
from .models import MIN_DIGEST_BYTES, TRUNCATED_BYTES


def dynamic_offset(digest: bytes) -> int:
    """Return the low 4 bits of the final digest byte (0..15)."""
    return digest[-1] & 0x0F


def dynamic_truncate(digest: bytes) -> int:
    """
    Extract a 31-bit unsigned integer from an HMAC digest.

    The 4-byte window is copied before the sign bit is masked, so the
    caller's buffer is left untouched even if it is a mutable bytearray.

    Args:
        digest: HMAC output, at least 20 bytes

    Returns:
        Integer in [0, 2**31 - 1]
    """
    if len(digest) < MIN_DIGEST_BYTES:
        raise ValueError(
            f"Digest must be at least {MIN_DIGEST_BYTES} bytes, got {len(digest)}"
        )

    offset = dynamic_offset(digest)
    window = bytearray(digest[offset:offset + TRUNCATED_BYTES])
    window[0] &= 0x7F
    return decode_uint32(bytes(window))
