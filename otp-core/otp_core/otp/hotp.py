"""
HOTP
====
Counter-based one-time passwords (RFC 4226).
"""

from .digest import AlgorithmSelector, compute_digest, resolve_algorithm
from .encoding import encode_counter
from .formatting import format_otp
from .models import OTP_MODULUS
from .truncation import dynamic_truncate


def generate_hotp(
    algorithm: AlgorithmSelector,
    secret: bytes,
    counter: int,
) -> str:
    """
    Generate a 6-digit HOTP code.

    Args:
        algorithm: HashAlgorithm, algorithm name, or None for SHA-1
        secret: Shared secret (any length, including empty)
        counter: Moving factor, wrapped to 64 bits

    Returns:
        6-digit code

    Raises:
        InvalidHashAlgorithm: unsupported algorithm selector
    """
    resolved = resolve_algorithm(algorithm)
    digest = compute_digest(resolved, secret, encode_counter(counter))
    return format_otp(dynamic_truncate(digest) % OTP_MODULUS)
