"""
Keyed Digest
============
HMAC computation over the encoded counter.
"""

import hmac
from typing import Optional, Union

from .exceptions import InvalidHashAlgorithm
from .models import DEFAULT_HASH_ALGORITHM, HashAlgorithm

AlgorithmSelector = Optional[Union[HashAlgorithm, str]]


def resolve_algorithm(algorithm: AlgorithmSelector = None) -> HashAlgorithm:
    """
    Resolve an algorithm selector to a HashAlgorithm.

    None means "unspecified" and resolves to DEFAULT_HASH_ALGORITHM (SHA-1).
    Strings are matched case-insensitively, with or without a dash
    ("sha1", "SHA-256").

    Raises:
        InvalidHashAlgorithm: selector is not a supported algorithm
    """
    if algorithm is None:
        return DEFAULT_HASH_ALGORITHM
    if isinstance(algorithm, HashAlgorithm):
        return algorithm
    if isinstance(algorithm, str):
        normalized = algorithm.strip().lower().replace("-", "").replace("_", "")
        try:
            return HashAlgorithm(normalized)
        except ValueError:
            raise InvalidHashAlgorithm(algorithm) from None
    raise InvalidHashAlgorithm(algorithm)


def compute_digest(
    algorithm: AlgorithmSelector,
    secret: bytes,
    message: bytes,
) -> bytes:
    """
    Compute HMAC(secret, message) with the selected hash.

    Key normalisation (hashing long keys, zero-padding short ones) is
    handled by the HMAC construction, so secrets of any length work.

    Args:
        algorithm: Hash algorithm selector (None for SHA-1)
        secret: Shared secret used as the HMAC key
        message: Encoded counter

    Returns:
        Digest of algorithm.digest_size bytes

    Raises:
        TypeError: secret is not a bytes-like object
    """
    resolved = resolve_algorithm(algorithm)
    if not isinstance(secret, (bytes, bytearray, memoryview)):
        raise TypeError(f"secret must be bytes-like, got {type(secret).__name__}")
    return hmac.new(bytes(secret), message, resolved.hashlib_name).digest()
