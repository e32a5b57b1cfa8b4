"""
OTP Models
==========
Hash algorithm selection and fixed parameters for HOTP/TOTP generation.
"""

from enum import Enum


class HashAlgorithm(str, Enum):
    """Hash functions supported for the HMAC step."""
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"

    @property
    def hashlib_name(self) -> str:
        return self.value

    @property
    def digest_size(self) -> int:
        return _DIGEST_SIZES[self]


_DIGEST_SIZES = {
    HashAlgorithm.SHA1: 20,
    HashAlgorithm.SHA256: 32,
    HashAlgorithm.SHA512: 64,
}

# Used whenever a caller leaves the algorithm unspecified (RFC 4226)
DEFAULT_HASH_ALGORITHM = HashAlgorithm.SHA1

OTP_DIGITS = 6
OTP_MODULUS = 10 ** OTP_DIGITS
TIME_STEP_SECONDS = 30  # RFC 6238 default, fixed

COUNTER_BYTES = 8
TRUNCATED_BYTES = 4
MIN_DIGEST_BYTES = 20
