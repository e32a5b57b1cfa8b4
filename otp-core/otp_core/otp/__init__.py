"""
OTP Generation
==============
HOTP (RFC 4226) and TOTP (RFC 6238) six-digit code generation.
"""

from .models import (
    HashAlgorithm,
    DEFAULT_HASH_ALGORITHM,
    OTP_DIGITS,
    OTP_MODULUS,
    TIME_STEP_SECONDS,
)
from .exceptions import OTPError, InvalidHashAlgorithm, FormatRangeError
from .encoding import encode_counter, decode_counter, decode_uint32
from .digest import resolve_algorithm, compute_digest
from .truncation import dynamic_offset, dynamic_truncate
from .formatting import format_otp
from .hotp import generate_hotp
from .totp import generate_totp, time_step_counter, unix_seconds
from .generator import OTPGenerator, OTPConfig

__all__ = [
    # Models
    "HashAlgorithm",
    "DEFAULT_HASH_ALGORITHM",
    "OTP_DIGITS",
    "OTP_MODULUS",
    "TIME_STEP_SECONDS",
    # Exceptions
    "OTPError",
    "InvalidHashAlgorithm",
    "FormatRangeError",
    # Building blocks
    "encode_counter",
    "decode_counter",
    "decode_uint32",
    "resolve_algorithm",
    "compute_digest",
    "dynamic_offset",
    "dynamic_truncate",
    "format_otp",
    # HOTP / TOTP
    "generate_hotp",
    "generate_totp",
    "time_step_counter",
    "unix_seconds",
    # Generator
    "OTPGenerator",
    "OTPConfig",
]
