"""
OTP Exceptions
==============
Exception classes for OTP generation.
"""

from typing import Any


class OTPError(Exception):
    """Base exception for all OTP generation errors."""
    pass


class InvalidHashAlgorithm(OTPError, ValueError):
    """Raised when the hash algorithm selector is unsupported or malformed."""

    def __init__(self, algorithm: Any):
        self.algorithm = algorithm
        super().__init__(f"Unsupported hash algorithm: {algorithm!r}")


class FormatRangeError(OTPError, ValueError):
    """Raised when a value outside [0, 999999] reaches the decimal formatter."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(
            f"OTP value {value} out of range; reduce modulo 1000000 before formatting"
        )
