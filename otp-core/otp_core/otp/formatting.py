"""
Decimal Formatting
==================
Render a reduced HOTP value as a fixed-width code.
"""

from .exceptions import FormatRangeError
from .models import OTP_DIGITS, OTP_MODULUS


def format_otp(value: int) -> str:
    """
    Format a value as a zero-padded 6-digit code.

    Args:
        value: Truncated value already reduced modulo 1000000

    Returns:
        6-character decimal string, leading zeros preserved

    Raises:
        FormatRangeError: value is negative or >= 1000000
    """
    if not 0 <= value < OTP_MODULUS:
        raise FormatRangeError(value)
    return str(value).zfill(OTP_DIGITS)
