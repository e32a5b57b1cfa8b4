"""
OTP Core Library
================
HOTP/TOTP one-time password generation for authentication services.
"""

__version__ = "0.1.0"

# Configuration
from otp_core.config import OTPSettings, get_settings

# Logging
from otp_core.logging import setup_logging, get_logger

# OTP
from otp_core.otp import (
    generate_hotp,
    generate_totp,
    time_step_counter,
    HashAlgorithm,
    DEFAULT_HASH_ALGORITHM,
    OTPGenerator,
    OTPConfig,
    OTPError,
    InvalidHashAlgorithm,
    FormatRangeError,
)

__all__ = [
    "__version__",
    # Configuration
    "OTPSettings",
    "get_settings",
    # Logging
    "setup_logging",
    "get_logger",
    # OTP
    "generate_hotp",
    "generate_totp",
    "time_step_counter",
    "HashAlgorithm",
    "DEFAULT_HASH_ALGORITHM",
    "OTPGenerator",
    "OTPConfig",
    "OTPError",
    "InvalidHashAlgorithm",
    "FormatRangeError",
]
