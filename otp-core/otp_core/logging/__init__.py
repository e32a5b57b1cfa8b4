"""
OTP Core Logging Module

Structured logging setup shared by services using otp-core.
"""

from .structured import (
    setup_logging,
    get_logger,
    JSONFormatter,
    TextFormatter,
    service_name_var,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "JSONFormatter",
    "TextFormatter",
    "service_name_var",
]
