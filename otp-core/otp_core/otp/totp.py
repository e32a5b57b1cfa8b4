"""
TOTP
====
Time-based one-time passwords (RFC 6238) with a fixed 30-second step.
"""

import math
from datetime import datetime
from typing import Union

from .digest import AlgorithmSelector
from .hotp import generate_hotp
from .models import TIME_STEP_SECONDS

Instant = Union[datetime, int, float]


def unix_seconds(current_time: Instant) -> int:
    """
    Convert an instant to whole Unix seconds.

    Naive datetimes are interpreted as local time, as datetime.timestamp() does.

    Raises:
        TypeError: not a datetime or a number
        ValueError: NaN or infinite seconds
    """
    if isinstance(current_time, datetime):
        return math.floor(current_time.timestamp())
    # bool is an int subclass but never a meaningful instant
    if isinstance(current_time, (int, float)) and not isinstance(current_time, bool):
        if isinstance(current_time, float) and not math.isfinite(current_time):
            raise ValueError(f"current_time must be finite, got {current_time}")
        return math.floor(current_time)
    raise TypeError(
        f"current_time must be a datetime or Unix seconds, got {type(current_time).__name__}"
    )


def time_step_counter(current_time: Instant) -> int:
    """Return floor(unix_seconds / 30) for the given instant."""
    return unix_seconds(current_time) // TIME_STEP_SECONDS


def generate_totp(
    algorithm: AlgorithmSelector,
    secret: bytes,
    current_time: Instant,
) -> str:
    """
    Generate a 6-digit TOTP code for the given instant.

    Args:
        algorithm: HashAlgorithm, algorithm name, or None for SHA-1
        secret: Shared secret
        current_time: datetime or Unix seconds

    Returns:
        6-digit code
    """
    return generate_hotp(algorithm, secret, time_step_counter(current_time))
