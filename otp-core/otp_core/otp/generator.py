"""
OTP Generator
=============
High-level HOTP/TOTP generation with a configured hash algorithm.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Union

import structlog

from ..config import get_settings
from .digest import resolve_algorithm
from .hotp import generate_hotp
from .models import HashAlgorithm, TIME_STEP_SECONDS
from .totp import Instant, time_step_counter, unix_seconds

logger = structlog.get_logger(__name__)


@dataclass
class OTPConfig:
    """Configuration for OTP generation."""
    algorithm: Optional[Union[HashAlgorithm, str]] = None  # None -> settings


class OTPGenerator:
    """
    HOTP/TOTP generation bound to one hash algorithm.

    Holds no per-call state; one instance can be shared between threads.
    """

    def __init__(self, config: Optional[OTPConfig] = None):
        self.config = config or OTPConfig()
        selector = self.config.algorithm
        if selector is None:
            selector = get_settings().hash_algorithm
        self.algorithm = resolve_algorithm(selector)

    def hotp(self, secret: bytes, counter: int) -> str:
        """
        Generate an HOTP code.

        Args:
            secret: Shared secret
            counter: Moving factor

        Returns:
            6-digit code
        """
        otp = generate_hotp(self.algorithm, secret, counter)
        logger.debug(
            "HOTP generated",
            algorithm=self.algorithm.value,
            counter=counter,
        )
        return otp

    def totp(self, secret: bytes, now: Optional[Instant] = None) -> str:
        """
        Generate a TOTP code for `now` (defaults to the current time).

        Args:
            secret: Shared secret
            now: datetime or Unix seconds

        Returns:
            6-digit code
        """
        counter = self.counter_for(now)
        otp = generate_hotp(self.algorithm, secret, counter)
        logger.debug(
            "TOTP generated",
            algorithm=self.algorithm.value,
            counter=counter,
        )
        return otp

    def counter_for(self, now: Optional[Instant] = None) -> int:
        """Time step counter for `now`."""
        return time_step_counter(_now_or(now))

    def seconds_remaining(self, now: Optional[Instant] = None) -> int:
        """Seconds until the current time step ends."""
        return TIME_STEP_SECONDS - unix_seconds(_now_or(now)) % TIME_STEP_SECONDS


def _now_or(now: Optional[Instant]) -> Instant:
    if now is None:
        return datetime.now(timezone.utc)
    return now
