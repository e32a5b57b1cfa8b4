"""
OTP Core Configuration
======================
Settings read from environment variables.
"""

import os
from dataclasses import dataclass
from functools import lru_cache


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class OTPSettings:
    """Runtime settings for the OTP generator and logging."""
    hash_algorithm: str = "sha1"
    log_level: str = "INFO"
    log_json: bool = True
    service_name: str = "otp-core"

    @classmethod
    def from_env(cls) -> "OTPSettings":
        return cls(
            hash_algorithm=os.getenv("OTP_HASH_ALGORITHM", "sha1"),
            log_level=os.getenv("OTP_LOG_LEVEL", "INFO"),
            log_json=_env_bool("OTP_LOG_JSON", "true"),
            service_name=os.getenv("SERVICE_NAME", "otp-core"),
        )


@lru_cache(maxsize=1)
def get_settings() -> OTPSettings:
    """Get cached settings instance."""
    return OTPSettings.from_env()
