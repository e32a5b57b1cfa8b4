"""
Structured Logging
==================
JSON logging for services embedding otp-core.

Library modules log through `structlog.get_logger(__name__)`. Calling
`setup_logging()` once at startup routes those events through the stdlib
root logger, rendered as JSON (or plain text for local development).

Usage:
    from otp_core.logging import setup_logging, get_logger

    setup_logging(service_name="auth-service")
    logger = get_logger(__name__)
    logger.info("MFA challenge issued", user_id="user_123")

Secrets and generated codes must never be passed to the logger.
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import structlog

from ..config import get_settings

service_name_var: ContextVar[str] = ContextVar("service_name", default="unknown")


# =============================================================================
# Formatters
# =============================================================================

class JSONFormatter(logging.Formatter):
    """One JSON object per record: base fields plus structlog key/values."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": service_name_var.get(),
            "message": record.getMessage(),
        }
        log_data.update(getattr(record, "extra_data", {}))
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable formatter with key=value pairs appended."""

    def __init__(self):
        super().__init__("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extra = getattr(record, "extra_data", None)
        if extra:
            line += " | " + " ".join(f"{k}={v}" for k, v in extra.items())
        return line


# =============================================================================
# structlog -> stdlib bridge
# =============================================================================

def _to_stdlib_kwargs(logger, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Pass structlog key/values to stdlib as `extra_data`."""
    event = event_dict.pop("event", "")
    exc_info = event_dict.pop("exc_info", None)
    return {
        "msg": event,
        "exc_info": exc_info,
        "extra": {"extra_data": event_dict},
    }


# =============================================================================
# Setup Functions
# =============================================================================

def setup_logging(
    service_name: Optional[str] = None,
    level: Optional[str] = None,
    json_output: Optional[bool] = None,
) -> logging.Logger:
    """
    Configure logging for a service.

    Args:
        service_name: Name of the service (default: SERVICE_NAME)
        level: Logging level (default: OTP_LOG_LEVEL)
        json_output: Whether to output JSON (default: OTP_LOG_JSON)

    Returns:
        Configured root logger
    """
    settings = get_settings()
    service_name = service_name or settings.service_name
    level = (level or settings.log_level).upper()
    if json_output is None:
        json_output = settings.log_json

    service_name_var.set(service_name)
    log_level = getattr(logging, level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(JSONFormatter() if json_output else TextFormatter())
    root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            _to_stdlib_kwargs,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root_logger.info(f"Logging configured for {service_name}", extra={
        "extra_data": {"event": "logging.configured", "service": service_name}
    })

    return root_logger


def get_logger(name: str):
    """Get a structlog logger for a module."""
    return structlog.get_logger(name)
