"""Core module exports."""

from hhoutline.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    OutlineError,
    ParserError,
)
from hhoutline.core.logging import (
    configure_logging,
    get_logger,
    set_request_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "OutlineError",
    "ParserError",
    # Logging
    "configure_logging",
    "get_logger",
    "set_request_id",
]
