"""Config module exports."""

from hhoutline.config.loader import load_config
from hhoutline.config.models import (
    HHOutlineConfig,
    LoggingConfig,
    LogOutputConfig,
    OutlineConfig,
)

__all__ = [
    "load_config",
    "HHOutlineConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "OutlineConfig",
]
