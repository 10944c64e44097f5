"""
Logging Infrastructure

Console, file and JSON logging with structlog integration.
"""

from .logger_config import (
    ColoredFormatter,
    LoggingConfig,
    LoggingConfigOptions,
    StructuredFormatter,
    get_structured_logger,
    setup_logging,
)

__all__ = [
    "ColoredFormatter",
    "LoggingConfig",
    "LoggingConfigOptions",
    "StructuredFormatter",
    "get_structured_logger",
    "setup_logging",
]
