"""
Logging Configuration

Sets up console, rotating file and JSON handlers on the root logger and
wires structlog into the standard library logging pipeline.
"""

import copy
import logging
import logging.handlers
import os
import sys
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Optional

import structlog
from pythonjsonlogger.json import JsonFormatter

from customer_registry.infrastructure.configuration.config import Settings, get_config

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Colored log formatter for console output"""

    colors = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'        # Reset
    }

    def format(self, record: logging.LogRecord) -> str:
        # Other handlers share the record, so color a copy
        record = copy.copy(record)
        log_color = self.colors.get(record.levelname, self.colors['RESET'])
        record.levelname = f"{log_color}{record.levelname}{self.colors['RESET']}"
        record.name = f"\033[94m{record.name}\033[0m"  # Blue
        return super().format(record)


class StructuredFormatter(JsonFormatter):
    """JSON formatter with process and domain context fields"""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(UTC).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["module"] = record.module
        log_record["function"] = record.funcName
        log_record["line"] = record.lineno
        log_record["process_id"] = os.getpid()

        if hasattr(record, "error_code"):
            log_record["error_code"] = record.error_code
        if hasattr(record, "operation"):
            log_record["operation"] = record.operation


@dataclass
class LoggingConfigOptions:
    """Dataclass for logging configuration options"""
    log_level: str = "INFO"
    log_dir: str = "logs"
    enable_console: bool = True
    enable_file: bool = False
    enable_json: bool = False
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5

    @classmethod
    def from_settings(cls, settings: Settings) -> "LoggingConfigOptions":
        """Build options from application settings"""
        return cls(
            log_level=settings.log_level,
            log_dir=settings.log_dir,
            enable_file=settings.log_to_file,
            enable_json=settings.log_json,
        )


class LoggingConfig:
    """Root logger and structlog configuration"""

    def __init__(self, options: LoggingConfigOptions):
        self.options = options

        if self.options.enable_file or self.options.enable_json:
            Path(self.options.log_dir).mkdir(parents=True, exist_ok=True)

        self._configure_structlog()

    def __repr__(self):
        return f"LoggingConfig(options={self.options})"

    def _configure_structlog(self):
        """Configure structlog for structured logging"""
        renderer = (
            structlog.processors.JSONRenderer()
            if self.options.enable_json
            else structlog.dev.ConsoleRenderer(colors=False)
        )
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.UnicodeDecoder(),
                renderer,
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

    def _rotating_handler(self, filename: str) -> logging.handlers.RotatingFileHandler:
        return logging.handlers.RotatingFileHandler(
            Path(self.options.log_dir) / filename,
            maxBytes=self.options.max_file_size,
            backupCount=self.options.backup_count,
            encoding="utf-8",
        )

    def setup_logging(self):
        """Setup logging handlers on the root logger"""
        level = getattr(logging, self.options.log_level.upper())

        root_logger = logging.getLogger()
        root_logger.setLevel(level)

        # Clear existing handlers
        root_logger.handlers.clear()

        if self.options.enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(
                ColoredFormatter(fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT)
            )
            root_logger.addHandler(console_handler)

        if self.options.enable_file:
            # Main application log
            app_handler = self._rotating_handler("customer_registry.log")
            app_handler.setLevel(level)
            app_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
            root_logger.addHandler(app_handler)

            # Error log
            error_handler = self._rotating_handler("errors.log")
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
            root_logger.addHandler(error_handler)

        if self.options.enable_json:
            json_handler = self._rotating_handler("customer_registry.json.log")
            json_handler.setLevel(level)
            json_handler.setFormatter(StructuredFormatter())
            root_logger.addHandler(json_handler)

        logger = get_structured_logger(__name__)
        logger.info(
            "Logging configured",
            log_level=self.options.log_level,
            console=self.options.enable_console,
            file=self.options.enable_file,
            json=self.options.enable_json,
        )


def setup_logging(options: Optional[LoggingConfigOptions] = None) -> LoggingConfig:
    """Setup logging, taking options from application settings when none are given"""
    if options is None:
        options = LoggingConfigOptions.from_settings(get_config())
    config = LoggingConfig(options)
    config.setup_logging()
    return config


def get_structured_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)
