"""Logging setup for the application."""
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, List, Optional

import structlog

if TYPE_CHECKING:
    from shopfront.config.schemas.logging_schema import LoggingConfig

ROOT_LOGGER_NAME = "shopfront"


class DetailedFormatter(logging.Formatter):
    """Formatter that adds caller information to each record."""

    def format(self, record: logging.LogRecord) -> str:
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


TEXT_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"


def _build_formatter(logging_config: "LoggingConfig") -> logging.Formatter:
    if logging_config.format == "json":
        return structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
            foreign_pre_chain=[
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.format_exc_info,
            ],
        )
    return DetailedFormatter(TEXT_FORMAT)


def setup_logging(logging_config: Optional["LoggingConfig"] = None) -> logging.Logger:
    """
    Set up logging for the application.

    Configures the ``shopfront`` logger hierarchy with console and/or rotating
    file handlers. Calling it again replaces the previously installed handlers.

    Args:
        logging_config: Logging configuration. Defaults are used if None.

    Returns:
        The configured application root logger.
    """
    from shopfront.config.schemas.logging_schema import LoggingConfig

    logging_config = logging_config or LoggingConfig()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, logging_config.level.upper()))

    formatter = _build_formatter(logging_config)
    handlers: List[logging.Handler] = []

    if logging_config.destination in ("file", "both"):
        log_path = os.path.expandvars(logging_config.file_path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=logging_config.max_size_mb * 1024 * 1024,
            backupCount=logging_config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if logging_config.destination in ("stdout", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    for handler in handlers:
        root_logger.addHandler(handler)

    root_logger.debug(
        "Logging configured: level=%s destination=%s format=%s",
        logging_config.level,
        logging_config.destination,
        logging_config.format,
    )
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)
