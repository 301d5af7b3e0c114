import json
import logging
from logging.handlers import RotatingFileHandler

from shopfront.config.schemas.logging_schema import LoggingConfig
from shopfront.infrastructure.logging.logger import (
    ROOT_LOGGER_NAME,
    DetailedFormatter,
    get_logger,
    setup_logging,
)


def test_default_setup():
    logger = setup_logging()

    assert logger.name == ROOT_LOGGER_NAME
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, DetailedFormatter)


def test_setup_replaces_handlers():
    setup_logging(LoggingConfig(level="DEBUG"))
    logger = setup_logging(LoggingConfig(level="WARNING"))

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_file_destination(tmp_path):
    log_path = tmp_path / "logs" / "shopfront.log"
    config = LoggingConfig(destination="both", file_path=str(log_path))

    logger = setup_logging(config)
    get_logger("shopfront.test").info("hello %s", "file")
    for handler in logger.handlers:
        handler.flush()

    assert any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
    assert len(logger.handlers) == 2
    assert "hello file" in log_path.read_text(encoding="utf-8")


def test_json_format(tmp_path):
    log_path = tmp_path / "shopfront.log"
    config = LoggingConfig(destination="file", file_path=str(log_path), format="json")

    logger = setup_logging(config)
    get_logger("shopfront.test").warning("skipped %s", "P2")
    for handler in logger.handlers:
        handler.flush()

    record = json.loads(log_path.read_text(encoding="utf-8").strip().splitlines()[-1])
    assert record["event"] == "skipped P2"
    assert record["level"] == "warning"
    assert record["logger"] == "shopfront.test"
