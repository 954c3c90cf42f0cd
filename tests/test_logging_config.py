"""Tests for logging_config module"""

import logging

import pytest

from llm_sdk import logging_config
from llm_sdk.logging_config import ColoredFormatter, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(logging_config.PACKAGE_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


def test_formatter_colors_level_name():
    formatter = ColoredFormatter("%(levelname)s: %(message)s")
    record = logging.LogRecord("llm_sdk", logging.WARNING, __file__, 1, "careful", None, None)

    output = formatter.format(record)

    assert output == "\033[33mWARNING\033[0m: careful"
    # the record itself is left untouched for other handlers
    assert record.levelname == "WARNING"


def test_setup_logging_is_idempotent(package_logger):
    setup_logging("DEBUG")
    setup_logging("DEBUG")

    colored = [h for h in package_logger.handlers if isinstance(h.formatter, ColoredFormatter)]
    assert len(colored) == 1
    assert package_logger.level == logging.DEBUG


def test_setup_logging_reads_environment(package_logger, monkeypatch):
    monkeypatch.setenv("LLM_SDK_LOG_LEVEL", "warning")

    logger = setup_logging()

    assert logger is package_logger
    assert logger.level == logging.WARNING
