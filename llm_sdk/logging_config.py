"""
Console logging for the command line entry point
"""

import copy
import logging
import os
from typing import Optional, Union

PACKAGE_LOGGER = "llm_sdk"


class ColoredFormatter(logging.Formatter):
    """Colors the level name by severity"""

    COLORS = {
        "DEBUG": "\033[36m",      # cyan
        "INFO": "\033[32m",       # green
        "WARNING": "\033[33m",    # yellow
        "ERROR": "\033[31m",      # red
        "CRITICAL": "\033[35m",   # magenta
    }
    RESET = "\033[0m"

    def format(self, record):
        color = self.COLORS.get(record.levelname)
        if color:
            # other handlers share the record
            record = copy.copy(record)
            record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Attach a colored console handler to the package logger.

    Args:
        level: log level (defaults to LLM_SDK_LOG_LEVEL env var or INFO)
    """
    if level is None:
        level = os.getenv("LLM_SDK_LOG_LEVEL", "INFO").upper()

    logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(h.formatter, ColoredFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(ColoredFormatter("%(levelname)s:     %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
