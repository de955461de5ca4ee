"""Console logging sink for lambda-pong loggers."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "lambda_pong"


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Attach a rich console handler to the package logger once and set its level."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
