"""Logging setup routed through the rich console."""
import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "STUDY_ASSISTANT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def setup_logging(level: str | None = None, console: Console | None = None) -> logging.Logger:
    """Attach a RichHandler to the package logger. Safe to call more than once."""
    level = (level or os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    logger = logging.getLogger("study_assistant")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    logger.addHandler(RichHandler(console=console, show_path=False, markup=False))
    return logger
