import logging

import pytest
from rich.logging import RichHandler

from study_assistant.logging_config import setup_logging, LOG_LEVEL_ENV


@pytest.fixture
def package_logger():
    logger = logging.getLogger("study_assistant")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_setup_logging_installs_single_rich_handler(package_logger):
    setup_logging("info")
    setup_logging("info")
    handlers = [h for h in package_logger.handlers if isinstance(h, RichHandler)]
    assert len(handlers) == 1
    assert package_logger.level == logging.INFO


def test_setup_logging_reads_env(package_logger, monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    setup_logging()
    assert package_logger.level == logging.DEBUG


def test_setup_logging_defaults_to_warning(package_logger, monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    setup_logging()
    assert package_logger.level == logging.WARNING
