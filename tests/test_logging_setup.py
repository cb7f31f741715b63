import io
import logging

import pytest

from routefinder.config import ObservabilityConfig
from routefinder.logging_setup import (
    PACKAGE_LOGGER,
    configure_logging,
    reset_logging,
    set_log_level,
)


@pytest.fixture(autouse=True)
def clean_logging():
    reset_logging()
    yield
    reset_logging()


def test_configure_installs_one_handler():
    stream = io.StringIO()
    config = ObservabilityConfig(level="DEBUG", format="%(levelname)s %(message)s")

    logger = configure_logging(config, logging.StreamHandler(stream))
    configure_logging(config, logging.StreamHandler(io.StringIO()))

    assert logger.name == PACKAGE_LOGGER
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG

    logging.getLogger("routefinder.graph").debug("searching")
    assert stream.getvalue() == "DEBUG searching\n"


def test_set_log_level_filters_records():
    stream = io.StringIO()
    configure_logging(
        ObservabilityConfig(format="%(message)s"), logging.StreamHandler(stream)
    )

    set_log_level(logging.WARNING)
    logging.getLogger("routefinder.services").info("hidden")
    logging.getLogger("routefinder.services").warning("shown")

    assert stream.getvalue() == "shown\n"


def test_reset_removes_handlers():
    configure_logging(ObservabilityConfig(), logging.StreamHandler(io.StringIO()))

    reset_logging()

    assert logging.getLogger(PACKAGE_LOGGER).handlers == []
