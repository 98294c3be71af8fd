"""
Tests for the package logging setup.
"""

import logging

import pytest

from treezip.log import PACKAGE_LOGGER, LoggingConfig, configure_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved_handlers, saved_level = list(logger.handlers), logger.level
    # start without the handler an earlier app import may have installed
    logger.handlers[:] = [h for h in saved_handlers if not getattr(h, "_treezip", False)]
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def own_handlers(logger):
    return [h for h in logger.handlers if getattr(h, "_treezip", False)]


def test_repeated_calls_keep_one_handler(package_logger):
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="INFO"))

    assert len(own_handlers(package_logger)) == 1


@pytest.mark.parametrize(
    "name, level",
    [("debug", logging.DEBUG), ("WARN", logging.WARNING), ("ERROR", logging.ERROR), ("bogus", logging.INFO)],
)
def test_level_map_applied(package_logger, name, level):
    logger = configure_logging(LoggingConfig(level=name))

    assert logger is package_logger
    assert logger.level == level


def test_second_call_updates_level(package_logger):
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"))

    assert package_logger.level == logging.DEBUG
    assert len(own_handlers(package_logger)) == 1


def test_handler_uses_configured_format(package_logger):
    configure_logging(LoggingConfig(fmt="%(levelname)s %(message)s"))

    handler = own_handlers(package_logger)[0]
    assert handler.formatter._fmt == "%(levelname)s %(message)s"
