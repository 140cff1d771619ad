import logging

import pytest

from polyoffset.logging_config import GEOMETRY_LOGGER, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("polyoffset")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logging.getLogger(GEOMETRY_LOGGER).setLevel(logging.NOTSET)


def test_setup_logging_configures_package_logger(tmp_path, package_logger):
    log_file = tmp_path / "app.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))

    assert package_logger.level == logging.DEBUG
    assert any(isinstance(h, logging.FileHandler) for h in package_logger.handlers)

    logging.getLogger("polyoffset.model.state").debug("hello from state")
    for handler in package_logger.handlers:
        handler.flush()
    assert "hello from state" in log_file.read_text(encoding="utf-8")


def test_setup_logging_twice_does_not_duplicate_handlers(package_logger):
    setup_logging()
    setup_logging()
    assert len(package_logger.handlers) == 1


def test_geometry_debug_muted_by_default(package_logger):
    setup_logging(level=logging.DEBUG)
    geometry_logger = logging.getLogger(GEOMETRY_LOGGER)
    assert not geometry_logger.isEnabledFor(logging.DEBUG)
    assert geometry_logger.isEnabledFor(logging.INFO)
    # Other modules keep DEBUG output
    assert logging.getLogger("polyoffset.model.state").isEnabledFor(logging.DEBUG)


def test_geometry_debug_on_request(package_logger):
    setup_logging(level=logging.DEBUG, debug_geometry=True)
    assert logging.getLogger(GEOMETRY_LOGGER).isEnabledFor(logging.DEBUG)


def test_geometry_logger_follows_higher_level(package_logger):
    setup_logging(level=logging.WARNING)
    assert not logging.getLogger(GEOMETRY_LOGGER).isEnabledFor(logging.INFO)
