"""
Unit tests for the logging setup helper.
"""

import logging
import pytest
from evonet.utils.logger import setup_logging


@pytest.fixture
def logger_name():
    name = "evonet.tests.logger"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


class TestSetupLogging:

    def test_console_handler(self, logger_name):
        logger = setup_logging(level=logging.DEBUG, name=logger_name)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_file_handler_writes_records(self, logger_name, tmp_path):
        log_file = tmp_path / "logs" / "run.log"
        logger = setup_logging(log_file=log_file, console_output=False, name=logger_name)
        logger.info("generation finished")
        for handler in logger.handlers:
            handler.flush()
        content = log_file.read_text()
        assert "generation finished" in content
        assert "INFO" in content

    def test_repeated_calls_replace_handlers(self, logger_name):
        setup_logging(name=logger_name)
        logger = setup_logging(name=logger_name)
        assert len(logger.handlers) == 1
