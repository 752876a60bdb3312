import logging
from logging.handlers import RotatingFileHandler

import pytest

from appointment_booking import logging_setup

LOGGER_TAG = "TEST"


@pytest.fixture
def temp_logger(tmp_path):
    log_path = tmp_path / "appointment_booking.log"
    logging_setup.configure_logging(log_path=log_path, force=True)
    adapter = logging_setup.get_logger(LOGGER_TAG)
    base_logger = logging.getLogger(logging_setup.LOGGER_NAME)
    yield adapter, base_logger, log_path


def test_rotating_handler_defaults(temp_logger):
    adapter, base_logger, log_path = temp_logger
    rotating_handlers = [h for h in base_logger.handlers if isinstance(h, RotatingFileHandler)]
    assert rotating_handlers, "Expected at least one rotating handler"
    handler = rotating_handlers[0]
    assert handler.maxBytes == logging_setup.DEFAULT_MAX_BYTES
    assert handler.backupCount == logging_setup.DEFAULT_BACKUP_COUNT
    assert handler.baseFilename == str(log_path)
    assert base_logger.propagate is False


def test_records_carry_tag(temp_logger):
    adapter, base_logger, log_path = temp_logger
    adapter.info("mapper registered")
    for handler in base_logger.handlers:
        handler.flush()

    content = log_path.read_text(encoding="utf-8")
    assert "[INFO] [TEST] mapper registered" in content


def test_each_test_starts_with_unconfigured_logger():
    assert logging.getLogger(logging_setup.LOGGER_NAME).handlers == []
    assert logging_setup._configured is False


def test_unknown_level_defaults_to_info(tmp_path, capsys):
    logger = logging_setup.configure_logging(log_path=tmp_path / "x.log", level="LOUD", force=True)
    assert logger.level == logging.INFO
    assert "unknown log level 'LOUD'" in capsys.readouterr().err


def test_reset_removes_handlers(tmp_path):
    logging_setup.configure_logging(log_path=tmp_path / "y.log", force=True)
    logging_setup.reset_logging()

    assert logging.getLogger(logging_setup.LOGGER_NAME).handlers == []
