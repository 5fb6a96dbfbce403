import logging

from utils.logger import LoggingContext, SecureFormatter, get_logging_mode, set_logging_mode, setup_logger


def _record(message):
    return logging.LogRecord('test', logging.INFO, __file__, 1, message, None, None)


def test_secure_formatter_masks_tokens():
    formatted = SecureFormatter('%(message)s').format(_record("using key ABCDEFGHIJKLMNOP1234 now"))

    assert 'ABCDEFGHIJKLMNOP1234' not in formatted
    assert 'ABCD...1234' in formatted


def test_secure_formatter_leaves_short_words():
    formatted = SecureFormatter('%(message)s').format(_record("OVERVIEW IBM key 1/3"))
    assert formatted == "OVERVIEW IBM key 1/3"


def test_logging_modes():
    previous = get_logging_mode()
    try:
        set_logging_mode(LoggingContext.SILENT)
        assert setup_logger('silent_test').level == logging.CRITICAL

        set_logging_mode(LoggingContext.ORCHESTRATED)
        assert setup_logger('run_analysis').level == logging.INFO
        assert setup_logger('key_rotation_client_test').level == logging.ERROR
    finally:
        set_logging_mode(previous)


def test_setup_logger_does_not_duplicate_handlers():
    logger = setup_logger('handler_test')
    logger = setup_logger('handler_test')
    assert len(logger.handlers) == 1
