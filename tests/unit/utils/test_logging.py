import logging

from jirasoap.utils.logging import setup_logging


def test_setup_logging_default_level():
    """Test setup_logging with default WARNING level"""
    logger = setup_logging()

    assert logger.level == logging.WARNING

    root_logger = logging.getLogger()
    assert root_logger.level == logging.WARNING

    # One handler with the library's format
    assert len(root_logger.handlers) == 1
    handler = root_logger.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.formatter._fmt == "%(levelname)s - %(name)s - %(message)s"


def test_setup_logging_custom_level():
    """Test that the level reaches the library and transport loggers"""
    logger = setup_logging(logging.DEBUG)

    assert logger.level == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("jira-soap.transport").level == logging.DEBUG
    assert logging.getLogger("jirasoap").level == logging.DEBUG


def test_setup_logging_removes_existing_handlers():
    """Test that repeated setup does not duplicate handlers"""
    root_logger = logging.getLogger()
    stale_handler = logging.StreamHandler()
    root_logger.addHandler(stale_handler)

    setup_logging()
    setup_logging(logging.INFO)

    assert len(root_logger.handlers) == 1
    assert stale_handler not in root_logger.handlers


def test_setup_logging_logger_name():
    """Test that setup_logging returns the library logger"""
    logger = setup_logging()
    assert logger.name == "jira-soap"
