"""
Root pytest configuration file for JIRA SOAP client tests.
"""

import logging

import pytest

LIBRARY_LOGGERS = ("jira-soap", "jira-soap.transport", "jirasoap")


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the logging state changed by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    levels = {name: logging.getLogger(name).level for name in LIBRARY_LOGGERS}
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    for name, logger_level in levels.items():
        logging.getLogger(name).setLevel(logger_level)
