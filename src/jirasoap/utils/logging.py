"""Logging utilities for the JIRA SOAP client."""

import logging


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Configure root and library logging with a single stream handler.

    Args:
        level: The minimum logging level to display (default: WARNING)

    Returns:
        The library logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Drop previously installed handlers so repeated calls don't duplicate output
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s - %(name)s - %(message)s"))
    root_logger.addHandler(handler)

    for logger_name in ("jira-soap", "jira-soap.transport", "jirasoap"):
        logging.getLogger(logger_name).setLevel(level)

    return logging.getLogger("jira-soap")


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Masks passwords and tokens before they reach a log line.

    Args:
        value: The string to mask
        keep_chars: Number of characters to keep visible at start and end

    Returns:
        Masked string with most characters replaced by asterisks
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    hidden = "*" * (len(value) - keep_chars * 2)
    return f"{value[:keep_chars]}{hidden}{value[-keep_chars:]}"


def log_config_param(
    logger: logging.Logger,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Logs a configuration parameter at INFO, masking it if sensitive."""
    display_value = mask_sensitive(value) if sensitive else (value or "Not Provided")
    logger.info(f"JIRA {param}: {display_value}")
