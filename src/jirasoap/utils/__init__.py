"""
Utility functions for the JIRA SOAP client.
This package provides helpers shared by the transport, client and CLI.
"""

from .date import parse_date
from .logging import log_config_param, mask_sensitive, setup_logging
from .ssl import SSLIgnoreAdapter, configure_ssl_verification
from .urls import build_soap_url

__all__ = [
    "SSLIgnoreAdapter",
    "build_soap_url",
    "configure_ssl_verification",
    "log_config_param",
    "mask_sensitive",
    "parse_date",
    "setup_logging",
]
