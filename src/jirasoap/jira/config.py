"""Configuration module for JIRA SOAP interactions."""

import logging
import os
from dataclasses import dataclass
from typing import Literal

from ..utils.logging import log_config_param
from ..utils.urls import build_soap_url
from .constants import DEFAULT_SOAP_PATH, DEFAULT_TIMEOUT

logger = logging.getLogger("jira-soap")


@dataclass
class JiraSoapConfig:
    """JIRA SOAP service configuration.

    Handles the two ways of authenticating SOAP calls:
    - basic: username/password exchanged for a session token via ``login``
    - token: a session token obtained elsewhere, used as-is
    """

    url: str  # Base URL for JIRA
    auth_type: Literal["basic", "token"]  # Authentication type
    username: str | None = None  # Login name
    password: str | None = None  # Password for the SOAP login call
    soap_token: str | None = None  # Pre-issued SOAP session token
    soap_path: str = DEFAULT_SOAP_PATH  # Path of the SOAP endpoint
    ssl_verify: bool = True  # Whether to verify SSL certificates
    timeout: float | None = DEFAULT_TIMEOUT  # Per-request timeout in seconds
    http_proxy: str | None = None  # HTTP proxy URL
    https_proxy: str | None = None  # HTTPS proxy URL
    no_proxy: str | None = None  # Comma-separated list of hosts to bypass proxy

    @property
    def soap_url(self) -> str:
        """Absolute URL of the SOAP endpoint."""
        return build_soap_url(self.url, self.soap_path)

    @property
    def proxies(self) -> dict[str, str]:
        """Proxy mapping suitable for ``requests.Session.proxies``."""
        proxies = {}
        if self.http_proxy:
            proxies["http"] = self.http_proxy
        if self.https_proxy:
            proxies["https"] = self.https_proxy
        if self.no_proxy:
            proxies["no_proxy"] = self.no_proxy
        return proxies

    @classmethod
    def from_env(cls) -> "JiraSoapConfig":
        """Create configuration from environment variables.

        Returns:
            JiraSoapConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        url = os.getenv("JIRA_URL")
        if not url:
            error_msg = "Missing required JIRA_URL environment variable"
            raise ValueError(error_msg)

        username = os.getenv("JIRA_USERNAME")
        password = os.getenv("JIRA_PASSWORD", os.getenv("JIRA_API_TOKEN"))
        soap_token = os.getenv("JIRA_SOAP_TOKEN")

        auth_type: Literal["basic", "token"]
        if soap_token:
            auth_type = "token"
        elif username and password:
            auth_type = "basic"
        else:
            error_msg = "SOAP authentication requires JIRA_SOAP_TOKEN or JIRA_USERNAME and JIRA_PASSWORD"
            raise ValueError(error_msg)

        ssl_verify_env = os.getenv("JIRA_SSL_VERIFY", "true").lower()
        ssl_verify = ssl_verify_env not in ("false", "0", "no")

        timeout_env = os.getenv("JIRA_TIMEOUT")
        timeout: float | None = DEFAULT_TIMEOUT
        if timeout_env:
            try:
                timeout = float(timeout_env)
            except ValueError as e:
                error_msg = f"Invalid JIRA_TIMEOUT value: {timeout_env}"
                raise ValueError(error_msg) from e
            if timeout <= 0:
                timeout = None

        config = cls(
            url=url,
            auth_type=auth_type,
            username=username,
            password=password,
            soap_token=soap_token,
            soap_path=os.getenv("JIRA_SOAP_PATH", DEFAULT_SOAP_PATH),
            ssl_verify=ssl_verify,
            timeout=timeout,
            http_proxy=os.getenv("JIRA_HTTP_PROXY", os.getenv("HTTP_PROXY")),
            https_proxy=os.getenv("JIRA_HTTPS_PROXY", os.getenv("HTTPS_PROXY")),
            no_proxy=os.getenv("JIRA_NO_PROXY", os.getenv("NO_PROXY")),
        )
        config.log_settings()
        return config

    def is_auth_configured(self) -> bool:
        """Check if the authentication configuration is complete.

        Returns:
            bool: True if calls can be authenticated, False otherwise.
        """
        if self.auth_type == "token":
            return bool(self.soap_token)
        elif self.auth_type == "basic":
            return bool(self.username and self.password)
        logger.warning(
            f"Unknown or unsupported auth_type: {self.auth_type} in JiraSoapConfig"
        )
        return False

    def log_settings(self) -> None:
        """Log the effective configuration at INFO, masking secrets."""
        log_config_param(logger, "URL", self.url)
        log_config_param(logger, "SOAP path", self.soap_path)
        log_config_param(logger, "auth type", self.auth_type)
        log_config_param(logger, "username", self.username)
        log_config_param(logger, "password", self.password, sensitive=True)
        log_config_param(logger, "SOAP token", self.soap_token, sensitive=True)
