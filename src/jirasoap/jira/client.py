"""Base client module for JIRA SOAP interactions."""

import logging
from typing import Any, TypeVar

from requests import Session

from ..exceptions import JiraSoapAuthenticationError, JiraSoapError
from ..models.base import ApiModel, ensure_list
from ..soap import SoapTransport
from ..utils.ssl import configure_ssl_verification
from .config import JiraSoapConfig

# Configure logging
logger = logging.getLogger("jira-soap")

T = TypeVar("T", bound=ApiModel)


class JiraSoapClient:
    """Base client for JIRA SOAP interactions.

    Every remote procedure except ``login`` takes the session token as its
    first argument; ``jira_call`` and ``array_jira_call`` take care of it.
    """

    config: JiraSoapConfig
    session: Session
    transport: SoapTransport
    _token: str | None

    def __init__(
        self, config: JiraSoapConfig | None = None, session: Session | None = None
    ) -> None:
        """Initialize the client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)
            session: Optional requests session to send calls through

        Raises:
            ValueError: If configuration is invalid or required credentials are missing
        """
        self.config = config or JiraSoapConfig.from_env()
        if not self.config.is_auth_configured():
            error_msg = f"Incomplete '{self.config.auth_type}' authentication settings"
            raise ValueError(error_msg)

        self.session = session or Session()
        if self.config.proxies:
            self.session.proxies.update(self.config.proxies)

        configure_ssl_verification(
            url=self.config.url,
            session=self.session,
            ssl_verify=self.config.ssl_verify,
        )

        self.transport = SoapTransport(
            self.config.soap_url, self.session, timeout=self.config.timeout
        )
        self._token = (
            self.config.soap_token if self.config.auth_type == "token" else None
        )

    @property
    def token(self) -> str | None:
        """The current session token, or None before login."""
        return self._token

    def login(self) -> str:
        """
        Exchange the configured username and password for a session token.

        Returns:
            The session token

        Raises:
            JiraSoapAuthenticationError: If the server rejects the credentials
        """
        if self.config.auth_type == "token":
            # Nothing to exchange; the configured token is used as-is
            self._token = self.config.soap_token
            return self._token or ""

        token = self.transport.invoke(
            "login", (self.config.username, self.config.password)
        )
        if not token:
            error_msg = "JIRA returned an empty session token"
            logger.error(error_msg)
            raise JiraSoapAuthenticationError("login", error_msg)

        self._token = str(token)
        logger.info(f"Logged in to JIRA as {self.config.username}")
        return self._token

    def logout(self) -> bool:
        """
        Invalidate the current session token on the server.

        Returns:
            True if the server acknowledged the logout, False if there was no session
        """
        if not self._token:
            return False
        try:
            result = self.transport.invoke("logout", (self._token,))
        finally:
            self._token = None
        return bool(result)

    def jira_call(self, method: str, *args: Any) -> Any:
        """
        Invoke a remote procedure with the session token prepended.

        Args:
            method: Remote procedure name (e.g. 'getIssue')
            *args: Arguments following the token, in server order

        Returns:
            The decoded return value

        Raises:
            JiraSoapAuthenticationError: If authentication fails
            JiraSoapFaultError: If the server reports any other fault
        """
        if not self._token:
            self.login()
        return self.transport.invoke(method, (self._token, *args))

    def array_jira_call(self, model: type[T], method: str, *args: Any) -> list[T]:
        """
        Invoke a remote procedure that returns an array of records.

        Args:
            model: Model class to build from each returned struct
            method: Remote procedure name
            *args: Arguments following the token, in server order

        Returns:
            List of model instances, empty if the server returned none
        """
        result = _unwrap_items(self.jira_call(method, *args), method)
        if result is not None and not isinstance(result, list | dict | str):
            error_msg = f"Unexpected return value type from `{method}`: {type(result)}"
            logger.error(error_msg)
            raise JiraSoapError(error_msg)
        return [model.from_api_response(item) for item in ensure_list(result)]


def _unwrap_items(result: Any, method: str) -> Any:
    """Unwrap an array the server sent without SOAP encoding.

    Such an array decodes to a struct with one key, the item tag, holding a
    list (two or more items) or a struct (one item). A lone item is only
    unwrapped under ``item`` or ``{method}Return``, so that a single record
    with a single field is not mistaken for a wrapper.
    """
    if not isinstance(result, dict) or len(result) != 1:
        return result
    ((tag, items),) = result.items()
    if isinstance(items, list):
        return items
    if isinstance(items, dict) and tag in ("item", f"{method}Return"):
        return items
    return result
