"""Exceptions raised by the JIRA SOAP client."""


class JiraSoapError(Exception):
    """Base class for errors raised by this library."""


class JiraSoapFaultError(JiraSoapError):
    """The server answered a call with a SOAP fault."""

    def __init__(self, faultcode: str, faultstring: str) -> None:
        self.faultcode = faultcode
        self.faultstring = faultstring
        super().__init__(f"{faultcode}: {faultstring}")


class JiraSoapAuthenticationError(JiraSoapFaultError):
    """The server rejected the credentials or the session token."""
