"""HTTP transport for JIRA SOAP calls."""

import logging
from collections.abc import Sequence
from typing import Any

from lxml import etree
from requests import Response, Session

from ..exceptions import (
    JiraSoapAuthenticationError,
    JiraSoapError,
    JiraSoapFaultError,
)
from .codec import decode, element_children, local_name
from .envelope import build_envelope
from .namespaces import SOAPENV_NS

logger = logging.getLogger("jira-soap.transport")

REQUEST_HEADERS = {
    "Content-Type": "text/xml; charset=utf-8",
    "SOAPAction": '""',
}

AUTHENTICATION_FAULT = "RemoteAuthenticationException"

_PARSER = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=True)


class SoapTransport:
    """Posts request envelopes to the SOAP endpoint and decodes the replies."""

    def __init__(
        self, url: str, session: Session, timeout: float | None = None
    ) -> None:
        """
        Args:
            url: Absolute URL of the SOAP endpoint
            session: Session used for every call (auth, proxies, SSL)
            timeout: Per-request timeout in seconds, None to wait forever
        """
        self.url = url
        self.session = session
        self.timeout = timeout

    def invoke(self, method: str, args: Sequence[Any] = ()) -> Any:
        """
        Call a remote procedure and return its decoded return value.

        Args:
            method: Remote procedure name
            args: Positional arguments

        Returns:
            The decoded ``{method}Return`` element, or None for void procedures

        Raises:
            JiraSoapAuthenticationError: On HTTP 401/403 or an authentication fault
            JiraSoapFaultError: If the server answers with any other SOAP fault
            JiraSoapError: If the response is not a SOAP envelope
            requests.HTTPError: On other HTTP errors without a SOAP body
        """
        logger.debug(f"Invoking remote procedure {method} ({len(args)} argument(s))")
        response = self.session.post(
            self.url,
            data=build_envelope(method, args),
            headers=REQUEST_HEADERS,
            timeout=self.timeout,
        )

        if response.status_code in (401, 403):
            error_msg = (
                f"Authentication failed for JIRA SOAP API ({response.status_code}). "
                "Credentials or session token may be invalid."
            )
            logger.error(error_msg)
            raise JiraSoapAuthenticationError(str(response.status_code), error_msg)

        body = self._parse_body(response)
        first = next(iter(element_children(body)), None)
        if first is None:
            response.raise_for_status()
            raise JiraSoapError(f"Empty SOAP body in response to {method}")

        if local_name(first) == "Fault":
            raise self._fault_error(first)

        response.raise_for_status()

        returned = next(iter(element_children(first)), None)
        if returned is None:
            return None
        refs = {
            ref.get("id"): ref
            for ref in body.iter("{*}multiRef")
            if ref.get("id") is not None
        }
        return decode(returned, refs)

    def _parse_body(self, response: Response) -> etree._Element:
        try:
            root = etree.fromstring(response.content, parser=_PARSER)
        except etree.XMLSyntaxError as e:
            response.raise_for_status()
            raise JiraSoapError(f"Response is not valid XML: {e}") from e

        body = root.find(f"{{{SOAPENV_NS}}}Body")
        if body is None:
            response.raise_for_status()
            raise JiraSoapError("Response is not a SOAP envelope")
        return body

    @staticmethod
    def _fault_error(fault: etree._Element) -> JiraSoapFaultError:
        texts = {
            local_name(child): (child.text or "").strip()
            for child in element_children(fault)
        }
        faultcode = texts.get("faultcode", "")
        faultstring = texts.get("faultstring", "")
        if AUTHENTICATION_FAULT in faultstring or AUTHENTICATION_FAULT in faultcode:
            logger.error(f"JIRA rejected the session: {faultstring}")
            return JiraSoapAuthenticationError(faultcode, faultstring)
        logger.debug(f"SOAP fault {faultcode}: {faultstring}")
        return JiraSoapFaultError(faultcode, faultstring)
