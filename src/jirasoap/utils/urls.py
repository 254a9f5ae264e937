"""URL-related utility functions."""

from urllib.parse import urlparse


def build_soap_url(base_url: str, soap_path: str) -> str:
    """Join the server base URL and the SOAP endpoint path.

    Args:
        base_url: The JIRA base URL, with or without a trailing slash
        soap_path: Path of the SOAP service (e.g. /rpc/soap/jirasoapservice-v2)

    Returns:
        The absolute endpoint URL

    Raises:
        ValueError: If base_url is not an absolute http(s) URL
    """
    parsed = urlparse(base_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Invalid JIRA URL: {base_url!r}")
    return f"{base_url.rstrip('/')}/{soap_path.lstrip('/')}"
