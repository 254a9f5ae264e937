"""
Generic remote procedure call machinery for the JIRA SOAP service.

The envelope module turns a method name and positional arguments into an
RPC/encoded request, the codec turns response elements back into plain
Python values, and the transport ties both to a requests session.
"""

from .codec import decode, local_name
from .envelope import SoapArray, add_value, build_envelope, marshal_into
from .transport import SoapTransport

__all__ = [
    "SoapArray",
    "SoapTransport",
    "add_value",
    "build_envelope",
    "decode",
    "local_name",
    "marshal_into",
]
