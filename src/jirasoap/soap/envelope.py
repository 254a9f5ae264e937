"""Request envelope construction for RPC/encoded JIRA SOAP calls."""

from collections.abc import Iterable, Sequence
from datetime import date, datetime
from typing import Any

from lxml import etree

from .namespaces import (
    JIRA_NS,
    NSMAP,
    SOAPENC_ARRAY_TYPE,
    SOAPENV_NS,
    XSI_NIL,
    XSI_TYPE,
)


class SoapArray(list):
    """A list sent as an array of ``item_type``, even when empty."""

    def __init__(self, items: Iterable[Any] = (), item_type: str | None = None):
        super().__init__(items)
        self.item_type = item_type


def build_envelope(method: str, args: Sequence[Any] = ()) -> bytes:
    """
    Build the request envelope for a remote procedure.

    Positional arguments become the children ``in0``, ``in1``, ... of the
    ``<soap:{method}>`` body element, which is how the Axis service names
    its parameters.

    Args:
        method: Remote procedure name (e.g. 'getIssue')
        args: Positional arguments, already including the session token

    Returns:
        The serialized envelope, UTF-8 encoded with an XML declaration
    """
    envelope = etree.Element(f"{{{SOAPENV_NS}}}Envelope", nsmap=NSMAP)
    body = etree.SubElement(envelope, f"{{{SOAPENV_NS}}}Body")
    call = etree.SubElement(body, f"{{{JIRA_NS}}}{method}")
    for index, arg in enumerate(args):
        add_value(call, f"in{index}", arg)
    return etree.tostring(envelope, xml_declaration=True, encoding="utf-8")


def add_value(
    parent: etree._Element, name: str, value: Any, item_type: str | None = None
) -> etree._Element:
    """Append a child element called ``name`` holding ``value``."""
    element = etree.SubElement(parent, name)
    marshal_into(element, value, item_type)
    return element


def marshal_into(
    element: etree._Element, value: Any, item_type: str | None = None
) -> None:
    """
    Write ``value`` into ``element`` using SOAP encoding rules.

    Objects exposing ``to_soap(element)`` fill the element themselves;
    lists and tuples become SOAP-encoded arrays of ``item`` children, typed
    ``item_type`` (e.g. ``xsd:string``) when given, otherwise after their
    first item.

    Raises:
        TypeError: If the value has no wire representation
    """
    if value is None:
        element.set(XSI_NIL, "true")
    elif isinstance(value, bool):
        # bool before int: bool is an int subclass
        element.set(XSI_TYPE, "xsd:boolean")
        element.text = "true" if value else "false"
    elif isinstance(value, int):
        element.set(XSI_TYPE, "xsd:long")
        element.text = str(value)
    elif isinstance(value, datetime):
        element.set(XSI_TYPE, "xsd:dateTime")
        element.text = value.isoformat()
    elif isinstance(value, date):
        element.set(XSI_TYPE, "xsd:date")
        element.text = value.isoformat()
    elif isinstance(value, str):
        element.set(XSI_TYPE, "xsd:string")
        element.text = value
    elif hasattr(value, "to_soap"):
        soap_type = getattr(value, "soap_type", None)
        if soap_type:
            element.set(XSI_TYPE, f"beans:{soap_type}")
        value.to_soap(element)
    elif isinstance(value, list | tuple):
        element.set(XSI_TYPE, "soapenc:Array")
        array_type = (
            item_type
            or getattr(value, "item_type", None)
            or _array_item_type(value)
        )
        element.set(SOAPENC_ARRAY_TYPE, f"{array_type}[{len(value)}]")
        for item in value:
            add_value(element, "item", item)
    else:
        raise TypeError(f"Cannot marshal value of type {type(value).__name__}")


def _array_item_type(items: Sequence[Any]) -> str:
    if not items:
        return "xsd:anyType"
    first = items[0]
    soap_type = getattr(first, "soap_type", None)
    if soap_type:
        return f"beans:{soap_type}"
    if isinstance(first, str):
        return "xsd:string"
    return "xsd:anyType"
