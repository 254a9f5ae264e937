"""Decoding of SOAP response elements into plain Python values."""

from typing import Any

from lxml import etree

from .namespaces import SOAPENC_ARRAY_TYPE, XSI_NIL, XSI_TYPE

_INTEGER_TYPES = {"int", "long", "short", "integer", "byte"}


def local_name(element: etree._Element) -> str:
    """Return the tag of ``element`` without its namespace."""
    return etree.QName(element).localname


def element_children(element: etree._Element) -> list[etree._Element]:
    """Return the element children of ``element``, skipping comments and PIs."""
    return [child for child in element if isinstance(child.tag, str)]


def decode(
    element: etree._Element, refs: dict[str, etree._Element] | None = None
) -> Any:
    """
    Convert a response element into dicts, lists and scalars.

    - ``xsi:nil="true"`` becomes None
    - SOAP-encoded arrays become lists
    - elements with children become dicts keyed by local name; repeated
      children collect into a list
    - leaves are typed from ``xsi:type`` (integers and booleans), anything
      else is returned as text

    Args:
        element: The element to decode
        refs: multiRef elements of the response body keyed by id, used to
            resolve ``href="#id"`` references

    Returns:
        The decoded value
    """
    href = element.get("href")
    if href and href.startswith("#") and refs:
        target = refs.get(href[1:])
        if target is not None:
            return decode(target, refs)

    if element.get(XSI_NIL) in ("true", "1"):
        return None

    children = element_children(element)
    if is_array(element):
        return [decode(child, refs) for child in children]

    if children:
        grouped: dict[str, list[Any]] = {}
        for child in children:
            grouped.setdefault(local_name(child), []).append(decode(child, refs))
        return {
            name: values[0] if len(values) == 1 else values
            for name, values in grouped.items()
        }

    return _decode_scalar(element.text or "", _xsi_type(element))


def is_array(element: etree._Element) -> bool:
    """Check whether ``element`` carries SOAP array encoding."""
    return (
        element.get(SOAPENC_ARRAY_TYPE) is not None or _xsi_type(element) == "Array"
    )


def _xsi_type(element: etree._Element) -> str | None:
    type_name = element.get(XSI_TYPE)
    if not type_name:
        return None
    return type_name.rsplit(":", 1)[-1]


def _decode_scalar(text: str, type_name: str | None) -> Any:
    if type_name in _INTEGER_TYPES:
        try:
            return int(text)
        except ValueError:
            return text
    if type_name == "boolean":
        return text.strip().lower() in ("true", "1")
    return text
