"""
Base model shared by all JIRA SOAP records.

Records are built from values decoded out of a SOAP response (plain dicts,
lists and strings) or from caller-supplied values before a call. Records
that travel to the server also write themselves into a request element.
"""

from typing import Any, ClassVar, TypeVar

from lxml import etree
from pydantic import BaseModel

# Type variable for the return type of from_api_response
T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model for all SOAP records with common conversion methods.
    """

    # Name of the remote bean type, e.g. 'RemoteIssue'
    soap_type: ClassVar[str | None] = None

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Convert a decoded SOAP value to a model instance.

        Args:
            data: The decoded response struct
            **kwargs: Additional context parameters

        Returns:
            An instance of the model

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_soap(self, element: etree._Element) -> None:
        """
        Write the record's wire fields as children of ``element``.

        Raises:
            NotImplementedError: If the record is never sent to the server
        """
        raise NotImplementedError(f"{type(self).__name__} cannot be sent to JIRA")

    def to_simplified_dict(self) -> dict[str, Any]:
        """
        Convert the model to a simplified dictionary.

        Returns:
            A dictionary without unset (None) fields
        """
        return self.model_dump(exclude_none=True)


def ensure_list(value: Any) -> list[Any]:
    """
    Normalize a decoded value that should be an array.

    Servers that omit array encoding hand back a single struct, and empty
    arrays may come back as blank text.
    """
    if value is None or value == "":
        return []
    if isinstance(value, list):
        return value
    return [value]


def optional_text(value: Any) -> str | None:
    """Return ``value`` as a string, keeping None (xsi:nil) as None."""
    if value is None:
        return None
    return str(value)
