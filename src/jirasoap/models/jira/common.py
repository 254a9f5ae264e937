"""
Small JIRA SOAP records shared by issues and workflow calls.

This module provides models for id/name pairs (workflow actions, versions,
components), field values used by partial updates, and custom field values.
"""

import logging
from typing import Any, ClassVar

from lxml import etree
from pydantic import Field, field_validator

from jirasoap.soap import add_value

from ..base import ApiModel, ensure_list, optional_text
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID

logger = logging.getLogger(__name__)


class NamedEntity(ApiModel):
    """
    Model representing an id/name pair such as a workflow action or version.
    """

    soap_type: ClassVar[str | None] = "RemoteNamedObject"

    id: str = JIRA_DEFAULT_ID
    name: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "NamedEntity":
        """
        Create a NamedEntity from a decoded SOAP struct.

        Args:
            data: The struct data from the SOAP response

        Returns:
            A NamedEntity instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        entity_id = data.get("id")
        return cls(
            id=str(entity_id) if entity_id is not None else JIRA_DEFAULT_ID,
            name=optional_text(data.get("name")) or EMPTY_STRING,
        )

    def to_soap(self, element: etree._Element) -> None:
        add_value(element, "id", self.id)
        add_value(element, "name", self.name)


class FieldValue(ApiModel):
    """
    Model representing a field name and the values to set it to.

    Used by partial updates. The name is the server's camel cased field name
    (``fixVersions``, ``customfield_10060``); the second level of a cascading
    select is addressed as ``customfield_10285:1``. Omitting the values
    blanks the field.

    Example:
        FieldValue("summary", "My new summary")
        FieldValue("versions", ["10010", "10011"])
        FieldValue("description")
    """

    soap_type: ClassVar[str | None] = "RemoteFieldValue"

    field_name: str
    values: list[str] = Field(default_factory=list)

    def __init__(
        self,
        field_name: str,
        values: str | list[str] | tuple[str, ...] | None = None,
        **data: Any,
    ) -> None:
        super().__init__(field_name=field_name, values=values, **data)

    @field_validator("values", mode="before")
    @classmethod
    def _coerce_values(cls, value: Any) -> list[Any]:
        if value is None:
            return []
        if isinstance(value, str | int):
            return [str(value)]
        return [str(item) for item in value]

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "FieldValue":
        """
        Create a FieldValue from a decoded SOAP struct.

        Args:
            data: The struct data from the SOAP response

        Returns:
            A FieldValue instance
        """
        if not isinstance(data, dict):
            raise ValueError("RemoteFieldValue data must be a struct")

        values = [str(v) for v in ensure_list(data.get("values")) if v is not None]
        return cls(str(data.get("id", EMPTY_STRING)), values)

    def to_soap(self, element: etree._Element) -> None:
        add_value(element, "id", self.field_name)
        add_value(element, "values", list(self.values), "xsd:string")


class CustomFieldValue(ApiModel):
    """
    Model representing the value of a custom field on an issue.
    """

    soap_type: ClassVar[str | None] = "RemoteCustomFieldValue"

    custom_field_id: str = EMPTY_STRING
    key: str | None = None
    values: list[str] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "CustomFieldValue":
        """
        Create a CustomFieldValue from a decoded SOAP struct.

        Args:
            data: The struct data from the SOAP response

        Returns:
            A CustomFieldValue instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            custom_field_id=str(data.get("customfieldId") or EMPTY_STRING),
            key=optional_text(data.get("key")),
            values=[str(v) for v in ensure_list(data.get("values")) if v is not None],
        )

    def to_soap(self, element: etree._Element) -> None:
        add_value(element, "customfieldId", self.custom_field_id)
        add_value(element, "key", self.key)
        add_value(element, "values", list(self.values), "xsd:string")
