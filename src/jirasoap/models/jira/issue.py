"""
JIRA issue model.

This module provides the Pydantic model for ``RemoteIssue`` records. The
attribute names are Pythonic; the wire names follow the server's bean
(``type`` -> ``type_id``, ``duedate`` -> ``due_date`` and so on).
"""

import logging
from datetime import datetime
from typing import Any, ClassVar

from lxml import etree
from pydantic import Field

from jirasoap.soap import add_value
from jirasoap.utils import parse_date

from ..base import ApiModel, ensure_list, optional_text
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID, JIRA_DEFAULT_KEY
from .common import CustomFieldValue, NamedEntity

logger = logging.getLogger(__name__)


class Issue(ApiModel):
    """
    Model representing a JIRA issue as returned by the SOAP service.

    The record carries no comments or attachments, only the attachment names.
    """

    soap_type: ClassVar[str | None] = "RemoteIssue"

    id: str = JIRA_DEFAULT_ID
    key: str = JIRA_DEFAULT_KEY
    summary: str = EMPTY_STRING
    description: str | None = None
    environment: str | None = None
    type_id: str | None = None
    status_id: str | None = None
    priority_id: str | None = None
    resolution_id: str | None = None
    assignee_username: str | None = None
    reporter_username: str | None = None
    project_name: str | None = None
    votes: int = 0
    due_date: datetime | None = None
    create_time: datetime | None = None
    last_updated_time: datetime | None = None
    affects_versions: list[NamedEntity] = Field(default_factory=list)
    fix_versions: list[NamedEntity] = Field(default_factory=list)
    components: list[NamedEntity] = Field(default_factory=list)
    custom_field_values: list[CustomFieldValue] = Field(default_factory=list)
    attachment_names: list[str] = Field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "Issue":
        """
        Create an Issue from a decoded ``RemoteIssue`` struct.

        Args:
            data: The issue data from the SOAP response

        Returns:
            An Issue instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        votes = data.get("votes", 0)
        try:
            votes = int(votes) if votes not in (None, "") else 0
        except (ValueError, TypeError):
            votes = 0

        issue_id = data.get("id")
        return cls(
            id=str(issue_id) if issue_id is not None else JIRA_DEFAULT_ID,
            key=str(data.get("key") or JIRA_DEFAULT_KEY),
            summary=optional_text(data.get("summary")) or EMPTY_STRING,
            description=optional_text(data.get("description")),
            environment=optional_text(data.get("environment")),
            type_id=optional_text(data.get("type")),
            status_id=optional_text(data.get("status")),
            priority_id=optional_text(data.get("priority")),
            resolution_id=optional_text(data.get("resolution")),
            assignee_username=optional_text(data.get("assignee")),
            reporter_username=optional_text(data.get("reporter")),
            project_name=optional_text(data.get("project")),
            votes=votes,
            due_date=parse_date(data.get("duedate")),
            create_time=parse_date(data.get("created")),
            last_updated_time=parse_date(data.get("updated")),
            affects_versions=_entities(data.get("affectsVersions")),
            fix_versions=_entities(data.get("fixVersions")),
            components=_entities(data.get("components")),
            custom_field_values=[
                CustomFieldValue.from_api_response(value)
                for value in ensure_list(data.get("customFieldValues"))
            ],
            attachment_names=[
                str(name)
                for name in ensure_list(data.get("attachmentNames"))
                if name is not None
            ],
        )

    def to_soap(self, element: etree._Element) -> None:
        """
        Write the fields the server honours when creating an issue.

        Reporter, resolution, status, votes and attachments are ignored by
        ``createIssue`` and are not sent. Versions and components only need
        their ids.
        """
        add_value(element, "project", self.project_name)
        add_value(element, "type", self.type_id)
        add_value(element, "priority", self.priority_id)
        add_value(element, "summary", self.summary)
        add_value(element, "description", self.description)
        add_value(element, "environment", self.environment)
        add_value(element, "assignee", self.assignee_username)
        add_value(element, "duedate", self.due_date)
        _add_id_array(
            element, "affectsVersions", self.affects_versions, "RemoteVersion"
        )
        _add_id_array(element, "fixVersions", self.fix_versions, "RemoteVersion")
        _add_id_array(element, "components", self.components, "RemoteComponent")
        add_value(
            element,
            "customFieldValues",
            list(self.custom_field_values),
            f"beans:{CustomFieldValue.soap_type}",
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to a compact dictionary for display."""
        result: dict[str, Any] = {
            "id": self.id,
            "key": self.key,
            "summary": self.summary,
        }
        for name in ("status_id", "type_id", "priority_id", "assignee_username"):
            value = getattr(self, name)
            if value:
                result[name] = value
        if self.create_time:
            result["created"] = self.create_time.isoformat()
        if self.last_updated_time:
            result["updated"] = self.last_updated_time.isoformat()
        if self.fix_versions:
            result["fix_versions"] = [v.name or v.id for v in self.fix_versions]
        return result


def _entities(value: Any) -> list[NamedEntity]:
    return [NamedEntity.from_api_response(item) for item in ensure_list(value)]


def _add_id_array(
    parent: etree._Element, name: str, entities: list[NamedEntity], soap_type: str
) -> None:
    # The server only reads the id
    add_value(
        parent,
        name,
        [_IdOnly(entity.id, soap_type) for entity in entities],
        f"beans:{soap_type}",
    )


class _IdOnly:
    def __init__(self, entity_id: str, soap_type: str) -> None:
        self.entity_id = entity_id
        self.soap_type = soap_type

    def to_soap(self, element: etree._Element) -> None:
        add_value(element, "id", self.entity_id)
