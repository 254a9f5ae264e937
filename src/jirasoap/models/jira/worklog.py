"""
JIRA worklog models.

This module provides the Pydantic model for ``RemoteWorklog`` records
(time tracking entries).
"""

import logging
from datetime import datetime
from typing import Any, ClassVar

from lxml import etree

from jirasoap.soap import add_value
from jirasoap.utils import parse_date

from ..base import ApiModel, optional_text
from ..constants import EMPTY_STRING

logger = logging.getLogger(__name__)


class Worklog(ApiModel):
    """
    Model representing a worklog entry.

    Only ``comment``, ``start_date`` and ``time_spent`` are sent when adding a
    worklog; the remaining attributes are filled in by the server.
    """

    soap_type: ClassVar[str | None] = "RemoteWorklog"

    id: str | None = None
    comment: str = EMPTY_STRING
    start_date: datetime | None = None
    time_spent: str = EMPTY_STRING
    time_spent_in_seconds: int = 0
    author: str | None = None
    update_author: str | None = None
    created: datetime | None = None
    updated: datetime | None = None
    group_level: str | None = None
    role_level_id: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "Worklog":
        """
        Create a Worklog from a decoded ``RemoteWorklog`` struct.

        Args:
            data: The worklog data from the SOAP response

        Returns:
            A Worklog instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        seconds = data.get("timeSpentInSeconds", 0)
        try:
            seconds = int(seconds) if seconds not in (None, "") else 0
        except (ValueError, TypeError):
            seconds = 0

        return cls(
            id=optional_text(data.get("id")),
            comment=optional_text(data.get("comment")) or EMPTY_STRING,
            start_date=parse_date(data.get("startDate")),
            time_spent=optional_text(data.get("timeSpent")) or EMPTY_STRING,
            time_spent_in_seconds=seconds,
            author=optional_text(data.get("author")),
            update_author=optional_text(data.get("updateAuthor")),
            created=parse_date(data.get("created")),
            updated=parse_date(data.get("updated")),
            group_level=optional_text(data.get("groupLevel")),
            role_level_id=optional_text(data.get("roleLevelId")),
        )

    def to_soap(self, element: etree._Element) -> None:
        add_value(element, "comment", self.comment)
        add_value(element, "startDate", self.start_date)
        add_value(element, "timeSpent", self.time_spent)

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for display."""
        result: dict[str, Any] = {
            "time_spent": self.time_spent,
            "time_spent_in_seconds": self.time_spent_in_seconds,
        }

        if self.id:
            result["id"] = self.id

        if self.author:
            result["author"] = self.author

        if self.comment:
            result["comment"] = self.comment

        if self.start_date:
            result["start_date"] = self.start_date.isoformat()

        return result
