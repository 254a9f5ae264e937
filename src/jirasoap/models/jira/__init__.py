"""
JIRA SOAP records.

This package provides Pydantic models mirroring the remote beans returned
and accepted by the SOAP service.
"""

from .common import CustomFieldValue, FieldValue, NamedEntity
from .issue import Issue
from .worklog import Worklog

__all__ = [
    "CustomFieldValue",
    "FieldValue",
    "Issue",
    "NamedEntity",
    "Worklog",
]
