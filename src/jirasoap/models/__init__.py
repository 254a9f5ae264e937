"""
Pydantic models for JIRA SOAP records.

This package provides type-safe models for data exchanged with the SOAP
service, with conversion from decoded responses and serialization into
request envelopes.
"""

from .base import ApiModel
from .constants import EMPTY_STRING, JIRA_DEFAULT_ID, JIRA_DEFAULT_KEY
from .jira import CustomFieldValue, FieldValue, Issue, NamedEntity, Worklog

__all__ = [
    # Base models
    "ApiModel",
    # Constants
    "EMPTY_STRING",
    "JIRA_DEFAULT_ID",
    "JIRA_DEFAULT_KEY",
    # JIRA records
    "CustomFieldValue",
    "FieldValue",
    "Issue",
    "NamedEntity",
    "Worklog",
]
