"""JIRA SOAP API module.

This module provides the client for the JIRA SOAP service, split by
resource area.
"""

from .client import JiraSoapClient
from .config import JiraSoapConfig
from .issues import IssuesMixin
from .search import SearchMixin
from .transitions import TransitionsMixin
from .worklog import WorklogMixin


class JiraSoapFetcher(
    IssuesMixin,
    SearchMixin,
    TransitionsMixin,
    WorklogMixin,
):
    """
    The main JIRA SOAP client providing access to all remote operations.

    - IssuesMixin: Get, create and update issues, resolution dates
    - SearchMixin: JQL and saved filter searches
    - TransitionsMixin: Workflow actions
    - WorklogMixin: Worklog operations
    """

    pass


__all__ = ["JiraSoapFetcher", "JiraSoapConfig", "JiraSoapClient"]
