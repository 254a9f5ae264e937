"""Module for JIRA search operations."""

import logging

from ..models import Issue
from .client import JiraSoapClient
from .constants import DEFAULT_FILTER_MAX_RESULTS, DEFAULT_JQL_MAX_RESULTS

logger = logging.getLogger("jira-soap")


class SearchMixin(JiraSoapClient):
    """Mixin for JIRA search operations."""

    def issues_from_jql_search(
        self, jql_query: str, max_results: int = DEFAULT_JQL_MAX_RESULTS
    ) -> list[Issue]:
        """
        Search for issues using JQL, like an advanced search in the web UI.

        Returned issues carry no comments or attachments. Very large result
        sets (a few thousand issues) can time out over slow links, hence the
        default limit.

        Args:
            jql_query: JQL query string
            max_results: Maximum issues to return; the server may lower it

        Returns:
            List of Issue models
        """
        logger.debug(f"JQL search (max {max_results}): {jql_query}")
        issues = self.array_jira_call(
            Issue, "getIssuesFromJqlSearch", jql_query, max_results
        )
        logger.info(f"JQL search returned {len(issues)} issue(s)")
        return issues

    def issues_from_filter_with_id(
        self,
        id: str,
        max_results: int = DEFAULT_FILTER_MAX_RESULTS,
        offset: int = 0,
    ) -> list[Issue]:
        """
        Get the issues matched by a saved filter.

        Args:
            id: The filter id
            max_results: Maximum issues to return
            offset: Index of the first issue to return

        Returns:
            List of Issue models
        """
        # The server takes the offset before the limit
        return self.array_jira_call(
            Issue, "getIssuesFromFilterWithLimit", id, offset, max_results
        )
