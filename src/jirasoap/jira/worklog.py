"""Module for JIRA worklog operations."""

import logging

from ..exceptions import JiraSoapAuthenticationError, JiraSoapFaultError
from ..models import Worklog
from .client import JiraSoapClient

logger = logging.getLogger("jira-soap")


class WorklogMixin(JiraSoapClient):
    """Mixin for JIRA worklog operations."""

    def add_worklog_and_auto_adjust_remaining_estimate(
        self, issue_key: str, worklog: Worklog
    ) -> Worklog:
        """
        Add a worklog entry to an issue, reducing its remaining estimate.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            worklog: Entry with comment, start_date and time_spent (e.g. '1h 30m')

        Returns:
            The stored worklog, including its id and author

        Raises:
            JiraSoapAuthenticationError: If authentication fails
            JiraSoapFaultError: If the server rejects the worklog
        """
        try:
            result = self.jira_call(
                "addWorklogAndAutoAdjustRemainingEstimate", issue_key, worklog
            )
        except JiraSoapAuthenticationError:
            raise
        except JiraSoapFaultError as e:
            logger.error(f"Error adding worklog to issue {issue_key}: {e.faultstring}")
            raise
        logger.info(f"Logged {worklog.time_spent} on {issue_key}")
        return Worklog.from_api_response(result)

    def get_worklogs(self, issue_key: str) -> list[Worklog]:
        """
        Get all worklog entries for an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            List of Worklog models
        """
        return self.array_jira_call(Worklog, "getWorklogs", issue_key)
