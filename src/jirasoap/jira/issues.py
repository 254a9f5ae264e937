"""Module for JIRA issue operations."""

import logging
from datetime import datetime

from ..exceptions import JiraSoapAuthenticationError, JiraSoapFaultError
from ..models import FieldValue, Issue
from ..utils import parse_date
from .client import JiraSoapClient
from .utils import check_field_values

logger = logging.getLogger("jira-soap")


class IssuesMixin(JiraSoapClient):
    """Mixin for JIRA issue operations."""

    def update_issue(self, issue_key: str, *field_values: FieldValue) -> Issue:
        """
        Update fields of an issue.

        Most, but not all, fields can be updated this way. ``status`` has to
        go through ``progress_workflow_action``, and attachments cannot be
        changed at all. Field names are the server's camel cased names
        (``fixVersions`` for ``fix_versions``); affected versions are the
        exception and must be set through ``versions``. Fields made of
        records (versions, components) only take their ids.

        Example:
            summary = FieldValue("summary", "My new summary")
            part1 = FieldValue("customfield_10285", "Main Detail")
            part2 = FieldValue("customfield_10285:1", "First Subdetail")
            client.update_issue("PROJECT-1", summary, part1, part2)

        Args:
            issue_key: The issue key (e.g. 'PROJECT-1')
            *field_values: The fields to change

        Returns:
            The issue as stored after the update

        Raises:
            JiraSoapAuthenticationError: If authentication fails
            JiraSoapFaultError: If the server rejects the update
        """
        values = check_field_values(field_values)
        try:
            result = self.jira_call("updateIssue", issue_key, values)
        except JiraSoapAuthenticationError:
            raise
        except JiraSoapFaultError as e:
            logger.error(f"Error updating issue {issue_key}: {e.faultstring}")
            raise
        logger.info(f"Updated {len(values)} field(s) of issue {issue_key}")
        return Issue.from_api_response(result)

    def create_issue_with_issue(self, issue: Issue) -> Issue:
        """
        Create an issue from an Issue record.

        The server ignores reporter, resolution, attachments, votes and status
        on creation.

        Args:
            issue: The issue to create; at least project, type and summary

        Returns:
            The created issue, with its id and key
        """
        try:
            result = self.jira_call("createIssue", issue)
        except JiraSoapAuthenticationError:
            raise
        except JiraSoapFaultError as e:
            logger.error(
                f"Error creating issue in project {issue.project_name}: {e.faultstring}"
            )
            raise
        created = Issue.from_api_response(result)
        logger.info(f"Created issue {created.key}")
        return created

    def create_issue_with_issue_and_parent(
        self, issue: Issue, parent_id: str
    ) -> Issue:
        """
        Create a sub-task of another issue.

        Args:
            issue: The issue to create
            parent_id: Id or key of the parent issue

        Returns:
            The created issue
        """
        try:
            result = self.jira_call("createIssueWithParent", issue, parent_id)
        except JiraSoapAuthenticationError:
            raise
        except JiraSoapFaultError as e:
            logger.error(f"Error creating sub-task of {parent_id}: {e.faultstring}")
            raise
        created = Issue.from_api_response(result)
        logger.info(f"Created issue {created.key} under {parent_id}")
        return created

    create_issue_with_parent = create_issue_with_issue_and_parent

    def issue_with_key(self, issue_key: str) -> Issue:
        """
        Get an issue by key.

        Args:
            issue_key: The issue key (e.g. 'PROJECT-1')

        Returns:
            Issue model
        """
        return Issue.from_api_response(self.jira_call("getIssue", issue_key))

    def issue_with_id(self, issue_id: str) -> Issue:
        """Get an issue by its numeric id."""
        return Issue.from_api_response(self.jira_call("getIssueById", issue_id))

    def resolution_date_for_issue_with_id(self, issue_id: str) -> datetime | None:
        """
        Get the date an issue was resolved.

        Args:
            issue_id: The issue id

        Returns:
            The resolution date, or None if the issue is unresolved
        """
        return parse_date(self.jira_call("getResolutionDateById", issue_id))

    def resolution_date_for_issue_with_key(self, issue_key: str) -> datetime | None:
        """
        Get the date an issue was resolved.

        Args:
            issue_key: The issue key (e.g. 'PROJECT-1')

        Returns:
            The resolution date, or None if the issue is unresolved
        """
        return parse_date(self.jira_call("getResolutionDateByKey", issue_key))
