"""Module for JIRA workflow operations."""

import logging

from ..exceptions import JiraSoapAuthenticationError, JiraSoapFaultError
from ..models import FieldValue, Issue, NamedEntity
from .client import JiraSoapClient
from .utils import check_field_values

logger = logging.getLogger("jira-soap")


class TransitionsMixin(JiraSoapClient):
    """Mixin for JIRA workflow operations."""

    def available_actions(self, issue_key: str) -> list[NamedEntity]:
        """
        Get the workflow actions available for an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            List of actions; their ids are what progress_workflow_action takes
        """
        return self.array_jira_call(NamedEntity, "getAvailableActions", issue_key)

    def progress_workflow_action(
        self, issue_key: str, action_id: str, *field_values: FieldValue
    ) -> Issue:
        """
        Perform a workflow action on an issue, updating fields on the way.

        Behaves like update_issue, except that the status changes too.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            action_id: Id of one of the issue's available actions
            *field_values: Fields to set along with the action

        Returns:
            The issue after the action

        Raises:
            JiraSoapAuthenticationError: If authentication fails
            JiraSoapFaultError: If the action is not available or fields are invalid
        """
        values = check_field_values(field_values)
        try:
            result = self.jira_call(
                "progressWorkflowAction", issue_key, str(action_id), values
            )
        except JiraSoapAuthenticationError:
            raise
        except JiraSoapFaultError as e:
            logger.error(
                f"Error performing action {action_id} on {issue_key}: {e.faultstring}"
            )
            raise
        logger.info(f"Performed workflow action {action_id} on {issue_key}")
        return Issue.from_api_response(result)
