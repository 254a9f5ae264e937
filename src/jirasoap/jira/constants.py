"""Constants specific to the JIRA SOAP service."""

DEFAULT_SOAP_PATH = "/rpc/soap/jirasoapservice-v2"

# Requests for ~2500 results can time out when the server is not on the same
# network; the server may lower this further on its own.
DEFAULT_JQL_MAX_RESULTS = 2000
DEFAULT_FILTER_MAX_RESULTS = 500

DEFAULT_TIMEOUT = 60

# Field names the server silently ignores in updates, mapped to the name it
# expects instead.
FIELD_NAME_CORRECTIONS: dict[str, str] = {
    "affectsVersions": "versions",
}

# Fields that updateIssue cannot change, with the operation that does.
UNUPDATABLE_FIELDS: dict[str, str] = {
    "status": "progress_workflow_action",
    "attachments": "add_base64_encoded_attachments_to_issue_with_key",
}
