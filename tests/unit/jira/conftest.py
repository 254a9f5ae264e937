"""Test fixtures for JIRA SOAP client unit tests."""

import os
from unittest.mock import patch

import pytest

from jirasoap.jira import JiraSoapFetcher
from jirasoap.jira.config import JiraSoapConfig
from tests.fixtures.soap_mocks import make_session

TEST_TOKEN = "test-token"


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        os.environ,
        {
            "JIRA_URL": "https://jira.example.com",
            "JIRA_USERNAME": "test_username",
            "JIRA_PASSWORD": "test_password",
        },
        clear=True,  # Clear existing environment variables
    ):
        yield


@pytest.fixture
def mock_config():
    """Create a token-authenticated JiraSoapConfig."""
    return JiraSoapConfig(
        url="https://jira.example.com",
        auth_type="token",
        soap_token=TEST_TOKEN,
    )


@pytest.fixture
def basic_config():
    """Create a JiraSoapConfig that logs in with username and password."""
    return JiraSoapConfig(
        url="https://jira.example.com",
        auth_type="basic",
        username="test_username",
        password="test_password",
    )


@pytest.fixture
def fetcher_factory(mock_config):
    """Build a JiraSoapFetcher whose session answers with the given responses."""

    def _factory(*responses: str, status_code: int = 200) -> JiraSoapFetcher:
        session = make_session(*responses, status_code=status_code)
        return JiraSoapFetcher(config=mock_config, session=session)

    return _factory
