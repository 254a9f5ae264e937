"""
Tests for the JIRA SOAP Pydantic models.

These tests validate the conversion of decoded SOAP structs to models, the
fields written back into request envelopes, and the simplified dictionaries.
"""

from datetime import datetime, timezone

import pytest
from lxml import etree

from jirasoap.models import (
    EMPTY_STRING,
    JIRA_DEFAULT_ID,
    JIRA_DEFAULT_KEY,
    CustomFieldValue,
    FieldValue,
    Issue,
    NamedEntity,
    Worklog,
)
from jirasoap.soap.namespaces import SOAPENC_ARRAY_TYPE, XSI_NIL


@pytest.fixture
def issue_data():
    """A RemoteIssue struct as decoded from a response."""
    return {
        "affectsVersions": [{"archived": False, "id": "10010", "name": "v1.0beta"}],
        "assignee": "jdoe",
        "attachmentNames": ["trace.log", "screenshot.png"],
        "components": [{"id": "10020", "name": "Backend"}],
        "created": "2011-03-02T14:21:10.000Z",
        "customFieldValues": [
            {"customfieldId": "customfield_10060", "key": None, "values": ["123456"]}
        ],
        "description": "Something is broken",
        "duedate": "2011-04-01T00:00:00.000Z",
        "environment": None,
        "fixVersions": [],
        "id": "10000",
        "key": "PROJECT-1",
        "priority": "3",
        "project": "PROJECT",
        "reporter": "admin",
        "resolution": None,
        "status": "1",
        "summary": "Test Issue Summary",
        "type": "1",
        "updated": "2011-03-04T09:00:00.000Z",
        "votes": 2,
    }


class TestIssue:
    """Tests for the Issue model."""

    def test_from_api_response(self, issue_data):
        """Test creating an Issue from a RemoteIssue struct."""
        issue = Issue.from_api_response(issue_data)

        assert issue.id == "10000"
        assert issue.key == "PROJECT-1"
        assert issue.summary == "Test Issue Summary"
        assert issue.type_id == "1"
        assert issue.project_name == "PROJECT"
        assert issue.votes == 2
        assert issue.due_date == datetime(2011, 4, 1, tzinfo=timezone.utc)
        assert issue.create_time == datetime(2011, 3, 2, 14, 21, 10, tzinfo=timezone.utc)
        assert issue.affects_versions == [NamedEntity(id="10010", name="v1.0beta")]
        assert issue.components == [NamedEntity(id="10020", name="Backend")]
        assert issue.attachment_names == ["trace.log", "screenshot.png"]
        assert issue.custom_field_values == [
            CustomFieldValue(custom_field_id="customfield_10060", values=["123456"])
        ]

    def test_from_api_response_with_empty_data(self):
        """Test that empty data gives a default Issue."""
        issue = Issue.from_api_response({})

        assert issue.id == JIRA_DEFAULT_ID
        assert issue.key == JIRA_DEFAULT_KEY
        assert issue.summary == EMPTY_STRING
        assert issue.votes == 0
        assert issue.affects_versions == []
        assert issue.create_time is None

    def test_from_api_response_with_unencoded_single_values(self, issue_data):
        """Test that lone structs where arrays are expected are wrapped."""
        issue_data["fixVersions"] = {"id": "10011", "name": "v1.0"}
        issue_data["attachmentNames"] = "only.txt"
        issue_data["votes"] = "7"

        issue = Issue.from_api_response(issue_data)

        assert issue.fix_versions == [NamedEntity(id="10011", name="v1.0")]
        assert issue.attachment_names == ["only.txt"]
        assert issue.votes == 7

    def test_from_api_response_with_epoch_dates(self, issue_data):
        """Test that millisecond timestamps are accepted for dates."""
        issue_data["created"] = "1299075670000"

        issue = Issue.from_api_response(issue_data)

        assert issue.create_time == datetime(2011, 3, 2, 14, 21, 10, tzinfo=timezone.utc)

    def test_to_soap(self):
        """Test the fields written when creating an issue."""
        issue = Issue(
            project_name="PROJECT",
            type_id="1",
            priority_id="2",
            summary="New issue",
            assignee_username="jdoe",
            reporter_username="admin",
            fix_versions=[NamedEntity(id="10011", name="v1.0")],
            components=[NamedEntity(id="10020")],
            custom_field_values=[
                CustomFieldValue(custom_field_id="customfield_10060", values=["1"])
            ],
        )
        element = etree.Element("in1")

        issue.to_soap(element)

        assert [child.tag for child in element] == [
            "project",
            "type",
            "priority",
            "summary",
            "description",
            "environment",
            "assignee",
            "duedate",
            "affectsVersions",
            "fixVersions",
            "components",
            "customFieldValues",
        ]
        assert element.find("assignee").text == "jdoe"
        assert element.find("duedate").get(XSI_NIL) == "true"
        assert element.find("affectsVersions").get(SOAPENC_ARRAY_TYPE) == (
            "beans:RemoteVersion[0]"
        )
        assert element.find("fixVersions").get(SOAPENC_ARRAY_TYPE) == (
            "beans:RemoteVersion[1]"
        )
        assert element.find("components").get(SOAPENC_ARRAY_TYPE) == (
            "beans:RemoteComponent[1]"
        )
        (custom,) = list(element.find("customFieldValues"))
        assert custom.find("customfieldId").text == "customfield_10060"
        assert custom.find("key").get(XSI_NIL) == "true"

    def test_to_simplified_dict(self, issue_data):
        """Test the compact dictionary of an issue."""
        simplified = Issue.from_api_response(issue_data).to_simplified_dict()

        assert simplified["key"] == "PROJECT-1"
        assert simplified["summary"] == "Test Issue Summary"
        assert simplified["assignee_username"] == "jdoe"
        assert simplified["created"] == "2011-03-02T14:21:10+00:00"
        assert "fix_versions" not in simplified
        assert "description" not in simplified


class TestNamedEntity:
    """Tests for the NamedEntity model."""

    def test_from_api_response(self):
        """Test creating a NamedEntity from a struct."""
        entity = NamedEntity.from_api_response({"id": 4, "name": "Start Progress"})

        assert entity.id == "4"
        assert entity.name == "Start Progress"

    def test_from_api_response_with_invalid_data(self):
        """Test that non-struct data gives a default NamedEntity."""
        assert NamedEntity.from_api_response("junk") == NamedEntity()
        assert NamedEntity.from_api_response(None) == NamedEntity()


class TestFieldValue:
    """Tests for the FieldValue model."""

    def test_positional_construction(self):
        """Test that a name and single value can be passed positionally."""
        value = FieldValue("summary", "My new summary")

        assert value.field_name == "summary"
        assert value.values == ["My new summary"]

    def test_values_are_coerced_to_strings(self):
        """Test that values are always a list of strings."""
        assert FieldValue("versions", ("10010", 10011)).values == ["10010", "10011"]
        assert FieldValue("priority", 2).values == ["2"]

    def test_missing_values_blank_the_field(self):
        """Test that omitting the values gives an empty list."""
        assert FieldValue("description").values == []
        assert FieldValue("description", None).values == []

    def test_to_soap_blank_field(self):
        """Test that blanking a field sends an empty string array."""
        element = etree.Element("item")

        FieldValue("description").to_soap(element)

        assert element.find("id").text == "description"
        values = element.find("values")
        assert values.get(SOAPENC_ARRAY_TYPE) == "xsd:string[0]"
        assert len(values) == 0

    def test_from_api_response(self):
        """Test creating a FieldValue from a RemoteFieldValue struct."""
        value = FieldValue.from_api_response({"id": "fixVersions", "values": "10010"})

        assert value == FieldValue("fixVersions", ["10010"])

    def test_from_api_response_requires_struct(self):
        """Test that non-struct data is rejected."""
        with pytest.raises(ValueError, match="must be a struct"):
            FieldValue.from_api_response("fixVersions")


class TestCustomFieldValue:
    """Tests for the CustomFieldValue model."""

    def test_from_api_response(self):
        """Test creating a CustomFieldValue from a struct."""
        value = CustomFieldValue.from_api_response(
            {"customfieldId": "customfield_10285", "key": "1", "values": "Detail"}
        )

        assert value.custom_field_id == "customfield_10285"
        assert value.key == "1"
        assert value.values == ["Detail"]


class TestWorklog:
    """Tests for the Worklog model."""

    def test_from_api_response(self):
        """Test creating a Worklog from a RemoteWorklog struct."""
        worklog = Worklog.from_api_response(
            {
                "author": "jdoe",
                "comment": "Fixed the build",
                "created": "2011-03-05T10:00:00.000Z",
                "groupLevel": None,
                "id": "10100",
                "roleLevelId": "10002",
                "startDate": "2011-03-05T08:30:00.000Z",
                "timeSpent": "1h 30m",
                "timeSpentInSeconds": 5400,
                "updateAuthor": "asmith",
                "updated": "2011-03-05T10:00:00.000Z",
            }
        )

        assert worklog.id == "10100"
        assert worklog.start_date == datetime(2011, 3, 5, 8, 30, tzinfo=timezone.utc)
        assert worklog.time_spent_in_seconds == 5400
        assert worklog.update_author == "asmith"
        assert worklog.role_level_id == "10002"
        assert worklog.group_level is None

    def test_from_api_response_with_empty_data(self):
        """Test that empty data gives a default Worklog."""
        worklog = Worklog.from_api_response({})

        assert worklog.id is None
        assert worklog.time_spent == EMPTY_STRING
        assert worklog.time_spent_in_seconds == 0

    def test_to_soap(self):
        """Test that only the caller-supplied fields are written."""
        worklog = Worklog(
            id="10100",
            comment="Pairing",
            start_date=datetime(2011, 3, 5, 8, 30, tzinfo=timezone.utc),
            time_spent="2h",
            author="jdoe",
        )
        element = etree.Element("in2")

        worklog.to_soap(element)

        assert [child.tag for child in element] == ["comment", "startDate", "timeSpent"]
        assert element.find("startDate").text == "2011-03-05T08:30:00+00:00"

    def test_to_simplified_dict(self):
        """Test the compact dictionary of a worklog."""
        worklog = Worklog(
            id="10100",
            time_spent="2h",
            time_spent_in_seconds=7200,
            start_date=datetime(2011, 3, 5, 8, 30, tzinfo=timezone.utc),
        )

        assert worklog.to_simplified_dict() == {
            "id": "10100",
            "time_spent": "2h",
            "time_spent_in_seconds": 7200,
            "start_date": "2011-03-05T08:30:00+00:00",
        }
