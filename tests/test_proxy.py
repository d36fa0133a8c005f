import pytest
import requests

from lxml import etree

from oae_bbb.proxy import execute_bbb_call, response_to_dict

from conftest import xml_response

MEETING_INFO = """<response>
  <returncode>SUCCESS</returncode>
  <meetingName>Weekly sync</meetingName>
  <meetingID>abc</meetingID>
  <moderatorPW>mp</moderatorPW>
  <attendeePW>ap</attendeePW>
  <attendees>
    <attendee><userID>u1</userID><fullName>Ada</fullName><role>MODERATOR</role></attendee>
    <attendee><userID>u2</userID><fullName>Bob</fullName><role>VIEWER</role></attendee>
  </attendees>
  <metadata/>
</response>"""


def test_execute_bbb_call_returns_response_dict(requests_get):
    requests_get.return_value = xml_response(MEETING_INFO)

    result = execute_bbb_call("http://bbb/api/getMeetingInfo?meetingID=abc&checksum=x")

    requests_get.assert_called_once()
    assert requests_get.call_args[0][0] == "http://bbb/api/getMeetingInfo?meetingID=abc&checksum=x"
    assert result["returncode"] == "SUCCESS"
    assert result["moderatorPW"] == "mp"
    assert result["metadata"] == ""
    attendees = result["attendees"]["attendee"]
    assert [a["fullName"] for a in attendees] == ["Ada", "Bob"]


def test_single_child_is_not_a_list(requests_get):
    requests_get.return_value = xml_response(
        "<response><returncode>SUCCESS</returncode>"
        "<attendees><attendee><userID>u1</userID></attendee></attendees></response>")

    result = execute_bbb_call("http://bbb/api/getMeetingInfo")
    assert result["attendees"]["attendee"] == {"userID": "u1"}


def test_failed_returncode_is_returned(requests_get):
    requests_get.return_value = xml_response(
        "<response><returncode>FAILED</returncode><messageKey>notFound</messageKey>"
        "<message>We could not find a meeting with that meeting ID</message></response>")

    result = execute_bbb_call("http://bbb/api/getMeetingInfo")
    assert result["returncode"] == "FAILED"
    assert result["messageKey"] == "notFound"


def test_xml_errors_propagate(requests_get):
    requests_get.return_value = xml_response("<html><body>oops")

    with pytest.raises(etree.XMLSyntaxError):
        execute_bbb_call("http://bbb/api/getMeetingInfo")


def test_http_errors_propagate(requests_get):
    error = requests.ConnectionError("refused")
    requests_get.side_effect = error

    with pytest.raises(requests.ConnectionError) as excinfo:
        execute_bbb_call("http://bbb/api/getMeetingInfo")
    assert excinfo.value is error


def test_http_status_errors_propagate(requests_get):
    response = xml_response("<response/>", status_code=500)
    response.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
    requests_get.return_value = response

    with pytest.raises(requests.HTTPError):
        execute_bbb_call("http://bbb/api/getMeetingInfo")


def test_response_nested_under_another_root():
    xml = etree.fromstring("<envelope><response><returncode>SUCCESS</returncode></response></envelope>")
    assert response_to_dict(xml) == {'returncode': 'SUCCESS'}


def test_missing_response_element():
    xml = etree.fromstring("<html><body>Not Found</body></html>")
    assert response_to_dict(xml) == {}
