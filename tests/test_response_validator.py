"""
Tests for response validation and error classification.
"""

import pytest

from osaclient.client.response_validator import decode_json, validate_response
from osaclient.utils.api_error_handler import FAILED_TO_CONNECT_ERROR
from osaclient.utils.exceptions import ServiceConnectionError, ServiceError


DIAGNOSTIC = {"messageCode": "OSA-1042", "messageDetails": "Project 42 does not exist"}


class TestValidateResponse:
    """Test cases for validate_response"""

    @pytest.mark.parametrize("status_code", [200, 201, 202, 204, 301, 302, 304, 399])
    def test_status_below_400_passes(self, make_response, status_code):
        assert validate_response(make_response(status_code)) is None

    @pytest.mark.parametrize("body", [None, DIAGNOSTIC, "<html>maintenance</html>"])
    def test_503_is_a_connection_error_regardless_of_body(self, make_response, body):
        if isinstance(body, dict):
            response = make_response(503, json_body=body)
        else:
            response = make_response(503, text=body)

        with pytest.raises(ServiceConnectionError) as exc_info:
            validate_response(response, "auth/login")

        assert exc_info.value.message == FAILED_TO_CONNECT_ERROR
        assert exc_info.value.status_code == 503

    @pytest.mark.parametrize("status_code", [400, 401, 403, 404, 409, 500, 502, 504])
    def test_error_with_diagnostic_contains_code_and_details(self, make_response, status_code):
        response = make_response(status_code, json_body=DIAGNOSTIC)

        with pytest.raises(ServiceError) as exc_info:
            validate_response(response, "projects/42/scans")

        error = exc_info.value
        assert not isinstance(error, ServiceConnectionError)
        assert error.status_code == status_code
        assert error.message_code == "OSA-1042"
        assert error.message_details == "Project 42 does not exist"
        assert error.message == "OSA-1042\nProject 42 does not exist"
        assert "OSA-1042" in str(error)
        assert "Project 42 does not exist" in str(error)

    def test_error_without_body_gets_generic_message(self, make_response):
        response = make_response(500, reason="Internal Server Error")

        with pytest.raises(ServiceError) as exc_info:
            validate_response(response)

        assert exc_info.value.message == "HTTP 500 Internal Server Error"
        assert exc_info.value.message_code is None

    def test_error_with_non_json_body_includes_raw_text(self, make_response):
        response = make_response(404, text="Not Found: /CxRestAPI/projects/9", reason="Not Found")

        with pytest.raises(ServiceError) as exc_info:
            validate_response(response)

        assert exc_info.value.message == "HTTP 404 Not Found: Not Found: /CxRestAPI/projects/9"

    def test_error_with_unrelated_json_is_generic(self, make_response):
        response = make_response(400, json_body={"error": "bad"})

        with pytest.raises(ServiceError) as exc_info:
            validate_response(response)

        assert exc_info.value.message_code is None
        assert '{"error": "bad"}' in exc_info.value.message

    def test_raw_body_is_truncated(self, make_response):
        response = make_response(500, text="x" * 1000)

        with pytest.raises(ServiceError) as exc_info:
            validate_response(response)

        assert exc_info.value.message.count("x") == 200


class TestDecodeJson:
    """Test cases for decode_json"""

    def test_decodes_json_body(self, make_response):
        assert decode_json(make_response(200, json_body={"status": 1})) == {"status": 1}

    def test_invalid_body_raises_service_error(self, make_response):
        with pytest.raises(ServiceError) as exc_info:
            decode_json(make_response(200, text="not json"), "projects/1/scans")

        assert "Could not parse response" in exc_info.value.message
        assert exc_info.value.endpoint == "projects/1/scans"
