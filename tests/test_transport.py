"""
Tests for the HTTP transport.
"""

from unittest.mock import Mock

import pytest
import requests

from osaclient.client.transport import Transport, create_http_session, project_endpoint
from osaclient.utils.exceptions import ServiceConnectionError


class TestTransport:
    """Test cases for Transport"""

    def setup_method(self):
        self.session = Mock(spec=requests.Session)
        self.session.cookies = requests.cookies.RequestsCookieJar()
        self.transport = Transport("https://osa.example.com/CxRestAPI", timeout=30, session=self.session)

    def test_api_url_gets_trailing_slash(self):
        assert self.transport.api_url == "https://osa.example.com/CxRestAPI/"

    def test_resolve_relative_endpoint(self):
        assert self.transport.resolve("auth/login") == "https://osa.example.com/CxRestAPI/auth/login"

    def test_resolve_strips_leading_slash(self):
        assert self.transport.resolve("/projects/1/scans") == "https://osa.example.com/CxRestAPI/projects/1/scans"

    def test_resolve_absolute_url_is_unchanged(self):
        link = "https://osa.example.com/CxRestAPI/osa/scans/99"
        assert self.transport.resolve(link) == link

    def test_request_uses_default_timeout(self, make_response):
        self.session.request.return_value = make_response(200)

        self.transport.get("projects/1/summaryresults")

        self.session.request.assert_called_once_with(
            "GET",
            "https://osa.example.com/CxRestAPI/projects/1/summaryresults",
            timeout=30,
        )

    def test_request_passes_through_keyword_arguments(self, make_response):
        self.session.request.return_value = make_response(200)

        self.transport.post("auth/login", json={"username": "u"}, timeout=5)

        _, kwargs = self.session.request.call_args
        assert kwargs == {"json": {"username": "u"}, "timeout": 5}

    def test_transport_failure_is_normalized(self):
        self.session.request.side_effect = requests.exceptions.ConnectionError("Connection refused")

        with pytest.raises(ServiceConnectionError) as exc_info:
            self.transport.post("auth/login", json={})

        assert exc_info.value.endpoint == "auth/login"
        assert isinstance(exc_info.value.original_exception, requests.exceptions.ConnectionError)

    def test_cookies_are_not_kept_between_calls(self, make_response):
        def respond(method, url, **kwargs):
            self.session.cookies.set("cxCookie", "leaked")
            return make_response(200)

        self.session.request.side_effect = respond

        self.transport.post("auth/login", json={})

        assert len(self.session.cookies) == 0

    def test_close_releases_session_once(self):
        self.transport.close()
        self.transport.close()

        self.session.close.assert_called_once()

    def test_context_manager_closes_on_error(self):
        with pytest.raises(RuntimeError):
            with self.transport:
                raise RuntimeError("boom")

        self.session.close.assert_called_once()


class TestCreateHttpSession:
    """Test cases for create_http_session"""

    def test_adapters_do_not_retry(self):
        session = create_http_session("osa-test/1.0")

        for prefix in ("http://", "https://"):
            assert session.get_adapter(prefix + "osa.example.com").max_retries.total == 0

        assert session.headers["User-Agent"] == "osa-test/1.0"


class TestProjectEndpoint:
    """Test cases for project_endpoint"""

    def test_plain_id(self):
        assert project_endpoint("projects/{project_id}/scans", "42") == "projects/42/scans"

    def test_reserved_characters_are_encoded(self):
        endpoint = project_endpoint("projects/{project_id}/summaryresults", "team/a?x=1#frag")

        assert endpoint == "projects/team%2Fa%3Fx%3D1%23frag/summaryresults"
        with Transport("https://osa.example.com/CxRestAPI") as transport:
            assert transport.resolve(endpoint) == "https://osa.example.com/CxRestAPI/projects/team%2Fa%3Fx%3D1%23frag/summaryresults"
