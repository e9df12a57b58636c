"""
Shared fixtures for OSA client tests.
"""

import json
from unittest.mock import Mock

import pytest
import requests

from osaclient.client.models import AuthenticationCredentials, OSAConfig, Session
from osaclient.client.transport import Transport


def build_response(status_code=200, json_body=None, text=None, cookies=None, reason=None):
    """Build a real requests.Response without touching the network"""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason if reason is not None else ("OK" if status_code < 400 else "Error")
    response.encoding = "utf-8"

    if json_body is not None:
        response._content = json.dumps(json_body).encode("utf-8")
    elif text is not None:
        response._content = text.encode("utf-8")
    else:
        response._content = b""

    for name, value in (cookies or {}).items():
        response.cookies.set(name, value)

    return response


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def login_response():
    return build_response(200, json_body={}, cookies={"cxCookie": "session-A", "CXCSRFToken": "csrf-B"})


@pytest.fixture
def session():
    return Session(session_cookie="session-A", csrf_token="csrf-B")


@pytest.fixture
def credentials():
    return AuthenticationCredentials(username="jenkins", password="s3cret")


@pytest.fixture
def client_config():
    return OSAConfig(server_url="https://osa.example.com", poll_interval=5)


@pytest.fixture
def mock_transport():
    """Transport mock whose close() can be asserted"""
    transport = Mock(spec=Transport)
    return transport


@pytest.fixture
def archive(tmp_path):
    path = tmp_path / "sources.zip"
    path.write_bytes(b"PK\x03\x04 fake zip content")
    return str(path)
