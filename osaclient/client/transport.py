"""
HTTP transport for the OSA REST API.

Owns a single requests.Session, resolves endpoints against the API root and
normalizes transport failures into ServiceConnectionError.
"""

import logging
from typing import Optional
from urllib.parse import quote, urljoin, urlparse

import requests
from requests.adapters import HTTPAdapter

from osaclient.utils.api_error_handler import handle_transport_errors


def create_http_session(user_agent: str) -> requests.Session:
    """
    Create an HTTP session without automatic retries.

    Retry policy belongs to the caller, so the adapters are mounted with
    max_retries=0.
    """
    session = requests.Session()

    adapter = HTTPAdapter(max_retries=0)
    session.mount("http://", adapter)
    session.mount("https://", adapter)

    session.headers.update({"User-Agent": user_agent, "Accept": "application/json"})
    return session


def project_endpoint(template: str, project_id: str) -> str:
    """Fill a projects/{project_id}/... template; the id is always a single path segment"""
    return template.format(project_id=quote(str(project_id), safe=""))


class Transport:
    """Issues HTTP requests against the OSA API root"""

    def __init__(
        self,
        api_url: str,
        timeout: int = 60,
        session: Optional[requests.Session] = None,
    ):
        self.api_url = api_url if api_url.endswith("/") else f"{api_url}/"
        self.timeout = timeout
        self.session = session or create_http_session("osa-scan-client/1.0")
        self.logger = logging.getLogger(self.__class__.__name__)
        self._closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def resolve(self, endpoint: str) -> str:
        """Resolve an endpoint relative to the API root; absolute URLs pass through"""
        if urlparse(endpoint).scheme in ("http", "https"):
            return endpoint
        return urljoin(self.api_url, endpoint.lstrip("/"))

    @handle_transport_errors
    def request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """Send a request; transport failures surface as ServiceConnectionError"""
        url = self.resolve(endpoint)
        kwargs.setdefault("timeout", self.timeout)

        self.logger.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, **kwargs)
        finally:
            # Tokens travel with each call explicitly, never through the jar
            self.session.cookies.clear()

        self.logger.debug(f"{method} {url} -> {response.status_code}")
        return response

    def get(self, endpoint: str, **kwargs) -> requests.Response:
        return self.request("GET", endpoint, **kwargs)

    def post(self, endpoint: str, **kwargs) -> requests.Response:
        return self.request("POST", endpoint, **kwargs)

    def close(self):
        if not self._closed:
            self.session.close()
            self._closed = True
