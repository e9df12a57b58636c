"""
Response validation and error classification.

Every response from the OSA server passes through validate_response before
its body is used.
"""

import logging
from typing import Any, Optional

import requests

from osaclient.utils.api_error_handler import FAILED_TO_CONNECT_ERROR
from osaclient.utils.exceptions import ServiceConnectionError, ServiceError
from .models import ServiceErrorPayload

SERVICE_UNAVAILABLE = 503

logger = logging.getLogger(__name__)


def validate_response(response: requests.Response, endpoint: Optional[str] = None) -> None:
    """
    Raise for HTTP-level failures.

    - status < 400: nothing happens
    - status 503: ServiceConnectionError, whatever the body says
    - any other status >= 400: ServiceError carrying the server diagnostic
      when the body holds one, otherwise a message built from the raw response
    """
    status_code = response.status_code
    if status_code < 400:
        return

    if status_code == SERVICE_UNAVAILABLE:
        logger.warning(f"OSA server unavailable (503) at {endpoint}")
        raise ServiceConnectionError(
            FAILED_TO_CONNECT_ERROR,
            endpoint=endpoint,
            status_code=status_code,
        )

    raise _service_error(response, endpoint)


def _service_error(response: requests.Response, endpoint: Optional[str]) -> ServiceError:
    payload = None
    try:
        payload = ServiceErrorPayload.from_dict(response.json())
    except ValueError:
        pass

    if payload is not None:
        logger.error(f"OSA server error {response.status_code}: {payload.message_code}")
        return ServiceError(
            str(payload),
            endpoint=endpoint,
            status_code=response.status_code,
            message_code=payload.message_code,
            message_details=payload.message_details,
        )

    logger.error(f"OSA server error {response.status_code} without diagnostic payload")
    body = (response.text or "")[:200]
    reason = response.reason or ""
    message = f"HTTP {response.status_code} {reason}".rstrip()
    if body:
        message = f"{message}: {body}"
    return ServiceError(message, endpoint=endpoint, status_code=response.status_code)


def decode_json(response: requests.Response, endpoint: Optional[str] = None) -> Any:
    """Decode a successful response body, raising ServiceError when it is not JSON"""
    try:
        return response.json()
    except ValueError as e:
        raise ServiceError(
            "Could not parse response from OSA server",
            endpoint=endpoint,
            status_code=response.status_code,
            original_exception=e,
        ) from e
