"""
Reusable decorator for normalizing transport exceptions.

Methods that talk to the OSA server are wrapped so that any exception raised
by the HTTP library (DNS failure, refused connection, timeout, SSL error...)
reaches the caller as a single ServiceConnectionError.
"""

import functools
import logging
from typing import Callable, Optional

import requests

from .exceptions import ServiceConnectionError

FAILED_TO_CONNECT_ERROR = "connection to OSA server failed"


def handle_transport_errors(func: Callable) -> Callable:
    """
    Decorator that re-raises requests exceptions as ServiceConnectionError.

    The wrapped method receives the endpoint as its second positional
    argument (after the HTTP method), which is used for error context.

    Usage:
        @handle_transport_errors
        def request(self, method, endpoint, **kwargs):
            return self.session.request(method, url, **kwargs)
    """

    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        logger = getattr(self, "logger", logging.getLogger(func.__name__))
        endpoint = _extract_endpoint(args, kwargs)

        try:
            return func(self, *args, **kwargs)

        except requests.exceptions.Timeout as e:
            logger.warning(f"Timeout while calling {endpoint}")
            raise ServiceConnectionError(
                FAILED_TO_CONNECT_ERROR,
                endpoint=endpoint,
                original_exception=e,
            ) from e

        except requests.exceptions.RequestException as e:
            logger.warning(f"Request to {endpoint} failed: {e.__class__.__name__}")
            raise ServiceConnectionError(
                FAILED_TO_CONNECT_ERROR,
                endpoint=endpoint,
                original_exception=e,
            ) from e

    return wrapper


def _extract_endpoint(args: tuple, kwargs: dict) -> Optional[str]:
    """Pick the endpoint out of (method, endpoint, ...) call arguments."""
    if "endpoint" in kwargs:
        return kwargs["endpoint"]
    if len(args) > 1:
        return str(args[1])
    return None


__all__ = ["handle_transport_errors", "FAILED_TO_CONNECT_ERROR"]
