"""
Utility modules for the OSA scan client.

This package contains shared utility functions and classes, including the
exception hierarchy and normalization of transport exceptions raised by the
HTTP library.
"""

from osaclient.utils.api_error_handler import (
    FAILED_TO_CONNECT_ERROR,
    handle_transport_errors,
)
from osaclient.utils.exceptions import (
    AuthenticationError,
    ConfigurationError,
    InvalidScanStatusError,
    OSAClientError,
    ScanCancelledError,
    ScanFailedError,
    ScanTimeoutError,
    ServiceConnectionError,
    ServiceError,
    ValidationError,
)

__all__ = [
    "handle_transport_errors",
    "FAILED_TO_CONNECT_ERROR",
    "OSAClientError",
    "ServiceConnectionError",
    "ServiceError",
    "AuthenticationError",
    "ScanFailedError",
    "InvalidScanStatusError",
    "ScanCancelledError",
    "ScanTimeoutError",
    "ValidationError",
    "ConfigurationError",
]
