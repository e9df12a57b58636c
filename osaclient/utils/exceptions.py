"""
Exceptions raised by the OSA scan client.

Every error carries:
- A clear message (service diagnostics are kept verbatim)
- The endpoint that failed, when known
- The HTTP status code, when one was received
- The original exception, preserved for debugging
"""

from typing import Optional


class OSAClientError(Exception):
    """
    Base exception for all OSA client errors.

    The string form joins the message with its context so that operators can
    correlate it with server-side logs.
    """

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        status_code: Optional[int] = None,
        original_exception: Optional[Exception] = None,
        suggested_action: Optional[str] = None,
    ):
        """
        Initialize OSAClientError.

        Args:
            message: Human-readable error message
            endpoint: API endpoint that failed (e.g., "auth/login")
            status_code: HTTP status code returned by the server
            original_exception: The original exception that was caught
            suggested_action: Suggested action for the user to resolve the issue
        """
        self.message = message
        self.endpoint = endpoint
        self.status_code = status_code
        self.original_exception = original_exception
        self.suggested_action = suggested_action

        error_parts = [message]

        if endpoint:
            error_parts.append(f"Endpoint: {endpoint}")

        if status_code is not None:
            error_parts.append(f"Status: {status_code}")

        if suggested_action:
            error_parts.append(f"Action: {suggested_action}")

        if original_exception:
            error_parts.append(f"Original error: {str(original_exception)}")

        super().__init__(" | ".join(error_parts))


class ServiceConnectionError(OSAClientError):
    """
    Raised when the OSA server cannot be reached.

    This covers:
    - DNS resolution failures and refused connections
    - Timeouts
    - HTTP 503 (service unavailable), which is treated as a connectivity
      problem rather than an application error
    """

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        status_code: Optional[int] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            endpoint=endpoint,
            status_code=status_code,
            original_exception=original_exception,
            suggested_action="Check network connectivity and verify the OSA server is running",
        )


class ServiceError(OSAClientError):
    """
    Raised when the server answers with an HTTP error (other than 503) or
    with a body the client cannot use.
    """

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        status_code: Optional[int] = None,
        message_code: Optional[str] = None,
        message_details: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.message_code = message_code
        self.message_details = message_details
        super().__init__(
            message=message,
            endpoint=endpoint,
            status_code=status_code,
            original_exception=original_exception,
        )


class AuthenticationError(ServiceError):
    """Login answered without the session or CSRF token."""
    pass


class ScanFailedError(OSAClientError):
    """The remote scan reached the Failed state."""

    def __init__(self, message: str, scan_uri: Optional[str] = None):
        self.scan_uri = scan_uri
        super().__init__(message=message, endpoint=scan_uri)


class InvalidScanStatusError(OSAClientError):
    """The server reported a scan status code the client does not know."""

    def __init__(self, status_code: object, scan_uri: Optional[str] = None):
        self.scan_status_code = status_code
        super().__init__(
            message=f"Scan Status invalid: {status_code}",
            endpoint=scan_uri,
        )


class ScanCancelledError(OSAClientError):
    """Polling was cancelled while waiting for the next status check."""
    pass


class ScanTimeoutError(OSAClientError):
    """Polling exceeded the configured attempt or time limit."""

    def __init__(self, message: str, scan_uri: Optional[str] = None, attempts: int = 0):
        self.attempts = attempts
        super().__init__(
            message=message,
            endpoint=scan_uri,
            suggested_action="Increase the polling limits or check the scan on the server",
        )


class ValidationError(OSAClientError):
    """Local precondition failed before any request was sent."""

    def __init__(self, message: str, file_path: Optional[str] = None):
        self.file_path = file_path
        super().__init__(message=message)


class ConfigurationError(OSAClientError):
    """Client configuration is missing or invalid."""

    def __init__(self, message: str, missing_vars: Optional[list] = None):
        self.missing_vars = missing_vars or []
        super().__init__(message=message)
