"""
OSA Scan Client

Client-side orchestration for the open-source analysis service:

Step 1: Authentication - log in and obtain the session and CSRF tokens
Step 2: Submission - upload the source archive and receive the scan link
Step 3: Polling - query the scan link until it reaches a terminal state
Step 4: Summary - fetch the open-source summary of the project
"""

from osaclient.utils.exceptions import (
    OSAClientError,
    ServiceConnectionError,
    ServiceError,
    AuthenticationError,
    ScanFailedError,
    InvalidScanStatusError,
    ScanCancelledError,
    ScanTimeoutError,
    ValidationError,
    ConfigurationError
)
from .models import (
    AuthenticationCredentials,
    OpenSourceSummary,
    OSAConfig,
    ScanHandle,
    ScanOutcome,
    ScanStatus,
    ScanSubmission,
    Session
)
from .environment_detector import OSAEnvironmentDetector
from .scan_client import ScanClient

__all__ = [
    'ScanClient',
    'OSAEnvironmentDetector',
    'AuthenticationCredentials',
    'OpenSourceSummary',
    'OSAConfig',
    'ScanHandle',
    'ScanOutcome',
    'ScanStatus',
    'ScanSubmission',
    'Session',
    'OSAClientError',
    'ServiceConnectionError',
    'ServiceError',
    'AuthenticationError',
    'ScanFailedError',
    'InvalidScanStatusError',
    'ScanCancelledError',
    'ScanTimeoutError',
    'ValidationError',
    'ConfigurationError'
]
