"""
osaclient - client for open-source analysis (OSA) scanning servers.
"""

from osaclient.client import (
    AuthenticationCredentials,
    OpenSourceSummary,
    OSAConfig,
    ScanClient,
    ScanHandle,
    ScanOutcome,
    ScanStatus,
    ScanSubmission,
)

__version__ = "1.0.0"

__all__ = [
    "ScanClient",
    "AuthenticationCredentials",
    "OpenSourceSummary",
    "OSAConfig",
    "ScanHandle",
    "ScanOutcome",
    "ScanStatus",
    "ScanSubmission",
]
