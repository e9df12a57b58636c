"""
OSA Scan Client

Facade over the session manager, submitter and poller. Each public
operation logs in again, so security tokens never outlive the operation
that acquired them.
"""

import logging
import threading
from typing import Optional

from osaclient.utils.exceptions import InvalidScanStatusError, ScanFailedError, ServiceError
from .file_validator import ArchiveValidator
from .models import (
    AuthenticationCredentials,
    OpenSourceSummary,
    OSAConfig,
    ScanHandle,
    ScanOutcome,
    ScanStatus,
    ScanStatusResponse,
    ScanSubmission,
)
from .response_validator import decode_json, validate_response
from .scan_poller import ScanPoller
from .scan_submitter import ScanSubmitter
from .session_manager import SessionManager
from .transport import Transport, project_endpoint

ANALYZE_SUMMARY_PATH = "projects/{project_id}/summaryresults"


class ScanClient:
    """
    Client for the OSA scanning service.

    Not safe for simultaneous operations from several threads; create one
    client per concurrent scan.

    Usage:
        with ScanClient(config, credentials) as client:
            summary = client.run_scan(ScanSubmission("42", "sources.zip"))
    """

    def __init__(
        self,
        config: OSAConfig,
        credentials: AuthenticationCredentials,
        transport: Optional[Transport] = None,
    ):
        self.config = config
        self.credentials = credentials
        self.transport = transport or Transport(config.api_url, timeout=config.timeout)
        self.logger = logging.getLogger(self.__class__.__name__)

        self.session_manager = SessionManager(self.transport)
        self.submitter = ScanSubmitter(
            self.transport,
            default_origin=config.origin,
            validator=ArchiveValidator(max_size_mb=config.max_archive_size_mb),
        )
        self.poller = ScanPoller(
            self.transport,
            poll_interval=config.poll_interval,
            max_attempts=config.max_poll_attempts,
            max_wait_seconds=config.max_wait_seconds,
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def create_scan(self, submission: ScanSubmission) -> ScanHandle:
        """Upload the archive and return the link to the new scan"""
        self.submitter.validate(submission)
        session = self.session_manager.authenticate(self.credentials)
        return self.submitter.submit_scan(session, submission)

    def get_scan_status(self, handle: ScanHandle) -> ScanStatusResponse:
        """Single status query, without waiting"""
        session = self.session_manager.authenticate(self.credentials)
        return self.poller.check_status(session, handle)

    def poll_scan(
        self,
        handle: ScanHandle,
        cancel_event: Optional[threading.Event] = None,
    ) -> ScanOutcome:
        """Wait for a terminal state and return it without raising for Failed"""
        session = self.session_manager.authenticate(self.credentials)
        return self.poller.poll(session, handle, cancel_event)

    def wait_for_scan_to_finish(
        self,
        handle: ScanHandle,
        cancel_event: Optional[threading.Event] = None,
    ) -> ScanOutcome:
        """
        Block until the scan finishes.

        Raises ScanFailedError with the server message when the scan fails and
        InvalidScanStatusError when the server reports an unknown status.
        """
        outcome = self.poll_scan(handle, cancel_event)

        if outcome.status == ScanStatus.FINISHED:
            return outcome
        if outcome.status == ScanStatus.FAILED:
            raise ScanFailedError(outcome.message or "Scan failed", scan_uri=handle.uri)
        raise InvalidScanStatusError(outcome.status_code, scan_uri=handle.uri)

    def get_open_source_summary(self, project_id: str) -> OpenSourceSummary:
        """GET projects/{project_id}/summaryresults"""
        session = self.session_manager.authenticate(self.credentials)
        endpoint = project_endpoint(ANALYZE_SUMMARY_PATH, project_id)

        response = self.transport.get(
            endpoint,
            cookies=session.auth_cookies(),
            headers=session.auth_headers(),
        )
        validate_response(response, endpoint)

        data = decode_json(response, endpoint)
        if not isinstance(data, dict):
            raise ServiceError(
                "Summary response is not an object",
                endpoint=endpoint,
                status_code=response.status_code,
            )
        return OpenSourceSummary.from_dict(data)

    def run_scan(
        self,
        submission: ScanSubmission,
        cancel_event: Optional[threading.Event] = None,
    ) -> OpenSourceSummary:
        """Submit, wait for completion and fetch the project summary"""
        handle = self.create_scan(submission)
        self.wait_for_scan_to_finish(handle, cancel_event)
        return self.get_open_source_summary(submission.project_id)

    def close(self):
        self.transport.close()
