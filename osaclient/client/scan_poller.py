"""
Scan status polling.

The server offers no push notification, so completion is detected by
querying the scan link at a fixed interval until a terminal state appears.
"""

import logging
import threading
import time
from typing import Callable, Optional

from osaclient.utils.exceptions import ScanCancelledError, ScanTimeoutError, ServiceError
from .models import ScanHandle, ScanOutcome, ScanStatus, ScanStatusResponse, Session
from .response_validator import decode_json, validate_response
from .session_manager import require_session
from .transport import Transport

DEFAULT_POLL_INTERVAL = 5.0


class ScanPoller:
    """Blocks until a scan reaches Finished, Failed or an unknown status"""

    def __init__(
        self,
        transport: Transport,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        max_attempts: Optional[int] = None,
        max_wait_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.transport = transport
        self.poll_interval = poll_interval
        self.max_attempts = max_attempts
        self.max_wait_seconds = max_wait_seconds
        self.clock = clock
        self.logger = logging.getLogger(self.__class__.__name__)

    def check_status(self, session: Session, handle: ScanHandle) -> ScanStatusResponse:
        """Issue one authenticated status query"""
        endpoint = handle.uri
        require_session(session, endpoint)

        response = self.transport.get(
            endpoint,
            cookies=session.auth_cookies(),
            headers=session.auth_headers(),
        )
        validate_response(response, endpoint)

        data = decode_json(response, endpoint)
        if not isinstance(data, dict):
            raise ServiceError(
                "Scan status response is not an object",
                endpoint=endpoint,
                status_code=response.status_code,
            )
        return ScanStatusResponse.from_dict(data)

    def poll(
        self,
        session: Session,
        handle: ScanHandle,
        cancel_event: Optional[threading.Event] = None,
    ) -> ScanOutcome:
        """
        Query the scan until it leaves the InProgress state.

        Returns a ScanOutcome for every terminal or unrecognized status.
        Raises ScanCancelledError when cancel_event is set during a wait and
        ScanTimeoutError when max_attempts or max_wait_seconds is exceeded.
        Connectivity and HTTP failures propagate from the first failing query.
        """
        cancel_event = cancel_event or threading.Event()
        started = self.clock()
        attempts = 0

        while True:
            attempts += 1
            status_response = self.check_status(session, handle)
            status = status_response.status

            if status != ScanStatus.IN_PROGRESS:
                self.logger.info(f"Scan {handle.uri} ended with status {status.name} after {attempts} checks")
                return ScanOutcome(
                    status=status,
                    message=status_response.message,
                    attempts=attempts,
                    status_code=status_response.status_code,
                )

            self._check_limits(handle, attempts, started)

            self.logger.debug(f"Scan {handle.uri} in progress, next check in {self.poll_interval}s")
            if cancel_event.wait(self.poll_interval):
                self.logger.info(f"Polling of {handle.uri} cancelled after {attempts} checks")
                raise ScanCancelledError(
                    "Waiting for scan to finish was cancelled",
                    endpoint=handle.uri,
                )

    def _check_limits(self, handle: ScanHandle, attempts: int, started: float) -> None:
        if self.max_attempts is not None and attempts >= self.max_attempts:
            raise ScanTimeoutError(
                f"Scan did not finish after {attempts} status checks",
                scan_uri=handle.uri,
                attempts=attempts,
            )

        if self.max_wait_seconds is not None:
            elapsed = self.clock() - started
            if elapsed + self.poll_interval > self.max_wait_seconds:
                raise ScanTimeoutError(
                    f"Scan did not finish within {self.max_wait_seconds}s",
                    scan_uri=handle.uri,
                    attempts=attempts,
                )
