"""
Scan submission: multipart upload of a source archive.
"""

import logging
import os
from typing import Any, Optional

from osaclient.utils.exceptions import ServiceError
from .file_validator import ArchiveValidator
from .models import ScanHandle, ScanSubmission, Session
from .response_validator import decode_json, validate_response
from .session_manager import require_session
from .transport import Transport, project_endpoint

ANALYZE_PATH = "projects/{project_id}/scans"
ARCHIVE_FIELD_NAME = "OSAZippedSourceCode"
ORIGIN_FIELD_NAME = "origin"


class ScanSubmitter:
    """Uploads archives and returns the link to the created scan"""

    def __init__(
        self,
        transport: Transport,
        default_origin: int = 1,
        validator: Optional[ArchiveValidator] = None,
    ):
        self.transport = transport
        self.default_origin = default_origin
        self.validator = validator or ArchiveValidator()
        self.logger = logging.getLogger(self.__class__.__name__)

    def validate(self, submission: ScanSubmission) -> None:
        """Check the archive locally; raises ValidationError"""
        self.validator.ensure_valid(submission.archive_path)

    def submit_scan(self, session: Session, submission: ScanSubmission) -> ScanHandle:
        """POST projects/{project_id}/scans with the archive and origin tag"""
        self.validate(submission)

        endpoint = project_endpoint(ANALYZE_PATH, submission.project_id)
        require_session(session, endpoint)

        origin = submission.origin if submission.origin is not None else self.default_origin
        archive_name = os.path.basename(submission.archive_path)
        archive_info = self.validator.get_archive_summary(submission.archive_path)
        self.logger.info(
            f"Submitting {archive_name} ({archive_info['size_mb']:.2f}MB) for project {submission.project_id}"
        )

        with open(submission.archive_path, "rb") as archive:
            response = self.transport.post(
                endpoint,
                data={ORIGIN_FIELD_NAME: str(int(origin))},
                files={ARCHIVE_FIELD_NAME: (archive_name, archive, "application/zip")},
                cookies=session.auth_cookies(),
                headers=session.auth_headers(),
            )

        validate_response(response, endpoint)
        link = extract_link(decode_json(response, endpoint))
        if not link:
            raise ServiceError(
                "Scan creation response did not contain a scan link",
                endpoint=endpoint,
                status_code=response.status_code,
            )

        self.logger.info(f"Scan created: {link}")
        return ScanHandle(uri=link)


def extract_link(data: Any) -> Optional[str]:
    """Read the scan link; it is either a plain string or an object with a uri"""
    if not isinstance(data, dict):
        return None

    link = data.get("link")
    if isinstance(link, dict):
        link = link.get("uri") or link.get("href")
    if isinstance(link, str) and link.strip():
        return link.strip()
    return None
