"""
Data Models for the OSA scan workflow

Dataclass-based models shared by the session manager, submitter, poller
and the client facade.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

SESSION_COOKIE = "cxCookie"
CSRF_TOKEN = "CXCSRFToken"


class ScanStatus(Enum):
    """Scan status as reported by the server"""
    UNKNOWN = -1
    IN_PROGRESS = 0
    FINISHED = 1
    FAILED = 2

    @classmethod
    def from_code(cls, code: Any) -> "ScanStatus":
        """Map a numeric status code to a ScanStatus; anything unrecognized is UNKNOWN"""
        if isinstance(code, bool) or not isinstance(code, int):
            return cls.UNKNOWN
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class AuthenticationCredentials:
    """Credentials used to log in to the OSA server"""
    username: str
    password: str = field(repr=False)

    def to_payload(self) -> Dict[str, str]:
        return {"username": self.username, "password": self.password}


@dataclass(frozen=True)
class Session:
    """Security tokens for one logical operation"""
    session_cookie: str = field(repr=False)
    csrf_token: str = field(repr=False)

    def is_complete(self) -> bool:
        return bool(self.session_cookie) and bool(self.csrf_token)

    def auth_cookies(self) -> Dict[str, str]:
        """Cookies sent on every authenticated call"""
        return {
            SESSION_COOKIE: self.session_cookie,
            CSRF_TOKEN: self.csrf_token,
        }

    def auth_headers(self) -> Dict[str, str]:
        """The CSRF token is submitted twice: as a cookie and as this header"""
        return {CSRF_TOKEN: self.csrf_token}


@dataclass
class ScanSubmission:
    """A source archive to be scanned for a project"""
    project_id: str
    archive_path: str
    origin: Optional[int] = None


@dataclass(frozen=True)
class ScanHandle:
    """Link to a scan resource created on the server"""
    uri: str

    def __str__(self) -> str:
        return self.uri


@dataclass
class ScanStatusResponse:
    """Body of a scan status query"""
    status: ScanStatus
    status_code: Any
    message: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScanStatusResponse":
        code = data.get("status")
        return cls(
            status=ScanStatus.from_code(code),
            status_code=code,
            message=data.get("message"),
        )


@dataclass
class ServiceErrorPayload:
    """Structured diagnostic returned by the server on errors"""
    message_code: str
    message_details: str

    @classmethod
    def from_dict(cls, data: Any) -> Optional["ServiceErrorPayload"]:
        if not isinstance(data, dict):
            return None
        if "messageCode" not in data and "messageDetails" not in data:
            return None
        return cls(
            message_code=str(data.get("messageCode") or ""),
            message_details=str(data.get("messageDetails") or ""),
        )

    def __str__(self) -> str:
        return f"{self.message_code}\n{self.message_details}"


@dataclass
class ScanOutcome:
    """Terminal result of polling a scan"""
    status: ScanStatus
    message: Optional[str] = None
    attempts: int = 0
    status_code: Any = None

    @property
    def succeeded(self) -> bool:
        return self.status == ScanStatus.FINISHED


@dataclass
class OpenSourceSummary:
    """Open-source analysis summary for a project"""
    total_libraries: Optional[int] = None
    high_vulnerability_libraries: Optional[int] = None
    medium_vulnerability_libraries: Optional[int] = None
    low_vulnerability_libraries: Optional[int] = None
    no_known_vulnerability_libraries: Optional[int] = None
    vulnerable_and_updated: Optional[int] = None
    vulnerable_and_outdated: Optional[int] = None
    high_vulnerabilities: Optional[int] = None
    medium_vulnerabilities: Optional[int] = None
    low_vulnerabilities: Optional[int] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    FIELD_MAP = {
        "totalLibraries": "total_libraries",
        "highVulnerabilityLibraries": "high_vulnerability_libraries",
        "mediumVulnerabilityLibraries": "medium_vulnerability_libraries",
        "lowVulnerabilityLibraries": "low_vulnerability_libraries",
        "noKnownVulnerabilityLibraries": "no_known_vulnerability_libraries",
        "vulnerableAndUpdated": "vulnerable_and_updated",
        "vulnerableAndOutdated": "vulnerable_and_outdated",
        "highVulnerabilities": "high_vulnerabilities",
        "mediumVulnerabilities": "medium_vulnerabilities",
        "lowVulnerabilities": "low_vulnerabilities",
    }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OpenSourceSummary":
        kwargs = {
            attr: data.get(key)
            for key, attr in cls.FIELD_MAP.items()
        }
        return cls(raw=data, **kwargs)

    def counters(self) -> Dict[str, Optional[int]]:
        """Known counters keyed by their server-side names"""
        return {key: getattr(self, attr) for key, attr in self.FIELD_MAP.items()}


@dataclass
class OSAConfig:
    """Configuration for OSA client operations"""
    server_url: str
    api_root: str = "CxRestAPI/"
    timeout: int = 60
    poll_interval: float = 5.0
    max_poll_attempts: Optional[int] = None
    max_wait_seconds: Optional[float] = None
    origin: int = 1
    max_archive_size_mb: Optional[float] = None
    summary_retries: int = 3

    @property
    def api_url(self) -> str:
        """Absolute URL of the REST API root, always ending with '/'"""
        root = self.api_root.strip("/")
        base = self.server_url.rstrip("/")
        return f"{base}/{root}/" if root else f"{base}/"

    @classmethod
    def from_dict(cls, config: Dict[str, Any], server_url: Optional[str] = None) -> "OSAConfig":
        """Build from the merged YAML configuration"""
        server = config.get("server", {}) or {}
        polling = config.get("polling", {}) or {}
        scan = config.get("scan", {}) or {}
        summary = config.get("summary", {}) or {}
        return cls(
            server_url=server_url or server.get("url") or "",
            api_root=_value(server, "api_root", "CxRestAPI/"),
            timeout=_value(server, "timeout_seconds", 60),
            poll_interval=_value(polling, "interval_seconds", 5.0),
            max_poll_attempts=polling.get("max_attempts"),
            max_wait_seconds=polling.get("max_wait_seconds"),
            origin=_value(scan, "origin", 1),
            max_archive_size_mb=scan.get("max_archive_size_mb"),
            summary_retries=_value(summary, "retries", 3),
        )


def _value(section: Dict[str, Any], key: str, default: Any) -> Any:
    """A YAML null falls back to the default"""
    value = section.get(key)
    return default if value is None else value


@dataclass
class ValidationResult:
    """Archive or configuration validation result"""
    is_valid: bool
    error_message: Optional[str] = None
    file_path: Optional[str] = None
    validation_type: Optional[str] = None
