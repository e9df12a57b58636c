"""
Session acquisition for the OSA REST API.
"""

import logging

from requests.cookies import CookieConflictError

from osaclient.utils.exceptions import AuthenticationError
from .models import CSRF_TOKEN, SESSION_COOKIE, AuthenticationCredentials, Session
from .response_validator import validate_response
from .transport import Transport

AUTHENTICATION_PATH = "auth/login"


class SessionManager:
    """Logs in and extracts the session and CSRF tokens"""

    def __init__(self, transport: Transport):
        self.transport = transport
        self.logger = logging.getLogger(self.__class__.__name__)

    def authenticate(self, credentials: AuthenticationCredentials) -> Session:
        """POST auth/login and return the tokens for one logical operation"""
        self.logger.debug(f"Authenticating as {credentials.username}")

        response = self.transport.post(AUTHENTICATION_PATH, json=credentials.to_payload())
        validate_response(response, AUTHENTICATION_PATH)

        try:
            session = Session(
                session_cookie=response.cookies.get(SESSION_COOKIE) or "",
                csrf_token=response.cookies.get(CSRF_TOKEN) or "",
            )
        except CookieConflictError as e:
            raise AuthenticationError(
                "Login response set conflicting values for a security cookie",
                endpoint=AUTHENTICATION_PATH,
                status_code=response.status_code,
                original_exception=e,
            ) from e

        if not session.is_complete():
            missing = [
                name for name, value in (
                    (SESSION_COOKIE, session.session_cookie),
                    (CSRF_TOKEN, session.csrf_token),
                ) if not value
            ]
            raise AuthenticationError(
                f"Login response is missing required cookies: {', '.join(missing)}",
                endpoint=AUTHENTICATION_PATH,
                status_code=response.status_code,
            )

        self.logger.info(f"Authenticated with OSA server as {credentials.username}")
        return session


def require_session(session: Session, endpoint: str) -> None:
    """Refuse authenticated calls without both tokens"""
    if session is None or not session.is_complete():
        raise AuthenticationError(
            "Session cookie and CSRF token are required for authenticated calls",
            endpoint=endpoint,
        )
