"""
Core authentication logic.

This module turns a raw `Authorization` header into one of three outcomes:
the matched user, rejected credentials, or a malformed request. Nothing here
raises for bad input; the API layer decides how each outcome is rendered.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .codec import Credential, MalformedEncodingError, MalformedHeaderError, parse_authorization
from .directory import Directory
from .schemas import AuthStatus

log = logging.getLogger(__name__)

FORBIDDEN_MSG = "Forbidden. Missing authorization header or bad header format"
INVALID_HEADER_MSG = "Invalid authorization header"


class AuthFailure(str, Enum):
    MALFORMED_HEADER = "MalformedHeader"
    MALFORMED_ENCODING = "MalformedEncoding"
    NO_MATCH = "NoMatch"


@dataclass(frozen=True)
class AuthResult:
    status: AuthStatus
    user: Optional[Credential] = None
    failure: Optional[AuthFailure] = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.status is AuthStatus.OK


def authenticate(header: Optional[str], directory: Directory, trim: bool = False) -> AuthResult:
    """
    Authenticate a request from its `Authorization` header.

    Args:
        header (Optional[str]): Raw header value, or None when absent.
        directory (Directory): Known users.
        trim (bool): Strip surrounding whitespace from decoded values.

    Returns:
        AuthResult: `Ok` with the matched directory entry, `InvalidCredentials`
        for a well-formed header that matches nobody, or `Error` for a
        malformed header/payload.

    LLM Prompt Example:
        "Show how to keep 'bad request' and 'wrong password' distinct in an
        auth result type while exposing the same denial to the client."
    """
    try:
        candidate = parse_authorization(header, trim=trim)
    except MalformedHeaderError as exc:
        log.info("Basic auth rejected: %s", exc)
        return AuthResult(AuthStatus.ERROR, failure=AuthFailure.MALFORMED_HEADER, reason=FORBIDDEN_MSG)
    except MalformedEncodingError as exc:
        log.info("Basic auth rejected: %s", exc)
        return AuthResult(AuthStatus.ERROR, failure=AuthFailure.MALFORMED_ENCODING, reason=INVALID_HEADER_MSG)

    log.debug("Decoded credential %r", candidate)
    user = directory.find(candidate)
    if user is None:
        log.info("Basic auth rejected: no directory match for %r", candidate.username)
        return AuthResult(
            AuthStatus.INVALID_CREDENTIALS,
            failure=AuthFailure.NO_MATCH,
            reason="Invalid credentials",
        )
    return AuthResult(AuthStatus.OK, user=user)
