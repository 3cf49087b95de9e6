"""
Credential codec for the Basic-auth demo.

Responsibilities:
    - Build the credential payload sent after the `Basic ` scheme token
    - Parse an incoming `Authorization` header back into a candidate Credential
    - Report malformed headers and malformed encodings as distinct errors

Wire format:
    The username and the password are base64-encoded *separately* (standard
    alphabet, padded) and joined with a single colon:

        Authorization: Basic U2FtcGxlVXNlcg==:cGFzc3dvcmQ=

    This is not the RFC 7617 layout (one base64 blob of "user:pass"), and
    standard HTTP clients will not produce it. Since the split happens on the
    *encoded* payload, colons inside a password survive a round trip.

LLM Prompt Example:
    "Explain why encoding username and password independently lets a decoder
    split on ':' without ambiguity, and how that differs from RFC 7617."
"""

import base64
import binascii
from dataclasses import dataclass, field
from typing import Optional

SCHEME = "Basic"


class AuthError(ValueError):
    """Base class for credential parsing failures."""


class MalformedHeaderError(AuthError):
    """Missing header, wrong scheme token, or a payload of the wrong shape."""


class MalformedEncodingError(AuthError):
    """A payload segment is not valid base64 or does not decode to UTF-8."""


@dataclass(frozen=True)
class Credential:
    """
    A (username, password) pair.

    The password is excluded from `repr` so credentials can be logged safely.
    """
    username: str
    password: str = field(repr=False)

    def encode(self) -> str:
        """Return the `b64(username):b64(password)` payload (no scheme prefix)."""
        return encode(self.username, self.password)

    def header(self) -> str:
        """Return a complete `Authorization` header value for this credential."""
        return f"{SCHEME} {self.encode()}"


def _b64(value: str) -> str:
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


def _unb64(segment: str) -> str:
    try:
        raw = base64.b64decode(segment, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MalformedEncodingError("Payload segment is not valid base64") from exc
    # Excess padding and non-zero trailing bits decode silently; only canonical input is accepted.
    if base64.b64encode(raw).decode("ascii") != segment:
        raise MalformedEncodingError("Payload segment is not canonical base64")
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedEncodingError("Payload segment is not valid UTF-8") from exc


def encode(username: str, password: str) -> str:
    """
    Encode a username/password pair into the demo wire payload.

    Args:
        username (str): Plaintext username. Should not contain ':'.
        password (str): Plaintext password. Any characters allowed.

    Returns:
        str: `base64(username):base64(password)`.
    """
    return f"{_b64(username)}:{_b64(password)}"


def parse_authorization(header: Optional[str], trim: bool = False) -> Credential:
    """
    Parse an `Authorization` header value into a Credential.

    Args:
        header (Optional[str]): Raw header value, e.g. "Basic <payload>".
        trim (bool): Strip surrounding whitespace from the decoded values.

    Returns:
        Credential: The decoded, still unverified, candidate.

    Raises:
        MalformedHeaderError: Header missing, scheme not exactly "Basic",
            payload missing, or payload not exactly two ':'-separated segments.
        MalformedEncodingError: A segment is not base64 or not UTF-8.
    """
    if not header:
        raise MalformedHeaderError("Missing authorization header")

    chunks = header.split()
    if not chunks or chunks[0] != SCHEME:
        raise MalformedHeaderError("Unsupported authorization scheme")
    if len(chunks) < 2:
        raise MalformedHeaderError("Missing credentials payload")

    segments = chunks[1].split(":")
    if len(segments) != 2:
        raise MalformedHeaderError("Payload must be exactly two ':'-separated segments")

    username, password = _unb64(segments[0]), _unb64(segments[1])
    if trim:
        username, password = username.strip(), password.strip()
    return Credential(username, password)


def decode(header: Optional[str], trim: bool = False) -> Optional[Credential]:
    """
    Decode an `Authorization` header, returning None on any malformed input.

    Never raises; use `parse_authorization` when the failure kind matters.
    """
    try:
        return parse_authorization(header, trim=trim)
    except AuthError:
        return None
