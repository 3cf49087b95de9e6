"""
Auth package for the demo services.

Provides the Basic-auth credential codec, the user directory, and the
authentication service used by the secret endpoint.
"""

from .codec import (
    AuthError,
    Credential,
    MalformedEncodingError,
    MalformedHeaderError,
    decode,
    encode,
    parse_authorization,
)
from .directory import Directory, matches
from .service import AuthFailure, AuthResult, authenticate

__all__ = [
    "AuthError",
    "AuthFailure",
    "AuthResult",
    "Credential",
    "Directory",
    "MalformedEncodingError",
    "MalformedHeaderError",
    "authenticate",
    "decode",
    "encode",
    "matches",
    "parse_authorization",
]
