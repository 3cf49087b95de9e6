"""
Pydantic schemas for request/response models in the auth module.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class AuthStatus(str, Enum):
    """Value of the `status` field in every Basic-auth response."""
    OK = "Ok"
    INVALID_CREDENTIALS = "InvalidCredentials"
    ERROR = "Error"


class SecretResponse(BaseModel):
    """Envelope returned by the secret endpoint, on success and on failure."""
    status: AuthStatus
    msg: Optional[str] = None
    secret: Optional[str] = None
