"""
Pydantic schemas for the users demo.
"""

from pydantic import BaseModel, Field


class User(BaseModel):
    """A user record; also the request body of `POST /add`."""
    id: int = Field(..., ge=0)
    username: str
