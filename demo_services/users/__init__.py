"""
Users package: the in-memory user list behind the users demo.
"""

from .schemas import User
from .storage import UserStorage

__all__ = ["User", "UserStorage"]
