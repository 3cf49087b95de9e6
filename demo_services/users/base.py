"""
Base storage interface for the users demo.

Purpose:
    Define a small, stable contract that a user store implements so the API
    layer never depends on where users live.

Testing & Coverage:
    These are abstract methods and are not executed directly in tests.
    We annotate them with `# pragma: no cover` so coverage tools don't
    penalize the project for un-runnable abstract declarations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .schemas import User


class BaseUserStorage(ABC):
    """Abstract base class for user stores."""

    @abstractmethod  # pragma: no cover
    def add_user(self, user_id: int, username: str) -> User:
        """
        Append a user. Duplicate ids are allowed.

        Returns:
            User: The stored record.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def get_user(self, user_id: int) -> Optional[User]:
        """
        Retrieve the first user with the given id.

        Returns:
            Optional[User]: The user or None if not found.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def list_users(self) -> List[User]:
        """Return all users in insertion order."""
        raise NotImplementedError
