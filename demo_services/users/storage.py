"""
Storage module for the users demo (in-memory implementation).

Responsibilities:
    - Keep an ordered list of users
    - Append users (duplicates permitted, first match wins on lookup)
    - Provide retrieval by id and a full listing

Design:
    - This is an in-memory reference implementation of the BaseUserStorage contract.
    - One lock guards the list; reads copy under the lock so callers never see
      a list that is being appended to.

LLM Prompt Example:
    "Explain how a lock-guarded in-memory list can back a FastAPI service whose
     sync handlers run concurrently in a thread pool."
"""

import threading
from typing import Iterable, List, Optional

from .base import BaseUserStorage
from .schemas import User


class UserStorage(BaseUserStorage):
    def __init__(self, users: Iterable[User] = ()):
        """
        Initialize the store, optionally with seed users.

        Internal schema:
            self.users = [User(id=int, username=str), ...]
        """
        self.users: List[User] = list(users)
        self._lock = threading.Lock()

    def add_user(self, user_id: int, username: str) -> User:
        """
        Append a user.

        Raises:
            ValueError: If user_id is negative.
        """
        if user_id < 0:
            raise ValueError("User id must be non-negative")
        user = User(id=user_id, username=username)
        with self._lock:
            self.users.append(user)
        return user

    def get_user(self, user_id: int) -> Optional[User]:
        with self._lock:
            for user in self.users:
                if user.id == user_id:
                    return user
        return None

    def list_users(self) -> List[User]:
        with self._lock:
            return list(self.users)
