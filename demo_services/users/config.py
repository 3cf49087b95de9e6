"""
Configuration for the users module: the list the demo starts with.
"""

from typing import List

from .schemas import User

DEFAULT_USERS: List[User] = [
    User(id=1, username="John"),
    User(id=2, username="Anna"),
    User(id=3, username="Martha"),
]
