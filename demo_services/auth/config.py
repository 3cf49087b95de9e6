"""
Configuration for the auth module.

This defines how the user directory is seeded. For demo purposes the seed is
an in-memory list; passwords can be overridden per user from the environment,
or the whole seed replaced with DEMO_AUTH_USERS (a JSON object).
"""

import json
import logging
import os
from typing import List, Optional, Tuple

from demo_services.config import settings

from .codec import Credential

log = logging.getLogger(__name__)

# Demo seed (username, password), in directory order.
DEFAULT_USERS: List[Tuple[str, str]] = [
    ("Peter", os.getenv("PETER_PASSWORD", "1234")),
    ("John", os.getenv("JOHN_PASSWORD", "password")),
    ("Martha", os.getenv("MARTHA_PASSWORD", "This is an amazing password")),
    ("Maria", os.getenv("MARIA_PASSWORD", "Pass:user:Home")),
    ("Anna", os.getenv("ANNA_PASSWORD", "p@bl0")),
]


def load_directory_seed(raw: Optional[str] = None) -> List[Credential]:
    """
    Return the credentials the directory starts with.

    Args:
        raw (str, optional): JSON object of username -> password. Defaults to
            settings.AUTH_USERS_JSON; when empty the demo seed is used.

    Raises:
        ValueError: If `raw` is not a JSON object of string pairs.
    """
    raw = settings.AUTH_USERS_JSON if raw is None else raw
    if not raw:
        return [Credential(username, password) for username, password in DEFAULT_USERS]

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"DEMO_AUTH_USERS is not valid JSON: {exc.msg}") from exc
    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        raise ValueError("DEMO_AUTH_USERS must be a JSON object of username -> password strings")

    log.info("Loaded %d directory users from DEMO_AUTH_USERS", len(data))
    return [Credential(username, password) for username, password in data.items()]
