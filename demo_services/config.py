"""
Runtime configuration for Demo Services
=======================================

Simple settings module that reads from environment variables (only here),
and exposes a stable `settings` object for the rest of the codebase.
Avoid reading env vars anywhere else; import from this module instead.

Logging
-------
- DEMO_LOG_LEVEL              : stdlib level name; default "INFO"

Basic auth
----------
- DEMO_AUTH_TRIM_CREDENTIALS  : "1"/"true"/"yes" strips surrounding whitespace from
                                decoded usernames/passwords (default off)
- DEMO_AUTH_USERS             : optional JSON object {"username": "password", ...}
                                replacing the default directory seed
"""

import os


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


class _Settings:
    # -------- Logging --------
    LOG_LEVEL: str = os.getenv("DEMO_LOG_LEVEL", "INFO").strip().upper()

    # -------- Basic auth --------
    AUTH_TRIM_CREDENTIALS: bool = _get_bool("DEMO_AUTH_TRIM_CREDENTIALS", False)
    AUTH_USERS_JSON: str = os.getenv("DEMO_AUTH_USERS", "")


settings = _Settings()
