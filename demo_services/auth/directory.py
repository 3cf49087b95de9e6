"""
Directory of known users for the Basic-auth demo.

Responsibilities:
    - Hold the ordered list of valid credentials loaded at startup
    - Match a decoded candidate against that list (first exact match wins)
    - Serialize administrative add/remove against concurrent lookups

Design:
    - `matches` is a pure function over any iterable of credentials.
    - `Directory` owns the lock; every method holds it for the whole operation
      so readers never observe a half-applied mutation.
"""

import secrets
import threading
from typing import Iterable, Iterator, List, Optional

from .codec import Credential


def _same(a: str, b: str) -> bool:
    # compare_digest only accepts ASCII str; compare the UTF-8 bytes instead.
    return secrets.compare_digest(a.encode("utf-8"), b.encode("utf-8"))


def matches(candidate: Credential, directory: Iterable[Credential]) -> Optional[Credential]:
    """
    Return the first directory entry whose username and password both equal the candidate's.

    Args:
        candidate (Credential): Decoded, unverified credential.
        directory (Iterable[Credential]): Known users in insertion order.

    Returns:
        Optional[Credential]: The matching entry, or None.
    """
    for entry in directory:
        if _same(entry.username, candidate.username) and _same(entry.password, candidate.password):
            return entry
    return None


class Directory:
    """Thread-safe, ordered collection of credentials."""

    def __init__(self, entries: Iterable[Credential] = ()):
        self._entries: List[Credential] = list(entries)
        self._lock = threading.Lock()

    def add(self, credential: Credential) -> None:
        """Append a credential. Duplicate usernames are allowed; lookups use the first."""
        with self._lock:
            self._entries.append(credential)

    def remove(self, username: str) -> int:
        """
        Remove every entry with the given username.

        Returns:
            int: Number of entries removed (0 if the username was unknown).
        """
        with self._lock:
            kept = [entry for entry in self._entries if entry.username != username]
            removed = len(self._entries) - len(kept)
            self._entries = kept
        return removed

    def find(self, candidate: Credential) -> Optional[Credential]:
        """Match a candidate against a consistent view of the directory."""
        with self._lock:
            return matches(candidate, self._entries)

    def snapshot(self) -> List[Credential]:
        """Return a copy of the current entries."""
        with self._lock:
            return list(self._entries)

    def __iter__(self) -> Iterator[Credential]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
