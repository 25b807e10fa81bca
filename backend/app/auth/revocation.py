"""
Revocation registry ("blacklist") of token ids invalidated before their
natural expiry.

Consumers depend on the RevocationRegistry protocol only. The in-memory
implementation covers a single process; a shared store (Redis, a database
table) can replace it as long as it keeps the three operations and their
per-key atomicity.
"""
import threading
from datetime import datetime, timedelta, timezone
from typing import Callable, Protocol

DEFAULT_REVOCATION_HORIZON = timedelta(hours=1)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RevocationRegistry(Protocol):
    def add(self, token_id: str, expires_at: datetime | None = None) -> None: ...
    def is_revoked(self, token_id: str) -> bool: ...
    def list_active(self) -> list[str]: ...


class InMemoryRevocationRegistry:
    """
    Thread-safe token_id -> expiry map.

    Expired entries are dropped lazily by is_revoked; there is no sweeper.
    Memory is bounded by the number of distinct revoked tokens inside their
    lifetime window.
    """

    def __init__(self, clock: Callable[[], datetime] = _utc_now):
        self._entries: dict[str, datetime] = {}
        self._lock = threading.Lock()
        self._clock = clock

    def add(self, token_id: str, expires_at: datetime | None = None) -> None:
        """
        Revokes token_id until expires_at (now + 1 hour when unknown).
        Revoking again only overwrites the stored expiry.
        """
        if expires_at is None:
            expires_at = self._clock() + DEFAULT_REVOCATION_HORIZON
        with self._lock:
            self._entries[token_id] = expires_at

    def is_revoked(self, token_id: str) -> bool:
        with self._lock:
            expires_at = self._entries.get(token_id)
            if expires_at is None:
                return False
            if self._clock() <= expires_at:
                return True
            del self._entries[token_id]
            return False

    def list_active(self) -> list[str]:
        """Token ids whose entry has not expired. Never prunes."""
        with self._lock:
            now = self._clock()
            return [token_id for token_id, expires_at in self._entries.items() if expires_at > now]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
