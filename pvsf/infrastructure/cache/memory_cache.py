"""In-process cache with TTL support.

Same async surface as a networked cache backend (get / set with ttl /
delete) but keeps values in a dict, so a single worker can reuse an
expensive Firestore scan between requests. Entries are not shared between
processes and vanish on restart.
"""

import logging
import time
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class MemoryCache:
    """Dict-backed cache; expiry is checked lazily on read."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        """Initialize an empty cache.

        Args:
            clock: Monotonic seconds source; injectable for tests.
        """
        self._clock = clock
        self._entries: dict[str, tuple[float | None, Any]] = {}

    def is_available(self) -> bool:
        return True

    async def get(self, key: str) -> Any:
        """Return the cached value, or None when missing or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if expires_at is not None and self._clock() >= expires_at:
            del self._entries[key]
            logger.debug("Cache entry expired: %s", key)
            return None
        return value

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store value; ttl in seconds, None keeps it until deleted."""
        expires_at = self._clock() + ttl if ttl is not None else None
        self._entries[key] = (expires_at, value)

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)
