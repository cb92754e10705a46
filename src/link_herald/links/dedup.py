"""
Time-windowed dedup cache for forwarded links.

Entries are keyed by ``(link, source room)``. Rather than arming a timer per
entry, the cache keeps an expiry-ordered ring of ``(expires_at, key)`` pairs
and sweeps it lazily on every ``has``/``add`` call. Because the window is fixed,
appending to the right keeps the ring sorted, so a sweep only ever pops from
the left.

Re-adding a key while it is live is rejected, not refreshed: the window always
runs from the first sighting.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from typing import Callable, NamedTuple

logger = logging.getLogger(__name__)


class DedupKey(NamedTuple):
    link: str
    room_id: str


class LinkCache:
    """In-memory ``(link, room)`` membership set with a fixed expiry window."""

    def __init__(
        self,
        window_s: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if window_s <= 0:
            raise ValueError("window_s must be positive")
        self.window_s = window_s
        self._clock = clock
        self._live: set[DedupKey] = set()
        self._ring: deque[tuple[float, DedupKey]] = deque()

    def has(self, key: DedupKey) -> bool:
        self._evict_expired()
        return key in self._live

    def add(self, key: DedupKey) -> bool:
        """
        Insert ``key`` if absent and return ``True``; return ``False`` when the
        key is already live. Check and insert happen without yielding to the
        event loop, so concurrent pipeline invocations cannot both win.
        """
        self._evict_expired()
        if key in self._live:
            return False
        self._live.add(key)
        self._ring.append((self._clock() + self.window_s, key))
        return True

    def __len__(self) -> int:
        self._evict_expired()
        return len(self._live)

    def _evict_expired(self) -> None:
        now = self._clock()
        while self._ring and self._ring[0][0] <= now:
            _, key = self._ring.popleft()
            self._live.discard(key)
            logger.debug("Dedup entry expired: %s in %s", key.link, key.room_id)


__all__ = ["DedupKey", "LinkCache"]
