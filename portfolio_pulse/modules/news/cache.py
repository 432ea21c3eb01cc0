from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Dict, Optional
from urllib.parse import urlencode

from portfolio_pulse.core.types import NewsResponse

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(minutes=30)


def cache_signature(params: Dict[str, str]) -> str:
    """Serialize query parameters into the exact key used for cache lookups."""
    return urlencode(params)


@dataclass(frozen=True)
class CacheEntry:
    response: NewsResponse
    fetched_at: float


class NewsCache:
    """Time-bounded map from request signature to the last fetched response.

    Entries are never evicted; an expired entry simply reads as a miss until a
    fresh fetch for the same signature overwrites it. There is no locking:
    overlapping writers for one key leave whichever response landed last.
    """

    def __init__(
        self,
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.ttl_seconds = ttl.total_seconds()
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}

    def get(self, key: str) -> Optional[NewsResponse]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.fetched_at >= self.ttl_seconds:
            return None
        logger.debug("news cache hit: %s", key)
        return entry.response

    def put(self, key: str, response: NewsResponse) -> None:
        self._entries[key] = CacheEntry(response=response, fetched_at=self._clock())

    def __len__(self) -> int:
        return len(self._entries)
