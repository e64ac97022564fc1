"""
In-process response cache scoped per owner.

Entries are keyed by ``(owner id, request signature)`` inside one bounded
``cachetools.TTLCache`` per cache class. Each class has its own expiry window;
listings change more often than the category/tag aggregates, so they expire
sooner. The cache is advisory: a miss only means the caller recomputes.

Writers bump a per-owner generation when they invalidate. A reader that
captured the generation before querying the store can only store its result
if no invalidation happened meanwhile.
"""

import logging
import threading
import time
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Tuple
from urllib.parse import urlencode
from uuid import UUID

from cachetools import TTLCache

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 1024


class CacheClass(str, Enum):
    """Named groups of cached data, each with its own expiry window."""

    POSTS = "posts"
    CATEGORIES = "categories"
    TAGS = "tags"


CacheKey = Tuple[UUID, str]
Generation = Tuple[int, int]


def request_signature(method: str, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Build a stable cache key component from method, path and query params.

    Parameters are sorted and empty values dropped, so ``?tag=a&search=`` and
    ``?tag=a`` share a signature.
    """
    items = sorted(
        (str(k), str(v)) for k, v in (params or {}).items() if v is not None and v != ""
    )
    query = urlencode(items)
    signature = f"{method.upper()} {path}"
    return f"{signature}?{query}" if query else signature


class ResponseCache:
    """Thread-safe TTL cache with per-class windows and per-owner invalidation."""

    def __init__(
        self,
        ttls: Mapping[CacheClass, float],
        clock: Callable[[], float] = time.monotonic,
        max_entries: int = DEFAULT_MAX_ENTRIES,
    ):
        missing = [c.value for c in CacheClass if c not in ttls]
        if missing:
            raise ValueError(f"Missing expiry window for cache classes: {', '.join(missing)}")
        self._ttls: Dict[CacheClass, float] = dict(ttls)
        self._max_entries = max_entries
        self._caches: Dict[CacheClass, TTLCache] = {
            c: TTLCache(maxsize=max_entries, ttl=self._ttls[c], timer=clock) for c in CacheClass
        }
        self._lock = threading.Lock()
        self._epoch = 0
        self._generations: Dict[UUID, int] = {}
        self._hits = 0
        self._misses = 0

    @classmethod
    def from_settings(cls, settings) -> "ResponseCache":
        """Build a cache using the windows and size configured in settings."""
        return cls(
            ttls={
                CacheClass.POSTS: settings.posts_cache_ttl_seconds,
                CacheClass.CATEGORIES: settings.aggregate_cache_ttl_seconds,
                CacheClass.TAGS: settings.aggregate_cache_ttl_seconds,
            },
            max_entries=settings.response_cache_max_entries,
        )

    def ttl_for(self, cache_class: CacheClass) -> float:
        return self._ttls[cache_class]

    def generation(self, owner_id: UUID) -> Generation:
        """Current invalidation generation of an owner; pass it back to ``put``."""
        with self._lock:
            return self._epoch, self._generations.get(owner_id, 0)

    def get(self, owner_id: UUID, cache_class: CacheClass, signature: Optional[str] = None) -> Optional[Any]:
        """Return the cached payload, or None on a miss or an expired entry."""
        key = (owner_id, signature or cache_class.value)
        with self._lock:
            cache = self._caches[cache_class]
            cache.expire()
            payload = cache.get(key)
            if payload is None:
                self._misses += 1
                return None
            self._hits += 1
            return payload

    def put(
        self,
        owner_id: UUID,
        cache_class: CacheClass,
        payload: Any,
        signature: Optional[str] = None,
        generation: Optional[Generation] = None,
    ) -> bool:
        """Store a payload, replacing any previous one.

        When ``generation`` is given and the owner was invalidated since it was
        taken, the payload is stale and is dropped. Returns whether it was stored.
        """
        key = (owner_id, signature or cache_class.value)
        with self._lock:
            if generation is not None and generation != (self._epoch, self._generations.get(owner_id, 0)):
                logger.debug(f"Dropped stale {cache_class.value} payload for owner {owner_id}")
                return False
            self._caches[cache_class][key] = payload
            return True

    def invalidate_owner(self, owner_id: UUID) -> int:
        """Drop every entry of one owner across all cache classes."""
        removed = 0
        with self._lock:
            self._generations[owner_id] = self._generations.get(owner_id, 0) + 1
            for cache in self._caches.values():
                cache.expire()
                stale = [key for key in cache if key[0] == owner_id]
                for key in stale:
                    del cache[key]
                removed += len(stale)
        if removed:
            logger.info(f"Invalidated {removed} cached responses for owner {owner_id}")
        return removed

    def invalidate_all(self) -> None:
        """Drop everything."""
        with self._lock:
            self._epoch += 1
            self._generations.clear()
            count = 0
            for cache in self._caches.values():
                cache.expire()
                count += len(cache)
                cache.clear()
        logger.info(f"Cleared response cache ({count} entries)")

    def _live_counts(self) -> Dict[str, int]:
        counts = {}
        for cache_class, cache in self._caches.items():
            cache.expire()
            counts[cache_class.value] = len(cache)
        return counts

    def stats(self) -> Dict[str, Any]:
        with self._lock:
            per_class = self._live_counts()
            return {
                "entries": sum(per_class.values()),
                "by_class": per_class,
                "hits": self._hits,
                "misses": self._misses,
                "max_entries_per_class": self._max_entries,
                "ttl_seconds": {c.value: ttl for c, ttl in self._ttls.items()},
            }

    def __len__(self) -> int:
        with self._lock:
            return sum(self._live_counts().values())
