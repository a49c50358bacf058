"""Cache utilities - DRY Implementation"""
import threading
import time
from hashlib import sha256
from typing import Any, Callable, Dict, Optional, Tuple

from classboard.config.settings import CacheConfig

class BaseCache:
    """TTL cache with a size bound.

    When full, expired entries are dropped first, then the entry closest to
    expiry. Instances are passed to the services that use them.
    """

    def __init__(self, ttl: int = None, max_entries: int = None, clock: Callable[[], float] = time.time):
        self._cache: Dict[str, Tuple[float, Any]] = {}
        self._lock = threading.Lock()
        self.ttl = ttl or CacheConfig.LEADERBOARD_CACHE_TTL
        self.max_entries = max_entries or CacheConfig.LEADERBOARD_CACHE_SIZE
        self._clock = clock

    def get(self, key: str) -> Optional[Any]:
        """Get cached result"""
        with self._lock:
            rec = self._cache.get(key)
            if not rec:
                return None
            expires_at, val = rec
            if expires_at <= self._clock():
                self._cache.pop(key, None)
                return None
            return val

    def put(self, key: str, val: Any) -> None:
        """Cache result"""
        with self._lock:
            if key not in self._cache and len(self._cache) >= self.max_entries:
                self._evict()
            self._cache[key] = (self._clock() + self.ttl, val)

    def clear(self) -> None:
        """Clear cache"""
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)

    def _evict(self) -> None:
        now = self._clock()
        expired = [key for key, (expires_at, _) in self._cache.items() if expires_at <= now]
        for key in expired:
            del self._cache[key]
        if len(self._cache) >= self.max_entries:
            oldest = min(self._cache, key=lambda k: self._cache[k][0])
            del self._cache[oldest]

def make_cache_key(*parts: Any) -> str:
    """Stable hashed key from request parts"""
    key_data = ":".join("" if part is None else str(part) for part in parts)
    return sha256(key_data.encode()).hexdigest()
