import time
from collections import namedtuple

from . import config

CacheEntry = namedtuple("CacheEntry", ["key", "data", "timestamp"])


def make_cache_key(trend1, trend2):
    # Order matters: ("a", "b") and ("b", "a") are cached separately.
    return f"{trend1.lower()}_{trend2.lower()}"


class ResultCache:
    """In-memory comparison results keyed by topic pair.

    Timestamps are epoch milliseconds. An entry is served while younger than
    ``ttl_seconds`` and is dropped by the next ``sweep`` once older than
    ``max_age_seconds``.
    """

    def __init__(self, ttl_seconds=config.CACHE_TTL_SECONDS,
                 max_age_seconds=config.CACHE_MAX_AGE_SECONDS, clock=time.time):
        self.ttl_ms = int(ttl_seconds * 1000)
        self.max_age_ms = int(max_age_seconds * 1000)
        self._clock = clock
        self._entries = {}

    def now_ms(self):
        return int(self._clock() * 1000)

    def get(self, key):
        return self._entries.get(key)

    def put(self, key, data, timestamp=None):
        if timestamp is None:
            timestamp = self.now_ms()
        entry = CacheEntry(key, data, timestamp)
        self._entries[key] = entry
        return entry

    def is_fresh(self, entry, now=None):
        if now is None:
            now = self.now_ms()
        return now - entry.timestamp < self.ttl_ms

    def get_fresh(self, key, now=None):
        entry = self.get(key)
        if entry is not None and self.is_fresh(entry, now):
            return entry
        return None

    def expiry_of(self, entry):
        return entry.timestamp + self.ttl_ms

    def sweep(self, now=None):
        if now is None:
            now = self.now_ms()
        cutoff = now - self.max_age_ms
        stale = [key for key, entry in self._entries.items() if entry.timestamp < cutoff]
        for key in stale:
            del self._entries[key]
        return len(stale)

    def clear(self):
        self._entries.clear()

    def __len__(self):
        return len(self._entries)

    def __contains__(self, key):
        return key in self._entries
