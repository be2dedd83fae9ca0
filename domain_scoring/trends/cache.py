"""In-process cache for the latest trend snapshot."""

import threading
import time
from collections.abc import Callable

from domain_scoring.trends.models import TrendEnrichment

DEFAULT_TTL_SECONDS = 600.0


class TrendCache:
    """Holds one trend snapshot for a bounded time.

    A cache is created once per process and handed to whatever fetches
    trend data. Refreshes are single-flight: while one caller is loading,
    concurrent callers wait for it and reuse its result instead of loading
    again.

    Usage:
        cache = TrendCache(ttl_seconds=600)
        enrichment = cache.get_or_load(source.fetch)
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the cache.

        Args:
            ttl_seconds: How long a stored snapshot stays fresh
            clock: Monotonic time source in seconds, replaceable in tests
        """
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._value: TrendEnrichment | None = None
        self._stored_at: float | None = None

    def get(self) -> TrendEnrichment | None:
        """Cached snapshot if still within its TTL."""
        if self._stored_at is None:
            return None
        if self._clock() - self._stored_at >= self.ttl_seconds:
            return None
        return self._value

    def refresh(self, value: TrendEnrichment | None) -> None:
        """Store a snapshot, restarting its TTL."""
        self._value = value
        self._stored_at = self._clock()

    def clear(self) -> None:
        """Drop the stored snapshot."""
        self._value = None
        self._stored_at = None

    def get_or_load(self, loader: Callable[[], TrendEnrichment | None]) -> TrendEnrichment | None:
        """Return the cached snapshot, loading it once on a miss.

        A failed load (``None``) is not stored, so the next call tries
        again.
        """
        cached = self.get()
        if cached is not None:
            return cached

        with self._lock:
            # Another caller may have loaded while we waited
            cached = self.get()
            if cached is not None:
                return cached
            value = loader()
            if value is not None:
                self.refresh(value)
            return value
