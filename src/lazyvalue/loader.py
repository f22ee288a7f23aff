#!/usr/bin/env python3
"""
Loader-backed lazy cache

Implements:
- get(key) → cached value, or loader(key) on miss / TTL expiry
- invalidate(key) → drop one entry
- invalidate_all() → drop everything
- get_stats() → {hits, misses, loads, load_errors, invalidations, ...}

Design principles:
- One lock per instance, held for the whole loader call
- At most one loader call in flight per instance, whatever the key
- Expiry is decided on read, nothing is swept in the background
- Loader errors pass through untouched and are never cached
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Hashable, Optional

from .base import Lazy, Loader, LoaderNotConfiguredError, T

logger = logging.getLogger(__name__)


@dataclass
class LazyStats:
    hits: int = 0
    misses: int = 0
    loads: int = 0
    load_errors: int = 0
    invalidations: int = 0
    start_time: float = field(default_factory=time.time)

    def reset(self) -> None:
        self.hits = 0
        self.misses = 0
        self.loads = 0
        self.load_errors = 0
        self.invalidations = 0
        self.start_time = time.time()


class LoaderLazy(Lazy[T], Generic[T]):
    """
    Lazy value that calls a loader the first time a key is used.

    Later calls with the same key are served from the cache until the key
    is invalidated or, with TTL enabled, until the entry is older than ttl.

    TTL is switched on by with_ttl, not by ttl being non-zero: with_ttl=True
    and ttl=0 means every entry is stale as soon as any time has passed.
    """

    def __init__(
        self,
        loader: Optional[Loader] = None,
        with_ttl: bool = False,
        ttl: float = 0.0,
        *,
        default: Any = None,
        strict: bool = False,
        reset_ttl_on_error: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl < 0:
            raise ValueError(f"ttl must not be negative, got {ttl}")

        self._values: Dict[Hashable, T] = {}
        self._times: Dict[Hashable, float] = {}
        self._loader = loader
        self._with_ttl = with_ttl
        self._ttl = float(ttl)
        self._default = default
        self._strict = strict
        self._reset_ttl_on_error = reset_ttl_on_error
        self._clock = clock
        self._lock = threading.Lock()
        self._stats = LazyStats()

    @classmethod
    def preloaded(
        cls,
        loader: Optional[Loader],
        value: T,
        key: Hashable,
        with_ttl: bool = False,
        ttl: float = 0.0,
        **kwargs: Any,
    ) -> "LoaderLazy[T]":
        """
        Build an instance that already holds value for key.

        The seeded entry has no timestamp, so in TTL mode it does not expire
        until it has been invalidated and loaded again.
        """
        lazy = cls(loader, with_ttl, ttl, **kwargs)
        lazy._values[key] = value
        return lazy

    @property
    def ttl(self) -> Optional[float]:
        """TTL in seconds, or None when TTL is disabled."""
        return self._ttl if self._with_ttl else None

    def _is_expired(self, key: Hashable) -> bool:
        if not self._with_ttl:
            return False
        loaded_at = self._times.get(key)
        if loaded_at is None:
            return False
        return self._clock() - loaded_at > self._ttl

    def get(self, key: Hashable) -> T:
        with self._lock:
            expired = self._is_expired(key)

            if key in self._values and not expired:
                self._stats.hits += 1
                return self._values[key]

            self._stats.misses += 1

            if self._loader is None:
                if self._strict:
                    raise LoaderNotConfiguredError(key)
                return self._default

            logger.debug(f"Loading value for key={key!r} (expired={expired})")
            self._stats.loads += 1
            try:
                value = self._loader(key)
            except Exception as e:
                self._stats.load_errors += 1
                logger.debug(f"Loader failed for key={key!r}: {e}")
                if self._with_ttl and self._reset_ttl_on_error:
                    self._times[key] = self._clock()
                raise

            self._values[key] = value
            if self._with_ttl:
                self._times[key] = self._clock()
            return value

    def invalidate(self, key: Hashable) -> None:
        with self._lock:
            self._values.pop(key, None)
            self._times.pop(key, None)
            self._stats.invalidations += 1
        logger.debug(f"Invalidated key={key!r}")

    def invalidate_all(self) -> None:
        with self._lock:
            cleared = len(self._values)
            self._values = {}
            self._times = {}
            self._stats.invalidations += 1
        logger.debug(f"Invalidated all keys ({cleared} cached)")

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._values

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            stats = self._stats
            total_requests = stats.hits + stats.misses
            hit_rate = (stats.hits / total_requests * 100) if total_requests > 0 else 0
            return {
                "hits": stats.hits,
                "misses": stats.misses,
                "hit_rate_percent": round(hit_rate, 1),
                "total_requests": total_requests,
                "loads": stats.loads,
                "load_errors": stats.load_errors,
                "invalidations": stats.invalidations,
                "cached_entries": len(self._values),
                "uptime_seconds": int(time.time() - stats.start_time),
            }

    def reset_stats(self) -> None:
        with self._lock:
            self._stats.reset()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(entries={len(self._values)}, "
            f"ttl={self.ttl!r}, loader={self._loader!r})"
        )
