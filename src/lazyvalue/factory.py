"""
Construction helpers.

Each helper wires a LoaderLazy (or StaticLazy) with a different starting
state. TTLs accept seconds or a datetime.timedelta.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Hashable, Optional, Union

from .base import Lazy, Loader, T
from .config import LazyConfig
from .loader import LoaderLazy
from .static import StaticLazy

Duration = Union[int, float, timedelta]


def _seconds(ttl: Duration) -> float:
    if isinstance(ttl, timedelta):
        return ttl.total_seconds()
    return float(ttl)


def with_loader(loader: Optional[Loader], default: Any = None) -> LoaderLazy:
    """
    Lazy that calls loader the first time a key is used.

    Later calls with that key are served from the cache until it is
    invalidated.
    """
    return LoaderLazy(loader, default=default)


def with_loader_ttl(
    loader: Optional[Loader],
    ttl: Duration,
    default: Any = None,
    reset_ttl_on_error: bool = True,
) -> LoaderLazy:
    """Like with_loader, but a cached value is reloaded once older than ttl."""
    return LoaderLazy(
        loader,
        True,
        _seconds(ttl),
        default=default,
        reset_ttl_on_error=reset_ttl_on_error,
    )


def preloaded(loader: Optional[Loader], value: T, key: Hashable) -> LoaderLazy:
    """
    Lazy already holding value for key.

    The loader is kept for other keys and for key after it is invalidated.
    """
    return LoaderLazy.preloaded(loader, value, key)


def preloaded_ttl(
    loader: Optional[Loader], value: T, key: Hashable, ttl: Duration
) -> LoaderLazy:
    """Like preloaded, with TTL on. The seeded value does not expire until reloaded."""
    return LoaderLazy.preloaded(loader, value, key, True, _seconds(ttl))


def new_static(value: T) -> StaticLazy:
    return StaticLazy(value)


def from_config(loader: Optional[Loader], config: LazyConfig, default: Any = None) -> Lazy:
    return LoaderLazy(
        loader,
        config.with_ttl,
        config.ttl_sec or 0.0,
        default=default,
        strict=config.strict,
        reset_ttl_on_error=config.reset_ttl_on_error,
    )
