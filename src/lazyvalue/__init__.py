"""
lazyvalue
Lazily loaded values, cached per key, with optional TTL expiry.
"""

from .base import Lazy, LazyError, Loader, LoaderNotConfiguredError
from .config import LazyConfig, load_config
from .factory import (
    from_config, new_static, preloaded, preloaded_ttl,
    with_loader, with_loader_ttl,
)
from .loader import LazyStats, LoaderLazy
from .static import StaticLazy

__all__ = [
    'Lazy', 'LazyError', 'Loader', 'LoaderNotConfiguredError',
    'LazyConfig', 'load_config',
    'from_config', 'new_static', 'preloaded', 'preloaded_ttl',
    'with_loader', 'with_loader_ttl',
    'LazyStats', 'LoaderLazy', 'StaticLazy',
]
