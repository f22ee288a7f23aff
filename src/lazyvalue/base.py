"""Common interface shared by every lazy value container."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, Hashable, TypeVar

T = TypeVar("T")

# Called with the key on a cache miss. Raising means the load failed.
Loader = Callable[[Hashable], T]


class LazyError(Exception):
    """Base class for errors raised by lazyvalue itself."""


class LoaderNotConfiguredError(LazyError):
    """Raised in strict mode when a value is requested but no loader is set."""

    def __init__(self, key: Hashable) -> None:
        super().__init__(f"no loader configured for key {key!r}")
        self.key = key


class Lazy(ABC, Generic[T]):
    """
    A lazily produced value of type T, cached per key.

    Callers hold a Lazy and never care which concrete container backs it:
    a loader-backed cache or a fixed static value.
    """

    @abstractmethod
    def get(self, key: Hashable) -> T:
        """Return the value for key, loading it if needed."""

    @abstractmethod
    def invalidate(self, key: Hashable) -> None:
        """Drop the cached value for key."""

    @abstractmethod
    def invalidate_all(self) -> None:
        """Drop every cached value."""
