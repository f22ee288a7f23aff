"""Fixed-value Lazy with no loader and nothing to invalidate."""

from __future__ import annotations

from typing import Generic, Hashable

from .base import Lazy, T


class StaticLazy(Lazy[T], Generic[T]):
    """Always returns the same value, whatever the key. Handy in tests."""

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def get(self, key: Hashable) -> T:
        return self._value

    def invalidate(self, key: Hashable) -> None:
        pass

    def invalidate_all(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"StaticLazy({self._value!r})"
