#!/usr/bin/env python3
"""
Unit tests for the construction helpers
"""

import sys
from datetime import timedelta
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from lazyvalue import (
    Lazy, LazyConfig, LoaderLazy, LoaderNotConfiguredError, StaticLazy,
    from_config, new_static, preloaded, preloaded_ttl, with_loader, with_loader_ttl,
)


def make_loader(value="new_value"):
    calls = []

    def loader(key):
        calls.append(key)
        return value

    return loader, calls


class TestFactories:

    def test_with_loader(self):
        loader, calls = make_loader()
        lazy = with_loader(loader)
        assert isinstance(lazy, Lazy)
        assert lazy.ttl is None
        assert lazy.get("ctx") == "new_value"
        assert lazy.get("ctx") == "new_value"
        assert calls == ["ctx"]

    def test_with_loader_ttl_seconds(self):
        loader, _ = make_loader()
        assert with_loader_ttl(loader, 30).ttl == 30.0

    def test_with_loader_ttl_timedelta(self):
        loader, _ = make_loader()
        assert with_loader_ttl(loader, timedelta(minutes=2)).ttl == 120.0

    def test_with_loader_ttl_rejects_negative(self):
        loader, _ = make_loader()
        with pytest.raises(ValueError):
            with_loader_ttl(loader, timedelta(seconds=-1))

    def test_preloaded(self):
        loader, calls = make_loader()
        lazy = preloaded(loader, "preloaded", "test_ctx")

        assert lazy.get("test_ctx") == "preloaded"
        assert calls == []
        assert lazy.get("other_ctx") == "new_value"
        assert calls == ["other_ctx"]

    def test_preloaded_ttl(self):
        loader, calls = make_loader()
        lazy = preloaded_ttl(loader, "preloaded", "test_ctx", timedelta(seconds=5))

        assert isinstance(lazy, LoaderLazy)
        assert lazy.ttl == 5.0
        assert lazy.get("test_ctx") == "preloaded"
        assert calls == []

    def test_new_static(self):
        s = new_static("fixed")
        assert isinstance(s, StaticLazy)
        assert s.get("whatever") == "fixed"


class TestFromConfig:

    def test_ttl_disabled(self):
        loader, _ = make_loader()
        lazy = from_config(loader, LazyConfig())
        assert lazy.ttl is None

    def test_zero_ttl_enabled(self):
        loader, _ = make_loader()
        lazy = from_config(loader, LazyConfig(ttl_sec=0))
        assert lazy.ttl == 0.0

    def test_strict(self):
        lazy = from_config(None, LazyConfig(strict=True))
        with pytest.raises(LoaderNotConfiguredError):
            lazy.get("ctx")

    def test_default(self):
        lazy = from_config(None, LazyConfig(), default="fallback")
        assert lazy.get("ctx") == "fallback"
