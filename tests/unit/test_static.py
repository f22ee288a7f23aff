#!/usr/bin/env python3
"""
Unit tests for the static lazy value
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from lazyvalue.base import Lazy
from lazyvalue.static import StaticLazy


class TestStaticLazy:

    def test_returns_value(self):
        s = StaticLazy("static_value")
        assert s.get("ctx1") == "static_value"

    def test_same_value_for_any_key(self):
        s = StaticLazy("static_value")
        assert s.get("ctx1") == s.get("ctx2") == s.get(None) == "static_value"

    def test_invalidate_is_noop(self):
        s = StaticLazy("static_value")
        s.invalidate("ctx1")
        assert s.get("ctx1") == "static_value"

    def test_invalidate_all_is_noop(self):
        s = StaticLazy("static_value")
        s.invalidate_all()
        assert s.get("ctx1") == "static_value"

    def test_int_value(self):
        assert StaticLazy(42).get("any_ctx") == 42

    def test_unhashable_key_is_fine(self):
        assert StaticLazy("v").get(["a", "list"]) == "v"

    def test_is_a_lazy(self):
        s = StaticLazy(1)
        assert isinstance(s, Lazy)
        assert s.value == 1
