"""Tests for EntropySourceRegistry."""

from __future__ import annotations

import pytest

from pwtool.entropy import SystemEntropySource
from pwtool.entropy.base import EntropySource
from pwtool.entropy.registry import EntropySourceRegistry


class _ZeroSource(EntropySource):
    """Minimal concrete source for registry tests."""

    @property
    def name(self) -> str:
        return "zero"

    @property
    def is_available(self) -> bool:
        return True

    def get_random_bytes(self, n: int) -> bytes:
        return b"\x00" * n

    def close(self) -> None:
        pass


class TestEntropySourceRegistry:
    """Tests for the decorator-based registry."""

    def setup_method(self) -> None:
        self._saved_registry = dict(EntropySourceRegistry._registry)

    def teardown_method(self) -> None:
        EntropySourceRegistry._registry = self._saved_registry

    def test_system_source_registered(self) -> None:
        assert EntropySourceRegistry.get("system") is SystemEntropySource

    def test_test_doubles_not_registered(self) -> None:
        available = EntropySourceRegistry.list_available()
        assert "mock_uniform" not in available
        assert "sequence" not in available

    def test_every_registered_source_is_secure(self) -> None:
        for name in EntropySourceRegistry.list_available():
            assert EntropySourceRegistry.get(name).secure is True

    def test_register_and_get(self) -> None:
        @EntropySourceRegistry.register("test_source")
        class TestSource(_ZeroSource):
            pass

        assert EntropySourceRegistry.get("test_source") is TestSource

    def test_build_returns_instance(self) -> None:
        assert isinstance(EntropySourceRegistry.build("system"), SystemEntropySource)

    def test_get_unknown_raises_key_error(self) -> None:
        with pytest.raises(KeyError, match="no_such_source"):
            EntropySourceRegistry.get("no_such_source")

    def test_unknown_error_lists_available(self) -> None:
        with pytest.raises(KeyError, match="system"):
            EntropySourceRegistry.get("missing")

    def test_list_available_is_sorted(self) -> None:
        EntropySourceRegistry.register("zzz_source")(_ZeroSource)
        EntropySourceRegistry.register("aaa_source")(_ZeroSource)
        available = EntropySourceRegistry.list_available()
        assert available == sorted(available)
        assert "zzz_source" in available

    def test_reset_clears_state(self) -> None:
        EntropySourceRegistry.register("reset_test")(_ZeroSource)
        EntropySourceRegistry._reset()
        assert EntropySourceRegistry.list_available() == []
