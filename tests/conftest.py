"""Shared fixtures for kvstore-lite tests.

Every test gets its own ConcurrentMap. Nothing is shared at module
level, so tests can run in any order.
"""
from __future__ import annotations

from pathlib import Path

import pytest

from kvstore_lite.store.concurrent_map import ConcurrentMap


@pytest.fixture
def store() -> ConcurrentMap:
    """A fresh, empty map."""
    return ConcurrentMap()


@pytest.fixture
def populated() -> ConcurrentMap:
    """A map holding T1 -> Test1 and T2 -> Test2."""
    m: ConcurrentMap[str, str] = ConcurrentMap()
    m.put("T1", "Test1")
    m.put("T2", "Test2")
    return m


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Path for a store file that does not exist yet."""
    return tmp_path / "store.bin"
