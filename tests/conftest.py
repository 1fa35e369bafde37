"""Shared fixtures for recent timers tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from recent_timers.cache import MemoryStore, RecentTimersCache, TimerStore


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "recent_timers.json"


@pytest.fixture
def timer_store(store_path: Path) -> TimerStore:
    return TimerStore(str(store_path))


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def cache(memory_store: MemoryStore) -> RecentTimersCache:
    return RecentTimersCache(memory_store)
