"""Cache package for recently used timer configurations."""

from .cache import RecentTimersCache
from .models import RecentTimerEntry
from .store import LoadOutcome, MemoryStore, SaveOutcome, TimerStore

__all__ = [
    'RecentTimersCache',
    'RecentTimerEntry',
    'LoadOutcome',
    'SaveOutcome',
    'MemoryStore',
    'TimerStore',
]
