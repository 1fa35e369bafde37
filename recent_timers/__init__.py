"""Local cache of recently used timer configurations with fuzzy search."""

from .cache import (
    LoadOutcome,
    MemoryStore,
    RecentTimerEntry,
    RecentTimersCache,
    SaveOutcome,
    TimerStore,
)
from .autocomplete import Suggestion, rank_entries, resolve_suggestions
from .exceptions import InvalidEntryError, RecentTimersError, StorageError
from .fuzzy_matcher import FuzzyMatch, fuzzy_match

__all__ = [
    'RecentTimersCache',
    'RecentTimerEntry',
    'LoadOutcome',
    'SaveOutcome',
    'MemoryStore',
    'TimerStore',
    'Suggestion',
    'rank_entries',
    'resolve_suggestions',
    'FuzzyMatch',
    'fuzzy_match',
    'RecentTimersError',
    'InvalidEntryError',
    'StorageError',
]
