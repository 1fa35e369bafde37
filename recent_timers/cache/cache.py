"""Recent timers cache: upsert, reconciliation with fetched entries, usage and search."""

import logging
from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Sequence, Union

from .models import RecentTimerEntry
from .store import STATUS_SKIPPED, SaveOutcome, TimerStore

if TYPE_CHECKING:
    from ..autocomplete import Suggestion

logger = logging.getLogger(__name__)

FetchedEntry = Union[RecentTimerEntry, Mapping[str, Any]]


def _upsert(timers: List[RecentTimerEntry], entry: RecentTimerEntry) -> None:
    """
    Insert an entry at the front of the list, replacing its older versions.

    An existing entry with the same configuration is replaced so the newest
    record id wins. Otherwise an existing entry with the same id (a record that
    was edited upstream) is replaced.
    """
    index = next((i for i, t in enumerate(timers) if t.same_configuration(entry)), None)
    if index is None:
        index = next((i for i, t in enumerate(timers) if t.id == entry.id), None)
    if index is not None:
        del timers[index]

    if entry.usage_count is None:
        entry.usage_count = 0
    timers.insert(0, entry)


class RecentTimersCache:
    """Manages the list of recently used timer configurations."""

    def __init__(
        self,
        store=None,
        enabled: bool = True,
        max_description_length: int = 60,
        default_limit: int = 10,
        max_entries: int = 0,
    ):
        """
        Initialize the cache.

        Args:
            store: Storage slot with read/write (defaults to a TimerStore at ~/.recent_timers.json)
            enabled: Whether caching is enabled
            max_description_length: Fetched descriptions must be shorter than this to be admitted
            default_limit: Number of results returned by search when no limit is given
            max_entries: Maximum number of stored entries (0 = unbounded)
        """
        self.store = store if store is not None else TimerStore()
        self.enabled = enabled
        self.max_description_length = max_description_length
        self.default_limit = default_limit
        self.max_entries = max_entries

    @classmethod
    def from_config(cls, config=None) -> "RecentTimersCache":
        """Build a cache and its on-disk store from a Config (read from the environment if omitted)."""
        if config is None:
            from ..config import Config
            config = Config()
        return cls(
            store=TimerStore(config.storage_path, slot=config.slot),
            enabled=config.enabled,
            max_description_length=config.max_description_length,
            default_limit=config.default_limit,
            max_entries=config.max_entries,
        )

    def entries(self) -> List[RecentTimerEntry]:
        """
        Get the stored entries.

        Returns:
            Entries in stored order (most recently touched first)
        """
        if not self.enabled:
            return []
        return self.store.read().entries

    def add(self, entry: RecentTimerEntry) -> SaveOutcome:
        """
        Add an entry, superseding any older version of it.

        Args:
            entry: Timer configuration that was just used or observed

        Returns:
            Outcome of persisting the updated list
        """
        if not self.enabled:
            return SaveOutcome(status=STATUS_SKIPPED)

        timers = self.store.read().entries
        _upsert(timers, entry)
        return self._save(timers)

    def reconcile(self, fetched: Sequence[FetchedEntry]) -> SaveOutcome:
        """
        Sync the cache with time entries freshly fetched from the backend.

        Cached entries whose record was fetched with different data are dropped
        as stale. Entries whose record was not part of the fetch are kept, since
        the fetch may cover a different time range. Admitted fetched entries are
        then upserted in input order, keeping the usage count of any cached
        entry with the same configuration.

        Args:
            fetched: Backend time entries (dicts with id, description,
                project_id, tag_ids) or RecentTimerEntry instances

        Returns:
            Outcome of persisting the reconciled list

        Raises:
            InvalidEntryError: If a fetched record has no integer id or a
                non-string description; the cache is left untouched
        """
        if not self.enabled:
            return SaveOutcome(status=STATUS_SKIPPED)

        incoming = [
            e if isinstance(e, RecentTimerEntry) else RecentTimerEntry.from_fetched(e)
            for e in fetched
        ]
        fetched_by_id = {}
        for entry in incoming:
            fetched_by_id.setdefault(entry.id, entry)

        baseline = []
        for cached in self.store.read().entries:
            current = fetched_by_id.get(cached.id)
            if current is not None and not current.same_configuration(cached):
                logger.debug("Dropping stale recent timer %s (%r)", cached.id, cached.description)
                continue
            baseline.append(cached)

        outcome = self._save(baseline)

        usage_by_identity = {}
        for cached in baseline:
            usage_by_identity.setdefault(cached.identity(), cached.usage_count)

        timers = list(baseline)
        for entry in incoming:
            if not self._admits(entry):
                logger.debug("Skipping recent timer %s: description not admitted", entry.id)
                continue
            admitted = RecentTimerEntry(
                id=entry.id,
                description=entry.description,
                project_id=entry.project_id,
                tag_ids=list(entry.tag_ids),
                usage_count=usage_by_identity.get(entry.identity(), 0),
            )
            _upsert(timers, admitted)

        if timers != baseline:
            outcome = self._save(timers)
        return outcome

    def increment_usage(
        self,
        description: str,
        project_id: Optional[int],
        tag_ids: Sequence[int],
    ) -> Optional[SaveOutcome]:
        """
        Count one more use of an existing configuration.

        Never creates an entry; only add and reconcile do.

        Returns:
            Outcome of persisting (skipped when the cache is disabled), or None
            if no entry has that configuration
        """
        if not self.enabled:
            return SaveOutcome(status=STATUS_SKIPPED)

        target = (description, project_id, tuple(sorted(tag_ids)))
        timers = self.store.read().entries
        for timer in timers:
            if timer.identity() == target:
                timer.usage_count += 1
                return self._save(timers)
        return None

    def search(self, query: str, limit: Optional[int] = None) -> List[RecentTimerEntry]:
        """
        Search the cache for suggestions.

        Args:
            query: User input text
            limit: Maximum number of results (defaults to default_limit)

        Returns:
            Ranked entries; see rank_entries
        """
        from ..autocomplete import rank_entries

        if limit is None:
            limit = self.default_limit
        return rank_entries(self.entries(), query, limit)

    def suggest(
        self,
        query: str,
        projects: Sequence[Mapping[str, Any]],
        tags: Sequence[Mapping[str, Any]],
        limit: Optional[int] = None,
    ) -> List["Suggestion"]:
        """Search and resolve the results against project and tag catalogs."""
        from ..autocomplete import resolve_suggestions

        return resolve_suggestions(self.search(query, limit), projects, tags)

    def _admits(self, entry: RecentTimerEntry) -> bool:
        return 0 < len(entry.description) < self.max_description_length

    def _save(self, timers: List[RecentTimerEntry]) -> SaveOutcome:
        # Trim to max_entries
        if self.max_entries and len(timers) > self.max_entries:
            timers = timers[:self.max_entries]
        return self.store.write(timers)
