"""Durable storage slot for the recent timers list.

The list lives under one named key of a JSON document on disk. Reads and
writes never raise: failures are logged and reported back as outcome values,
since the cache is a convenience layer and never a system of record.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..exceptions import CorruptStorageError, InvalidEntryError, StorageError
from .models import RecentTimerEntry

logger = logging.getLogger(__name__)

DEFAULT_SLOT = "recent_timers"

STATUS_OK = "ok"
STATUS_MISSING = "missing"
STATUS_RECOVERED = "recovered"
STATUS_FAILED = "failed"
STATUS_SKIPPED = "skipped"


@dataclass
class LoadOutcome:
    """Result of reading the slot."""
    entries: List[RecentTimerEntry] = field(default_factory=list)
    status: str = STATUS_OK
    error: Optional[str] = None

    @property
    def degraded(self) -> bool:
        """True when stored data existed but could not be read in full."""
        return self.status in (STATUS_RECOVERED, STATUS_FAILED)


@dataclass
class SaveOutcome:
    """Result of writing the slot."""
    status: str = STATUS_OK
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK


def _parse_entries(raw: Any) -> LoadOutcome:
    """Convert the raw slot value into entries, dropping unusable records."""
    if not isinstance(raw, list):
        return LoadOutcome(status=STATUS_RECOVERED, error=f"slot holds {type(raw).__name__}, expected list")

    entries = []
    errors = []
    for record in raw:
        try:
            entries.append(RecentTimerEntry.from_dict(record))
        except InvalidEntryError as e:
            errors.append(str(e))

    if errors:
        return LoadOutcome(
            entries=entries,
            status=STATUS_RECOVERED,
            error=f"dropped {len(errors)} invalid record(s): {errors[0]}",
        )
    return LoadOutcome(entries=entries)


class TimerStore:
    """Reads and writes the recent timers list in a JSON file."""

    def __init__(self, path: Optional[str] = None, slot: str = DEFAULT_SLOT):
        """
        Initialize the store.

        Args:
            path: Path to the JSON document (defaults to ~/.recent_timers.json)
            slot: Key of the document holding the timer list
        """
        if path is None:
            path = os.path.expanduser("~/.recent_timers.json")
        self.path = path
        self.slot = slot

    def read(self) -> LoadOutcome:
        """
        Read the timer list from the slot.

        Returns:
            LoadOutcome; on a missing, corrupt or unreadable slot the entries are
            empty (or hold whatever records could be salvaged)
        """
        try:
            document = self._read_document()
        except StorageError as e:
            logger.warning("Failed to load recent timers from %s: %s", self.path, e)
            status = STATUS_RECOVERED if isinstance(e, CorruptStorageError) else STATUS_FAILED
            return LoadOutcome(status=status, error=str(e))

        if document is None or self.slot not in document:
            return LoadOutcome(status=STATUS_MISSING)

        outcome = _parse_entries(document[self.slot])
        if outcome.degraded:
            logger.warning("Recovered recent timers from %s: %s", self.path, outcome.error)
        return outcome

    def write(self, entries: Sequence[RecentTimerEntry]) -> SaveOutcome:
        """
        Write the timer list to the slot, keeping any other keys in the document.

        Returns:
            SaveOutcome; a failed write is logged and reported, never raised
        """
        try:
            try:
                document = self._read_document() or {}
            except StorageError:
                # An unreadable document is replaced rather than blocking the write
                document = {}
            document[self.slot] = [entry.to_dict() for entry in entries]
            self._write_document(document)
        except StorageError as e:
            logger.warning("Failed to save recent timers to %s: %s", self.path, e)
            return SaveOutcome(status=STATUS_FAILED, error=str(e))
        return SaveOutcome()

    def load(self) -> List[RecentTimerEntry]:
        """Return the stored entries, or an empty list if they cannot be read."""
        return self.read().entries

    def save(self, entries: Sequence[RecentTimerEntry]) -> SaveOutcome:
        """Persist the entries, swallowing (but reporting) any failure."""
        return self.write(entries)

    def _read_document(self) -> Optional[Dict[str, Any]]:
        if not os.path.exists(self.path):
            return None

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except ValueError as e:
            raise CorruptStorageError(f"corrupt JSON: {e}") from e
        except OSError as e:
            raise StorageError(str(e)) from e

        if not isinstance(data, dict):
            raise CorruptStorageError(f"document holds {type(data).__name__}, expected object")
        return data

    def _write_document(self, document: Dict[str, Any]) -> None:
        try:
            # Ensure directory exists
            data_dir = os.path.dirname(self.path)
            if data_dir and not os.path.exists(data_dir):
                os.makedirs(data_dir, exist_ok=True)

            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(document, f, indent=2)
        except (OSError, TypeError, ValueError) as e:
            raise StorageError(str(e)) from e


class MemoryStore:
    """Keeps the timer list in memory only, for sessions without persistence."""

    def __init__(self, entries: Optional[Sequence[RecentTimerEntry]] = None):
        self._records: List[Dict[str, Any]] = [entry.to_dict() for entry in entries or []]

    def read(self) -> LoadOutcome:
        return _parse_entries(list(self._records))

    def write(self, entries: Sequence[RecentTimerEntry]) -> SaveOutcome:
        self._records = [entry.to_dict() for entry in entries]
        return SaveOutcome()

    def load(self) -> List[RecentTimerEntry]:
        return self.read().entries

    def save(self, entries: Sequence[RecentTimerEntry]) -> SaveOutcome:
        return self.write(entries)
