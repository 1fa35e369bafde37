"""Data models for cache storage."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..exceptions import InvalidEntryError


Identity = Tuple[str, Optional[int], Tuple[int, ...]]


def _require_int(value: Any, name: str) -> int:
    # bool is an int subclass but never a valid id
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidEntryError(f"{name} must be an integer, got {value!r}")
    return value


def _optional_int(value: Any, name: str) -> Optional[int]:
    if value is None:
        return None
    return _require_int(value, name)


def _int_list(value: Any, name: str) -> List[int]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise InvalidEntryError(f"{name} must be a list of integers, got {value!r}")
    return [_require_int(item, name) for item in value]


@dataclass
class RecentTimerEntry:
    """A recently used timer configuration offered as a suggestion."""
    id: int
    description: str
    project_id: Optional[int] = None
    tag_ids: List[int] = field(default_factory=list)
    usage_count: int = 0

    def identity(self) -> Identity:
        """
        Return the logical identity of this configuration.

        Two entries with the same description, project and set of tags are the
        same configuration regardless of their record id, usage or tag order.
        """
        return (self.description, self.project_id, tuple(sorted(self.tag_ids)))

    def same_configuration(self, other: "RecentTimerEntry") -> bool:
        """Check whether two entries describe the same configuration."""
        return self.identity() == other.identity()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted record layout."""
        return {
            "id": self.id,
            "description": self.description,
            "projectId": self.project_id,
            "tagIds": list(self.tag_ids),
            "usageCount": self.usage_count,
        }

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "RecentTimerEntry":
        """
        Build an entry from a persisted record.

        Records written before usage tracking existed have no ``usageCount``;
        they read as unused.

        Raises:
            InvalidEntryError: If ``id`` or ``description`` is missing or mistyped
        """
        if not isinstance(record, Mapping):
            raise InvalidEntryError(f"Timer record must be an object, got {record!r}")
        description = record.get("description")
        if not isinstance(description, str):
            raise InvalidEntryError(f"description must be a string, got {description!r}")
        usage_count = record.get("usageCount")
        return cls(
            id=_require_int(record.get("id"), "id"),
            description=description,
            project_id=_optional_int(record.get("projectId"), "projectId"),
            tag_ids=_int_list(record.get("tagIds"), "tagIds"),
            usage_count=0 if usage_count is None else max(0, _require_int(usage_count, "usageCount")),
        )

    @classmethod
    def from_fetched(cls, record: Mapping[str, Any]) -> "RecentTimerEntry":
        """
        Build an entry from a time entry returned by the time-tracking backend.

        The backend uses snake_case keys (``project_id``, ``tag_ids``); camelCase
        keys are accepted too so already-converted records can be passed back in.
        A missing description becomes an empty string and is rejected later by
        the admission filter.

        Raises:
            InvalidEntryError: If ``id`` is missing or not an integer, or ``description``
                is present but not a string
        """
        if not isinstance(record, Mapping):
            raise InvalidEntryError(f"Fetched time entry must be an object, got {record!r}")
        description = record.get("description")
        if description is None:
            description = ""
        elif not isinstance(description, str):
            raise InvalidEntryError(f"description must be a string, got {description!r}")
        project_id = record.get("project_id", record.get("projectId"))
        tag_ids = record.get("tag_ids", record.get("tagIds"))
        return cls(
            id=_require_int(record.get("id"), "id"),
            description=description,
            project_id=_optional_int(project_id, "project_id"),
            tag_ids=_int_list(tag_ids, "tag_ids"),
        )
