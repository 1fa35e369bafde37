"""Auto-complete ranking of recent timers for the new-timer search box."""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from .cache.models import RecentTimerEntry
from .fuzzy_matcher import fuzzy_match


def rank_entries(entries: Sequence[RecentTimerEntry], query: str, limit: int) -> List[RecentTimerEntry]:
    """
    Rank entries for a search query.

    With an empty (or whitespace-only) query every entry is returned, most used
    first. Otherwise entries whose description fuzzy-matches the query are
    sorted by match score, cut down to ``limit``, and only then reordered by
    usage. Usage can therefore reorder the top matches but never pull a weaker
    match into the window.

    All sorts are stable, so ties keep the stored order.

    Args:
        entries: Stored entries, most recently touched first
        query: User input text
        limit: Maximum number of entries to return

    Returns:
        Ranked entries
    """
    # A negative limit would slice from the end
    limit = max(limit, 0)

    if not query.strip():
        ranked = sorted(entries, key=lambda e: e.usage_count, reverse=True)
        return ranked[:limit]

    scored = []
    for entry in entries:
        result = fuzzy_match(query, entry.description)
        if result.matches:
            scored.append((result.score, entry))

    # Sort by score (descending) and keep the top window
    scored.sort(key=lambda item: item[0], reverse=True)
    window = [entry for _, entry in scored[:limit]]

    window.sort(key=lambda e: e.usage_count, reverse=True)
    return window


class Suggestion:
    """Represents a single recent timer suggestion ready for display."""

    def __init__(
        self,
        entry: RecentTimerEntry,
        project_name: Optional[str] = None,
        project_color: Optional[str] = None,
        tag_names: Optional[List[str]] = None,
    ):
        """
        Initialize a suggestion.

        Args:
            entry: The cached timer configuration
            project_name: Name of the entry's project, if it resolved
            project_color: Display colour of the entry's project, if it resolved
            tag_names: Names of the entry's tags, in tag catalog order
        """
        self.entry = entry
        self.project_name = project_name
        self.project_color = project_color
        self.tag_names = tag_names or []

    @property
    def description(self) -> str:
        return self.entry.description

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for UI consumption."""
        return {
            "description": self.entry.description,
            "projectId": self.entry.project_id,
            "tagIds": list(self.entry.tag_ids),
            "projectName": self.project_name,
            "projectColor": self.project_color,
            "tagNames": list(self.tag_names),
        }


def resolve_suggestions(
    entries: Sequence[RecentTimerEntry],
    projects: Sequence[Mapping[str, Any]],
    tags: Sequence[Mapping[str, Any]],
) -> List[Suggestion]:
    """
    Attach project and tag display data to entries.

    The cache only stores project and tag ids; names and colours come from the
    host's catalogs. Ids that no longer exist in a catalog are left unresolved.

    Args:
        entries: Ranked entries
        projects: Project dicts with 'id', 'name', 'color' keys
        tags: Tag dicts with 'id', 'name' keys

    Returns:
        One suggestion per entry, in the same order
    """
    projects_by_id = {p.get("id"): p for p in projects}

    suggestions = []
    for entry in entries:
        # A project id of 0 is treated like no project
        project = projects_by_id.get(entry.project_id) if entry.project_id else None
        tag_ids = set(entry.tag_ids)
        tag_names = [t.get("name", "") for t in tags if t.get("id") in tag_ids]
        suggestions.append(Suggestion(
            entry,
            project_name=project.get("name") if project else None,
            project_color=project.get("color") if project else None,
            tag_names=tag_names,
        ))
    return suggestions
