"""Dashboard policies — filtering and aggregate statistics over assignments."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from topic_picker.domain.entities.assignment import Assignment
from topic_picker.domain.value_objects.enums import Category, Channel
from topic_picker.domain.value_objects.topic_pools import ROOMS


@dataclass(frozen=True)
class AssignmentFilter:
    """``None`` on any field means "all"."""

    channel: Channel | None = None
    category: Category | None = None
    room: int | None = None
    search: str | None = None

    def matches(self, a: Assignment) -> bool:
        if self.channel is not None and a.channel != self.channel:
            return False
        if self.category is not None and a.category != self.category:
            return False
        if self.room is not None and a.room != self.room:
            return False
        if self.search:
            term = self.search.strip().lower()
            return (
                term in a.name.lower()
                or term in a.employee_id
                or term in a.topic.lower()
            )
        return True


@dataclass
class AssignmentStatistics:
    total: int = 0
    by_channel: dict[str, int] = field(default_factory=dict)
    by_category: dict[str, int] = field(default_factory=dict)
    by_room: dict[int, int] = field(default_factory=dict)
    unique_topics: int = 0
    topic_distribution: dict[str, int] = field(default_factory=dict)


def filter_assignments(
    assignments: Iterable[Assignment], criteria: AssignmentFilter
) -> list[Assignment]:
    return [a for a in assignments if criteria.matches(a)]


def compute_statistics(assignments: Iterable[Assignment]) -> AssignmentStatistics:
    """Count assignments per channel, category, room and topic.

    Every known channel, category and room is reported, with zero when it
    has no assignments, so dashboards can render a fixed layout.
    """
    items = list(assignments)
    by_channel = {c.value: 0 for c in Channel}
    by_category = {c.value: 0 for c in Category}
    by_room = {r: 0 for r in ROOMS}
    topics: Counter[str] = Counter()

    for a in items:
        by_channel[a.channel.value] += 1
        by_category[a.category.value] += 1
        if a.room in by_room:
            by_room[a.room] += 1
        if a.topic:
            topics[a.topic] += 1

    return AssignmentStatistics(
        total=len(items),
        by_channel=by_channel,
        by_category=by_category,
        by_room=by_room,
        unique_topics=len(topics),
        topic_distribution=dict(topics),
    )
