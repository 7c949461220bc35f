"""AdminDashboardUseCase — list, aggregate, export and remove assignments."""

from __future__ import annotations

import logging

from topic_picker.application.ports.assignment_store import AssignmentStore
from topic_picker.application.services.assignment_cache import AssignmentCache
from topic_picker.domain.entities.assignment import Assignment
from topic_picker.domain.policies.dashboard import (
    AssignmentFilter,
    AssignmentStatistics,
    compute_statistics,
    filter_assignments,
)

logger = logging.getLogger(__name__)


class AdminDashboardUseCase:
    """Reads go through the cache; deletions go straight to the store.

    Deletion is best-effort: stores without the capability raise
    ``UnsupportedOperation`` and the caller must show the manual fallback.
    """

    def __init__(self, store: AssignmentStore, cache: AssignmentCache):
        self._store = store
        self._cache = cache

    async def list_assignments(self, criteria: AssignmentFilter | None = None) -> list[Assignment]:
        assignments = await self._cache.refresh()
        return filter_assignments(assignments, criteria or AssignmentFilter())

    async def statistics(self) -> AssignmentStatistics:
        return compute_statistics(await self._cache.refresh())

    async def delete(self, record_id: str) -> None:
        await self._store.delete(record_id)
        logger.info("Assignment %s deleted", record_id)
        self._cache.invalidate()
        await self._cache.refresh()

    async def clear_all(self) -> None:
        await self._store.clear()
        logger.info("All assignments cleared")
        self._cache.invalidate()
        await self._cache.refresh()
