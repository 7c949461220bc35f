"""DuplicateResolver — finds an employee's existing assignment, if any."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from topic_picker.application.ports.assignment_store import AssignmentStore
from topic_picker.application.services.assignment_cache import AssignmentCache
from topic_picker.domain.entities.assignment import Assignment, normalize_employee_id
from topic_picker.domain.errors import StoreError, UnsupportedOperation

logger = logging.getLogger(__name__)


class DuplicateResolver:
    """Ordered lookup: local cache, then filtered query, then full scan.

    The backing store has no uniqueness constraint and its reads can lag
    behind writes, so every step is a best-effort scan. Each step is
    authoritative when it finds a match; a store failure makes that step
    inconclusive and the lookup moves on instead of aborting.
    """

    def __init__(self, cache: AssignmentCache, store: AssignmentStore):
        self._cache = cache
        self._store = store

    async def find_existing(self, employee_id: object) -> Assignment | None:
        clean_id = normalize_employee_id(employee_id)

        # Step 1: local cache
        found = _scan(self._cache.assignments, clean_id)
        if found:
            logger.info("Employee %s: existing assignment found in cache", clean_id)
            return found

        # Step 2: server-side equality query
        try:
            found = _scan(await self._store.query_equal("employee_id", clean_id), clean_id)
        except UnsupportedOperation:
            logger.debug("Store has no filtered query, skipping to full scan")
        except StoreError as e:
            logger.warning("Filtered lookup for %s failed: %s", clean_id, e)
        if found:
            logger.info("Employee %s: existing assignment found by store query", clean_id)
            return found

        # Step 3: fetch everything and scan client-side
        try:
            found = _scan(await self._store.fetch_all(), clean_id)
        except StoreError as e:
            logger.warning("Full-scan lookup for %s failed, assuming no duplicate: %s", clean_id, e)
            return None
        if found:
            logger.info("Employee %s: existing assignment found by full scan", clean_id)
            return found

        logger.info("Employee %s: no existing assignment", clean_id)
        return None


def _scan(assignments: Iterable[Assignment], clean_id: str) -> Assignment | None:
    return next((a for a in assignments if a.belongs_to(clean_id)), None)
