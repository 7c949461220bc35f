"""AssignmentCache — in-process mirror of the assignment store.

The store only offers fetch-all, so the cache is the synchronous read
surface for the rest of the application and the change feed for listeners.

Refresh rules:
    - Contents are replaced wholesale; readers never see a partial update.
    - Within ``cooldown_seconds`` of the last completed refresh the cached
      contents are returned without touching the store, unless the cache
      has been invalidated since.
    - Callers arriving while a fetch is running await that same fetch.
    - Fetch results are applied in start order; a fetch that started before
      the currently applied one is discarded.
    - Store failures never escape ``refresh()``. The last good contents stay
      in place and listeners receive a snapshot carrying the error. A failed
      refresh still starts the cooldown.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from topic_picker.application.ports.assignment_store import AssignmentStore
from topic_picker.domain.entities.assignment import Assignment
from topic_picker.domain.errors import StoreError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheSnapshot:
    assignments: tuple[Assignment, ...]
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


Listener = Callable[[CacheSnapshot], None]


class AssignmentCache:
    def __init__(
        self,
        store: AssignmentStore,
        cooldown_seconds: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._store = store
        self._cooldown = cooldown_seconds
        self._clock = clock

        self._records: tuple[Assignment, ...] = ()
        self._last_error: str | None = None
        self._listeners: list[Listener] = []

        self._generation = 0
        self._completed_generation = -1
        self._attempted_generation = -1
        self._last_completed: float | None = None
        self._started_seq = 0
        self._applied_seq = 0

        self._inflight: asyncio.Future[tuple[Assignment, ...]] | None = None
        self._inflight_generation = -1
        self._background: set[asyncio.Task] = set()

    # ─── Read surface ────────────────────────────────────────────────

    @property
    def assignments(self) -> tuple[Assignment, ...]:
        return self._records

    @property
    def last_error(self) -> str | None:
        return self._last_error

    @property
    def loaded(self) -> bool:
        return self._completed_generation >= 0

    def snapshot(self) -> CacheSnapshot:
        return CacheSnapshot(assignments=self._records, error=self._last_error)

    # ─── Refresh ─────────────────────────────────────────────────────

    def invalidate(self) -> None:
        """Force the next refresh to hit the store, ignoring the cooldown."""
        self._generation += 1

    async def refresh(self) -> tuple[Assignment, ...]:
        inflight = self._inflight
        if (
            inflight is not None
            and not inflight.done()
            and self._inflight_generation == self._generation
        ):
            return await asyncio.shield(inflight)

        if self._is_fresh():
            return self._records

        task = asyncio.ensure_future(self._fetch())
        self._inflight = task
        self._inflight_generation = self._generation
        return await asyncio.shield(task)

    def schedule_refresh(self) -> asyncio.Task:
        """Invalidate and refresh in the background (fire-and-forget)."""
        self.invalidate()
        task = asyncio.get_running_loop().create_task(self.refresh())
        self._background.add(task)
        task.add_done_callback(self._on_background_done)
        return task

    async def aclose(self) -> None:
        """Wait for background refreshes still running."""
        if self._background:
            await asyncio.gather(*self._background, return_exceptions=True)

    def _is_fresh(self) -> bool:
        if self._attempted_generation != self._generation or self._last_completed is None:
            return False
        return self._clock() - self._last_completed < self._cooldown

    async def _fetch(self) -> tuple[Assignment, ...]:
        self._started_seq += 1
        seq = self._started_seq
        generation = self._generation

        try:
            records = tuple(await self._store.fetch_all())
        except StoreError as e:
            if seq < self._applied_seq:
                logger.debug("Ignoring failure of refresh #%d, #%d already applied", seq, self._applied_seq)
                return self._records
            logger.warning("Cache refresh failed, keeping %d cached records: %s", len(self._records), e)
            self._last_error = str(e) or type(e).__name__
            self._mark_attempted(generation)
            self._notify(self.snapshot())
            return self._records

        if seq < self._applied_seq:
            logger.debug("Discarding refresh #%d, #%d already applied", seq, self._applied_seq)
            return self._records

        self._applied_seq = seq
        self._records = records
        self._last_error = None
        self._mark_attempted(generation)
        self._completed_generation = max(self._completed_generation, generation)
        logger.debug("Cache refreshed: %d assignments", len(records))
        self._notify(self.snapshot())
        return records

    def _mark_attempted(self, generation: int) -> None:
        # Failed refreshes also start the cooldown.
        self._last_completed = self._clock()
        self._attempted_generation = max(self._attempted_generation, generation)

    def _on_background_done(self, task: asyncio.Task) -> None:
        self._background.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error("Background cache refresh crashed", exc_info=task.exception())

    # ─── Subscriptions ───────────────────────────────────────────────

    async def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; it is called now and after every refresh.

        Returns:
            A function that removes the listener.
        """
        await self.refresh()
        self._listeners.append(listener)
        self._deliver(listener, self.snapshot())

        def unsubscribe() -> None:
            self._listeners = [l for l in self._listeners if l is not listener]

        return unsubscribe

    def _notify(self, snapshot: CacheSnapshot) -> None:
        for listener in list(self._listeners):
            self._deliver(listener, snapshot)

    @staticmethod
    def _deliver(listener: Listener, snapshot: CacheSnapshot) -> None:
        try:
            listener(snapshot)
        except Exception:
            logger.exception("Cache listener %r failed", listener)
