"""AssignTopicUseCase — full pipeline: duplicate check → allocate → append."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from topic_picker.application.ports.assignment_store import AssignmentStore
from topic_picker.application.services.assignment_cache import AssignmentCache
from topic_picker.application.services.duplicate_resolver import DuplicateResolver
from topic_picker.domain.entities.assignment import Assignment
from topic_picker.domain.entities.submission import TrainerSubmission
from topic_picker.domain.errors import AssignmentFailed, ExhaustedPool, StoreError
from topic_picker.domain.policies.topic_allocation import available_topics, draw_topic
from topic_picker.domain.value_objects.enums import AssignmentStatus

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class AssignmentOutcome:
    """The assignment shown to the trainer and how it was obtained."""

    assignment: Assignment
    status: AssignmentStatus

    @property
    def is_new(self) -> bool:
        return self.status != AssignmentStatus.EXISTING


class AssignTopicUseCase:
    """Orchestrates one trainer registration.

    Two submissions for different employees racing for the same room can
    both see the same topic as available before either append is visible,
    which yields a duplicate topic in that room. Stores with a real
    uniqueness constraint reject the second append (``AppendConflict``),
    which surfaces as ``AssignmentFailed`` and a manual retry.
    """

    def __init__(
        self,
        store: AssignmentStore,
        cache: AssignmentCache,
        resolver: DuplicateResolver,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._store = store
        self._cache = cache
        self._resolver = resolver
        self._rng = rng
        self._clock = clock

    async def execute(self, submission: TrainerSubmission) -> AssignmentOutcome:
        """Assign a topic to the submitting trainer.

        Pipeline:
        1. Normalize employee id and name
        2. Return the prior assignment if the employee already has one
        3. Compute topics still free in the requested room
        4. Fail with ExhaustedPool if none are left
        5. Draw one at random and append it to the store
        6. On success refresh the cache in the background
        7. On append failure look the employee up once more before giving up

        Raises:
            ExhaustedPool: no topic left for this channel/category in the room.
            AssignmentFailed: the append failed and no record was found after it.
        """
        sub = submission.normalized()

        # Step 2: idempotent resubmission
        existing = await self._resolver.find_existing(sub.employee_id)
        if existing:
            logger.info(
                "Employee %s already assigned %r in room %s, returning it",
                sub.employee_id, existing.topic, existing.room,
            )
            return AssignmentOutcome(existing, AssignmentStatus.EXISTING)

        # Step 3: availability over the freshest view we can get
        known = await self._cache.refresh()
        candidates = available_topics(sub.channel, sub.category, sub.room, known)
        logger.info(
            "Employee %s: %d topics available for %s/%s in room %d",
            sub.employee_id, len(candidates),
            sub.channel.value, sub.category.value, sub.room,
        )

        # Step 4
        if not candidates:
            logger.warning(
                "Pool exhausted for %s/%s in room %d",
                sub.channel.value, sub.category.value, sub.room,
            )
            raise ExhaustedPool(sub.channel.value, sub.category.value, sub.room)

        # Step 5
        assignment = Assignment(
            id=None,
            employee_id=sub.employee_id,
            name=sub.name,
            channel=sub.channel,
            category=sub.category,
            topic=draw_topic(candidates, self._rng),
            room=sub.room,
            assigned_at=self._clock(),
        )

        try:
            record_id = await self._store.append(assignment)
        except StoreError as e:
            return await self._recover(sub, e)

        # Step 6
        self._cache.schedule_refresh()
        created = assignment.with_id(record_id)
        logger.info(
            "Employee %s → %r in room %d (id=%s)",
            sub.employee_id, created.topic, created.room, record_id,
        )
        return AssignmentOutcome(created, AssignmentStatus.CREATED)

    async def _recover(self, sub: TrainerSubmission, error: StoreError) -> AssignmentOutcome:
        """Step 7: the append may have landed even though the call failed."""
        logger.warning("Append for employee %s failed (%s), rechecking store", sub.employee_id, error)
        self._cache.invalidate()

        found = await self._resolver.find_existing(sub.employee_id)
        if found:
            logger.info("Employee %s: record was persisted despite the error", sub.employee_id)
            self._cache.schedule_refresh()
            return AssignmentOutcome(found, AssignmentStatus.RECOVERED)

        raise AssignmentFailed(
            "Error occurred while assigning topic. Please try again."
        ) from error
