"""In-memory fakes shared by the unit tests."""

from __future__ import annotations

import asyncio
from collections import Counter
from datetime import datetime, timezone

from topic_picker.application.ports.assignment_store import AssignmentStore
from topic_picker.domain.entities.assignment import Assignment
from topic_picker.domain.errors import StoreError
from topic_picker.domain.value_objects.enums import Category, Channel


def make_assignment(
    employee_id: str = "123456789",
    topic: str = "Sales Techniques",
    room: int = 1,
    channel: Channel = Channel.BANCA,
    category: Category = Category.ROOKIE,
    name: str = "Jane Doe",
    record_id: str | None = None,
) -> Assignment:
    return Assignment(
        id=record_id or f"rec-{employee_id}",
        employee_id=employee_id,
        name=name,
        channel=channel,
        category=category,
        topic=topic,
        room=room,
        assigned_at=datetime(2025, 1, 15, 9, 30, tzinfo=timezone.utc),
    )


class FakeStore(AssignmentStore):
    """Store fake with call counting and failure injection.

    Attributes:
        fetch_error / query_error / append_error: raised by the matching call.
        persist_before_error: append stores the record before raising, like a
            request whose response was lost.
        stale_reads: number of most recent records hidden from reads, like a
            read path that has not caught up with writes.
        fetch_gate: when set, ``fetch_all`` waits on it before answering.
    """

    def __init__(self, assignments: list[Assignment] | None = None, queryable: bool = True):
        self.records: list[Assignment] = list(assignments or [])
        self.queryable = queryable
        self.calls: Counter[str] = Counter()
        self.fetch_error: StoreError | None = None
        self.query_error: StoreError | None = None
        self.append_error: StoreError | None = None
        self.persist_before_error = False
        self.stale_reads = 0
        self.fetch_gate: asyncio.Event | None = None

    def _visible(self) -> list[Assignment]:
        if self.stale_reads:
            return self.records[: max(len(self.records) - self.stale_reads, 0)]
        return list(self.records)

    async def fetch_all(self):
        self.calls["fetch_all"] += 1
        if self.fetch_gate is not None:
            await self.fetch_gate.wait()
        if self.fetch_error is not None:
            raise self.fetch_error
        return self._visible()

    async def append(self, assignment):
        self.calls["append"] += 1
        record = assignment if assignment.id else assignment.with_id(f"rec-{len(self.records) + 1}")
        if self.append_error is not None:
            if self.persist_before_error:
                self.records.append(record)
            raise self.append_error
        self.records.append(record)
        return record.id

    async def query_equal(self, field, value):
        self.calls["query_equal"] += 1
        if not self.queryable:
            return await super().query_equal(field, value)
        if self.query_error is not None:
            raise self.query_error
        return [a for a in self._visible() if a.belongs_to(value)]


class FakeClock:
    """Monotonic clock the test advances by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
