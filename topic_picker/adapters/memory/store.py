"""In-memory store — process-local backend for development and demos."""

from __future__ import annotations

import asyncio

from topic_picker.application.ports.assignment_store import AssignmentStore
from topic_picker.domain.entities.assignment import (
    Assignment,
    new_record_id,
    normalize_employee_id,
)
from topic_picker.domain.value_objects.enums import plain_value

_FIELDS = {"id", "employee_id", "name", "channel", "category", "topic", "room"}


class InMemoryAssignmentStore(AssignmentStore):
    """Supports every capability, including filtered queries and deletion."""

    def __init__(self, assignments: list[Assignment] | None = None):
        self._records: list[Assignment] = list(assignments or [])
        self._lock = asyncio.Lock()

    async def fetch_all(self) -> list[Assignment]:
        async with self._lock:
            return list(self._records)

    async def append(self, assignment: Assignment) -> str:
        async with self._lock:
            record = assignment if assignment.id else assignment.with_id(new_record_id())
            self._records.append(record)
            return record.id

    async def query_equal(self, field: str, value: str) -> list[Assignment]:
        if field not in _FIELDS:
            raise ValueError(f"Unknown assignment field: {field}")
        async with self._lock:
            if field == "employee_id":
                target = normalize_employee_id(value)
                return [a for a in self._records if normalize_employee_id(a.employee_id) == target]
            return [a for a in self._records if plain_value(getattr(a, field)) == plain_value(value)]

    async def delete(self, record_id: str) -> None:
        async with self._lock:
            self._records = [a for a in self._records if a.id != record_id]

    async def clear(self) -> None:
        async with self._lock:
            self._records.clear()
