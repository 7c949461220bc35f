"""SQLAlchemy store implementation.

Unlike the spreadsheet backend this one enforces uniqueness server-side:
an append that would give an employee a second assignment, or reuse a
topic inside a room, is rejected atomically with ``AppendConflict``.
Every call runs under ``timeout`` seconds; expiry raises ``StoreUnavailable``.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from topic_picker.adapters.persistence.models import AssignmentModel
from topic_picker.application.ports.assignment_store import AssignmentStore
from topic_picker.domain.entities.assignment import (
    Assignment,
    new_record_id,
    normalize_employee_id,
)
from topic_picker.domain.errors import AppendConflict, StoreUnavailable
from topic_picker.domain.value_objects.enums import Category, Channel

logger = logging.getLogger(__name__)

_COLUMNS = {
    "id": AssignmentModel.id,
    "employee_id": AssignmentModel.employee_id,
    "name": AssignmentModel.name,
    "channel": AssignmentModel.channel,
    "category": AssignmentModel.category,
    "topic": AssignmentModel.topic,
    "room": AssignmentModel.room,
}

# ─── Mappers ─────────────────────────────────────────────────────────


def _assignment_to_domain(m: AssignmentModel) -> Assignment | None:
    try:
        channel = Channel(m.channel)
        category = Category(m.category)
    except ValueError:
        logger.warning("Skipping malformed assignment row %s (%s/%s)", m.id, m.channel, m.category)
        return None
    return Assignment(
        id=m.id,
        employee_id=m.employee_id,
        name=m.name,
        channel=channel,
        category=category,
        topic=m.topic,
        room=m.room,
        assigned_at=m.assigned_at,
    )


def _to_domain_list(models: Iterable[AssignmentModel]) -> list[Assignment]:
    return [a for a in map(_assignment_to_domain, models) if a is not None]


def _assignment_to_model(a: Assignment, record_id: str) -> AssignmentModel:
    return AssignmentModel(
        id=record_id,
        employee_id=normalize_employee_id(a.employee_id),
        name=a.name,
        channel=a.channel.value,
        category=a.category.value,
        topic=a.topic,
        room=a.room,
        assigned_at=a.assigned_at,
    )


# ─── Store ───────────────────────────────────────────────────────────


class SqlAssignmentStore(AssignmentStore):
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        timeout: float | None = None,
    ):
        self._sessions = session_factory
        self._timeout = timeout

    @asynccontextmanager
    async def _session(self, action: str) -> AsyncIterator[AsyncSession]:
        try:
            async with asyncio.timeout(self._timeout):
                async with self._sessions() as s:
                    yield s
        except TimeoutError as e:
            logger.error("Database %s timed out after %ss", action, self._timeout)
            raise StoreUnavailable(f"Database {action} timed out after {self._timeout}s") from e

    async def fetch_all(self) -> list[Assignment]:
        try:
            async with self._session("fetch") as s:
                result = await s.execute(
                    select(AssignmentModel).order_by(AssignmentModel.assigned_at, AssignmentModel.id)
                )
                return _to_domain_list(result.scalars())
        except SQLAlchemyError as e:
            logger.exception("Error fetching assignments")
            raise StoreUnavailable(f"Database fetch failed: {e}") from e

    async def append(self, assignment: Assignment) -> str:
        record_id = assignment.id or new_record_id()
        try:
            async with self._session("append") as s:
                s.add(_assignment_to_model(assignment, record_id))
                await s.commit()
        except IntegrityError as e:
            logger.warning("Append of %s rejected by constraint: %s", record_id, e.orig)
            raise AppendConflict(
                f"Employee {assignment.employee_id} or topic {assignment.topic!r} "
                f"in room {assignment.room} is already taken"
            ) from e
        except SQLAlchemyError as e:
            logger.exception("Error appending assignment %s", record_id)
            raise StoreUnavailable(f"Database append failed: {e}") from e
        return record_id

    async def query_equal(self, field: str, value: str) -> list[Assignment]:
        column = _COLUMNS.get(field)
        if column is None:
            raise ValueError(f"Unknown assignment field: {field}")
        if field == "employee_id":
            value = normalize_employee_id(value)
        elif field == "room":
            value = int(value)
        try:
            async with self._session("query") as s:
                result = await s.execute(select(AssignmentModel).where(column == value))
                return _to_domain_list(result.scalars())
        except SQLAlchemyError as e:
            raise StoreUnavailable(f"Database query failed: {e}") from e

    async def delete(self, record_id: str) -> None:
        await self._execute_delete(delete(AssignmentModel).where(AssignmentModel.id == record_id))

    async def clear(self) -> None:
        await self._execute_delete(delete(AssignmentModel))

    async def _execute_delete(self, statement) -> None:
        try:
            async with self._session("delete") as s:
                await s.execute(statement)
                await s.commit()
        except SQLAlchemyError as e:
            raise StoreUnavailable(f"Database delete failed: {e}") from e
