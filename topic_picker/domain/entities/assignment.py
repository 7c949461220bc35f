"""Assignment entity — one employee linked to one topic in one room."""

from __future__ import annotations

import secrets
import string
import time
from dataclasses import dataclass, replace
from datetime import datetime

from topic_picker.domain.value_objects.enums import Category, Channel

_ID_ALPHABET = string.ascii_lowercase + string.digits


def normalize_employee_id(value: object) -> str:
    """Canonical form used for every employee-id comparison."""
    return str(value).strip().casefold()


def new_record_id() -> str:
    """Client-side record id: ``id_<epoch millis>_<9 random chars>``."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"id_{int(time.time() * 1000)}_{suffix}"


@dataclass(frozen=True)
class Assignment:
    id: str | None
    employee_id: str
    name: str
    channel: Channel
    category: Category
    topic: str
    room: int
    assigned_at: datetime | None = None

    def with_id(self, record_id: str) -> Assignment:
        return replace(self, id=record_id)

    def belongs_to(self, employee_id: object) -> bool:
        return normalize_employee_id(self.employee_id) == normalize_employee_id(employee_id)
