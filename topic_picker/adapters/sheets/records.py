"""Mapping between flat sheet rows and Assignment entities.

Rows arrive as string-valued dicts keyed by the sheet's column headers.
Parsing (room text → int, timestamp text → datetime) happens here and
nowhere else.
"""

from __future__ import annotations

import logging
from datetime import datetime

from topic_picker.domain.entities.assignment import Assignment, new_record_id
from topic_picker.domain.value_objects.enums import Category, Channel

logger = logging.getLogger(__name__)

RECORD_FIELDS: tuple[str, ...] = (
    "id",
    "employeeId",
    "name",
    "channel",
    "category",
    "topic",
    "room",
    "assignedAt",
)


def is_blank_row(row: dict) -> bool:
    return all(str(v).strip() == "" for v in row.values() if v is not None)


def parse_timestamp(raw: object) -> datetime | None:
    text = str(raw or "").strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        logger.warning("Could not parse timestamp: %s", text)
        return None


def parse_room(raw: object) -> int:
    """Rooms are stored as text; "2" and "2.0" both mean room 2."""
    return int(float(str(raw or "").strip()))


def row_to_domain(row: dict) -> Assignment | None:
    """Convert one sheet row; returns None for rows that cannot be parsed."""
    try:
        return Assignment(
            id=str(row.get("id") or "").strip() or None,
            employee_id=str(row.get("employeeId", "")).strip(),
            name=str(row.get("name", "")).strip(),
            channel=Channel(str(row.get("channel", "")).strip()),
            category=Category(str(row.get("category", "")).strip()),
            topic=str(row.get("topic", "")).strip(),
            room=parse_room(row.get("room")),
            assigned_at=parse_timestamp(row.get("assignedAt")),
        )
    except (ValueError, OverflowError):
        logger.warning("Skipping malformed sheet row: %s", row)
        return None


def domain_to_row(a: Assignment) -> dict[str, str]:
    """Flat form fields for an append; generates an id when none is set."""
    return {
        "id": a.id or new_record_id(),
        "employeeId": a.employee_id,
        "name": a.name,
        "channel": a.channel.value,
        "category": a.category.value,
        "topic": a.topic,
        "room": str(a.room),
        "assignedAt": (a.assigned_at or datetime.now().astimezone()).isoformat(),
    }
