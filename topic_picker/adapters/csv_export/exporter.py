"""CSV exporter — writes assignments in the admin spreadsheet layout."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable
from datetime import date
from typing import TextIO

from topic_picker.domain.entities.assignment import Assignment

CSV_HEADERS: list[str] = [
    "Employee ID",
    "Name",
    "Channel",
    "Category",
    "Topic",
    "Room",
    "Assigned At",
]


def _to_row(a: Assignment) -> list[str]:
    return [
        a.employee_id,
        a.name,
        a.channel.value,
        a.category.value,
        a.topic,
        f"Room {a.room}" if a.room else "",
        a.assigned_at.strftime("%Y-%m-%d %H:%M:%S") if a.assigned_at else "",
    ]


def write_csv(assignments: Iterable[Assignment], stream: TextIO) -> int:
    """Write a header plus one row per assignment. Returns the row count."""
    writer = csv.writer(stream)
    writer.writerow(CSV_HEADERS)
    count = 0
    for a in assignments:
        writer.writerow(_to_row(a))
        count += 1
    return count


def export_csv(assignments: Iterable[Assignment]) -> str:
    buffer = io.StringIO(newline="")
    write_csv(assignments, buffer)
    return buffer.getvalue()


def export_filename(today: date | None = None) -> str:
    return f"trainer-assignments-{(today or date.today()).isoformat()}.csv"
