"""Shared response serialization for API routers."""

from __future__ import annotations

from topic_picker.domain.entities.assignment import Assignment


def serialize_assignment(a: Assignment) -> dict:
    return {
        "id": a.id,
        "employee_id": a.employee_id,
        "name": a.name,
        "channel": a.channel.value,
        "category": a.category.value,
        "topic": a.topic,
        "room": a.room,
        "assigned_at": a.assigned_at.isoformat() if a.assigned_at else None,
    }
