"""TrainerSubmission — validated input coming from the registration form."""

from __future__ import annotations

from dataclasses import dataclass

from topic_picker.domain.entities.assignment import normalize_employee_id
from topic_picker.domain.value_objects.enums import Category, Channel


@dataclass(frozen=True)
class TrainerSubmission:
    employee_id: str
    name: str
    channel: Channel
    category: Category
    room: int

    def normalized(self) -> TrainerSubmission:
        return TrainerSubmission(
            employee_id=normalize_employee_id(self.employee_id),
            name=self.name.strip(),
            channel=Channel(self.channel),
            category=Category(self.category),
            room=int(self.room),
        )
