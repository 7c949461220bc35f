"""SQLAlchemy ORM models — maps to the assignments table."""

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from topic_picker.adapters.persistence.database import Base


class AssignmentModel(Base):
    __tablename__ = "assignments"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    employee_id: Mapped[str] = mapped_column(String(32), nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    channel: Mapped[str] = mapped_column(String(20), nullable=False)
    category: Mapped[str] = mapped_column(String(20), nullable=False)
    topic: Mapped[str] = mapped_column(String(200), nullable=False)
    room: Mapped[int] = mapped_column(Integer, nullable=False)
    assigned_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # One assignment per employee, one trainer per topic per room.
    __table_args__ = (
        UniqueConstraint("employee_id", name="uq_assignments_employee"),
        UniqueConstraint("room", "topic", name="uq_assignments_room_topic"),
        Index("idx_assignments_room", "room"),
    )
