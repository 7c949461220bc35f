"""Trainer-facing endpoints — submit registration, look up a prior result."""

from __future__ import annotations

import re

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel, field_validator

from topic_picker.application.services.duplicate_resolver import DuplicateResolver
from topic_picker.application.use_cases.assign_topic import AssignTopicUseCase
from topic_picker.domain.entities.submission import TrainerSubmission
from topic_picker.domain.value_objects.enums import Category, Channel
from topic_picker.domain.value_objects.topic_pools import ROOMS
from topic_picker.infrastructure.api.dependencies import get_assign_topic_uc, get_resolver
from topic_picker.infrastructure.api.serializers import serialize_assignment

router = APIRouter(prefix="/assignments", tags=["assignments"])

EMPLOYEE_ID_RE = re.compile(r"^\d{9}$")
NAME_RE = re.compile(r"^[A-Za-z\s]+$")

# ── Request schema ──────────────────────────────────────────────────


class SubmissionRequest(BaseModel):
    employee_id: str
    name: str
    channel: Channel
    category: Category
    room: int

    @field_validator("employee_id")
    @classmethod
    def _check_employee_id(cls, v: str) -> str:
        if not EMPLOYEE_ID_RE.match(v):
            raise ValueError("Employee ID must be exactly 9 digits")
        return v

    @field_validator("name")
    @classmethod
    def _check_name(cls, v: str) -> str:
        v = v.strip()
        if not NAME_RE.match(v):
            raise ValueError("Name must contain only letters and spaces")
        if len(v) < 2:
            raise ValueError("Name must be at least 2 characters long")
        return v

    @field_validator("room")
    @classmethod
    def _check_room(cls, v: int) -> int:
        if v not in ROOMS:
            raise ValueError(f"Room must be one of {', '.join(map(str, ROOMS))}")
        return v

    def to_domain(self) -> TrainerSubmission:
        return TrainerSubmission(
            employee_id=self.employee_id,
            name=self.name,
            channel=self.channel,
            category=self.category,
            room=self.room,
        )


# ── Endpoints ───────────────────────────────────────────────────────


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_registration(
    body: SubmissionRequest,
    response: Response,
    uc: AssignTopicUseCase = Depends(get_assign_topic_uc),
):
    """Assign a topic, or return the employee's existing assignment."""
    outcome = await uc.execute(body.to_domain())
    if not outcome.is_new:
        response.status_code = status.HTTP_200_OK
    return {
        "status": outcome.status.value,
        "assignment": serialize_assignment(outcome.assignment),
    }


@router.get("/{employee_id}")
async def get_assignment(
    employee_id: str,
    resolver: DuplicateResolver = Depends(get_resolver),
):
    """Show a trainer their previous result."""
    existing = await resolver.find_existing(employee_id)
    if existing is None:
        raise HTTPException(status_code=404, detail="No assignment for this employee")
    return serialize_assignment(existing)
