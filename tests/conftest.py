"""Pytest configuration and shared fixtures."""

import pytest

from topic_picker.domain.entities.submission import TrainerSubmission
from topic_picker.domain.value_objects.enums import Category, Channel


@pytest.fixture
def jane_submission():
    return TrainerSubmission(
        employee_id="123456789",
        name="Jane Doe",
        channel=Channel.BANCA,
        category=Category.ROOKIE,
        room=1,
    )


@pytest.fixture
def padded_submission():
    return TrainerSubmission(
        employee_id="  987654321 ",
        name="  John Smith  ",
        channel=Channel.RETAIL,
        category=Category.VINTAGE,
        room=2,
    )
