"""Tests for domain entities."""

import dataclasses
import re

import pytest

from fakes import make_assignment
from topic_picker.domain.entities.assignment import new_record_id, normalize_employee_id
from topic_picker.domain.value_objects.enums import Category, Channel


def test_normalize_employee_id_trims_and_stringifies():
    assert normalize_employee_id("  123456789 ") == "123456789"
    assert normalize_employee_id(123456789) == "123456789"


def test_normalize_employee_id_is_case_insensitive():
    assert normalize_employee_id("AB12") == normalize_employee_id("ab12")


def test_belongs_to_uses_normalized_comparison():
    a = make_assignment(employee_id="123456789")
    assert a.belongs_to(" 123456789")
    assert not a.belongs_to("123456780")


def test_assignment_is_immutable():
    a = make_assignment()
    with pytest.raises(dataclasses.FrozenInstanceError):
        a.topic = "Other"  # type: ignore[misc]


def test_with_id_returns_copy():
    a = make_assignment(record_id="old")
    b = a.with_id("new")
    assert b.id == "new"
    assert a.id == "old"
    assert b.topic == a.topic


def test_new_record_id_format():
    rid = new_record_id()
    assert re.fullmatch(r"id_\d+_[a-z0-9]{9}", rid)
    assert new_record_id() != rid


def test_submission_normalized(padded_submission):
    clean = padded_submission.normalized()
    assert clean.employee_id == "987654321"
    assert clean.name == "John Smith"
    assert clean.channel is Channel.RETAIL
    assert clean.category is Category.VINTAGE
    assert clean.room == 2
