"""Tests for sheet row <-> Assignment mapping."""

from datetime import datetime, timezone

from fakes import make_assignment
from topic_picker.adapters.sheets.records import (
    RECORD_FIELDS,
    domain_to_row,
    is_blank_row,
    parse_room,
    parse_timestamp,
    row_to_domain,
)
from topic_picker.domain.value_objects.enums import Channel


def test_parse_room_accepts_float_text():
    assert parse_room("2") == 2
    assert parse_room(" 3.0 ") == 3
    assert parse_room(1) == 1


def test_parse_timestamp_handles_zulu_suffix():
    ts = parse_timestamp("2025-01-15T09:30:00.000Z")
    assert ts == datetime(2025, 1, 15, 9, 30, tzinfo=timezone.utc)


def test_parse_timestamp_bad_or_empty_is_none():
    assert parse_timestamp("") is None
    assert parse_timestamp(None) is None
    assert parse_timestamp("yesterday") is None


def test_blank_row_detection():
    assert is_blank_row({"id": "", "name": "  ", "room": None})
    assert not is_blank_row({"id": "", "name": "Jane"})


def test_row_to_domain_trims_values():
    a = row_to_domain({
        "id": " id_1 ",
        "employeeId": " 123456789 ",
        "name": " Jane Doe ",
        "channel": "Banca",
        "category": "Rookie",
        "topic": " Sales Techniques ",
        "room": "1",
        "assignedAt": "",
    })
    assert a is not None
    assert a.id == "id_1"
    assert a.employee_id == "123456789"
    assert a.name == "Jane Doe"
    assert a.channel is Channel.BANCA
    assert a.topic == "Sales Techniques"


def test_row_to_domain_rejects_malformed_rows():
    base = {"employeeId": "1", "name": "X", "channel": "Banca", "category": "Rookie", "topic": "T", "room": "1"}
    assert row_to_domain({**base, "channel": "Corporate"}) is None
    assert row_to_domain({**base, "room": "Room A"}) is None
    assert row_to_domain({**base, "room": "inf"}) is None


def test_domain_to_row_has_every_column():
    row = domain_to_row(make_assignment(record_id="id_9_zzz", room=2))
    assert tuple(row) == RECORD_FIELDS
    assert row["id"] == "id_9_zzz"
    assert row["channel"] == "Banca"
    assert row["category"] == "Rookie"
    assert row["room"] == "2"
    assert all(isinstance(v, str) for v in row.values())


def test_row_round_trip_keeps_fields():
    original = make_assignment(record_id="id_9_zzz")
    assert row_to_domain(domain_to_row(original)) == original
