"""Tests for the admin CSV export."""

import csv
import dataclasses
import io
from datetime import date

from fakes import make_assignment
from topic_picker.adapters.csv_export.exporter import (
    CSV_HEADERS,
    export_csv,
    export_filename,
    write_csv,
)
from topic_picker.domain.value_objects.enums import Category, Channel


def test_export_layout():
    text = export_csv([
        make_assignment("123456789", topic="Sales Techniques", room=1),
        make_assignment("987654321", topic="Store Operations", room=3,
                        channel=Channel.RETAIL, category=Category.VINTAGE, name="John Smith"),
    ])

    rows = list(csv.reader(io.StringIO(text)))
    assert rows[0] == CSV_HEADERS
    assert rows[1] == [
        "123456789", "Jane Doe", "Banca", "Rookie", "Sales Techniques", "Room 1", "2025-01-15 09:30:00",
    ]
    assert rows[2][2:6] == ["Retail", "Vintage", "Store Operations", "Room 3"]


def test_export_empty_has_header_only():
    rows = list(csv.reader(io.StringIO(export_csv([]))))
    assert rows == [CSV_HEADERS]


def test_values_with_commas_are_quoted():
    text = export_csv([make_assignment(topic="Risk, Compliance")])
    assert '"Risk, Compliance"' in text
    assert list(csv.reader(io.StringIO(text)))[1][4] == "Risk, Compliance"


def test_write_csv_returns_row_count():
    buffer = io.StringIO()
    assert write_csv([make_assignment(), make_assignment("222222222")], buffer) == 2


def test_missing_timestamp_is_blank():
    a = dataclasses.replace(make_assignment(), assigned_at=None)
    assert list(csv.reader(io.StringIO(export_csv([a]))))[1][6] == ""


def test_export_filename():
    assert export_filename(date(2025, 2, 3)) == "trainer-assignments-2025-02-03.csv"
