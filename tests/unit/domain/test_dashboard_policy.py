"""Tests for dashboard filtering and statistics."""

from fakes import make_assignment
from topic_picker.domain.policies.dashboard import (
    AssignmentFilter,
    compute_statistics,
    filter_assignments,
)
from topic_picker.domain.value_objects.enums import Category, Channel

ASSIGNMENTS = [
    make_assignment("111111111", topic="Sales Techniques", room=1, name="Alice Brown"),
    make_assignment("222222222", topic="Market Analysis", room=2,
                    category=Category.VINTAGE, name="Bob Stone"),
    make_assignment("333333333", topic="POS Systems", room=1,
                    channel=Channel.RETAIL, name="Carol White"),
    make_assignment("444444444", topic="Sales Techniques", room=3, name="Dan Green"),
]


def test_empty_filter_matches_everything():
    assert filter_assignments(ASSIGNMENTS, AssignmentFilter()) == ASSIGNMENTS


def test_filter_by_channel_category_room():
    result = filter_assignments(
        ASSIGNMENTS,
        AssignmentFilter(channel=Channel.BANCA, category=Category.ROOKIE, room=1),
    )
    assert [a.employee_id for a in result] == ["111111111"]


def test_search_matches_name_id_or_topic_case_insensitive():
    assert [a.name for a in filter_assignments(ASSIGNMENTS, AssignmentFilter(search="carol"))] == ["Carol White"]
    assert len(filter_assignments(ASSIGNMENTS, AssignmentFilter(search="2222"))) == 1
    assert len(filter_assignments(ASSIGNMENTS, AssignmentFilter(search="sales tech"))) == 2


def test_statistics_counts():
    stats = compute_statistics(ASSIGNMENTS)
    assert stats.total == 4
    assert stats.by_channel == {"Banca": 3, "Retail": 1}
    assert stats.by_category == {"Rookie": 3, "Vintage": 1}
    assert stats.by_room == {1: 2, 2: 1, 3: 1}
    assert stats.unique_topics == 3
    assert stats.topic_distribution["Sales Techniques"] == 2


def test_statistics_empty_reports_zeroes():
    stats = compute_statistics([])
    assert stats.total == 0
    assert stats.by_room == {1: 0, 2: 0, 3: 0}
    assert stats.by_channel == {"Banca": 0, "Retail": 0}
    assert stats.topic_distribution == {}
