# tests/test_views.py

import datetime

import pytest

from core.views import (
    SortDirection,
    SortState,
    default_view,
    filter_by_name,
    sort_records,
)
from models.exam_record import ExamRecord

UTC = datetime.timezone.utc


@pytest.fixture
def mixed_records():
    return [
        ExamRecord(datetime.datetime(2024, 3, 1, tzinfo=UTC), "physics midterm", 7, 3, 0, 70.0),
        ExamRecord(datetime.datetime(2024, 1, 5, tzinfo=UTC), "Algebra", 9, 1, 0, 90.0),
        ExamRecord(datetime.datetime(2024, 2, 2, tzinfo=UTC), "Physics Final", 7, 2, 1, 70.0),
        ExamRecord(datetime.datetime(2024, 1, 20, tzinfo=UTC), "Chemistry", 5, 5, 0, 50.0),
    ]


# === sort state ===


def test_same_column_twice_sorts_ascending_then_descending():
    state = SortState()

    assert state.toggle("percentage") is SortDirection.ASC
    assert state.toggle("percentage") is SortDirection.DESC
    assert state.toggle("percentage") is SortDirection.ASC


def test_initial_date_column_sorts_ascending_first():
    state = SortState()

    assert state.column == "date"
    assert state.direction is SortDirection.DESC
    assert state.toggle("date") is SortDirection.ASC


def test_switching_columns_resets_to_ascending():
    state = SortState()
    state.toggle("correct")
    state.toggle("correct")

    assert state.toggle("examName") is SortDirection.ASC
    assert state.column == "examName"


def test_unknown_column_leaves_state_unchanged():
    state = SortState()

    with pytest.raises(ValueError):
        state.toggle("score")

    assert state.column == "date"
    assert state.direction is SortDirection.DESC


# === sorting ===


def test_sort_by_date_compares_instants(mixed_records):
    ascending = sort_records(mixed_records, "date", SortDirection.ASC)

    assert [r.exam_name for r in ascending] == [
        "Algebra",
        "Chemistry",
        "Physics Final",
        "physics midterm",
    ]


def test_sort_by_name_is_lexicographic(mixed_records):
    descending = sort_records(mixed_records, "examName", SortDirection.DESC)

    assert [r.exam_name for r in descending] == [
        "physics midterm",
        "Physics Final",
        "Chemistry",
        "Algebra",
    ]


def test_sort_is_stable_in_both_directions(mixed_records):
    ascending = sort_records(mixed_records, "percentage", SortDirection.ASC)
    descending = sort_records(mixed_records, "percentage", SortDirection.DESC)

    assert [r.exam_name for r in ascending] == [
        "Chemistry",
        "physics midterm",
        "Physics Final",
        "Algebra",
    ]
    assert [r.exam_name for r in descending] == [
        "Algebra",
        "physics midterm",
        "Physics Final",
        "Chemistry",
    ]


def test_sort_returns_new_list(mixed_records):
    original = list(mixed_records)

    sort_records(mixed_records, "correct", SortDirection.DESC)

    assert mixed_records == original


def test_sort_rejects_unknown_column(mixed_records):
    with pytest.raises(ValueError):
        sort_records(mixed_records, "score", SortDirection.ASC)


def test_default_view_is_newest_first(mixed_records):
    view = default_view(mixed_records, SortState())

    assert view[0].exam_name == "physics midterm"
    assert view[-1].exam_name == "Algebra"


# === filtering ===


def test_filter_empty_term_returns_everything(mixed_records):
    assert filter_by_name(mixed_records, "") == mixed_records


def test_filter_is_case_insensitive_substring(mixed_records):
    matches = filter_by_name(mixed_records, "PHYSICS")

    assert [r.exam_name for r in matches] == ["physics midterm", "Physics Final"]
    assert [r.exam_name for r in filter_by_name(mixed_records, "term")] == [
        "physics midterm"
    ]


def test_filter_only_searches_exam_name(mixed_records):
    assert filter_by_name(mixed_records, "90") == []
    assert filter_by_name(mixed_records, "2024") == []
