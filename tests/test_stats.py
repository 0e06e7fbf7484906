# tests/test_stats.py

import datetime

import pytest

import core.stats as stats
from models.exam_record import ExamRecord

UTC = datetime.timezone.utc


def make_record(name, day, percentage, correct=0, incorrect=0, not_attempted=0):
    return ExamRecord(
        date=datetime.datetime(2024, 1, day, tzinfo=UTC) if day else None,
        exam_name=name,
        correct=correct,
        incorrect=incorrect,
        not_attempted=not_attempted,
        percentage=percentage,
    )


def test_summary_of_math_and_science(sample_records):
    summary = stats.summarize(sample_records)

    assert summary.total_exams == 2
    assert summary.average_percentage == pytest.approx(85.0)
    assert summary.best_percentage == 90.0
    assert summary.last_exam.exam_name == "Science"
    assert summary.composition == (17, 2, 1)


def test_empty_collection_has_no_summary():
    assert stats.total_exams([]) == 0
    assert stats.average_percentage([]) is None
    assert stats.best_percentage([]) is None
    assert stats.last_exam([]) is None
    assert stats.composition_totals([]) == (0, 0, 0)
    assert stats.trend_series([]) == []
    assert stats.summarize([]) is None


def test_average_and_best_percentage():
    records = [
        make_record("A", 1, 72.5),
        make_record("B", 2, 64.0),
        make_record("C", 3, 99.9),
        make_record("D", 4, 0.0),
    ]

    assert stats.average_percentage(records) == pytest.approx(
        (72.5 + 64.0 + 99.9 + 0.0) / 4
    )
    assert stats.best_percentage(records) == 99.9
    assert stats.best_percentage(records) in [r.percentage for r in records]


def test_last_exam_has_latest_date():
    records = [
        make_record("Old", 3, 50.0),
        make_record("Newest", 20, 60.0),
        make_record("Middle", 9, 70.0),
    ]

    latest = stats.last_exam(records)

    assert latest.exam_name == "Newest"
    assert all(latest.date >= r.date for r in records)


def test_last_exam_tie_picks_first_in_collection_order():
    records = [
        make_record("Early", 1, 50.0),
        make_record("First Tie", 5, 60.0),
        make_record("Second Tie", 5, 70.0),
    ]

    assert stats.last_exam(records).exam_name == "First Tie"


def test_undated_records_are_never_last():
    records = [make_record("Undated", None, 10.0), make_record("Dated", 2, 20.0)]

    assert stats.last_exam(records).exam_name == "Dated"


def test_composition_totals_sum_every_record():
    records = [
        make_record("A", 1, 0.0, correct=3, incorrect=4, not_attempted=5),
        make_record("B", 2, 0.0, correct=10, incorrect=0, not_attempted=2),
    ]

    totals = stats.composition_totals(records)

    assert totals.as_tuple() == (13, 4, 7)
    assert totals.total == 24
    assert totals.to_dict() == {"correct": 13, "incorrect": 4, "notAttempted": 7}


def test_trend_series_is_date_ascending_and_leaves_input_alone():
    records = [
        make_record("C", 15, 30.0),
        make_record("A", 1, 10.0),
        make_record("B", 8, 20.0),
    ]
    original_order = list(records)

    trend = stats.trend_series(records)

    assert [percentage for _, percentage in trend] == [10.0, 20.0, 30.0]
    assert [d.day for d, _ in trend] == [1, 8, 15]
    assert records == original_order
