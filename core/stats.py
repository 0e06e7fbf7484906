# core/stats.py

"""
Summary statistics over the full exam history.

All functions are pure: they read a sequence of `ExamRecord` objects and never reorder or
mutate it. Callers must pass the whole collection, not a sorted or filtered view, so the
figures never depend on what the table currently shows.

`average_percentage()`, `best_percentage()`, and `last_exam()` are undefined for an empty
collection and return None; `summarize()` likewise returns None when there is nothing to summarize.
"""

from __future__ import annotations

import datetime
from collections.abc import Sequence

from core.utils import EARLIEST_INSTANT
from models.exam_record import ExamRecord


class CompositionTotals:
    """
    Question totals across every attempt, for a proportion chart.
    """

    def __init__(self, correct: int, incorrect: int, not_attempted: int):
        self.correct = correct
        self.incorrect = incorrect
        self.not_attempted = not_attempted

    @property
    def total(self) -> int:
        return self.correct + self.incorrect + self.not_attempted

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.correct, self.incorrect, self.not_attempted)

    def to_dict(self) -> dict:
        return {
            "correct": self.correct,
            "incorrect": self.incorrect,
            "notAttempted": self.not_attempted,
        }

    def __eq__(self, other: object) -> bool:
        if isinstance(other, tuple):
            return self.as_tuple() == other
        if not isinstance(other, CompositionTotals):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __repr__(self) -> str:
        return f"CompositionTotals({self.correct}, {self.incorrect}, {self.not_attempted})"


class ExamSummary:

    def __init__(
        self,
        total_exams: int,
        average_percentage: float,
        best_percentage: float,
        last_exam: ExamRecord,
        composition: CompositionTotals,
        trend: list[tuple[datetime.datetime | None, float]],
    ):
        self.total_exams = total_exams
        self.average_percentage = average_percentage
        self.best_percentage = best_percentage
        self.last_exam = last_exam
        self.composition = composition
        self.trend = trend

    def __repr__(self) -> str:
        return f"ExamSummary(total={self.total_exams}, average={self.average_percentage}, best={self.best_percentage}, last={self.last_exam.exam_name!r})"


def date_key(record: ExamRecord) -> datetime.datetime:
    # undated records order before every dated record
    return record.date if record.date is not None else EARLIEST_INSTANT


def total_exams(records: Sequence[ExamRecord]) -> int:
    return len(records)


def average_percentage(records: Sequence[ExamRecord]) -> float | None:
    if not records:
        return None
    return sum(r.percentage for r in records) / len(records)


def best_percentage(records: Sequence[ExamRecord]) -> float | None:
    if not records:
        return None
    return max(r.percentage for r in records)


def last_exam(records: Sequence[ExamRecord]) -> ExamRecord | None:
    """
    Returns the most recent attempt.

    When several records share the latest date, the first of them in collection order wins.
    """
    if not records:
        return None

    latest = records[0]
    for record in records[1:]:
        if date_key(record) > date_key(latest):
            latest = record

    return latest


def composition_totals(records: Sequence[ExamRecord]) -> CompositionTotals:
    return CompositionTotals(
        correct=sum(r.correct for r in records),
        incorrect=sum(r.incorrect for r in records),
        not_attempted=sum(r.not_attempted for r in records),
    )


def trend_series(
    records: Sequence[ExamRecord],
) -> list[tuple[datetime.datetime | None, float]]:
    """
    Returns (date, percentage) points ordered by date ascending, for a trend chart.

    Records sharing a date keep their collection order.
    """
    return [(r.date, r.percentage) for r in sorted(records, key=date_key)]


def summarize(records: Sequence[ExamRecord]) -> ExamSummary | None:
    if not records:
        return None

    return ExamSummary(
        total_exams=total_exams(records),
        average_percentage=average_percentage(records),
        best_percentage=best_percentage(records),
        last_exam=last_exam(records),
        composition=composition_totals(records),
        trend=trend_series(records),
    )
