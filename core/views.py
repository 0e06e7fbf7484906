# core/views.py

"""
Sorted and filtered views over the exam history.

Views are plain lists built from a snapshot of the collection; they never own or modify it.
Column names are the wire names used in stored and exported JSON (e.g. "examName").
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any

from core.stats import date_key
from models.exam_record import ExamRecord

SORT_KEYS: dict[str, Callable[[ExamRecord], Any]] = {
    "date": date_key,
    "examName": lambda r: r.exam_name,
    "correct": lambda r: r.correct,
    "incorrect": lambda r: r.incorrect,
    "notAttempted": lambda r: r.not_attempted,
    "percentage": lambda r: r.percentage,
}


class SortDirection(Enum):
    ASC = "asc"
    DESC = "desc"


class SortState:
    """
    The column and direction of the most recent sort request.

    Starts as date/descending, so the first request for any column sorts ascending.
    """

    def __init__(self, column: str = "date", direction: SortDirection = SortDirection.DESC):
        self.column = column
        self.direction = direction

    def toggle(self, column: str) -> SortDirection:
        """
        Records a sort request for `column` and returns the direction to use.

        Requesting the column that is currently ascending flips it to descending;
        any other request (a new column, or the current column while descending) sorts ascending.

        Raises:
            ValueError: If `column` is not sortable. The state is left unchanged.
        """
        require_sortable_column(column)

        if self.column == column and self.direction is SortDirection.ASC:
            direction = SortDirection.DESC
        else:
            direction = SortDirection.ASC

        self.column = column
        self.direction = direction

        return direction

    def __repr__(self) -> str:
        return f"SortState({self.column!r}, {self.direction.value!r})"


def require_sortable_column(column: str) -> None:
    if column not in SORT_KEYS:
        raise ValueError(
            f"Cannot sort by '{column}'. Choose one of: {', '.join(SORT_KEYS)}."
        )


def sort_records(
    records: Sequence[ExamRecord], column: str, direction: SortDirection
) -> list[ExamRecord]:
    """
    Returns a new list of records ordered by one column.

    Args:
        records (Sequence[ExamRecord]): The records to order; left untouched.
        column (str): A key of `SORT_KEYS`. Dates compare as instants, numbers numerically, names lexicographically.
        direction (SortDirection): Ascending or descending.

    Raises:
        ValueError: If `column` is not sortable.

    Notes:
        - Records with equal keys keep their relative input order in both directions.
          `sorted()` guarantees this stability, including with `reverse=True`.
    """
    require_sortable_column(column)

    return sorted(
        records,
        key=SORT_KEYS[column],
        reverse=direction is SortDirection.DESC,
    )


def filter_by_name(records: Sequence[ExamRecord], term: str) -> list[ExamRecord]:
    """
    Returns the records whose exam name contains `term`, ignoring case.

    An empty term matches every record. Only the exam name is searched.
    """
    needle = term.lower()

    if not needle:
        return list(records)

    return [r for r in records if needle in r.exam_name.lower()]


def default_view(records: Sequence[ExamRecord], sort_state: SortState) -> list[ExamRecord]:
    return sort_records(records, sort_state.column, sort_state.direction)
