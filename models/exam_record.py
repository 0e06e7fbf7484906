# models/exam_record.py

"""
Represents a single exam attempt in the user's history.

Each `ExamRecord` stores when the exam was taken, the exam's name, the breakdown of
correct, incorrect, and unattempted questions, and the percentage score for the attempt.

Includes functionality for:
- Serializing to and from JSON-compatible dictionaries (camelCase wire names)
- Validating user-authored field values before they enter the history

Notes:
- `percentage` is authored independently of the three counts and is never recomputed from them.
- Unknown fields found during deserialization are carried in `extra` and written back out unchanged.
- `from_dict()` requires whole-number counts and a finite percentage but does not range-check.
"""

from __future__ import annotations

import datetime
import math
from typing import Any

from core.utils import format_instant, parse_instant

WIRE_FIELDS = ("date", "examName", "correct", "incorrect", "notAttempted", "percentage")


class ExamRecord:

    def __init__(
        self,
        date: datetime.datetime | None,
        exam_name: str,
        correct: int = 0,
        incorrect: int = 0,
        not_attempted: int = 0,
        percentage: float = 0.0,
        extra: dict[str, Any] | None = None,
    ):
        self._date = date
        self._exam_name = exam_name
        self._correct = correct
        self._incorrect = incorrect
        self._not_attempted = not_attempted
        self._percentage = percentage
        self._extra = dict(extra) if extra else {}

    # === properties ===

    @property
    def date(self) -> datetime.datetime | None:
        return self._date

    @property
    def exam_name(self) -> str:
        return self._exam_name

    @property
    def correct(self) -> int:
        return self._correct

    @property
    def incorrect(self) -> int:
        return self._incorrect

    @property
    def not_attempted(self) -> int:
        return self._not_attempted

    @property
    def percentage(self) -> float:
        return self._percentage

    @property
    def extra(self) -> dict[str, Any]:
        return dict(self._extra)

    # === public classmethods ===

    @classmethod
    def create(
        cls,
        date: Any,
        exam_name: Any,
        correct: Any,
        incorrect: Any,
        not_attempted: Any,
        percentage: Any,
    ) -> ExamRecord:
        """
        Builds a new `ExamRecord` from raw user input, enforcing every field constraint.

        Raises:
            TypeError: If a value cannot be cast to the expected type.
            ValueError: If a value is out of bounds (empty name, negative count, percentage outside 0-100).
        """
        return cls(
            date=parse_instant(date),
            exam_name=cls.validate_exam_name(exam_name),
            correct=cls.validate_count_input(correct, "correct"),
            incorrect=cls.validate_count_input(incorrect, "incorrect"),
            not_attempted=cls.validate_count_input(not_attempted, "not attempted"),
            percentage=cls.validate_percentage_input(percentage),
        )

    # === persistence and import ===

    def to_dict(self) -> dict:
        data = {
            "date": format_instant(self._date),
            "examName": self._exam_name,
            "correct": self._correct,
            "incorrect": self._incorrect,
            "notAttempted": self._not_attempted,
            "percentage": self._percentage,
        }
        data.update(self._extra)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> ExamRecord:
        if not isinstance(data, dict):
            raise TypeError(f"Expected an object, got {type(data).__name__}.")

        date_value = data.get("date")
        exam_name = data.get("examName")

        return cls(
            date=parse_instant(date_value) if date_value is not None else None,
            exam_name=str(exam_name) if exam_name is not None else "",
            correct=cls.read_count_field(data.get("correct"), "correct"),
            incorrect=cls.read_count_field(data.get("incorrect"), "incorrect"),
            not_attempted=cls.read_count_field(
                data.get("notAttempted"), "notAttempted"
            ),
            percentage=cls.read_percentage_field(data.get("percentage")),
            extra={k: v for k, v in data.items() if k not in WIRE_FIELDS},
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExamRecord):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"ExamRecord({format_instant(self._date)}, {self._exam_name!r}, {self._correct}, {self._incorrect}, {self._not_attempted}, {self._percentage})"

    def __str__(self) -> str:
        return f"EXAM RECORD: name: {self._exam_name}, date: {format_instant(self._date)}, score: {self._percentage}"

    # === data validators ===

    @staticmethod
    def validate_exam_name(name: Any) -> str:
        if not isinstance(name, str):
            raise TypeError("Invalid input. Exam name must be text.")

        name = name.strip()

        if not name:
            raise ValueError("Invalid input. Exam name cannot be empty.")

        return name

    @staticmethod
    def validate_count_input(count: Any, label: str = "count") -> int:
        """
        Validates and normalizes a question count.

        Accepts any input, and then:
            - Casts to int, rejecting values with a fractional part.
            - Ensures it is non-negative.

        Args:
            count (Any): The input value to validate.
            label (str): The field name used in error messages.

        Returns:
            The normalized count (int).

        Raises:
            TypeError: If the input cannot be cast to a whole number.
            ValueError: If the input is less than zero.
        """
        try:
            as_float = float(count)
            if not as_float.is_integer():
                raise ValueError
            count = int(as_float)

        except (TypeError, ValueError, OverflowError):
            raise TypeError(
                f"Invalid input. The {label} count must be a whole number."
            ) from None

        if count < 0:
            raise ValueError(f"Invalid input. The {label} count cannot be negative.")

        return count

    @staticmethod
    def validate_percentage_input(percentage: Any) -> float:
        """
        Validates and normalizes a percentage score.

        Raises:
            TypeError: If the input cannot be cast to float.
            ValueError: If the input is non-finite or outside 0 to 100.
        """
        try:
            percentage = float(percentage)

        except (TypeError, ValueError):
            raise TypeError("Invalid input. Percentage must be a number.") from None

        if not math.isfinite(percentage):
            raise ValueError("Invalid input. Percentage must be a finite number.")

        if not 0 <= percentage <= 100:
            raise ValueError("Invalid input. Percentage must be between 0 and 100.")

        return percentage

    # === wire readers ===

    @staticmethod
    def read_count_field(value: Any, label: str = "count") -> int:
        """
        Reads a count from a deserialized record. Missing values default to 0.

        Raises:
            ValueError: If the value is a boolean, has a fractional part, or is not finite.
            TypeError: If the value is not numeric at all.
        """
        if value is None:
            return 0

        if isinstance(value, bool):
            raise ValueError(f"The {label} count must be a whole number, got {value!r}.")

        if isinstance(value, float):
            # is_integer() is False for inf and nan
            if not value.is_integer():
                raise ValueError(
                    f"The {label} count must be a whole number, got {value!r}."
                )
            return int(value)

        return int(value)

    @staticmethod
    def read_percentage_field(value: Any) -> float:
        """
        Reads a percentage from a deserialized record. Missing values default to 0.0.

        Raises:
            ValueError: If the value is a boolean or not a finite number.
        """
        if value is None:
            return 0.0

        if isinstance(value, bool):
            raise ValueError(f"Percentage must be a number, got {value!r}.")

        try:
            percentage = float(value)
        except OverflowError:
            raise ValueError("Percentage is too large.") from None

        if not math.isfinite(percentage):
            raise ValueError(f"Percentage must be a finite number, got {value!r}.")

        return percentage
