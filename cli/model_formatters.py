# cli/model_formatters.py

"""
Display formatters for exam records and summary statistics.
"""

from textwrap import dedent

import core.formatters as formatters
from core.stats import CompositionTotals, ExamSummary
from models.exam_record import ExamRecord

# (wire column, header label, width)
TABLE_COLUMNS = [
    ("date", "Date", 13),
    ("examName", "Exam", 24),
    ("correct", "Correct", 8),
    ("incorrect", "Incorrect", 10),
    ("notAttempted", "Skipped", 8),
    ("percentage", "Score", 8),
]


# === ExamRecord formatters ===


def format_table_header() -> str:
    header = " | ".join(f"{label:<{width}}" for _, label, width in TABLE_COLUMNS)
    return f"{header}\n{'-' * len(header)}"


def format_exam_record_oneline(record: ExamRecord) -> str:
    name = record.exam_name if len(record.exam_name) <= 24 else record.exam_name[:21] + "..."
    return (
        f"{formatters.format_exam_date(record.date):<13} | "
        f"{name:<24} | "
        f"{record.correct:<8} | "
        f"{record.incorrect:<10} | "
        f"{record.not_attempted:<8} | "
        f"{formatters.format_percentage(record.percentage):<8}"
    )


def format_exam_record_multiline(record: ExamRecord) -> str:
    return dedent(
        f"""\
        Exam attempt:
        ... Name: {record.exam_name}
        ... Date: {formatters.format_exam_date_long(record.date)}
        ... Correct: {record.correct}
        ... Incorrect: {record.incorrect}
        ... Not Attempted: {record.not_attempted}
        ... Score: {formatters.format_percentage(record.percentage)}
        """
    )


# === summary formatters ===


def format_summary_cards(summary: ExamSummary) -> str:
    return dedent(
        f"""\
        Total Exams:   {summary.total_exams}
        Average Score: {formatters.format_percentage(summary.average_percentage)}
        Best Score:    {formatters.format_percentage(summary.best_percentage)}
        Last Score:    {formatters.format_percentage(summary.last_exam.percentage)} ({summary.last_exam.exam_name}, {formatters.format_exam_date(summary.last_exam.date)})
        """
    )


def format_composition(composition: CompositionTotals) -> str:
    total = composition.total
    return dedent(
        f"""\
        Question breakdown ({total} questions):
        ... Correct:       {composition.correct:<6} {formatters.format_proportion(composition.correct, total)}
        ... Incorrect:     {composition.incorrect:<6} {formatters.format_proportion(composition.incorrect, total)}
        ... Not Attempted: {composition.not_attempted:<6} {formatters.format_proportion(composition.not_attempted, total)}
        """
    )


def format_trend_line(exam_date, percentage: float, width: int = 25) -> str:
    bar = "#" * round(max(0.0, min(percentage, 100.0)) / 100 * width)
    return f"{formatters.format_exam_date(exam_date):<13} {bar:<{width}} {formatters.format_percentage(percentage)}"
