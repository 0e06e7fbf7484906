# cli/menus/history_menu.py

"""
Exam History menu for the Exam History CLI.

This module defines the full interface for working with the user's exam history, including:
- Viewing summary statistics, the question breakdown, and the score trend
- Viewing, sorting, and searching the record table
- Logging a new exam attempt
- Importing, exporting, and clearing the history

All operations are routed through the `ExamHistory` API, which persists every change immediately.
Sorting and searching each start from the full collection: a sort ignores the last search term,
and a search shows matches in collection order.
"""

import datetime
import logging
from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.path_utils import read_text, resolve_export_path, write_bytes
from core.views import SortDirection
from models.exam_history import ExamHistory
from models.exam_record import ExamRecord

logger = logging.getLogger(__name__)


def run(history: ExamHistory, data_dir: str) -> None:
    """
    Top-level loop with dispatch for the Exam History menu.

    Args:
        history (ExamHistory): The active `ExamHistory`.
        data_dir (str): The directory holding the stored history, used as the default export location.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("EXAM HISTORY")
    options = [
        ("View Summary", lambda: view_summary(history)),
        ("View History", lambda: view_history(history)),
        ("Sort History", lambda: sort_history(history)),
        ("Search History", lambda: search_history(history)),
        ("Log Exam Attempt", lambda: log_exam_attempt(history)),
        ("Import History", lambda: import_history(history)),
        ("Export History", lambda: export_history(history, data_dir)),
        ("Clear History", lambda: clear_history(history)),
    ]
    zero_option = "Exit Program"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response()

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


# === summary ===


def view_summary(history: ExamHistory) -> None:
    """
    Displays the summary cards, the question breakdown, and the score trend for the full history.

    Notes:
        - Nothing but a notice is shown when the history is empty.
    """
    history_response = history.summarize()

    if not history_response.success:
        print(f"\n{history_response.detail}")
        return

    summary = history_response.data["summary"]

    print(f"\n{formatters.format_banner_text('Summary')}")
    print(model_formatters.format_summary_cards(summary))
    print(model_formatters.format_composition(summary.composition))

    print("Score trend:")
    for exam_date, percentage in summary.trend:
        print(f"... {model_formatters.format_trend_line(exam_date, percentage)}")


# === table views ===


def view_history(history: ExamHistory) -> None:
    helpers.display_record_table(history.current_view(), "Exam History")


def sort_history(history: ExamHistory) -> None:
    """
    Prompts for a column and displays the full history sorted by it.

    Notes:
        - Choosing the column that is currently ascending sorts it descending; any other choice sorts ascending.
    """
    title = formatters.format_banner_text("Sort History By")
    options = [
        (label, lambda column=column: column)
        for column, label, _ in model_formatters.TABLE_COLUMNS
    ]

    menu_response = helpers.display_menu(title, options, "Cancel")

    if menu_response is MenuSignal.EXIT:
        helpers.returning_without_changes()
        return

    column = menu_response()
    history_response = history.sort_by(column)

    if not history_response.success:
        helpers.display_response_failure(history_response)
        return

    direction = history_response.data["direction"]
    arrow = "ascending" if direction is SortDirection.ASC else "descending"

    helpers.display_record_table(
        history_response.data["records"], f"Sorted by {column} ({arrow})"
    )


def search_history(history: ExamHistory) -> None:
    term = helpers.prompt_user_input(
        "Enter part of an exam name to search for (leave blank to show all):"
    )

    history_response = history.search(term)
    records = history_response.data["records"]

    title = f"Exams matching '{term}'" if term else "Exam History"
    helpers.display_record_table(records, title)


# === log exam attempt ===


def log_exam_attempt(history: ExamHistory) -> None:
    """
    Loops a prompt to create a new `ExamRecord` and append it to the history.

    Notes:
        - Additions are saved immediately.
    """
    while True:
        new_record = prompt_new_exam_record()

        if new_record is not None and preview_and_confirm_record(new_record):
            history_response = history.append(new_record)

            if not history_response.success:
                helpers.display_response_failure(history_response)
                print(f"\n{new_record.exam_name} was not added.")

            else:
                print(f"\n{history_response.detail}")

        if not helpers.confirm_action("Would you like to log another exam attempt?"):
            break

    helpers.returning_to("Exam History menu")


def prompt_new_exam_record() -> ExamRecord | None:
    """
    Collects the fields of a new exam attempt.

    Returns:
        A new `ExamRecord`, or None if the user cancels or a value is invalid.

    Notes:
        - A blank date means now.
        - A blank percentage is filled in from the counts (correct out of all questions).
    """
    exam_name = helpers.prompt_user_input_or_cancel(
        "Enter the exam name (leave blank to cancel):"
    )

    if exam_name is MenuSignal.CANCEL:
        return None
    exam_name = cast(str, exam_name)

    date_input = helpers.prompt_user_input_or_none(
        "Enter the exam date as YYYY-MM-DD (leave blank for now):"
    )

    counts = []
    for label in ("correct", "incorrect", "not attempted"):
        count = helpers.prompt_user_input_or_cancel(
            f"Enter the number of {label} questions (leave blank to cancel):"
        )

        if count is MenuSignal.CANCEL:
            return None
        counts.append(cast(str, count))

    percentage_input = helpers.prompt_user_input_or_none(
        "Enter the percentage score (leave blank to calculate from the counts):"
    )

    try:
        correct, incorrect, not_attempted = (
            ExamRecord.validate_count_input(c, label)
            for c, label in zip(counts, ("correct", "incorrect", "not attempted"))
        )

        if percentage_input is None:
            total = correct + incorrect + not_attempted
            percentage_input = correct / total * 100 if total else 0.0

        exam_date = (
            date_input
            if date_input is not None
            else datetime.datetime.now(datetime.timezone.utc)
        )

        return ExamRecord.create(
            date=exam_date,
            exam_name=exam_name,
            correct=correct,
            incorrect=incorrect,
            not_attempted=not_attempted,
            percentage=percentage_input,
        )

    except (TypeError, ValueError) as e:
        print(f"\nError: {e}")
        return None


def preview_and_confirm_record(record: ExamRecord) -> bool:
    print("\nYou are about to log the following exam attempt:")
    print(model_formatters.format_exam_record_multiline(record))

    return helpers.confirm_action("Would you like to save this exam attempt?")


# === import and export ===


def import_history(history: ExamHistory) -> None:
    """
    Replaces the history with the records in a JSON file chosen by the user.

    Notes:
        - Import is all-or-nothing. A rejected file leaves the history untouched.
    """
    path = helpers.prompt_user_input_or_cancel(
        "Enter the path of the JSON file to import (leave blank to cancel):"
    )

    if path is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    path = cast(str, path)

    try:
        text = read_text(path)

    except (OSError, UnicodeDecodeError) as e:
        print(f"\nCould not read {path}: {e}")
        return

    if not history.is_empty:
        helpers.caution_banner()
        print(f"Importing replaces all {len(history)} existing exam records.")

        if not helpers.confirm_action("Do you want to continue?"):
            helpers.returning_without_changes()
            return

    history_response = history.import_json(text)

    if not history_response.success:
        helpers.display_response_failure(history_response)
        print(
            "\nImport failed! Please check the data format. It should be a valid JSON array."
        )
        return

    print(f"\n{history_response.detail}")


def export_history(history: ExamHistory, data_dir: str) -> None:
    history_response = history.export_json()

    if not history_response.success:
        print(f"\n{history_response.detail}")
        return

    dir_input = helpers.prompt_user_input_or_none(
        f"Enter directory to save the export (leave blank to use {data_dir}):"
    )

    try:
        path = resolve_export_path(
            dir_input, data_dir, history_response.data["filename"]
        )
        write_bytes(path, history_response.data["content"])

    except OSError as e:
        logger.warning("Export failed: %s", e)
        print(f"\nCould not write the export: {e}")
        return

    print(f"\nExam history exported to {path}.")


# === clear ===


def clear_history(history: ExamHistory) -> None:
    """
    Deletes every exam record after explicit confirmation.

    Notes:
        - Declining the confirmation is a no-op.
    """
    if history.is_empty:
        print("\nThe exam history is already empty.")
        return

    helpers.caution_banner()
    print(
        "This will delete all of your exam history. This action cannot be undone."
    )

    if not helpers.confirm_action("Are you sure you want to delete all your exam history?"):
        helpers.returning_without_changes()
        return

    history_response = history.clear()

    if not history_response.success:
        helpers.display_response_failure(history_response)
        return

    print(f"\n{history_response.detail}")
