# core/formatters.py

# all pure utilities & date/datetime helpers
# must never import from models!

import datetime

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_percentage(value: float) -> str:
    return f"{value:.2f}%"


def format_proportion(part: int, whole: int) -> str:
    if whole == 0:
        return "0.0%"
    return f"{part / whole * 100:.1f}%"


# === date formatters ===


def format_exam_date(exam_date: datetime.datetime | None) -> str:
    # e.g. "Jan 10, 2024"
    if exam_date is None:
        return "[NO DATE]"
    return f"{exam_date.strftime('%b')} {exam_date.day}, {exam_date.year}"


def format_exam_date_long(exam_date: datetime.datetime | None) -> str:
    if exam_date is None:
        return "[NO DATE]"
    return f"{exam_date.strftime('%A, %B')} {exam_date.day}, {exam_date.year}"
