# tests/test_formatters.py

import datetime

import cli.model_formatters as model_formatters
import core.formatters as formatters
import core.stats as stats
from cli.path_utils import get_data_dir, resolve_export_path


def test_format_exam_date():
    exam_date = datetime.datetime(2024, 1, 5, tzinfo=datetime.timezone.utc)

    assert formatters.format_exam_date(exam_date) == "Jan 5, 2024"
    assert formatters.format_exam_date(None) == "[NO DATE]"


def test_format_percentage_and_proportion():
    assert formatters.format_percentage(85.0) == "85.00%"
    assert formatters.format_proportion(17, 20) == "85.0%"
    assert formatters.format_proportion(0, 0) == "0.0%"


def test_summary_cards_show_last_score(sample_records):
    cards = model_formatters.format_summary_cards(stats.summarize(sample_records))

    assert "Total Exams:   2" in cards
    assert "Average Score: 85.00%" in cards
    assert "Last Score:    90.00% (Science, Feb 10, 2024)" in cards


def test_exam_record_oneline(math_record):
    line = model_formatters.format_exam_record_oneline(math_record)

    assert line.startswith("Jan 10, 2024")
    assert "Math" in line
    assert line.rstrip().endswith("80.00%")


def test_default_data_dir():
    assert get_data_dir(None).endswith(("Documents/ExamHistory", "Documents\\ExamHistory"))


def test_resolve_export_path_defaults_to_data_dir(tmp_path):
    path = resolve_export_path(None, str(tmp_path), "zoro_exam_history.json")

    assert path == str(tmp_path / "zoro_exam_history.json")
