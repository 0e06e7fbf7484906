# tests/test_transfer.py

import json

import pytest

import core.transfer as transfer


def test_decode_records_reads_array():
    text = json.dumps(
        [
            {
                "date": "2024-01-10T00:00:00.000Z",
                "examName": "Math",
                "correct": 8,
                "incorrect": 2,
                "notAttempted": 0,
                "percentage": 80,
            },
            {"date": "2024-02-10", "examName": "Science"},
        ]
    )

    records = transfer.decode_records(text)

    assert [r.exam_name for r in records] == ["Math", "Science"]


def test_decode_empty_array():
    assert transfer.decode_records("[]") == []


@pytest.mark.parametrize("text", ["not json", '{"examName": "Math"}', "42", ""])
def test_decode_rejects_non_arrays(text):
    with pytest.raises(transfer.ImportFormatError) as excinfo:
        transfer.decode_records(text)

    assert excinfo.value.reason == transfer.REASON_NOT_AN_ARRAY


@pytest.mark.parametrize(
    "payload",
    [[{"date": "2024-01-10"}], [{"examName": ""}], ["Math"], [None]],
)
def test_decode_rejects_first_record_without_exam_name(payload):
    with pytest.raises(transfer.ImportFormatError) as excinfo:
        transfer.decode_records(json.dumps(payload))

    assert excinfo.value.reason == transfer.REASON_MISSING_EXAM_NAME


def test_only_the_first_record_is_shape_checked():
    text = json.dumps([{"examName": "Math"}, {"percentage": 50}])

    records = transfer.decode_records(text)

    assert records[1].exam_name == ""


def test_decode_rejects_unreadable_later_record():
    text = json.dumps([{"examName": "Math"}, {"examName": "Bad", "correct": "many"}])

    with pytest.raises(transfer.ImportFormatError) as excinfo:
        transfer.decode_records(text)

    assert excinfo.value.reason == transfer.REASON_MALFORMED_RECORD


def test_decode_rejects_deeply_nested_payload():
    text = "[" * 100000 + "]" * 100000

    with pytest.raises(transfer.ImportFormatError) as excinfo:
        transfer.decode_records(text)

    assert excinfo.value.reason == transfer.REASON_NOT_AN_ARRAY


@pytest.mark.parametrize(
    "text",
    [
        '[{"examName": "Math", "correct": 1e400}]',
        '[{"examName":"Math","incorrect":Infinity}]',
        '[{"examName": "Math", "correct": 8.7}]',
        '[{"examName": "Math", "correct": true}]',
        '[{"examName": "Math", "percentage": NaN}]',
        '[{"examName": "Math", "percentage": 1e400}]',
    ],
)
def test_decode_rejects_out_of_range_numbers(text):
    with pytest.raises(transfer.ImportFormatError) as excinfo:
        transfer.decode_records(text)

    assert excinfo.value.reason == transfer.REASON_MALFORMED_RECORD


def test_encode_records_is_pretty_printed_utf8(sample_records):
    content = transfer.encode_records(sample_records)

    assert isinstance(content, bytes)
    text = content.decode("utf-8")
    assert text.startswith("[\n  {")
    assert json.loads(text)[1]["examName"] == "Science"


def test_blob_round_trip(sample_records):
    assert transfer.load_blob(transfer.dump_blob(sample_records)) == sample_records


def test_load_blob_rejects_non_list():
    with pytest.raises(ValueError):
        transfer.load_blob('{"examName": "Math"}')
