# core/transfer.py

"""
Conversion between the exam history and its portable JSON snapshot.

Import validation is intentionally shallow: the payload must be a JSON array and, when it is
non-empty, its first element must carry a non-empty "examName". Later elements are not checked
for shape; they only need to be objects whose values can be read into an `ExamRecord`.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from models.exam_record import ExamRecord

EXPORT_FILENAME = "zoro_exam_history.json"
EXPORT_MIME_TYPE = "application/json"

REASON_NOT_AN_ARRAY = "not an array"
REASON_MISSING_EXAM_NAME = "missing examName"
REASON_MALFORMED_RECORD = "malformed record"


class ImportFormatError(ValueError):
    """
    Raised when an import payload is rejected. `reason` is one of the `REASON_*` constants.
    """

    def __init__(self, reason: str, message: str | None = None):
        super().__init__(message or reason)
        self.reason = reason


def decode_records(text: str) -> list[ExamRecord]:
    """
    Parses an import payload into records.

    Args:
        text (str): JSON text expected to hold an array of exam record objects.

    Returns:
        The decoded records, in payload order.

    Raises:
        ImportFormatError:
            - `REASON_NOT_AN_ARRAY` if the text is not valid JSON or the top-level value is not an array.
            - `REASON_MISSING_EXAM_NAME` if the first element has no non-empty "examName".
            - `REASON_MALFORMED_RECORD` if any element cannot be read as a record.
    """
    try:
        payload = json.loads(text)
    except (json.JSONDecodeError, TypeError, RecursionError) as e:
        raise ImportFormatError(REASON_NOT_AN_ARRAY, f"Payload is not valid JSON: {e}")

    if not isinstance(payload, list):
        raise ImportFormatError(
            REASON_NOT_AN_ARRAY,
            f"Payload must be an array, got {type(payload).__name__}.",
        )

    if payload:
        first = payload[0]
        if not isinstance(first, dict) or not first.get("examName"):
            raise ImportFormatError(
                REASON_MISSING_EXAM_NAME,
                "The first record has no exam name.",
            )

    records = []
    for index, item in enumerate(payload):
        try:
            records.append(ExamRecord.from_dict(item))
        except (TypeError, ValueError, OverflowError) as e:
            raise ImportFormatError(
                REASON_MALFORMED_RECORD,
                f"Record {index} could not be read: {e}",
            )

    return records


def encode_records(records: Sequence[ExamRecord]) -> bytes:
    """
    Serializes records as pretty-printed JSON, encoded as UTF-8.
    """
    return json.dumps(
        [r.to_dict() for r in records], indent=2, ensure_ascii=False
    ).encode("utf-8")


def dump_blob(records: Sequence[ExamRecord]) -> str:
    return json.dumps([r.to_dict() for r in records], ensure_ascii=False)


def load_blob(blob: str) -> list[ExamRecord]:
    """
    Reads a persisted blob back into records.

    Raises:
        json.JSONDecodeError: If the blob is not valid JSON.
        ValueError: If the blob is not an array, or an element cannot be read as a record.
        TypeError: If an element is not an object.
    """
    data = json.loads(blob)

    if not isinstance(data, list):
        raise ValueError(f"Expected a list of records, got {type(data).__name__}.")

    return [ExamRecord.from_dict(item) for item in data]
