# models/exam_history.py

"""
The ExamHistory model is the central data object of the program and the "source of truth" for all exam records.

Records are held in memory as an ordered list and persisted as a single JSON array under a fixed key
of an injected key-value store. Every mutation is written through immediately; there is no
unsaved-changes state. If a write fails, the in-memory collection is restored to what it was before
the mutation, so memory and storage never disagree.

Provides functions for loading, replacing, appending, and clearing records, plus Response-returning
wrappers around the derived views (summary statistics, sorting, searching) and the import/export codec.
Derived views always read a snapshot of the full collection and never modify it.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

import core.stats as stats
import core.transfer as transfer
import core.views as views
from core.response import ErrorCode, Response
from core.storage import KeyValueStore
from models.exam_record import ExamRecord

logger = logging.getLogger(__name__)

STORAGE_KEY = "zoroExamHistory"


class ExamHistory:

    def __init__(self, storage: KeyValueStore):
        self._storage = storage
        self._records: list[ExamRecord] = []
        self._sort_state = views.SortState()

    # === properties ===

    @property
    def records(self) -> tuple[ExamRecord, ...]:
        return tuple(self._records)

    @property
    def storage(self) -> KeyValueStore:
        return self._storage

    @property
    def sort_state(self) -> views.SortState:
        return self._sort_state

    @property
    def is_empty(self) -> bool:
        return not self._records

    def get_all(self) -> tuple[ExamRecord, ...]:
        return self.records

    # === public classmethods ===

    @classmethod
    def load(cls, storage: KeyValueStore) -> Response:
        """
        Reads the persisted collection from `storage` and returns an `ExamHistory` instance.

        Args:
            storage (KeyValueStore): The key-value store holding the serialized collection.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if no blob was stored yet (empty history) or the blob was read successfully.
                    - False if the stored blob cannot be parsed or the store cannot be read.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.PERSISTED_STATE_CORRUPT` if the blob is not a well-formed record list.
                    - `ErrorCode.INTERNAL_ERROR` if the store raises OSError or for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "history" (ExamHistory): The loaded history.
                    - On failure:
                        - None

        Notes:
            - A corrupt blob is never coerced to an empty history, and is never overwritten here.
        """
        try:
            history = cls(storage)
            blob = storage.get(STORAGE_KEY)

            if blob is not None:
                history._records = transfer.load_blob(blob)

        except (
            json.JSONDecodeError,
            ValueError,
            TypeError,
            OverflowError,
            RecursionError,
        ) as e:
            logger.warning("Stored exam history could not be parsed: %s", e)
            return Response.fail(
                detail=f"Stored exam history is corrupt: {e}",
                error=ErrorCode.PERSISTED_STATE_CORRUPT,
            )

        except OSError as e:
            return Response.fail(
                detail=f"Failed to read stored exam history: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            logger.debug("Loaded %d exam records", len(history._records))

            return Response.succeed(
                data={
                    "history": history,
                },
            )

    # === persistence ===

    def save(self) -> Response:
        """
        Serializes the full collection and writes it under the fixed storage key.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the collection was written to the store.
                    - False for serialization or storage failures.
                - detail (str | None):
                    - On success, "Exam history saved."
                    - On failure, a description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` if a record is not JSON serializable.
                    - `ErrorCode.INTERNAL_ERROR` if OSError is raised or for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None):
                    - Always None, this method does not return any payload.

        Notes:
            - Called by every mutating method; callers never need to save manually.
        """
        try:
            self._storage.set(STORAGE_KEY, transfer.dump_blob(self._records))

        except (TypeError, ValueError) as e:
            return Response.fail(
                detail=f"Object not JSON serializable: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        except OSError as e:
            logger.warning("Failed to write exam history: %s", e)
            return Response.fail(
                detail=f"Failed to write exam history: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            logger.debug("Saved %d exam records", len(self._records))

            return Response.succeed(detail="Exam history saved.")

    def _commit(self, records: list[ExamRecord], detail: str) -> Response:
        """
        Swaps in a new collection and persists it, restoring the previous collection if the write fails.

        Args:
            records (list[ExamRecord]): The complete new collection.
            detail (str): The confirmation message returned on success.

        Returns:
            Response: The failed `save()` response, or a success response carrying "records" (the new snapshot).
        """
        previous = self._records
        self._records = records

        save_response = self.save()

        if not save_response.success:
            self._records = previous
            return save_response

        return Response.succeed(
            detail=detail,
            data={
                "records": self.records,
            },
        )

    # === data manipulators ===

    def replace_all(self, records: Iterable[ExamRecord]) -> Response:
        """
        Replaces the whole collection with `records` and persists it.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the collection was replaced and saved.
                    - False if saving failed; the previous collection is kept.
                - detail (str | None): A confirmation message, or the save failure description.
                - error (ErrorCode | str | None): The `save()` error code on failure.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "records" (tuple[ExamRecord, ...]): The new collection.
                    - On failure:
                        - None

        Notes:
            - This is all-or-nothing; nothing is merged with the existing records.
        """
        new_records = list(records)
        return self._commit(
            new_records, f"Exam history replaced with {len(new_records)} records."
        )

    def clear(self) -> Response:
        """
        Removes every record and persists the empty collection.

        Returns:
            Response: Same contract as `replace_all()`, with an empty "records" tuple on success.

        Notes:
            - This method does not ask for confirmation; the caller must confirm destructive intent first.
        """
        return self._commit([], "All exam records removed from the history.")

    def append(self, record: ExamRecord) -> Response:
        """
        Adds a single user-authored `ExamRecord` to the end of the collection and persists it.

        Args:
            record (ExamRecord): The attempt to add.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record passed validation and was saved.
                    - False if a field is invalid or saving failed.
                - detail (str | None): A confirmation message, or the failure description.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` if a field fails validation.
                    - The `save()` error code if persisting failed.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (ExamRecord): The added record.
                        - "records" (tuple[ExamRecord, ...]): The new collection.
                    - On failure:
                        - None

        Notes:
            - Duplicates (same date and name) are allowed.
        """
        try:
            if record.date is None:
                raise ValueError("An exam attempt must have a date.")
            ExamRecord.validate_exam_name(record.exam_name)
            ExamRecord.validate_count_input(record.correct, "correct")
            ExamRecord.validate_count_input(record.incorrect, "incorrect")
            ExamRecord.validate_count_input(record.not_attempted, "not attempted")
            ExamRecord.validate_percentage_input(record.percentage)

        except (TypeError, ValueError) as e:
            return Response.fail(
                detail=f"Invalid field value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        commit_response = self._commit(
            self._records + [record],
            f"{record.exam_name} successfully added to the exam history.",
        )

        if not commit_response.success:
            return commit_response

        return Response.succeed(
            detail=commit_response.detail,
            data={
                "record": record,
                "records": commit_response.data["records"],
            },
        )

    # === derived views ===

    def summarize(self) -> Response:
        """
        Computes summary statistics over the full collection.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the collection has at least one record.
                    - False if the collection is empty.
                - detail (str | None):
                    - On failure, a human-readable explanation.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.EMPTY_COLLECTION` if there is nothing to summarize.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the collection is empty
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "summary" (ExamSummary): Totals, average, best, last exam, composition, and trend.
                    - On failure:
                        - None

        Notes:
            - This method is read-only. Statistics never reflect an active sort or search.
        """
        summary = stats.summarize(self._records)

        if summary is None:
            return Response.fail(
                detail="There are no exam records to summarize.",
                error=ErrorCode.EMPTY_COLLECTION,
                status_code=404,
            )

        return Response.succeed(
            data={
                "summary": summary,
            },
        )

    def sort_by(self, column: str) -> Response:
        """
        Toggles the sort state for `column` and returns the full collection in that order.

        Args:
            column (str): A wire column name such as "date", "examName", or "percentage".

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the column is sortable.
                    - False otherwise; the sort state is left unchanged.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` for an unknown column.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "records" (list[ExamRecord]): The full, unfiltered collection in the new order.
                        - "column" (str): The sorted column.
                        - "direction" (SortDirection): The applied direction.
                    - On failure:
                        - None

        Notes:
            - Any active search term is ignored; the full collection is always sorted.
        """
        try:
            direction = self._sort_state.toggle(column)
            records = views.sort_records(self._records, column, direction)

        except ValueError as e:
            return Response.fail(
                detail=f"Invalid field value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        return Response.succeed(
            data={
                "records": records,
                "column": column,
                "direction": direction,
            },
        )

    def search(self, term: str) -> Response:
        """
        Returns every record whose exam name contains `term`, ignoring case.

        Returns:
            Response: Always successful, with "records" (list[ExamRecord]) holding the matches
            (possibly empty) in collection order and "term" (str) echoing the search term.

        Notes:
            - The full, unsorted collection is searched; an active sort order is not applied.
            - The sort state itself is kept, so the next sort request still toggles from it.
        """
        return Response.succeed(
            data={
                "records": views.filter_by_name(self._records, term),
                "term": term,
            },
        )

    def current_view(self) -> list[ExamRecord]:
        return views.default_view(self._records, self._sort_state)

    # === import and export ===

    def import_json(self, text: str) -> Response:
        """
        Replaces the collection with the records in a JSON import payload.

        Args:
            text (str): The raw payload, expected to be a JSON array of exam records.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the payload was accepted and the new collection saved.
                    - False if the payload was rejected or saving failed.
                - detail (str | None): A confirmation message, or the failure description.
                - error (ErrorCode | str | None):
                    - `ErrorCode.IMPORT_FORMAT_INVALID` if the payload was rejected.
                    - The `save()` error code if persisting failed.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "records" (tuple[ExamRecord, ...]): The imported collection.
                    - On rejection:
                        - "reason" (str): "not an array", "missing examName", or "malformed record".

        Notes:
            - Import is all-or-nothing: on any failure the existing collection is untouched and nothing is written.
            - Only the first record's exam name is validated; see `core.transfer.decode_records()`.
        """
        try:
            records = transfer.decode_records(text)

        except transfer.ImportFormatError as e:
            logger.warning("Rejected exam history import (%s): %s", e.reason, e)
            return Response.fail(
                detail=f"Import failed: {e}",
                error=ErrorCode.IMPORT_FORMAT_INVALID,
                data={
                    "reason": e.reason,
                },
            )

        return self._commit(
            records, f"Imported {len(records)} exam records into the history."
        )

    def export_json(self) -> Response:
        """
        Serializes the full collection as a pretty-printed JSON artifact.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the collection has at least one record.
                    - False if the collection is empty.
                - detail (str | None):
                    - On failure, a human-readable explanation.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.EXPORT_EMPTY_COLLECTION` if there is nothing to export.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "content" (bytes): UTF-8 encoded JSON array of records.
                        - "filename" (str): The artifact name, `zoro_exam_history.json`.
                        - "mime_type" (str): "application/json".
                    - On failure:
                        - None

        Notes:
            - This method is read-only; writing the artifact somewhere is the caller's job.
        """
        if not self._records:
            return Response.fail(
                detail="There is no exam history to export.",
                error=ErrorCode.EXPORT_EMPTY_COLLECTION,
            )

        return Response.succeed(
            data={
                "content": transfer.encode_records(self._records),
                "filename": transfer.EXPORT_FILENAME,
                "mime_type": transfer.EXPORT_MIME_TYPE,
            },
        )

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"ExamHistory({len(self._records)} records, {self._storage!r})"
