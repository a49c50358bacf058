"""Submission Repository - Data Access Layer (SoC)"""
from datetime import date
from typing import Dict, Iterable, Iterator, Optional

from pymongo import UpdateOne
from pymongo.errors import PyMongoError

from classboard.exceptions.exceptions import StorageUnavailable
from classboard.models.board_models import SubmissionRecord
from classboard.repositories.submission.submission_queries import (
    SUBMISSION_PROJECTION, SUBMISSION_SORT, build_class_range_filter,
    build_record_key, record_from_document, record_to_document
)
from classboard.utils.logging.log_config import get_logger
from classboard.utils.time.timeutils import now_local

logger = get_logger(__name__)


class SubmissionStream:
    """Lazy, restartable view over one class's submissions in a date range.

    No query runs until iteration starts; every new iteration runs a fresh
    query, so the stream can be walked more than once.
    """

    def __init__(self, collection, class_id: str, start: date, end: date):
        self.collection = collection
        self.class_id = class_id
        self.start = start
        self.end = end

    def __iter__(self) -> Iterator[SubmissionRecord]:
        query = build_class_range_filter(self.class_id, self.start, self.end)
        try:
            cursor = self.collection.find(query, SUBMISSION_PROJECTION).sort(SUBMISSION_SORT)
            for doc in cursor:
                yield record_from_document(doc)
        except PyMongoError as e:
            logger.error(f"Reading submissions for {self.class_id} ({self.start}..{self.end}) failed: {e}")
            raise StorageUnavailable(f"Could not read submissions for class {self.class_id}: {e}") from e


class SubmissionRepo:
    def __init__(self, collection=None):
        if collection is None:
            from classboard.board_central_db import submissions_collection
            collection = submissions_collection
        self.collection = collection

    def load_submissions(self, class_id: str, start: date, end: date) -> SubmissionStream:
        return SubmissionStream(self.collection, class_id, start, end)

    def upsert_records(self, records: Iterable[SubmissionRecord], recorded_by: Optional[str] = None) -> int:
        """Write records keyed on (class, date, student, task); returns documents inserted or matched"""
        now = now_local()
        operations = []
        for record in records:
            doc = record_to_document(record)
            doc["recordedBy"] = recorded_by
            doc["updatedAt"] = now
            operations.append(UpdateOne(
                build_record_key(record.class_id, record.date, record.student_id, record.task_id),
                {"$set": doc, "$setOnInsert": {"createdAt": now}},
                upsert=True
            ))
        if not operations:
            return 0
        try:
            result = self.collection.bulk_write(operations, ordered=False)
        except PyMongoError as e:
            raise StorageUnavailable(f"Could not write submissions: {e}") from e
        return result.upserted_count + result.matched_count

    def update_status(self, class_id: str, day: date, student_id: str, task_id: str,
                      status: str, approved: Optional[bool] = None) -> bool:
        updates: Dict = {"status": status, "updatedAt": now_local()}
        if approved is not None:
            updates["approved"] = approved
        try:
            result = self.collection.update_one(
                build_record_key(class_id, day, student_id, task_id),
                {"$set": updates}
            )
        except PyMongoError as e:
            raise StorageUnavailable(f"Could not update submission: {e}") from e
        return result.matched_count > 0
