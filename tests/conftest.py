"""Shared fixtures: in-memory repositories and record builders."""

import os
import tempfile
from datetime import date

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="classboard-logs-"))

import pytest

from classboard.exceptions.exceptions import StorageUnavailable
from classboard.models.board_models import SubmissionRecord


WEEK_START = date(2025, 10, 6)  # a Monday


def make_record(student_id, day, task_id="hw-math", status="completed", category="homework",
                outcome="Completed on time", class_id="10-A", approved=True, quiz_score=None):
    return SubmissionRecord(
        student_id=student_id,
        class_id=class_id,
        date=day,
        task_id=task_id,
        status=status,
        category=category,
        approved=approved,
        quiz_score=quiz_score,
        outcome=outcome,
    )


class FakeSubmissionRepo:
    """Keeps records in a list; reads return a fresh filtered list."""

    def __init__(self, records=None, failing_classes=()):
        self.records = list(records or [])
        self.failing_classes = set(failing_classes)
        self.reads = []
        self.written = []
        self.status_updates = []

    def load_submissions(self, class_id, start, end):
        self.reads.append((class_id, start, end))
        if class_id in self.failing_classes:
            raise StorageUnavailable(f"store down for {class_id}")
        matching = [r for r in self.records if r.class_id == class_id and start <= r.date <= end]
        return sorted(matching, key=lambda r: (r.date, r.student_id, r.task_id))

    def upsert_records(self, records, recorded_by=None):
        records = list(records)
        self.written.append((records, recorded_by))
        return len(records)

    def update_status(self, class_id, day, student_id, task_id, status, approved=None):
        self.status_updates.append((class_id, day, student_id, task_id, status, approved))
        return any(
            r.class_id == class_id and r.date == day and r.student_id == student_id and r.task_id == task_id
            for r in self.records
        )


class FakeEnrollmentRepo:
    def __init__(self, rosters=None):
        self.rosters = rosters or {}

    def get_enrolled_students(self, class_id):
        return sorted(self.rosters.get(class_id, []))


@pytest.fixture
def week_start():
    return WEEK_START


@pytest.fixture
def two_day_records():
    """Monday: both students hand in homework. Tuesday: only s1 does."""
    monday = WEEK_START
    tuesday = date(2025, 10, 7)
    return [
        make_record("s1", monday),
        make_record("s2", monday),
        make_record("s1", tuesday),
    ]


@pytest.fixture
def enrollment():
    return FakeEnrollmentRepo({"10-A": ["s1", "s2"], "10-B": ["t1"], "9-A": []})
