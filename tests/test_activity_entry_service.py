"""Tests for recording activities and updating task status."""

from datetime import date

import pytest

from classboard.exceptions.exceptions import UnknownOutcome, ValidationError
from classboard.services.activity.activity_entry_service import ActivityEntryService
from tests.conftest import FakeSubmissionRepo, make_record


@pytest.fixture
def repo():
    return FakeSubmissionRepo([make_record("s1", date(2025, 10, 6))])


@pytest.fixture
def service(repo):
    return ActivityEntryService(repo)


def test_record_event_writes_one_record_per_student(service, repo):
    result = service.record_event(
        "homework", "10-A", "2025-10-06", "math", ["s1", "s2", "s1"], "Completed on time",
        recorded_by="teacher-1",
    )

    assert result == {
        "success": True, "taskId": "homework-math", "date": "2025-10-06", "students": 2,
        "written": 2, "studentPoints": 5, "classPoints": 2,
    }
    records, recorded_by = repo.written[0]
    assert recorded_by == "teacher-1"
    assert [r.student_id for r in records] == ["s1", "s2"]
    assert all(r.status == "completed" and r.approved is True for r in records)
    assert records[0].submitted_at is not None


def test_short_category_names_are_accepted(service, repo):
    result = service.record_event("noncurr-team", "10-A", "2025-10-06", "football", ["s1"], "Team Won 1st Place")

    assert result["taskId"] == "team-noncurricular-football"
    assert (result["studentPoints"], result["classPoints"]) == (10, 6)
    assert repo.written[0][0][0].category == "team-noncurricular"


def test_quiz_score_is_stored(service, repo):
    service.record_event("quiz", "10-A", "2025-10-06", "algebra", ["s1"], "Score 90%+", quiz_score=94)
    assert repo.written[0][0][0].quiz_score == 94


def test_unknown_outcome_is_rejected_before_writing(service, repo):
    with pytest.raises(UnknownOutcome):
        service.record_event("homework", "10-A", "2025-10-06", "math", ["s1"], "Half done")
    assert repo.written == []


@pytest.mark.parametrize("kwargs", [
    {"event_type": "recess"},
    {"class_id": ""},
    {"subject": "  "},
    {"student_ids": []},
    {"student_ids": "s1"},
    {"quiz_score": 140},
    {"quiz_score": True},
])
def test_invalid_input(service, repo, kwargs):
    args = {
        "event_type": "homework", "class_id": "10-A", "day": "2025-10-06", "subject": "math",
        "student_ids": ["s1"], "outcome": "Completed on time",
    }
    args.update(kwargs)
    with pytest.raises(ValidationError):
        service.record_event(**args)
    assert repo.written == []


def test_bad_date_is_rejected(service):
    with pytest.raises(ValueError):
        service.record_event("homework", "10-A", "6 Oct", "math", ["s1"], "Completed on time")


def test_update_task_status(service, repo):
    result = service.update_task_status("10-A", "2025-10-06", "s1", "hw-math", "pending-approval")

    assert result == {"success": True, "updated": True, "status": "pending"}
    assert repo.status_updates == [("10-A", date(2025, 10, 6), "s1", "hw-math", "pending", None)]


def test_update_task_status_no_match(service):
    result = service.update_task_status("10-A", "2025-10-07", "s1", "hw-math", "completed", approved=True)
    assert result["updated"] is False


@pytest.mark.parametrize("status,approved", [("done", None), ("completed", "yes")])
def test_update_task_status_validation(service, status, approved):
    with pytest.raises(ValidationError):
        service.update_task_status("10-A", "2025-10-06", "s1", "hw-math", status, approved)
