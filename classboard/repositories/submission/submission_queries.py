"""Submission Domain Queries - document mapping and filters (SoC)"""
from datetime import date, datetime
from typing import Any, Dict, List, Tuple

from classboard.exceptions.exceptions import MalformedRecord
from classboard.models.board_models import SubmissionRecord
from classboard.utils.time.timeutils import parse_timestamp

# ═══════════════════════════════════════════════════════════════════════════════
# READ PATH
# ═══════════════════════════════════════════════════════════════════════════════

SUBMISSION_SORT: List[Tuple[str, int]] = [("date", 1), ("studentId", 1), ("taskId", 1)]

SUBMISSION_PROJECTION = {
    "_id": 1, "studentId": 1, "classId": 1, "date": 1, "taskId": 1, "status": 1,
    "category": 1, "approved": 1, "submittedAt": 1, "quizScore": 1, "outcome": 1
}

REQUIRED_FIELDS = ("studentId", "classId", "date", "taskId", "status")

def build_class_range_filter(class_id: str, start: date, end: date) -> Dict:
    """One class over an inclusive date range; dates are stored as YYYY-MM-DD strings"""
    return {
        "classId": class_id,
        "date": {"$gte": start.isoformat(), "$lte": end.isoformat()}
    }

def build_record_key(class_id: str, day: date, student_id: str, task_id: str) -> Dict:
    return {
        "classId": class_id,
        "date": day.isoformat(),
        "studentId": student_id,
        "taskId": task_id
    }

def record_from_document(doc: Dict[str, Any]) -> SubmissionRecord:
    """Parse a stored submission document

    Raises:
        MalformedRecord: Missing required fields, unparseable date or timestamp,
            non-numeric quiz score
    """
    doc_ref = doc.get("_id", "?")
    missing = [name for name in REQUIRED_FIELDS if doc.get(name) in (None, "")]
    if missing:
        raise MalformedRecord(f"Submission {doc_ref} is missing fields: {', '.join(missing)}")

    raw_date = doc["date"]
    try:
        if isinstance(raw_date, datetime):
            day = raw_date.date()
        else:
            day = datetime.strptime(str(raw_date), "%Y-%m-%d").date()
    except ValueError:
        raise MalformedRecord(f"Submission {doc_ref} has an unparseable date: {raw_date!r}")

    submitted_at = doc.get("submittedAt")
    if submitted_at is not None:
        try:
            submitted_at = parse_timestamp(submitted_at)
        except ValueError:
            raise MalformedRecord(f"Submission {doc_ref} has an unparseable submittedAt: {submitted_at!r}")

    quiz_score = doc.get("quizScore")
    if quiz_score is not None:
        if isinstance(quiz_score, bool) or not isinstance(quiz_score, (int, float)):
            raise MalformedRecord(f"Submission {doc_ref} has a non-numeric quizScore: {quiz_score!r}")
        quiz_score = float(quiz_score)

    approved = doc.get("approved")
    return SubmissionRecord(
        student_id=str(doc["studentId"]),
        class_id=str(doc["classId"]),
        date=day,
        task_id=str(doc["taskId"]),
        status=str(doc["status"]),
        category=doc.get("category") or None,
        approved=None if approved is None else bool(approved),
        submitted_at=submitted_at,
        quiz_score=quiz_score,
        outcome=doc.get("outcome") or None,
    )

# ═══════════════════════════════════════════════════════════════════════════════
# WRITE PATH
# ═══════════════════════════════════════════════════════════════════════════════

def record_to_document(record: SubmissionRecord) -> Dict[str, Any]:
    return {
        **build_record_key(record.class_id, record.date, record.student_id, record.task_id),
        "status": record.status,
        "category": record.category,
        "approved": record.approved,
        "submittedAt": record.submitted_at,
        "quizScore": record.quiz_score,
        "outcome": record.outcome,
    }
