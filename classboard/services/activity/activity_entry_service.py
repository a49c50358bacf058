"""Activity Entry Service - recording scored events and task status"""
from datetime import date
from typing import Dict, List, Optional, Union

from classboard.config.settings import (
    QUIZ_SCORE_MAX, QUIZ_SCORE_MIN, STATUS_ALIASES, STATUS_COMPLETED, SUBMISSION_STATUSES
)
from classboard.exceptions.exceptions import MalformedRecord, ValidationError
from classboard.models.board_models import SubmissionRecord
from classboard.repositories.core.repository_factory import RepositoryFactory
from classboard.services.catalog.outcome_catalog import DEFAULT_CATALOG, OutcomeCatalog
from classboard.utils.logging.log_config import get_logger
from classboard.utils.time.timeutils import now_local
from classboard.utils.time.week_utils import parse_iso_date

logger = get_logger(__name__)


class ActivityEntryService:
    def __init__(self, submission_repo=None, catalog: OutcomeCatalog = DEFAULT_CATALOG):
        self.submission_repo = submission_repo or RepositoryFactory.get_submission_repo()
        self.catalog = catalog

    def record_event(self, event_type: str, class_id: str, day: Union[str, date], subject: str,
                     student_ids: List[str], outcome: str, recorded_by: Optional[str] = None,
                     quiz_score: Optional[float] = None) -> Dict:
        """Record one outcome for several students of a class.

        Raises:
            ValidationError: Missing class, subject or students, or unknown category
            UnknownOutcome: Outcome not registered for the event type
        """
        if not class_id:
            raise ValidationError("Class id is required")
        if not subject or not str(subject).strip():
            raise ValidationError("Subject or event name is required")
        if student_ids is not None and not isinstance(student_ids, (list, tuple)):
            raise ValidationError("studentIds must be a list")
        students = list(dict.fromkeys(s for s in (student_ids or []) if s))
        if not students:
            raise ValidationError("At least one student is required")
        try:
            category = self.catalog.normalize_category(event_type)
        except MalformedRecord as e:
            raise ValidationError(str(e))
        if quiz_score is not None:
            if isinstance(quiz_score, bool) or not isinstance(quiz_score, (int, float)) \
                    or not QUIZ_SCORE_MIN <= quiz_score <= QUIZ_SCORE_MAX:
                raise ValidationError(f"quizScore must be a number between {QUIZ_SCORE_MIN} and {QUIZ_SCORE_MAX}")
        student_points, class_points = self.catalog.lookup(category, outcome)
        record_date = parse_iso_date(day)
        task_id = f"{category}-{str(subject).strip()}"
        submitted_at = now_local()

        records = [
            SubmissionRecord(
                student_id=student_id,
                class_id=class_id,
                date=record_date,
                task_id=task_id,
                status=STATUS_COMPLETED,
                category=category,
                approved=True,
                submitted_at=submitted_at,
                quiz_score=quiz_score,
                outcome=outcome,
            )
            for student_id in students
        ]
        written = self.submission_repo.upsert_records(records, recorded_by=recorded_by)
        logger.info(f"Recorded '{outcome}' ({category}) for {len(students)} students of {class_id} on {record_date}")

        return {
            "success": True,
            "taskId": task_id,
            "date": record_date.isoformat(),
            "students": len(students),
            "written": written,
            "studentPoints": student_points,
            "classPoints": class_points,
        }

    def update_task_status(self, class_id: str, day: Union[str, date], student_id: str, task_id: str,
                           status: str, approved: Optional[bool] = None) -> Dict:
        """Teacher marks a daily task; returns {"updated": False} when no record matched"""
        if not class_id or not student_id or not task_id:
            raise ValidationError("classId, studentId and taskId are required")
        normalized = STATUS_ALIASES.get(status, status)
        if normalized not in SUBMISSION_STATUSES:
            raise ValidationError(f"Invalid status '{status}'. Use one of: {', '.join(sorted(SUBMISSION_STATUSES))}")
        if approved is not None and not isinstance(approved, bool):
            raise ValidationError("approved must be true or false")

        updated = self.submission_repo.update_status(
            class_id, parse_iso_date(day), student_id, task_id, normalized, approved
        )
        return {"success": True, "updated": updated, "status": normalized}
