"""Daily Aggregator - Business Logic Layer (SoC)

Reduces one class's submissions for one calendar day into a DayScore.
Pure: same inputs always give the same DayScore, no I/O.
"""
from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List, Sequence

from classboard.config.settings import (
    CLASS_DAY_BONUS, QUIZ_SCORE_MAX, QUIZ_SCORE_MIN, STATUS_ALIASES,
    STATUS_COMPLETED, STATUS_PENDING, SUBMISSION_STATUSES
)
from classboard.exceptions.exceptions import MalformedRecord
from classboard.models.board_models import DayScore, SubmissionRecord
from classboard.services.catalog.outcome_catalog import DEFAULT_CATALOG, OutcomeCatalog


def _score_record(record: SubmissionRecord, catalog: OutcomeCatalog) -> tuple:
    """Validate a record and return its (student points, class points)"""
    status = STATUS_ALIASES.get(record.status, record.status)
    if status not in SUBMISSION_STATUSES:
        raise MalformedRecord(
            f"Invalid status '{record.status}' for student {record.student_id}, task {record.task_id}"
        )
    if record.quiz_score is not None and not QUIZ_SCORE_MIN <= record.quiz_score <= QUIZ_SCORE_MAX:
        raise MalformedRecord(
            f"Quiz score {record.quiz_score} out of range for student {record.student_id}, task {record.task_id}"
        )

    category = None
    if record.category is not None:
        category = catalog.normalize_category(record.category)
    elif record.outcome:
        raise MalformedRecord(
            f"Outcome '{record.outcome}' has no event category (student {record.student_id}, task {record.task_id})"
        )

    # Labels are resolved even for pending records so bad data always surfaces
    points = catalog.lookup(category, record.outcome) if record.outcome else None

    if status == STATUS_PENDING:
        return 0, 0
    if points is not None:
        return points
    if category is not None:
        return catalog.fallback(category, status) or (0, 0)
    return 0, 0


def aggregate_day(class_id: str, day: date, enrolled_student_ids: Iterable[str],
                  submissions: Iterable[SubmissionRecord],
                  catalog: OutcomeCatalog = DEFAULT_CATALOG,
                  class_bonus: int = CLASS_DAY_BONUS) -> DayScore:
    """Score one class-day.

    Records for other dates are ignored. Students outside the roster still
    earn points but do not count towards the full-submission check, and an
    empty roster never earns the bonus.
    """
    by_student: Dict[str, List[SubmissionRecord]] = defaultdict(list)
    for record in submissions:
        if record.date == day:
            by_student[record.student_id].append(record)

    student_points: Dict[str, int] = {}
    class_points = 0
    tasks_seen = 0
    tasks_completed = 0
    quiz_scores = []

    for student_id in sorted(by_student):
        total = 0
        for record in by_student[student_id]:
            student_delta, class_delta = _score_record(record, catalog)
            total += student_delta
            class_points += class_delta
            tasks_seen += 1
            if STATUS_ALIASES.get(record.status, record.status) == STATUS_COMPLETED and record.approved is True:
                tasks_completed += 1
            if record.quiz_score is not None:
                quiz_scores.append(float(record.quiz_score))
        student_points[student_id] = total

    enrolled = set(enrolled_student_ids)
    full_submission = bool(enrolled) and enrolled.issubset(by_student.keys())
    bonus = class_bonus if full_submission else 0

    return DayScore(
        class_id=class_id,
        date=day,
        class_points=class_points + bonus,
        bonus=bonus,
        full_submission=full_submission,
        student_points=student_points,
        tasks_seen=tasks_seen,
        tasks_completed=tasks_completed,
        quiz_scores=tuple(quiz_scores),
    )


def aggregate_days(class_id: str, days: Sequence[date], enrolled_student_ids: Iterable[str],
                   submissions: Iterable[SubmissionRecord],
                   catalog: OutcomeCatalog = DEFAULT_CATALOG,
                   class_bonus: int = CLASS_DAY_BONUS) -> List[DayScore]:
    """Score consecutive days from one batch of records, in the order given"""
    enrolled = list(enrolled_student_ids)
    by_day: Dict[date, List[SubmissionRecord]] = defaultdict(list)
    for record in submissions:
        by_day[record.date].append(record)
    return [
        aggregate_day(class_id, day, enrolled, by_day.get(day, []), catalog, class_bonus)
        for day in days
    ]
