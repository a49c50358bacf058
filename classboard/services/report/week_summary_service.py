"""Week Summary Service - Business Logic Layer (SoC)"""
from collections import defaultdict
from datetime import date
from typing import Dict, List, Optional, Union

from classboard.config.settings import CLASS_DAY_BONUS, WEEK_LENGTH_DAYS
from classboard.models.board_models import ClassWeekSummary, DayScore
from classboard.repositories.core.repository_factory import RepositoryFactory
from classboard.services.aggregation.daily_aggregator import aggregate_days
from classboard.services.aggregation.streak_tracker import compute_streak
from classboard.services.catalog.outcome_catalog import DEFAULT_CATALOG, OutcomeCatalog
from classboard.utils.logging.log_config import get_logger
from classboard.utils.time.week_utils import get_week_dates

logger = get_logger(__name__)


def completion_percent(completed: int, seen: int) -> int:
    """Whole percent, halves rounded up; 0 when nothing was seen"""
    if seen <= 0:
        return 0
    return (completed * 200 + seen) // (2 * seen)


def quiz_average(scores: List[float]) -> Optional[float]:
    if not scores:
        return None
    return round(sum(scores) / len(scores), 2)


def summarize_week(class_id: str, week_start: date, day_scores: List[DayScore]) -> ClassWeekSummary:
    """Fold a week of day scores into a ClassWeekSummary"""
    student_points: Dict[str, int] = defaultdict(int)
    quiz_scores: List[float] = []
    for day in day_scores:
        for student_id, points in day.student_points.items():
            student_points[student_id] += points
        quiz_scores.extend(day.quiz_scores)

    streak = compute_streak(day_scores)
    return ClassWeekSummary(
        class_id=class_id,
        week_start=week_start,
        total_points=sum(day.class_points for day in day_scores),
        full_submission_days=sum(1 for day in day_scores if day.full_submission),
        max_streak=streak.max,
        completion_percent=completion_percent(
            sum(day.tasks_completed for day in day_scores),
            sum(day.tasks_seen for day in day_scores)
        ),
        quiz_average=quiz_average(quiz_scores),
        student_points=dict(student_points),
        days=tuple(day_scores),
    )


class WeekSummaryService:
    def __init__(self, submission_repo=None, enrollment_repo=None,
                 catalog: OutcomeCatalog = DEFAULT_CATALOG,
                 week_length: int = WEEK_LENGTH_DAYS, class_bonus: int = CLASS_DAY_BONUS):
        self.submission_repo = submission_repo or RepositoryFactory.get_submission_repo()
        self.enrollment_repo = enrollment_repo or RepositoryFactory.get_enrollment_repo()
        self.catalog = catalog
        self.week_length = week_length
        self.class_bonus = class_bonus

    def compute_class_week_summary(self, class_id: str, week_start: Union[str, date]) -> ClassWeekSummary:
        """One enrollment read and one submission read, then pure aggregation"""
        days = get_week_dates(week_start, self.week_length)
        # Roster is read once, so mid-week changes apply to the whole week
        enrolled = self.enrollment_repo.get_enrolled_students(class_id)
        submissions = self.submission_repo.load_submissions(class_id, days[0], days[-1])

        day_scores = aggregate_days(class_id, days, enrolled, submissions,
                                    self.catalog, self.class_bonus)
        summary = summarize_week(class_id, days[0], day_scores)
        logger.debug(
            f"Week summary {class_id} from {days[0]}: {summary.total_points} points, "
            f"streak {summary.max_streak}, {len(enrolled)} enrolled"
        )
        return summary
