"""
Points and leaderboard data models

Immutable data transfer objects passed between the repositories, the
aggregation functions and the report services.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class OutcomeRule:
    """Point deltas for one outcome label within an event category."""
    category: str
    label: str
    student_points: int
    class_points: int


@dataclass(frozen=True)
class SubmissionRecord:
    """One student's interaction with one task on one day."""
    student_id: str
    class_id: str
    date: date
    task_id: str
    status: str
    category: Optional[str] = None
    approved: Optional[bool] = None
    submitted_at: Optional[datetime] = None
    quiz_score: Optional[float] = None
    outcome: Optional[str] = None


@dataclass(frozen=True)
class DayScore:
    """Class result for a single calendar day. ``class_points`` includes ``bonus``."""
    class_id: str
    date: date
    class_points: int
    bonus: int
    full_submission: bool
    student_points: Dict[str, int] = field(default_factory=dict)
    tasks_seen: int = 0
    tasks_completed: int = 0
    quiz_scores: Tuple[float, ...] = ()


@dataclass(frozen=True)
class StreakState:
    current: int = 0
    max: int = 0


@dataclass(frozen=True)
class ClassWeekSummary:
    """Aggregated week for one class, the unit the ranker sorts."""
    class_id: str
    week_start: date
    total_points: int
    full_submission_days: int
    max_streak: int
    completion_percent: int
    quiz_average: Optional[float]
    student_points: Dict[str, int] = field(default_factory=dict)
    days: Tuple[DayScore, ...] = ()


@dataclass(frozen=True)
class ClassResult:
    """Outcome of one class computation; exactly one of summary/error is set."""
    class_id: str
    summary: Optional[ClassWeekSummary] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None
