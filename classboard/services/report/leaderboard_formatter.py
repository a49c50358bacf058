"""Leaderboard Formatter - Handles leaderboard data formatting"""
from typing import Dict, List, Tuple

from classboard.models.board_models import ClassWeekSummary, DayScore
from classboard.services.aggregation.class_ranker import top_performers


class LeaderboardFormatter:
    """Formats summaries into API rows"""

    def __init__(self, top_n: int = 3):
        self.top_n = top_n

    def format_leaderboard(self, ranked: List[ClassWeekSummary]) -> List[Dict]:
        """Ranked summaries -> rows with 1-based rank"""
        return [
            {"rank": rank, **self.format_summary(summary, include_days=False)}
            for rank, summary in enumerate(ranked, 1)
        ]

    def format_summary(self, summary: ClassWeekSummary, include_days: bool = True) -> Dict:
        row = {
            "classId": summary.class_id,
            "weekStart": summary.week_start.isoformat(),
            "totalPoints": summary.total_points,
            "streak": summary.max_streak,
            "fullSubmissionDays": summary.full_submission_days,
            "completionPercent": summary.completion_percent,
            "weeklyQuizAvg": summary.quiz_average,
            "topPerformers": self.format_performers(top_performers(summary.student_points, self.top_n)),
        }
        if include_days:
            row["days"] = [self.format_day(day) for day in summary.days]
        return row

    @staticmethod
    def format_day(day: DayScore) -> Dict:
        return {
            "date": day.date.isoformat(),
            "classPoints": day.class_points,
            "bonus": day.bonus,
            "fullSubmission": day.full_submission,
            "tasksSeen": day.tasks_seen,
            "tasksCompleted": day.tasks_completed,
        }

    @staticmethod
    def format_performers(performers: List[Tuple[str, int]]) -> List[Dict]:
        return [
            {"rank": rank, "studentId": student_id, "points": points}
            for rank, (student_id, points) in enumerate(performers, 1)
        ]
