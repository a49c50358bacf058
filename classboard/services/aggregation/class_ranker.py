"""Class Ranker - leaderboard ordering"""
from typing import Iterable, List, Mapping, Tuple

from classboard.models.board_models import ClassWeekSummary


def rank_classes(summaries: Iterable[ClassWeekSummary]) -> List[ClassWeekSummary]:
    """Highest total points first, ties by class id ascending"""
    return sorted(summaries, key=lambda s: (-s.total_points, s.class_id))


def top_performers(student_points: Mapping[str, int], n: int) -> List[Tuple[str, int]]:
    """The n students with the most points, ties by student id ascending"""
    if n <= 0:
        return []
    ordered = sorted(student_points.items(), key=lambda item: (-item[1], item[0]))
    return ordered[:n]
