"""Streak Tracker - consecutive full-submission days"""
from typing import Iterable, Iterator

from classboard.models.board_models import DayScore, StreakState


def streak_history(day_scores: Iterable[DayScore]) -> Iterator[StreakState]:
    """Yield the streak state after each day. Days must be in date order."""
    current = 0
    best = 0
    previous = None
    for day in day_scores:
        if previous is not None and day.date <= previous:
            raise ValueError(f"Day scores must be in chronological order: {day.date} after {previous}")
        previous = day.date

        current = current + 1 if day.full_submission else 0
        best = max(best, current)
        yield StreakState(current=current, max=best)


def compute_streak(day_scores: Iterable[DayScore]) -> StreakState:
    state = StreakState()
    for state in streak_history(day_scores):
        pass
    return state
