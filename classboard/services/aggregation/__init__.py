"""Aggregation package - day scores, streaks and ranking"""

from .daily_aggregator import aggregate_day, aggregate_days
from .streak_tracker import compute_streak, streak_history
from .class_ranker import rank_classes, top_performers

__all__ = [
    'aggregate_day',
    'aggregate_days',
    'compute_streak',
    'streak_history',
    'rank_classes',
    'top_performers'
]
