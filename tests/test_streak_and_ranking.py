"""Tests for streak tracking and class ranking."""

import random
from datetime import date, timedelta

import pytest

from classboard.models.board_models import ClassWeekSummary, DayScore, StreakState
from classboard.services.aggregation.class_ranker import rank_classes, top_performers
from classboard.services.aggregation.streak_tracker import compute_streak, streak_history

START = date(2025, 10, 6)


def make_days(flags):
    return [
        DayScore(class_id="10-A", date=START + timedelta(days=i), class_points=0, bonus=0, full_submission=flag)
        for i, flag in enumerate(flags)
    ]


def make_summary(class_id, points):
    return ClassWeekSummary(
        class_id=class_id, week_start=START, total_points=points, full_submission_days=0,
        max_streak=0, completion_percent=0, quiz_average=None,
    )


def test_streak_counts_consecutive_full_days():
    assert compute_streak(make_days([True, True, False, True, True, True])) == StreakState(current=3, max=3)


def test_streak_resets_after_missed_day():
    assert compute_streak(make_days([True, True, True, False])) == StreakState(current=0, max=3)


def test_empty_sequence():
    assert compute_streak([]) == StreakState(current=0, max=0)


def test_streak_invariant_holds_for_random_sequences():
    rng = random.Random(7)
    for _ in range(50):
        flags = [rng.random() < 0.6 for _ in range(rng.randint(0, 20))]
        for flag, state in zip(flags, streak_history(make_days(flags))):
            assert state.max >= state.current
            if not flag:
                assert state.current == 0


def test_out_of_order_days_rejected():
    days = make_days([True, True])
    with pytest.raises(ValueError):
        compute_streak(list(reversed(days)))


def test_rank_by_points_descending():
    ranked = rank_classes([make_summary("9-A", 10), make_summary("10-A", 30), make_summary("10-B", 20)])
    assert [s.class_id for s in ranked] == ["10-A", "10-B", "9-A"]


def test_ties_broken_by_class_id():
    summaries = [make_summary("9-B", 16), make_summary("10-B", 16), make_summary("9-A", 16)]
    for _ in range(5):
        shuffled = summaries[:]
        random.shuffle(shuffled)
        assert [s.class_id for s in rank_classes(shuffled)] == ["10-B", "9-A", "9-B"]


def test_top_performers_order_and_ties():
    points = {"s3": 10, "s1": 10, "s2": 15, "s4": -3}
    assert top_performers(points, 3) == [("s2", 15), ("s1", 10), ("s3", 10)]
    assert top_performers(points, 10)[-1] == ("s4", -3)
    assert top_performers(points, 0) == []
