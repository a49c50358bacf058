"""Tests for the leaderboard command line report."""

import pytest

from classboard.cli import main
from classboard.services.report.leaderboard_service import LeaderboardService
from classboard.services.report.week_summary_service import WeekSummaryService
from tests.conftest import FakeSubmissionRepo, make_record


@pytest.fixture
def leaderboard_service(two_day_records, enrollment, week_start):
    records = two_day_records + [
        make_record("t1", week_start, class_id="10-B", task_id="quiz-1", category="quiz",
                    outcome="Score 70–89%", quiz_score=75),
    ]
    repo = FakeSubmissionRepo(records, failing_classes={"9-C"})
    return LeaderboardService(WeekSummaryService(repo, enrollment))


def test_prints_ranked_table(leaderboard_service, capsys):
    code = main(["leaderboard", "--week-start", "2025-10-06", "--classes", "10-B,10-A"],
                leaderboard_service=leaderboard_service)

    lines = capsys.readouterr().out.splitlines()
    assert code == 0
    assert lines[0] == "Class leaderboard for the week of 2025-10-06"
    assert lines[1].split() == ["Rank", "Class", "Points", "Streak", "Completion", "Quiz", "Avg"]
    assert lines[2].split() == ["1", "10-A", "16", "1", "100%", "-"]
    assert lines[3].split() == ["2", "10-B", "13", "1", "100%", "75.00"]
    assert "Unavailable:" not in lines


def test_failed_class_is_listed_and_exit_code_is_nonzero(leaderboard_service, capsys):
    code = main(["leaderboard", "--week-start", "2025-10-06", "--classes", "10-A,9-C"],
                leaderboard_service=leaderboard_service)

    out = capsys.readouterr().out
    assert code == 1
    assert "Unavailable:" in out
    assert "  9-C: data unavailable (STORAGE_UNAVAILABLE: store down for 9-C)" in out.splitlines()


def test_bad_week_start(leaderboard_service, capsys):
    code = main(["leaderboard", "--week-start", "next monday", "--classes", "10-A"],
                leaderboard_service=leaderboard_service)

    assert code == 2
    assert "expected YYYY-MM-DD" in capsys.readouterr().err


def test_command_is_required():
    with pytest.raises(SystemExit):
        main([])
