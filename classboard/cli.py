"""Weekly class leaderboard report

    python -m classboard.cli leaderboard --week-start 2025-10-06 --classes class-10-A,class-9-B
"""
import argparse
import sys

from classboard.config.settings import CLASS_OPTIONS
from classboard.exceptions.error_handler import describe_error
from classboard.utils.logging.log_config import setup_logging
from classboard.utils.validation.input_validator import get_default_week_start, parse_class_ids
from classboard.utils.time.week_utils import parse_iso_date

HEADER = ("Rank", "Class", "Points", "Streak", "Completion", "Quiz Avg")


def format_table(results, leaderboard_service) -> str:
    ranked = leaderboard_service.rank_classes(r.summary for r in results if r.ok)
    rows = [HEADER]
    for rank, summary in enumerate(ranked, 1):
        quiz = "-" if summary.quiz_average is None else f"{summary.quiz_average:.2f}"
        rows.append((str(rank), summary.class_id, str(summary.total_points), str(summary.max_streak),
                     f"{summary.completion_percent}%", quiz))
    widths = [max(len(row[i]) for row in rows) for i in range(len(HEADER))]
    lines = ["  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip() for row in rows]

    failed = [r for r in results if not r.ok]
    if failed:
        lines.append("")
        lines.append("Unavailable:")
        for result in failed:
            info = describe_error(result.error)
            lines.append(f"  {result.class_id}: data unavailable ({info['error']}: {info['message']})")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="classboard", description="Class points reports")
    subparsers = parser.add_subparsers(dest="command", required=True)

    board = subparsers.add_parser("leaderboard", help="Print the weekly class leaderboard")
    board.add_argument("--week-start", default=None, help="First school day, YYYY-MM-DD (default: this Monday)")
    board.add_argument("--classes", default=None, help="Comma separated class ids (default: CLASS_OPTIONS)")
    return parser


def main(argv=None, leaderboard_service=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()

    try:
        week_start = parse_iso_date(args.week_start or get_default_week_start(), "week start")
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2
    class_ids = parse_class_ids(args.classes) or list(CLASS_OPTIONS)

    if leaderboard_service is None:
        from classboard.services.report.leaderboard_service import LeaderboardService
        leaderboard_service = LeaderboardService()

    results = leaderboard_service.compute_class_results(class_ids, week_start)
    print(f"Class leaderboard for the week of {week_start.isoformat()}")
    print(format_table(results, leaderboard_service))
    return 0 if all(r.ok for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
