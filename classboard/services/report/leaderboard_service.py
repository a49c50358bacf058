"""Leaderboard Service - Business Logic Layer (SoC)"""
from datetime import date
from typing import Dict, Iterable, List, Optional, Union

from classboard.config.settings import CLASS_OPTIONS, LeaderboardConfig
from classboard.exceptions.error_handler import describe_error
from classboard.exceptions.exceptions import ValidationError
from classboard.models.board_models import ClassResult, ClassWeekSummary
from classboard.services.aggregation.class_ranker import rank_classes, top_performers
from classboard.services.report.leaderboard_formatter import LeaderboardFormatter
from classboard.services.report.week_summary_service import WeekSummaryService
from classboard.utils.cache.cache_utils import BaseCache, make_cache_key
from classboard.utils.logging.log_config import get_logger
from classboard.utils.pagination.pagination_utils import build_paginated_response
from classboard.utils.processing.parallel_processor import ParallelProcessor
from classboard.utils.time.week_utils import parse_iso_date

logger = get_logger(__name__)


class LeaderboardService:
    def __init__(self, summary_service: WeekSummaryService = None, cache: BaseCache = None,
                 formatter: LeaderboardFormatter = None, class_timeout: float = None,
                 max_workers: int = None):
        self.summary_service = summary_service or WeekSummaryService()
        self.cache = cache if cache is not None else BaseCache()
        self.formatter = formatter or LeaderboardFormatter(LeaderboardConfig.DEFAULT_TOP_PERFORMERS)
        self.class_timeout = class_timeout if class_timeout is not None else LeaderboardConfig.CLASS_TIMEOUT
        self.max_workers = max_workers

    def rank_classes(self, summaries: Iterable[ClassWeekSummary]) -> List[ClassWeekSummary]:
        return rank_classes(summaries)

    def compute_class_results(self, class_ids: List[str], week_start: Union[str, date]) -> List[ClassResult]:
        """Summaries for many classes at once; a failing class is reported, never dropped"""
        start = parse_iso_date(week_start, "week start")
        unique_ids = list(dict.fromkeys(class_ids))

        summaries, errors = ParallelProcessor.process_isolated(
            unique_ids,
            lambda class_id: self.summary_service.compute_class_week_summary(class_id, start),
            timeout=self.class_timeout,
            max_workers=self.max_workers
        )
        return [
            ClassResult(class_id, summary=summaries.get(class_id), error=errors.get(class_id))
            for class_id in unique_ids
        ]

    def get_class_leaderboard(self, class_ids: Optional[List[str]], week_start: Union[str, date],
                              page: int = 1, limit: int = 10) -> Dict:
        """Ranked leaderboard for a week plus the classes that could not be computed"""
        class_ids = class_ids or list(CLASS_OPTIONS)
        start = parse_iso_date(week_start, "week start")

        cache_key = make_cache_key("leaderboard", ",".join(sorted(set(class_ids))), start, page, limit)
        cached_result = self.cache.get(cache_key)
        if cached_result:
            return {**cached_result, "cached": True}

        results = self.compute_class_results(class_ids, start)
        ranked = self.rank_classes(r.summary for r in results if r.ok)
        unavailable = [
            {"classId": r.class_id, **describe_error(r.error)}
            for r in results if not r.ok
        ]
        if unavailable:
            logger.warning(f"Leaderboard for {start} is partial, unavailable: {[u['classId'] for u in unavailable]}")

        response = build_paginated_response(
            data=self.formatter.format_leaderboard(ranked),
            page=page,
            limit=limit,
            additional_fields={
                "weekStart": start.isoformat(),
                "unavailable": unavailable,
                "partial": bool(unavailable),
            }
        )
        response["cached"] = False

        # Partial results are recomputed on the next request
        if not unavailable:
            self.cache.put(cache_key, response)
        return response

    def get_class_summary(self, class_id: str, week_start: Union[str, date]) -> Dict:
        if not class_id:
            raise ValidationError("Class id is required")
        summary = self.summary_service.compute_class_week_summary(class_id, parse_iso_date(week_start, "week start"))
        return {"success": True, "data": self.formatter.format_summary(summary)}

    def get_top_performers(self, class_id: str, week_start: Union[str, date], n: int) -> Dict:
        if not class_id:
            raise ValidationError("Class id is required")
        if n < 0:
            raise ValidationError("n must not be negative")
        summary = self.summary_service.compute_class_week_summary(class_id, parse_iso_date(week_start, "week start"))
        return {
            "success": True,
            "classId": class_id,
            "weekStart": summary.week_start.isoformat(),
            "data": self.formatter.format_performers(top_performers(summary.student_points, n)),
        }
