from flask_restful import Resource
from classboard.jwt.auth_middleware import leaderbd_required
from classboard.config.settings import LeaderboardConfig
from classboard.services.report.leaderboard_service import LeaderboardService
from classboard.services.catalog.outcome_catalog import DEFAULT_CATALOG
from classboard.utils.validation.input_validator import (
    get_default_week_start, get_optional_query_params, parse_class_ids, parse_positive_int
)
from classboard.utils.pagination.pagination_utils import get_pagination_params
from classboard.utils.formatting.json_utils import to_json_safe
from classboard.exceptions.error_handler import handle_service_error

class ClassLeaderboard(Resource):
    def __init__(self, leaderboard_service: LeaderboardService = None):
        self.service = leaderboard_service or LeaderboardService()
    @leaderbd_required
    def get(self):
        try:
            params = get_optional_query_params(weekStart=None, classes=None, page="1", limit="10")
            page, limit = get_pagination_params(params["page"], params["limit"])
            result = self.service.get_class_leaderboard(
                parse_class_ids(params["classes"]),
                params["weekStart"] or get_default_week_start(),
                page,
                limit
            )
            return to_json_safe(result), 200
        except Exception as e:
            return handle_service_error(e)

class ClassWeekSummaryResource(Resource):
    def __init__(self, leaderboard_service: LeaderboardService = None):
        self.service = leaderboard_service or LeaderboardService()
    @leaderbd_required
    def get(self, class_id):
        try:
            params = get_optional_query_params(weekStart=None)
            result = self.service.get_class_summary(class_id, params["weekStart"] or get_default_week_start())
            return to_json_safe(result), 200
        except Exception as e:
            return handle_service_error(e)

class TopPerformers(Resource):
    def __init__(self, leaderboard_service: LeaderboardService = None):
        self.service = leaderboard_service or LeaderboardService()
    @leaderbd_required
    def get(self, class_id):
        try:
            params = get_optional_query_params(weekStart=None, n=None)
            n = parse_positive_int(params["n"], "n", LeaderboardConfig.DEFAULT_TOP_PERFORMERS)
            result = self.service.get_top_performers(class_id, params["weekStart"] or get_default_week_start(), n)
            return to_json_safe(result), 200
        except Exception as e:
            return handle_service_error(e)

class OutcomeCatalogResource(Resource):
    def __init__(self, catalog=None):
        self.catalog = catalog or DEFAULT_CATALOG
    @leaderbd_required
    def get(self):
        try:
            return {"success": True, "data": self.catalog.to_dict()}, 200
        except Exception as e:
            return handle_service_error(e)
