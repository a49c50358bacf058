from dotenv import load_dotenv
load_dotenv()

from datetime import timedelta
from flask import Flask
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from flask_restful import Api

from classboard.config.settings import SecurityConfig
from classboard.utils.logging.log_config import setup_logging

# Leaderboard and catalog
from classboard.api.leaderboard_api import (
    ClassLeaderboard, ClassWeekSummaryResource, TopPerformers, OutcomeCatalogResource
)
# Activity entry and task tracking
from classboard.api.activity_api import RecordActivity, TaskStatus

from classboard.services.activity.activity_entry_service import ActivityEntryService
from classboard.services.catalog.outcome_catalog import DEFAULT_CATALOG
from classboard.services.report.leaderboard_service import LeaderboardService


def build_services():
    """Default service graph backed by MongoDB"""
    return {
        "leaderboard": LeaderboardService(),
        "activity": ActivityEntryService(),
        "catalog": DEFAULT_CATALOG,
    }


def create_app(services=None, config=None):
    setup_logging()
    app = Flask(__name__)
    app.config["JWT_SECRET_KEY"] = SecurityConfig.JWT_SECRET_KEY
    app.config["JWT_ACCESS_TOKEN_EXPIRES"] = timedelta(minutes=SecurityConfig.JWT_ACCESS_TOKEN_MINUTES)
    app.config["JSON_SORT_KEYS"] = False
    if config:
        app.config.update(config)

    CORS(app)
    JWTManager(app)
    api = Api(app)

    services = services or build_services()
    leaderboard_kwargs = {"leaderboard_service": services["leaderboard"]}
    activity_kwargs = {"activity_service": services["activity"]}

    api.add_resource(ClassLeaderboard, "/api/v1/leaderboard", resource_class_kwargs=leaderboard_kwargs)
    api.add_resource(ClassWeekSummaryResource, "/api/v1/classes/<string:class_id>/summary", resource_class_kwargs=leaderboard_kwargs)
    api.add_resource(TopPerformers, "/api/v1/classes/<string:class_id>/top-performers", resource_class_kwargs=leaderboard_kwargs)
    api.add_resource(OutcomeCatalogResource, "/api/v1/outcomes", resource_class_kwargs={"catalog": services["catalog"]})

    api.add_resource(RecordActivity, "/api/v1/activities", resource_class_kwargs=activity_kwargs)
    api.add_resource(TaskStatus, "/api/v1/submissions/status", resource_class_kwargs=activity_kwargs)

    @app.route("/health")
    def health():
        return {"status": "ok"}

    return app


if __name__ == "__main__":
    import os
    create_app().run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")))
