"""Tests for the HTTP layer using the Flask test client."""

from datetime import timedelta

import pytest
from flask_jwt_extended import create_access_token

from classboard.app import create_app
from classboard.services.activity.activity_entry_service import ActivityEntryService
from classboard.services.catalog.outcome_catalog import DEFAULT_CATALOG
from classboard.services.report.leaderboard_service import LeaderboardService
from classboard.services.report.week_summary_service import WeekSummaryService
from classboard.utils.cache.cache_utils import BaseCache
from tests.conftest import FakeSubmissionRepo, make_record


@pytest.fixture
def submission_repo(two_day_records, week_start):
    return FakeSubmissionRepo(
        two_day_records + [
            make_record("t1", week_start, class_id="10-B", task_id="quiz-1", category="quiz",
                        outcome="Score 90%+", quiz_score=92),
            make_record("x1", week_start, class_id="9-B", outcome="Mostly done"),
        ],
        failing_classes={"9-C"},
    )


@pytest.fixture
def app(submission_repo, enrollment):
    services = {
        "leaderboard": LeaderboardService(WeekSummaryService(submission_repo, enrollment), cache=BaseCache(ttl=60)),
        "activity": ActivityEntryService(submission_repo),
        "catalog": DEFAULT_CATALOG,
    }
    return create_app(services=services, config={"TESTING": True, "JWT_SECRET_KEY": "test-secret"})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth(app):
    def headers(role="student", identity="u1", **kwargs):
        with app.app_context():
            token = create_access_token(identity=identity, additional_claims={"userType": role}, **kwargs)
        return {"Authorization": f"Bearer {token}"}
    return headers


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


class TestLeaderboard:
    def test_ranked_classes(self, client, auth):
        response = client.get("/api/v1/leaderboard?weekStart=2025-10-06&classes=10-A,10-B,9-A", headers=auth())

        assert response.status_code == 200
        body = response.get_json()
        assert [row["classId"] for row in body["data"]] == ["10-A", "10-B", "9-A"]
        assert body["data"][0]["totalPoints"] == 16
        assert body["partial"] is False

    def test_partial_results(self, client, auth):
        response = client.get("/api/v1/leaderboard?weekStart=2025-10-06&classes=10-A,9-C,9-B", headers=auth())

        assert response.status_code == 200
        body = response.get_json()
        assert [row["classId"] for row in body["data"]] == ["10-A"]
        assert {u["classId"]: u["error"] for u in body["unavailable"]} == {
            "9-C": "STORAGE_UNAVAILABLE", "9-B": "UNKNOWN_OUTCOME"
        }

    def test_missing_token(self, client):
        response = client.get("/api/v1/leaderboard")
        assert response.status_code == 401
        assert response.get_json()["error"] == "NO_AUTH_HEADER"

    def test_expired_token(self, client, auth):
        response = client.get("/api/v1/leaderboard", headers=auth(expires_delta=timedelta(seconds=-1)))
        assert response.status_code == 401
        assert response.get_json()["error"] == "TOKEN_EXPIRED"

    def test_unknown_role(self, client, auth):
        response = client.get("/api/v1/leaderboard", headers=auth(role="parent"))
        assert response.status_code == 403

    def test_bad_week_start(self, client, auth):
        response = client.get("/api/v1/leaderboard?weekStart=06-10-2025&classes=10-A", headers=auth())
        assert response.status_code == 400


class TestClassSummary:
    def test_summary(self, client, auth):
        response = client.get("/api/v1/classes/10-A/summary?weekStart=2025-10-06", headers=auth())

        assert response.status_code == 200
        data = response.get_json()["data"]
        assert data["totalPoints"] == 16
        assert data["streak"] == 1
        assert [d["classPoints"] for d in data["days"]] == [14, 2, 0, 0, 0]

    def test_storage_failure(self, client, auth):
        response = client.get("/api/v1/classes/9-C/summary?weekStart=2025-10-06", headers=auth())
        assert response.status_code == 503
        assert response.get_json()["error"] == "STORAGE_UNAVAILABLE"

    def test_unknown_outcome(self, client, auth):
        response = client.get("/api/v1/classes/9-B/summary?weekStart=2025-10-06", headers=auth())
        assert response.status_code == 422
        assert response.get_json()["error"] == "UNKNOWN_OUTCOME"

    def test_top_performers(self, client, auth):
        response = client.get("/api/v1/classes/10-A/top-performers?weekStart=2025-10-06&n=2", headers=auth())

        assert response.status_code == 200
        assert response.get_json()["data"] == [
            {"rank": 1, "studentId": "s1", "points": 10},
            {"rank": 2, "studentId": "s2", "points": 5},
        ]

    @pytest.mark.parametrize("n", ["-1", "two"])
    def test_top_performers_bad_n(self, client, auth, n):
        response = client.get(f"/api/v1/classes/10-A/top-performers?weekStart=2025-10-06&n={n}", headers=auth())
        assert response.status_code == 400


def test_outcome_catalog(client, auth):
    response = client.get("/api/v1/outcomes", headers=auth())

    assert response.status_code == 200
    homework = response.get_json()["data"]["homework"]
    assert homework[0] == {"label": "Completed on time", "studentPoints": 5, "classPoints": 2}


class TestActivities:
    payload = {
        "eventType": "homework", "classId": "10-A", "date": "2025-10-08", "subject": "science",
        "studentIds": ["s1", "s2"], "outcome": "Late but done",
    }

    def test_teacher_records_activity(self, client, auth, submission_repo):
        response = client.post("/api/v1/activities", json=self.payload, headers=auth(role="teacher", identity="t-9"))

        assert response.status_code == 201
        assert response.get_json()["taskId"] == "homework-science"
        records, recorded_by = submission_repo.written[0]
        assert recorded_by == "t-9"
        assert len(records) == 2

    def test_students_cannot_record(self, client, auth, submission_repo):
        response = client.post("/api/v1/activities", json=self.payload, headers=auth(role="student"))
        assert response.status_code == 403
        assert submission_repo.written == []

    def test_unknown_outcome(self, client, auth):
        response = client.post("/api/v1/activities", json={**self.payload, "outcome": "Forgot"},
                               headers=auth(role="admin"))
        assert response.status_code == 422

    def test_missing_fields(self, client, auth):
        response = client.post("/api/v1/activities", json={"eventType": "homework"}, headers=auth(role="teacher"))
        assert response.status_code == 400
        assert "classId" in response.get_json()["message"]

    def test_non_object_body(self, client, auth):
        response = client.post("/api/v1/activities", json=["homework"], headers=auth(role="teacher"))
        assert response.status_code == 400


class TestTaskStatus:
    def test_update(self, client, auth, submission_repo):
        body = {"classId": "10-A", "date": "2025-10-06", "studentId": "s1", "taskId": "hw-math",
                "status": "completed", "approved": True}
        response = client.patch("/api/v1/submissions/status", json=body, headers=auth(role="teacher"))

        assert response.status_code == 200
        assert response.get_json()["updated"] is True

    def test_no_matching_record(self, client, auth):
        body = {"classId": "10-A", "date": "2025-10-09", "studentId": "s1", "taskId": "hw-math",
                "status": "absent"}
        response = client.patch("/api/v1/submissions/status", json=body, headers=auth(role="main-admin"))
        assert response.status_code == 404

    def test_invalid_status(self, client, auth):
        body = {"classId": "10-A", "date": "2025-10-06", "studentId": "s1", "taskId": "hw-math",
                "status": "skipped"}
        response = client.patch("/api/v1/submissions/status", json=body, headers=auth(role="teacher"))
        assert response.status_code == 400
