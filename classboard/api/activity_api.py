from flask_jwt_extended import get_jwt_identity
from flask_restful import Resource
from classboard.jwt.auth_middleware import staff_required
from classboard.services.activity.activity_entry_service import ActivityEntryService
from classboard.utils.validation.input_validator import get_json_data, require_fields
from classboard.exceptions.error_handler import handle_service_error

class RecordActivity(Resource):
    def __init__(self, activity_service: ActivityEntryService = None):
        self.service = activity_service or ActivityEntryService()
    @staff_required
    def post(self):
        try:
            data = get_json_data()
            require_fields(data, "eventType", "classId", "date", "subject", "studentIds", "outcome")
            result = self.service.record_event(
                data["eventType"],
                data["classId"],
                data["date"],
                data["subject"],
                data["studentIds"],
                data["outcome"],
                recorded_by=get_jwt_identity(),
                quiz_score=data.get("quizScore")
            )
            return result, 201
        except Exception as e:
            return handle_service_error(e)

class TaskStatus(Resource):
    def __init__(self, activity_service: ActivityEntryService = None):
        self.service = activity_service or ActivityEntryService()
    @staff_required
    def patch(self):
        try:
            data = get_json_data()
            require_fields(data, "classId", "date", "studentId", "taskId", "status")
            result = self.service.update_task_status(
                data["classId"],
                data["date"],
                data["studentId"],
                data["taskId"],
                data["status"],
                data.get("approved")
            )
            return result, 200 if result["updated"] else 404
        except Exception as e:
            return handle_service_error(e)
