"""Enrollment Repository - Data Access Layer (SoC)"""
from typing import Dict, List

from pymongo.errors import PyMongoError

from classboard.exceptions.exceptions import StorageUnavailable

def build_enrollment_filter(class_id: str) -> Dict:
    """Active students of one class in the users collection"""
    return {"class": class_id, "role": "student", "status": {"$ne": "inactive"}}

class EnrollmentRepo:
    def __init__(self, collection=None):
        if collection is None:
            from classboard.board_central_db import users_collection
            collection = users_collection
        self.collection = collection

    def get_enrolled_students(self, class_id: str) -> List[str]:
        """Ids of active students in a class, sorted"""
        try:
            docs = list(self.collection.find(build_enrollment_filter(class_id), {"id": 1, "_id": 1}))
        except PyMongoError as e:
            raise StorageUnavailable(f"Could not read enrollment for class {class_id}: {e}") from e
        return sorted({str(doc.get("id") or doc["_id"]) for doc in docs})
