"""JSON serialization utilities for Mongo documents and report payloads"""
from datetime import date, datetime
from typing import Any

from bson import ObjectId

def to_json_safe(obj: Any) -> Any:
    """Convert ObjectId, dates and tuples into JSON serializable values"""
    if isinstance(obj, ObjectId):
        return str(obj)
    elif isinstance(obj, (datetime, date)):
        return obj.isoformat()
    elif isinstance(obj, dict):
        return {key: to_json_safe(value) for key, value in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [to_json_safe(item) for item in obj]
    return obj
