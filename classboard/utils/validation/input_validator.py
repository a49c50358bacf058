"""Centralized Input Validation - DRY Implementation"""
from typing import Dict, List, Optional

from classboard.exceptions.exceptions import ValidationError
from classboard.utils.time.timeutils import today_local
from classboard.utils.time.week_utils import monday_of

def get_json_data() -> Dict:
    """Centralized JSON parsing"""
    from flask import request
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data

def get_optional_query_params(**param_defaults) -> Dict:
    """Get optional query parameters with defaults"""
    from flask import request
    return {param: request.args.get(param, default) for param, default in param_defaults.items()}

def require_fields(data: Dict, *fields: str) -> None:
    missing = [name for name in fields if data.get(name) in (None, "", [])]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

def parse_class_ids(raw: Optional[str]) -> List[str]:
    """'class-10-A, class-9-B' -> ['class-10-A', 'class-9-B']"""
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]

def parse_positive_int(raw: Optional[str], name: str, default: int) -> int:
    if raw in (None, ""):
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ValidationError(f"{name} must be an integer")
    if value < 0:
        raise ValidationError(f"{name} must not be negative")
    return value

def get_default_week_start() -> str:
    """Monday of the current school week"""
    return monday_of(today_local()).isoformat()
