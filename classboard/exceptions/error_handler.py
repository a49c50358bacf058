"""Centralized error handling and responses - DRY principle"""
from typing import Tuple

from classboard.exceptions.exceptions import (
    MalformedRecord, StorageUnavailable, UnknownOutcome, ValidationError
)
from classboard.utils.logging.log_config import get_logger

logger = get_logger(__name__)



# ============= ERROR HANDLERS =============

def handle_service_error(e: Exception) -> Tuple[dict, int]:
    """Centralized error handling for services"""

    if isinstance(e, ValidationError):
        return {"success": False, "message": str(e)}, 400

    elif isinstance(e, UnknownOutcome):
        return {"success": False, "message": str(e), "error": "UNKNOWN_OUTCOME"}, 422

    elif isinstance(e, MalformedRecord):
        return {"success": False, "message": str(e), "error": "MALFORMED_RECORD"}, 422

    elif isinstance(e, StorageUnavailable):
        logger.warning(f"Storage unavailable: {e}")
        return {"success": False, "message": "Data store temporarily unavailable", "error": "STORAGE_UNAVAILABLE"}, 503

    elif isinstance(e, ValueError):
        return {"success": False, "message": str(e)}, 400

    else:
        sanitized_error = str(e).replace('\n', ' ').replace('\r', ' ')[:500]
        logger.error(f"Unexpected error: {sanitized_error}")
        return {"success": False, "message": "Server error"}, 500

def describe_error(e: Exception) -> dict:
    """Short annotation for a failed unit inside a partial result set"""
    if isinstance(e, UnknownOutcome):
        code = "UNKNOWN_OUTCOME"
    elif isinstance(e, MalformedRecord):
        code = "MALFORMED_RECORD"
    elif isinstance(e, StorageUnavailable):
        code = "STORAGE_UNAVAILABLE"
    else:
        code = "INTERNAL_ERROR"
    return {"error": code, "message": str(e).replace('\n', ' ')[:200]}
