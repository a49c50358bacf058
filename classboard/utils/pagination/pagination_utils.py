"""Pagination Utilities - consistent paginated payloads (SoC)"""
from math import ceil
from typing import Any, Dict, List, Optional

MAX_PAGE_SIZE = 100

def paginate_data(data: List[Any], page: int = 1, limit: int = 10) -> Dict:
    """
    Slice a list into one page plus metadata

    Args:
        data: Full ordered list
        page: Page number (1-based)
        limit: Items per page

    Returns:
        Dict with "data" and "pagination"
    """
    page = max(1, page)
    limit = max(1, min(limit, MAX_PAGE_SIZE))

    total_count = len(data)
    total_pages = ceil(total_count / limit) if total_count > 0 else 1
    start_idx = (page - 1) * limit

    return {
        "data": data[start_idx:start_idx + limit],
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total_count,
            "totalPages": total_pages,
            "hasNext": page < total_pages,
            "hasPrev": page > 1
        }
    }

def get_pagination_params(page_param: Optional[str], limit_param: Optional[str]) -> tuple:
    """Parse page/limit query strings, falling back to 1 and 10"""
    try:
        page = max(1, int(page_param)) if page_param else 1
    except (ValueError, TypeError):
        page = 1

    try:
        limit = max(1, min(int(limit_param), MAX_PAGE_SIZE)) if limit_param else 10
    except (ValueError, TypeError):
        limit = 10

    return page, limit

def build_paginated_response(data: List[Any], page: int, limit: int,
                             additional_fields: Optional[Dict] = None) -> Dict:
    """Standard ``{"success": True, "data": [...], "pagination": {...}}`` payload"""
    response = {"success": True, **paginate_data(data, page, limit)}
    if additional_fields:
        response.update(additional_fields)
    return response
