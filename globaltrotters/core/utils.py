"""
Utility functions for the application.
"""
import math
from typing import Any, Dict, Optional
from datetime import date, datetime
from fastapi.encoders import jsonable_encoder


def parse_iso_date(value: Any) -> Optional[date]:
    """
    Parse an ISO date or timestamp string into a date.
    A full timestamp ("2026-06-15T10:00:00Z") keeps only its date part.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError("Expected an ISO date string")
    text = value.strip()
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        raise ValueError(f"Invalid date '{value}', expected ISO format (YYYY-MM-DD)")


def page_count(total: int, limit: int) -> int:
    """Number of pages needed to show ``total`` items ``limit`` at a time."""
    return math.ceil(total / limit) if limit > 0 else 0


def pagination(page: int, limit: int, total: int) -> Dict[str, int]:
    """Build the pagination envelope."""
    return {
        "page": page,
        "limit": limit,
        "total": total,
        "pages": page_count(total, limit),
    }


def format_response(data: Any = None, message: Optional[str] = None) -> Dict[str, Any]:
    """Format a successful API response."""
    response: Dict[str, Any] = {"success": True}
    if data is not None:
        response["data"] = jsonable_encoder(data, by_alias=True)
    if message:
        response["message"] = message
    return response


def format_error(code: str, message: str) -> Dict[str, Any]:
    """Format an error response."""
    return {
        "success": False,
        "error": {"code": code, "message": message},
    }
