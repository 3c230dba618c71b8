"""
Common API utilities for consistent error responses across all controllers.
"""

from datetime import datetime, timezone
from typing import Optional

from flask import jsonify, request


def api_error(message: str, status_code: int, path: Optional[str] = None) -> tuple:
    """
    Standardized error body for all endpoints.

    Args:
        message: Human-readable message about the failure
        status_code: HTTP status code
        path: Request path; defaults to the path of the current request

    Returns:
        Tuple of (json_response, status_code)
    """
    body = {
        "message": message,
        "path": path if path is not None else request.path,
        "statusCode": status_code,
        "timeStamp": datetime.now(timezone.utc).isoformat(),
    }
    return jsonify(body), status_code
