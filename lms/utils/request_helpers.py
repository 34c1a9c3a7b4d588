"""Request helper functions shared by the API routes."""

from flask import request, jsonify
from typing import Dict, Any, Optional

UNAUTHORIZED_BODY = {'status': 'unauthorized'}


def get_json_or_form(key: str, default: Any = None) -> Any:
    """
    Get a value from JSON body or form data, preferring JSON.

    Args:
        key: Key to retrieve
        default: Default value if not found

    Returns:
        Value from request data or default
    """
    if request.is_json:
        data = request.get_json(silent=True) or {}
        return data.get(key, default)

    return request.form.get(key, default)


def build_error_response(message: str, details: Optional[Dict] = None) -> Dict[str, Any]:
    """
    Build a standardized error response.

    Args:
        message: Error message
        details: Optional additional error details

    Returns:
        Dict with error information
    """
    response = {'error': message}
    if details:
        response.update(details)
    return response


def unauthorized_response():
    """401 response returned for every rejected API caller."""
    return jsonify(UNAUTHORIZED_BODY), 401
