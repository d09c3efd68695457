"""
Response formatting helper utilities.

Provides standardized JSON response creation for the table API.
"""
from typing import Any, Dict, Optional, Tuple
from flask import jsonify, Response


def error_response(
    message: str,
    status_code: int = 400,
    extra_data: Optional[Dict[str, Any]] = None
) -> Tuple[Response, int]:
    """
    Create a standardized error response.

    Usage:
        return error_response("Missing 'column' parameter", 400)
    """
    response_data = {
        'success': False,
        'error': message
    }

    if extra_data:
        response_data.update(extra_data)

    return jsonify(response_data), status_code


def success_response(
    data: Optional[Any] = None,
    message: Optional[str] = None,
    status_code: int = 200
) -> Tuple[Response, int]:
    """
    Create a standardized success response.

    Dict fields are merged at top level; anything else is wrapped in 'data'.

    Usage:
        return success_response(table.to_dict())
    """
    response_data = {'success': True}

    if message:
        response_data['message'] = message

    if data is not None:
        if isinstance(data, dict):
            response_data.update(data)
        else:
            response_data['data'] = data

    return jsonify(response_data), status_code


def table_response(table, message: Optional[str] = None,
                   status_code: int = 200) -> Tuple[Response, int]:
    """
    Success response carrying the full table state.

    Body: {'success': True, 'columns': [...], 'rows': [...], 'active': {...} | None}
    """
    payload = table.to_dict()
    active = table.schema.active_column
    payload['active'] = active.to_dict() if active else None
    return success_response(payload, message, status_code)
