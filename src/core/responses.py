"""JSON response helpers for API Gateway proxy handlers."""

import json
from typing import Any

from core.errors import ErrorCode, SmartTripError

_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.AUTH_FAILED: 401,
    ErrorCode.TRIP_NOT_FOUND: 404,
    ErrorCode.ITINERARY_ITEM_NOT_FOUND: 404,
    ErrorCode.DATABASE_ERROR: 502,
    ErrorCode.PARTIAL_ITINERARY: 502,
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.INVALID_REQUEST: 400,
    ErrorCode.METHOD_NOT_ALLOWED: 405,
    ErrorCode.INTERNAL_ERROR: 500,
}


def json_response(status_code: int, body: Any) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def error_response(error: SmartTripError, **extra: Any) -> dict[str, Any]:
    """Client-facing error envelope. Only the user message is exposed, never ``error.message``."""
    payload: dict[str, Any] = {"code": error.code.value, "message": error.user_message, **extra}
    return json_response(_STATUS_BY_CODE.get(error.code, 500), {"error": payload})
