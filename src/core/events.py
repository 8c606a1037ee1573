"""Helpers for reading API Gateway proxy events."""

from typing import Any, TypeVar

import pydantic

from core.errors import AuthenticationError, ErrorCode, ValidationError

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


def get_user_id(event: dict[str, Any]) -> int:
    """Caller id placed on the request context by the API Gateway authorizer."""
    try:
        return int(event["requestContext"]["authorizer"]["userId"])
    except (KeyError, TypeError, ValueError) as e:
        raise AuthenticationError("Missing or malformed authorizer userId", code=ErrorCode.AUTH_FAILED) from e


def get_path_id(event: dict[str, Any], name: str) -> int:
    try:
        return int((event.get("pathParameters") or {})[name])
    except (KeyError, TypeError, ValueError) as e:
        raise ValidationError(f"Path parameter {name!r} must be an integer", code=ErrorCode.INVALID_REQUEST) from e


def parse_body(event: dict[str, Any], model: type[ModelT]) -> ModelT:
    try:
        return model.model_validate_json(event.get("body") or "{}")
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid {model.__name__}: {e}", code=ErrorCode.INVALID_REQUEST) from e
