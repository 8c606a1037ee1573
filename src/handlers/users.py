"""GET /users: everyone the caller could share a trip with."""

from typing import Any

from core.config import get_config
from core.db import PostgresClient
from core.errors import SmartTripError
from core.events import get_user_id
from core.responses import error_response, json_response


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    try:
        get_user_id(event)
        with PostgresClient(get_config()) as client:
            users = client.list_users()
    except SmartTripError as e:
        return error_response(e)

    return json_response(200, [user.model_dump(mode="json", by_alias=True) for user in users])
