"""Trip CRUD for the calling user: GET /trips, GET|PUT|DELETE /trips/{tripId}."""

import logging
from typing import Any

from core.config import get_config
from core.db import PostgresClient
from core.errors import ErrorCode, SmartTripError, ValidationError
from core.events import get_path_id, get_user_id, parse_body
from core.models import TripInput
from core.responses import error_response, json_response

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    method = event.get("httpMethod", "GET")
    has_trip_id = bool((event.get("pathParameters") or {}).get("tripId"))

    try:
        owner_id = get_user_id(event)
        with PostgresClient(get_config()) as client:
            if method == "GET" and not has_trip_id:
                trips = client.list_trips(owner_id)
                return json_response(200, [trip.model_dump(mode="json", by_alias=True) for trip in trips])

            trip_id = get_path_id(event, "tripId")
            if method == "GET":
                trip = client.get_trip(trip_id, owner_id)
            elif method == "PUT":
                trip = client.update_trip(trip_id, owner_id, parse_body(event, TripInput))
            elif method == "DELETE":
                client.delete_trip(trip_id, owner_id)
                return {"statusCode": 204}
            else:
                raise ValidationError(f"{method} not supported on trips", code=ErrorCode.METHOD_NOT_ALLOWED)
    except SmartTripError as e:
        logger.warning("Trip request %s failed: %s", method, e.message)
        return error_response(e)

    return json_response(200, trip.model_dump(mode="json", by_alias=True))
