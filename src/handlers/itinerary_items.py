"""Itinerary items of one trip: GET|POST /trips/{tripId}/itinerary, PUT|DELETE .../{itemId}."""

import logging
from typing import Any

from core.config import get_config
from core.db import PostgresClient
from core.errors import ErrorCode, SmartTripError, ValidationError
from core.events import get_path_id, get_user_id, parse_body
from core.models import ItineraryItem
from core.responses import error_response, json_response

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    method = event.get("httpMethod", "GET")

    try:
        owner_id = get_user_id(event)
        trip_id = get_path_id(event, "tripId")
        with PostgresClient(get_config()) as client:
            # Ownership check; raises NotFoundError for someone else's trip.
            client.get_trip(trip_id, owner_id)

            if method == "GET":
                items = client.list_itinerary_items(trip_id)
                return json_response(200, [item.model_dump(mode="json", by_alias=True) for item in items])
            if method == "POST":
                item = client.create_itinerary_item(trip_id, parse_body(event, ItineraryItem))
                return json_response(201, item.model_dump(mode="json", by_alias=True))

            item_id = get_path_id(event, "itemId")
            if method == "PUT":
                item = client.update_itinerary_item(trip_id, item_id, parse_body(event, ItineraryItem))
                return json_response(200, item.model_dump(mode="json", by_alias=True))
            if method == "DELETE":
                client.delete_itinerary_item(trip_id, item_id)
                return {"statusCode": 204}

            raise ValidationError(f"{method} not supported on itinerary items", code=ErrorCode.METHOD_NOT_ALLOWED)
    except SmartTripError as e:
        logger.warning("Itinerary request %s on trip failed: %s", method, e.message)
        return error_response(e)
