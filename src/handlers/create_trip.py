"""POST /trips: create a trip and save the itinerary derived from its sub-data."""

import logging
from typing import Any

from core.config import get_config
from core.db import PostgresClient
from core.errors import ItineraryPersistenceError, SmartTripError
from core.events import get_user_id, parse_body
from core.models import CreateTripRequest
from core.responses import error_response, json_response
from core.services.trips import create_trip_with_itinerary

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    try:
        owner_id = get_user_id(event)
        request = parse_body(event, CreateTripRequest)
        with PostgresClient(get_config()) as client:
            result = create_trip_with_itinerary(client, owner_id, request.trip_input(), request.sources())
    except ItineraryPersistenceError as e:
        # The trip row exists; tell the client how far the itinerary got.
        logger.error("Trip created with partial itinerary: %s", e.message)
        return error_response(e, savedItems=len(e.created), failedIndex=e.failed_index)
    except SmartTripError as e:
        logger.warning("Create trip failed: %s", e.message)
        return error_response(e)

    return json_response(201, result.model_dump(mode="json", by_alias=True))
