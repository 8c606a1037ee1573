"""POST /itinerary/preview: derive itinerary items without saving anything."""

import logging
from typing import Any

from core.errors import SmartTripError
from core.events import parse_body
from core.models import PreviewItineraryRequest
from core.responses import error_response, json_response
from core.services.itinerary import build_itinerary_items

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    try:
        request = parse_body(event, PreviewItineraryRequest)
    except SmartTripError as e:
        logger.warning("Itinerary preview failed: %s", e.message)
        return error_response(e)

    items = build_itinerary_items(request.trip, request)
    return json_response(200, {"itineraryItems": [item.model_dump(mode="json", by_alias=True) for item in items]})
