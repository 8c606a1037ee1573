"""Trip creation flow: save the trip, derive its itinerary, save each item."""

import logging
from collections.abc import Sequence

from core.db.interface import TripStore
from core.errors import ItineraryPersistenceError, SmartTripError
from core.models.itinerary import ItineraryItem, ItinerarySources, StoredItineraryItem
from core.models.trip import TripInput, TripWithItinerary
from core.services.itinerary import build_itinerary_items

logger = logging.getLogger(__name__)


def persist_itinerary(store: TripStore, trip_id: int, items: Sequence[ItineraryItem]) -> list[StoredItineraryItem]:
    """Save items one at a time, in order.

    There is no transaction around the loop. If an insert fails, the items
    saved so far stay saved and are reported on the raised error.
    """
    created: list[StoredItineraryItem] = []
    for index, item in enumerate(items):
        try:
            created.append(store.create_itinerary_item(trip_id, item))
        except SmartTripError as e:
            logger.error(
                "Saving itinerary item %d/%d for trip %s failed: %s", index + 1, len(items), trip_id, e.message
            )
            raise ItineraryPersistenceError(
                f"Saved {len(created)} of {len(items)} itinerary items for trip {trip_id}",
                created=created,
                failed_index=index,
            ) from e
    return created


def create_trip_with_itinerary(
    store: TripStore,
    owner_id: int,
    trip_input: TripInput,
    sources: ItinerarySources,
) -> TripWithItinerary:
    trip = store.create_trip(owner_id, trip_input)
    # Derive from the stored trip so dates and names match what was saved.
    items = build_itinerary_items(trip, sources)
    stored = persist_itinerary(store, trip.id, items)
    logger.info("Trip %s created with %d itinerary items", trip.id, len(stored))
    return TripWithItinerary(trip=trip, itinerary_items=stored)
