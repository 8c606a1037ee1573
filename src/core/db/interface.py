from abc import ABC, abstractmethod

from core.models.itinerary import ItineraryItem, StoredItineraryItem
from core.models.trip import TripInput, TripRecord


class TripStore(ABC):
    """Persistence operations the trip-creation flow depends on."""

    @abstractmethod
    def create_trip(self, owner_id: int, trip: TripInput) -> TripRecord: ...

    @abstractmethod
    def create_itinerary_item(self, trip_id: int, item: ItineraryItem) -> StoredItineraryItem: ...
