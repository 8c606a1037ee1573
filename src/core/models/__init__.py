"""
Pydantic models for SmartTrip.
"""

from core.models.itinerary import (
    Activity,
    ActivityType,
    CarRentalData,
    Flight,
    FlightData,
    ItineraryItem,
    ItinerarySources,
    Lodging,
    RentalLocation,
    StoredItineraryItem,
)
from core.models.trip import CreateTripRequest, PreviewItineraryRequest, TripInput, TripRecord, TripRef, TripWithItinerary
from core.models.user import UserSummary

__all__ = [
    "Activity",
    "ActivityType",
    "CarRentalData",
    "CreateTripRequest",
    "Flight",
    "FlightData",
    "ItineraryItem",
    "ItinerarySources",
    "Lodging",
    "PreviewItineraryRequest",
    "RentalLocation",
    "StoredItineraryItem",
    "TripInput",
    "TripRecord",
    "TripRef",
    "TripWithItinerary",
    "UserSummary",
]
