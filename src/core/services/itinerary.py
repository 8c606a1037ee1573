"""
Itinerary derivation: turn a trip's flight, car rental, activity and lodging
blocks into day-indexed itinerary items ready to be saved.

Items come out grouped by category in ITINERARY_ORDER and, within a category,
in input order. Nothing here sorts by day or time; that is up to the client.
"""

from collections.abc import Callable, Sequence
from typing import Any

from core.models.itinerary import (
    Activity,
    ActivityType,
    CarRentalData,
    Flight,
    ItineraryItem,
    ItinerarySources,
    Lodging,
)
from core.models.trip import TripRef
from core.services.dates import compute_day_index


def is_present(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)


def _first_present(*candidates: Any, default: str = "") -> str:
    for candidate in candidates:
        if is_present(candidate):
            return candidate
    return default


def _labelled(*pairs: tuple[str, Any]) -> list[str]:
    return [f"{label}: {value}" for label, value in pairs if is_present(value)]


def _optional(value: str | None) -> str | None:
    return value if is_present(value) else None


def _join_or_none(lines: Sequence[str]) -> str | None:
    # Empty notes are stored as NULL, never as "".
    return "\n".join(lines) or None


def _contact_notes(website: Any, email: Any, total_cost: Any) -> str | None:
    return _join_or_none(_labelled(("Website", website), ("Email", email), ("Total Cost", total_cost)))


def _trip_location(trip: TripRef) -> tuple[str | None, str | None]:
    return trip.location, trip.name


def build_flight_item(trip: TripRef, flight: Flight, index: int, total_cost: Any = None) -> ItineraryItem:
    """One item per flight; ``total_cost`` is shared by every flight of the trip."""
    description = "\n".join(
        _labelled(("Airline", flight.airline), ("Flight", flight.flight_number), ("Seats", flight.seats))
    )
    return ItineraryItem(
        day_index=compute_day_index(trip.start_date, _first_present(flight.departure, flight.date) or None),
        title=_first_present(flight.custom_name, flight.flight_number, default=f"Flight {index + 1}"),
        description=description or "Flight",
        start_time=None,
        end_time=None,
        location_name=_first_present(*_trip_location(trip), default="Flight"),
        activity_type=ActivityType.FLIGHT,
        notes=_join_or_none(_labelled(("Total Cost", total_cost))),
    )


def _date_time_line(label: str, day: str | None, time: str | None) -> list[str]:
    parts = [part.strip() for part in (day, time) if is_present(part)]
    return [f"{label}: {' '.join(parts)}"] if parts else []


def build_car_rental_item(trip: TripRef, rental: CarRentalData) -> ItineraryItem | None:
    """A single item for the whole rental, or None when no agency was entered."""
    if not is_present(rental.rental_agency):
        return None

    lines = [
        *_date_time_line("Pickup", rental.pickup_date, rental.pickup_time),
        *_date_time_line("Dropoff", rental.dropoff_date, rental.dropoff_time),
        *_labelled(("Confirmation", rental.confirmation_number)),
    ]
    pickup_location = rental.pickup_location.location if rental.pickup_location else None
    return ItineraryItem(
        day_index=compute_day_index(trip.start_date, rental.pickup_date),
        title=f"Car Rental - {rental.rental_agency}",
        description="\n".join(lines) or "Car rental",
        start_time=_optional(rental.pickup_time),
        end_time=_optional(rental.dropoff_time),
        location_name=_first_present(pickup_location, rental.rental_agency, *_trip_location(trip)),
        activity_type=ActivityType.CAR_RENTAL,
        notes=_contact_notes(rental.website, rental.email, rental.total_cost),
    )


def build_activity_item(trip: TripRef, activity: Activity) -> ItineraryItem:
    description = "\n".join(
        _labelled(("Venue", activity.venue), ("Address", activity.address), ("Phone", activity.phone))
    )
    return ItineraryItem(
        day_index=compute_day_index(trip.start_date, activity.start_date),
        title=_first_present(activity.activity_name, default="Activity"),
        description=description or _first_present(activity.description, default="Activity"),
        start_time=_optional(activity.start_time),
        end_time=_optional(activity.end_time),
        location_name=_first_present(activity.venue, activity.location, *_trip_location(trip)),
        activity_type=ActivityType.ACTIVITY,
        notes=_contact_notes(activity.website, activity.email, activity.total_cost),
    )


def build_lodging_item(trip: TripRef, lodging: Lodging) -> ItineraryItem:
    description = "\n".join(
        _labelled(
            ("Venue", lodging.venue),
            ("Address", lodging.address),
            ("Phone", lodging.phone),
            ("Confirmation", lodging.confirmation_number),
        )
    )
    return ItineraryItem(
        day_index=compute_day_index(trip.start_date, lodging.start_date),
        title=_first_present(lodging.lodging_name, default="Lodging"),
        description=description or "Lodging",
        start_time=_optional(lodging.start_time),
        end_time=_optional(lodging.end_time),
        location_name=_first_present(lodging.venue, lodging.location, *_trip_location(trip)),
        activity_type=ActivityType.LODGING,
        notes=_contact_notes(lodging.website, lodging.email, lodging.total_cost),
    )


def _flight_items(trip: TripRef, sources: ItinerarySources) -> list[ItineraryItem]:
    if sources.flight_data is None:
        return []
    total_cost = sources.flight_data.total_cost
    return [build_flight_item(trip, flight, index, total_cost) for index, flight in enumerate(sources.flight_data.flights)]


def _car_rental_items(trip: TripRef, sources: ItinerarySources) -> list[ItineraryItem]:
    if sources.car_rental_data is None:
        return []
    item = build_car_rental_item(trip, sources.car_rental_data)
    return [item] if item else []


def _activity_items(trip: TripRef, sources: ItinerarySources) -> list[ItineraryItem]:
    return [build_activity_item(trip, activity) for activity in sources.activity_data]


def _lodging_items(trip: TripRef, sources: ItinerarySources) -> list[ItineraryItem]:
    return [build_lodging_item(trip, lodging) for lodging in sources.lodging_data]


ItemBuilder = Callable[[TripRef, ItinerarySources], list[ItineraryItem]]

ITINERARY_ORDER: tuple[ActivityType, ...] = (
    ActivityType.FLIGHT,
    ActivityType.CAR_RENTAL,
    ActivityType.ACTIVITY,
    ActivityType.LODGING,
)

_BUILDERS: dict[ActivityType, ItemBuilder] = {
    ActivityType.FLIGHT: _flight_items,
    ActivityType.CAR_RENTAL: _car_rental_items,
    ActivityType.ACTIVITY: _activity_items,
    ActivityType.LODGING: _lodging_items,
}


def build_itinerary_items(trip: TripRef, sources: ItinerarySources) -> list[ItineraryItem]:
    items: list[ItineraryItem] = []
    for activity_type in ITINERARY_ORDER:
        items.extend(_BUILDERS[activity_type](trip, sources))
    return items
