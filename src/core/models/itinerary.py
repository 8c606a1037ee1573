"""Itinerary sub-data blocks collected from trip forms, and the items derived from them."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Costs keep their numeric type so that a zero cost stays falsy.
Cost = str | int | float | None


class ActivityType(str, Enum):
    FLIGHT = "Flight"
    CAR_RENTAL = "Car Rental"
    ACTIVITY = "Activity"
    LODGING = "Lodging"


class FormModel(BaseModel):
    """Base for camelCase form payloads. Unknown keys are ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        frozen=True,
    )


class Flight(FormModel):
    id: str | None = None
    custom_name: str | None = None
    flight_number: str | None = None
    airline: str | None = None
    seats: str | None = None
    departure: str | None = None
    date: str | None = None


class FlightData(FormModel):
    flights: list[Flight] = []
    total_cost: Cost = None


class RentalLocation(FormModel):
    location: str | None = None
    address: str | None = None
    phone: str | None = None


class CarRentalData(FormModel):
    rental_agency: str | None = None
    pickup_date: str | None = None
    pickup_time: str | None = None
    dropoff_date: str | None = None
    dropoff_time: str | None = None
    confirmation_number: str | None = None
    website: str | None = None
    email: str | None = None
    total_cost: Cost = None
    pickup_location: RentalLocation | None = None
    dropoff_location: RentalLocation | None = None


class Activity(FormModel):
    activity_name: str | None = None
    venue: str | None = None
    address: str | None = None
    phone: str | None = None
    location: str | None = None
    start_date: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    website: str | None = None
    email: str | None = None
    total_cost: Cost = None
    description: str | None = None


class Lodging(FormModel):
    lodging_name: str | None = None
    venue: str | None = None
    address: str | None = None
    phone: str | None = None
    location: str | None = None
    confirmation_number: str | None = None
    start_date: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    website: str | None = None
    email: str | None = None
    total_cost: Cost = None


class ItinerarySources(FormModel):
    """The four sub-data blocks for one trip, passed explicitly to the derivation step."""

    flight_data: FlightData | None = None
    car_rental_data: CarRentalData | None = None
    activity_data: list[Activity] = []
    lodging_data: list[Lodging] = []

    @classmethod
    def cleared(cls) -> "ItinerarySources":
        return cls(flight_data=FlightData(), car_rental_data=CarRentalData())


class ItineraryItem(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    day_index: int = Field(..., ge=1)
    title: str = Field(..., min_length=1)
    description: str
    start_time: str | None = None
    end_time: str | None = None
    location_name: str = ""
    activity_type: ActivityType
    notes: str | None = None


class StoredItineraryItem(ItineraryItem):
    id: int
    trip_id: int
