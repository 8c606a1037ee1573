from datetime import date

from pydantic import Field, field_validator, model_validator

from core.models.itinerary import FormModel, ItinerarySources, StoredItineraryItem
from core.services.dates import parse_date


class TripRef(FormModel):
    """The trip fields the itinerary derivation reads."""

    id: int | str | None = None
    name: str | None = None
    location: str | None = None
    start_date: date | str | None = None


class TripInput(FormModel):
    name: str = Field(..., min_length=1, max_length=255)
    location: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    description: str | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def form_date(cls, value: object) -> object:
        """Accept the same date shapes the itinerary derivation reads."""
        if not isinstance(value, str):
            return value
        if not value.strip():
            return None
        parsed = parse_date(value)
        if parsed is None:
            raise ValueError(f"unrecognised date {value!r}")
        return parsed

    @model_validator(mode="after")
    def end_not_before_start(self) -> "TripInput":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class TripRecord(TripRef):
    id: int
    owner_id: int
    name: str
    start_date: date | None = None
    end_date: date | None = None
    description: str | None = None


class TripWithItinerary(FormModel):
    trip: TripRecord
    itinerary_items: list[StoredItineraryItem]


class CreateTripRequest(TripInput, ItinerarySources):
    """Trip fields plus the sub-data blocks collected while the trip was drafted."""

    def trip_input(self) -> TripInput:
        return TripInput(**{name: getattr(self, name) for name in TripInput.model_fields})

    def sources(self) -> ItinerarySources:
        return ItinerarySources(**{name: getattr(self, name) for name in ItinerarySources.model_fields})


class PreviewItineraryRequest(ItinerarySources):
    trip: TripRef
