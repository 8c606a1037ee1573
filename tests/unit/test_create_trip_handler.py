"""Unit tests for the create-trip Lambda handler."""

import json
from datetime import date
from unittest.mock import MagicMock, patch

import pytest

from core.errors import ErrorCode, ItineraryPersistenceError
from core.models import StoredItineraryItem, TripRecord, TripWithItinerary
from handlers.create_trip import handler

BODY = {
    "name": "Paris Getaway",
    "location": "Paris",
    "startDate": "2024-06-01",
    "endDate": "2024-06-08",
    "carRentalData": {"rentalAgency": "Hertz"},
    "activityData": [{"activityName": "Museum", "venue": "Louvre", "startDate": "2024-06-03"}],
}

TRIP = TripRecord(id=12, owner_id=7, name="Paris Getaway", location="Paris", start_date=date(2024, 6, 1))


@pytest.fixture
def pg_client():
    with patch("handlers.create_trip.PostgresClient") as mock_cls, patch("handlers.create_trip.get_config"):
        client = MagicMock()
        mock_cls.return_value.__enter__.return_value = client
        yield client


def test_create_trip_returns_201_with_items(api_event, pg_client):
    stored = StoredItineraryItem(
        id=1, trip_id=12, day_index=3, title="Museum", description="Venue: Louvre", activity_type="Activity"
    )
    with patch("handlers.create_trip.create_trip_with_itinerary") as mock_create:
        mock_create.return_value = TripWithItinerary(trip=TRIP, itinerary_items=[stored])
        result = handler(api_event("POST", json.dumps(BODY)), None)

    assert result["statusCode"] == 201
    body = json.loads(result["body"])
    assert body["trip"]["id"] == 12
    assert body["itineraryItems"][0]["dayIndex"] == 3
    assert body["itineraryItems"][0]["activityType"] == "Activity"

    client, owner_id, trip_input, sources = mock_create.call_args.args
    assert client is pg_client
    assert owner_id == 7
    assert trip_input.start_date == date(2024, 6, 1)
    assert sources.car_rental_data.rental_agency == "Hertz"
    assert len(sources.activity_data) == 1


def test_create_trip_runs_derivation_against_store(api_event, pg_client):
    """Full path through the service with only the store mocked."""
    pg_client.create_trip.return_value = TRIP
    pg_client.create_itinerary_item.side_effect = lambda trip_id, item: StoredItineraryItem(
        id=pg_client.create_itinerary_item.call_count, trip_id=trip_id, **item.model_dump()
    )

    result = handler(api_event("POST", json.dumps(BODY)), None)

    assert result["statusCode"] == 201
    titles = [item["title"] for item in json.loads(result["body"])["itineraryItems"]]
    assert titles == ["Car Rental - Hertz", "Museum"]


def test_partial_itinerary_returns_502_with_progress(api_event, pg_client):
    error = ItineraryPersistenceError("Saved 1 of 2 itinerary items for trip 12", created=["first"], failed_index=1)
    with patch("handlers.create_trip.create_trip_with_itinerary", side_effect=error):
        result = handler(api_event("POST", json.dumps(BODY)), None)

    assert result["statusCode"] == 502
    payload = json.loads(result["body"])["error"]
    assert payload["code"] == ErrorCode.PARTIAL_ITINERARY.value
    assert payload["savedItems"] == 1
    assert payload["failedIndex"] == 1


def test_invalid_body_returns_400(api_event, pg_client):
    result = handler(api_event("POST", json.dumps({"location": "Paris"})), None)
    assert result["statusCode"] == 400
    assert json.loads(result["body"])["error"]["code"] == "INVALID_REQUEST"
    pg_client.create_trip.assert_not_called()


def test_malformed_json_returns_400(api_event, pg_client):
    result = handler(api_event("POST", "{not json"), None)
    assert result["statusCode"] == 400


def test_missing_user_returns_401(api_event, pg_client):
    result = handler(api_event("POST", json.dumps(BODY), user_id=None), None)
    assert result["statusCode"] == 401


def test_create_trip_accepts_slash_dates(api_event, pg_client):
    body = {**BODY, "startDate": "06/01/2024", "endDate": "06/08/2024"}
    with patch("handlers.create_trip.create_trip_with_itinerary") as mock_create:
        mock_create.return_value = TripWithItinerary(trip=TRIP, itinerary_items=[])
        result = handler(api_event("POST", json.dumps(body)), None)

    assert result["statusCode"] == 201
    trip_input = mock_create.call_args.args[2]
    assert trip_input.start_date == date(2024, 6, 1)
    assert trip_input.end_date == date(2024, 6, 8)
