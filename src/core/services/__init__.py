"""
Business services for SmartTrip.

- dates.py: lenient form-date parsing and day-index computation
- itinerary.py: derivation of itinerary items from trip sub-data
- trips.py: trip creation with sequential itinerary persistence
- migration.py: programmatic Alembic upgrades
"""

__all__: list[str] = []
