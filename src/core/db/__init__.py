"""
Database ORM models and clients for SmartTrip.

Importing this package registers all models on Base.metadata,
which Alembic needs for autogenerate.
"""

from core.db.interface import TripStore
from core.db.postgres import PostgresClient
from core.db.schemas.base import Base
from core.db.schemas.itinerary_item import ItineraryItem
from core.db.schemas.trip import Trip
from core.db.schemas.user import User

__all__ = ["Base", "ItineraryItem", "PostgresClient", "Trip", "TripStore", "User"]
