"""create_trips_and_itinerary_items

Revision ID: 4b1e7c2a9d30
Revises: 
Create Date: 2026-10-12 14:05:31.218407

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1e7c2a9d30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute("""
        CREATE TABLE users (
            id SERIAL PRIMARY KEY,
            email VARCHAR(255) NOT NULL UNIQUE,
            first_name VARCHAR(100),
            last_name VARCHAR(100),
            password_hash VARCHAR(255),
            google_id VARCHAR(255) UNIQUE,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)

    op.execute("""
        CREATE TABLE trips (
            id SERIAL PRIMARY KEY,
            owner_id INTEGER NOT NULL REFERENCES users (id) ON DELETE CASCADE,
            name VARCHAR(255) NOT NULL,
            location TEXT,
            start_date DATE,
            end_date DATE,
            description TEXT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            CONSTRAINT chk_trips_dates
                CHECK (end_date IS NULL OR start_date IS NULL OR end_date >= start_date)
        )
    """)
    op.execute("CREATE INDEX idx_trips_owner_id ON trips (owner_id)")

    # Deleting a trip removes its itinerary
    op.execute("""
        CREATE TABLE itinerary_items (
            id SERIAL PRIMARY KEY,
            trip_id INTEGER NOT NULL REFERENCES trips (id) ON DELETE CASCADE,
            day_index INTEGER NOT NULL DEFAULT 1,
            title TEXT NOT NULL,
            description TEXT NOT NULL,
            start_time TEXT,
            end_time TEXT,
            location_name TEXT NOT NULL DEFAULT '',
            activity_type VARCHAR(20) NOT NULL,
            notes TEXT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            CONSTRAINT chk_itinerary_items_day_index CHECK (day_index >= 1),
            CONSTRAINT chk_itinerary_items_activity_type
                CHECK (activity_type IN ('Flight', 'Car Rental', 'Activity', 'Lodging'))
        )
    """)
    op.execute("CREATE INDEX idx_itinerary_items_trip_id ON itinerary_items (trip_id)")


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP INDEX IF EXISTS idx_itinerary_items_trip_id")
    op.execute("DROP TABLE IF EXISTS itinerary_items")
    op.execute("DROP INDEX IF EXISTS idx_trips_owner_id")
    op.execute("DROP TABLE IF EXISTS trips")
    op.execute("DROP TABLE IF EXISTS users")
