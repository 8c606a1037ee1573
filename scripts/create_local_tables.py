#!/usr/bin/env python3
"""Create Postgres tables for local development.

Builds the users, trips and itinerary_items tables straight from the
SQLAlchemy models (no Alembic history) and seeds one demo user so the
handlers have an owner to attach trips to.

Usage:
    python scripts/create_local_tables.py
"""

import sys
from pathlib import Path

from sqlalchemy import create_engine, select
from sqlalchemy.orm import Session

# Add src to path for config import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import get_config
from core.db import Base, User

DEMO_EMAIL = "demo@smarttrip.local"


def seed_demo_user(session: Session) -> None:
    """Insert the demo user unless it already exists."""
    if session.scalar(select(User).where(User.email == DEMO_EMAIL)) is not None:
        print(f"✓ Demo user {DEMO_EMAIL} already exists")
        return
    session.add(User(email=DEMO_EMAIL, first_name="Demo", last_name="Traveler"))
    session.commit()
    print(f"✓ Created demo user {DEMO_EMAIL}")


def main():
    """Create all tables."""
    config = get_config()

    print(f"Creating tables on {config.postgres_host}:{config.postgres_port}/{config.postgres_database}...")
    print()

    engine = create_engine(config.database_url)
    Base.metadata.create_all(engine)
    for table in Base.metadata.sorted_tables:
        print(f"✓ {table.name} table ready")

    with Session(engine) as session:
        seed_demo_user(session)

    print()
    print("✅ All Postgres tables ready")


if __name__ == "__main__":
    main()
