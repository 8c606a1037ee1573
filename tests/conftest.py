"""Shared test fixtures for SmartTrip."""

import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def api_event():
    """Build a minimal API Gateway proxy event."""

    def _build(method: str = "GET", body: str | None = None, user_id: str | None = "7", **path_params: str) -> dict:
        event: dict = {
            "httpMethod": method,
            "pathParameters": path_params or None,
            "requestContext": {"authorizer": {"userId": user_id} if user_id is not None else {}},
        }
        if body is not None:
            event["body"] = body
        return event

    return _build


@pytest.fixture
def trip_ref():
    from core.models import TripRef

    return TripRef(id=1, name="Paris Getaway", location="Paris", start_date="2024-06-01")


# PostgreSQL fixtures
@pytest.fixture
def pg_connection():
    """Provide a PostgreSQL connection for integration tests."""
    import psycopg
    from core.config import get_config

    config = get_config()
    conn_str = (
        f"host={config.postgres_host} port={config.postgres_port} "
        f"dbname={config.postgres_database} user={config.postgres_user} "
        f"password={config.postgres_password}"
    )

    conn = psycopg.connect(conn_str)
    yield conn

    # Rollback any uncommitted changes
    conn.rollback()
    conn.close()


@pytest.fixture
def pg_user_id(pg_connection):
    """Insert a throwaway user; deleting it cascades to its trips and items."""
    import uuid

    with pg_connection.cursor() as cur:
        cur.execute(
            "INSERT INTO users (email, first_name, last_name) VALUES (%s, 'Test', 'Traveler') RETURNING id",
            (f"test-{uuid.uuid4()}@smarttrip.local",),
        )
        user_id = cur.fetchone()[0]
    pg_connection.commit()
    yield user_id

    with pg_connection.cursor() as cur:
        cur.execute("DELETE FROM users WHERE id = %s", (user_id,))
    pg_connection.commit()
