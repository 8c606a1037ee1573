"""PostgreSQL client: connection management and trip/itinerary persistence."""

import json
import logging
from typing import Any

import psycopg
from psycopg.rows import dict_row

from core.clients import get_secrets_client
from core.config import Config
from core.db.interface import TripStore
from core.errors import ErrorCode, NotFoundError, PersistenceError, SmartTripError
from core.models.itinerary import ItineraryItem, StoredItineraryItem
from core.models.trip import TripInput, TripRecord
from core.models.user import UserSummary

logger = logging.getLogger(__name__)

_TRIP_COLUMNS = "id, owner_id, name, location, start_date, end_date, description"
_ITEM_COLUMNS = (
    "id, trip_id, day_index, title, description, start_time, end_time, location_name, activity_type, notes"
)

_INSERT_TRIP_SQL = f"""
    INSERT INTO trips (owner_id, name, location, start_date, end_date, description)
    VALUES (%s, %s, %s, %s, %s, %s)
    RETURNING {_TRIP_COLUMNS}
"""

_UPDATE_TRIP_SQL = f"""
    UPDATE trips
    SET name = %s, location = %s, start_date = %s, end_date = %s, description = %s, updated_at = NOW()
    WHERE id = %s AND owner_id = %s
    RETURNING {_TRIP_COLUMNS}
"""

_INSERT_ITEM_SQL = f"""
    INSERT INTO itinerary_items
        (trip_id, day_index, title, description, start_time, end_time, location_name, activity_type, notes)
    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
    RETURNING {_ITEM_COLUMNS}
"""

_UPDATE_ITEM_SQL = f"""
    UPDATE itinerary_items
    SET day_index = %s, title = %s, description = %s, start_time = %s, end_time = %s,
        location_name = %s, activity_type = %s, notes = %s, updated_at = NOW()
    WHERE id = %s AND trip_id = %s
    RETURNING {_ITEM_COLUMNS}
"""


def _item_params(item: ItineraryItem) -> tuple[Any, ...]:
    return (
        item.day_index,
        item.title,
        item.description,
        item.start_time,
        item.end_time,
        item.location_name,
        item.activity_type.value,
        item.notes,
    )


def _trip_params(trip: TripInput) -> tuple[Any, ...]:
    return (trip.name, trip.location, trip.start_date, trip.end_date, trip.description)


class PostgresClient(TripStore):
    def __init__(self, config: Config) -> None:
        self._config = config
        self._conn: psycopg.Connection | None = None
        self._secret_cache: dict[str, str] | None = None

    def _get_credentials(self) -> dict[str, str]:
        if self._config.postgres_secret_arn:
            if self._secret_cache is None:
                secret = get_secrets_client().get_secret_value(SecretId=self._config.postgres_secret_arn)
                self._secret_cache = json.loads(secret["SecretString"])
            return self._secret_cache
        return {
            "host": self._config.postgres_host,
            "port": str(self._config.postgres_port),
            "dbname": self._config.postgres_database,
            "user": self._config.postgres_user,
            "password": self._config.postgres_password,
        }

    def connect(self) -> None:
        creds = self._get_credentials()
        try:
            self._conn = psycopg.connect(
                host=creds.get("host", self._config.postgres_host),
                port=int(creds.get("port", self._config.postgres_port)),
                dbname=creds.get("dbname", self._config.postgres_database),
                user=creds.get("username", creds.get("user", self._config.postgres_user)),
                password=creds.get("password", self._config.postgres_password),
                row_factory=dict_row,
            )
        except psycopg.Error as e:
            raise PersistenceError(f"Could not connect to Postgres: {e}", code=ErrorCode.DATABASE_ERROR) from e

    def disconnect(self) -> None:
        if self._conn and not self._conn.closed:
            self._conn.close()
        self._conn = None

    def _require_connection(self) -> psycopg.Connection:
        """Return the active connection or raise if not connected."""
        if self._conn is None or self._conn.closed:
            raise SmartTripError("PostgresClient is not connected. Call connect() first.")
        return self._conn

    def _execute(self, sql: str, params: tuple[Any, ...] = (), *, many: bool = False, write: bool = False) -> Any:
        conn = self._require_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                result = cur.fetchall() if many else cur.fetchone()
            if write:
                conn.commit()
            return result
        except psycopg.Error as e:
            conn.rollback()
            raise PersistenceError(f"Query failed: {e}", code=ErrorCode.DATABASE_ERROR) from e

    def health_check(self) -> bool:
        try:
            self._execute("SELECT 1")
            return True
        except SmartTripError:
            return False

    # ── Trips ─────────────────────────────────────────────────────────────

    def create_trip(self, owner_id: int, trip: TripInput) -> TripRecord:
        row = self._execute(_INSERT_TRIP_SQL, (owner_id, *_trip_params(trip)), write=True)
        logger.info("Created trip %s for user %s", row["id"], owner_id)
        return TripRecord.model_validate(row)

    def get_trip(self, trip_id: int, owner_id: int) -> TripRecord:
        row = self._execute(f"SELECT {_TRIP_COLUMNS} FROM trips WHERE id = %s AND owner_id = %s", (trip_id, owner_id))
        if row is None:
            raise NotFoundError(f"Trip {trip_id} not found for user {owner_id}", code=ErrorCode.TRIP_NOT_FOUND)
        return TripRecord.model_validate(row)

    def list_trips(self, owner_id: int) -> list[TripRecord]:
        rows = self._execute(
            f"SELECT {_TRIP_COLUMNS} FROM trips WHERE owner_id = %s ORDER BY start_date NULLS LAST, id",
            (owner_id,),
            many=True,
        )
        return [TripRecord.model_validate(row) for row in rows]

    def update_trip(self, trip_id: int, owner_id: int, trip: TripInput) -> TripRecord:
        row = self._execute(_UPDATE_TRIP_SQL, (*_trip_params(trip), trip_id, owner_id), write=True)
        if row is None:
            raise NotFoundError(f"Trip {trip_id} not found for user {owner_id}", code=ErrorCode.TRIP_NOT_FOUND)
        return TripRecord.model_validate(row)

    def delete_trip(self, trip_id: int, owner_id: int) -> None:
        """Delete a trip; its itinerary items go with it (ON DELETE CASCADE)."""
        row = self._execute(
            "DELETE FROM trips WHERE id = %s AND owner_id = %s RETURNING id", (trip_id, owner_id), write=True
        )
        if row is None:
            raise NotFoundError(f"Trip {trip_id} not found for user {owner_id}", code=ErrorCode.TRIP_NOT_FOUND)
        logger.info("Deleted trip %s", trip_id)

    # ── Itinerary items ───────────────────────────────────────────────────

    def create_itinerary_item(self, trip_id: int, item: ItineraryItem) -> StoredItineraryItem:
        row = self._execute(_INSERT_ITEM_SQL, (trip_id, *_item_params(item)), write=True)
        return StoredItineraryItem.model_validate(row)

    def list_itinerary_items(self, trip_id: int) -> list[StoredItineraryItem]:
        rows = self._execute(
            f"SELECT {_ITEM_COLUMNS} FROM itinerary_items WHERE trip_id = %s ORDER BY id", (trip_id,), many=True
        )
        return [StoredItineraryItem.model_validate(row) for row in rows]

    def update_itinerary_item(self, trip_id: int, item_id: int, item: ItineraryItem) -> StoredItineraryItem:
        row = self._execute(_UPDATE_ITEM_SQL, (*_item_params(item), item_id, trip_id), write=True)
        if row is None:
            raise NotFoundError(
                f"Itinerary item {item_id} not found on trip {trip_id}", code=ErrorCode.ITINERARY_ITEM_NOT_FOUND
            )
        return StoredItineraryItem.model_validate(row)

    def delete_itinerary_item(self, trip_id: int, item_id: int) -> None:
        row = self._execute(
            "DELETE FROM itinerary_items WHERE id = %s AND trip_id = %s RETURNING id", (item_id, trip_id), write=True
        )
        if row is None:
            raise NotFoundError(
                f"Itinerary item {item_id} not found on trip {trip_id}", code=ErrorCode.ITINERARY_ITEM_NOT_FOUND
            )

    # ── Users ─────────────────────────────────────────────────────────────

    def list_users(self) -> list[UserSummary]:
        rows = self._execute("SELECT id, email, first_name, last_name FROM users ORDER BY id", many=True)
        return [UserSummary.model_validate(row) for row in rows]

    def __enter__(self) -> "PostgresClient":
        self.connect()
        return self

    def __exit__(self, *args: object) -> None:
        self.disconnect()
