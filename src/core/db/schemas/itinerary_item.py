"""SQLAlchemy ORM model for the itinerary_items table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column, relationship

from core.db.schemas.base import Base

if TYPE_CHECKING:
    from core.db.schemas.trip import Trip


class ItineraryItem(Base):
    __tablename__ = "itinerary_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    trip_id: Mapped[int] = mapped_column(Integer, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False)
    day_index: Mapped[int] = mapped_column(Integer, nullable=False, server_default="1")
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    start_time: Mapped[str | None] = mapped_column(Text)
    end_time: Mapped[str | None] = mapped_column(Text)
    location_name: Mapped[str] = mapped_column(Text, nullable=False, server_default="")
    activity_type: Mapped[str] = mapped_column(String(20), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text)
    created_at = mapped_column(TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()"))
    updated_at = mapped_column(TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()"))

    trip: Mapped["Trip"] = relationship(back_populates="itinerary_items")

    __table_args__ = (
        CheckConstraint("day_index >= 1", name="chk_itinerary_items_day_index"),
        CheckConstraint(
            "activity_type IN ('Flight', 'Car Rental', 'Activity', 'Lodging')",
            name="chk_itinerary_items_activity_type",
        ),
        Index("idx_itinerary_items_trip_id", "trip_id"),
    )
