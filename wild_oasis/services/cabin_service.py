"""Cabin service — catalogue reads and booking settings."""

import logging
import uuid
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wild_oasis.models.booking_settings import BookingSettings
from wild_oasis.models.cabin import Cabin
from wild_oasis.services.errors import LoadFailed, NotFound

logger = logging.getLogger(__name__)

# Capacity filter values offered on the cabins page -> inclusive guest range.
CAPACITY_FILTERS: dict[str, tuple[int, int | None]] = {
    "small": (1, 3),
    "medium": (4, 7),
    "large": (8, None),
}


async def get_cabins(db: AsyncSession, capacity: str | None = None) -> list[Cabin]:
    """Return cabins ordered by name, optionally narrowed by a capacity filter.

    Unknown filter values (including ``"all"`` and the empty string) return
    every cabin.
    """
    query = select(Cabin).order_by(Cabin.name)

    bounds = CAPACITY_FILTERS.get(capacity or "")
    if bounds is not None:
        low, high = bounds
        query = query.where(Cabin.max_capacity >= low)
        if high is not None:
            query = query.where(Cabin.max_capacity <= high)

    try:
        result = await db.execute(query)
    except SQLAlchemyError as exc:
        logger.exception("Loading cabins failed")
        raise LoadFailed("Cabins could not be loaded") from exc
    return list(result.scalars().all())


async def get_cabin(db: AsyncSession, cabin_id: uuid.UUID) -> Cabin:
    """Fetch a single cabin or raise ``NotFound``."""
    result = await db.execute(select(Cabin).where(Cabin.id == cabin_id))
    cabin = result.scalar_one_or_none()
    if cabin is None:
        raise NotFound("Cabin not found")
    return cabin


async def get_booking_settings(db: AsyncSession) -> BookingSettings:
    """Return the settings row, falling back to defaults when none is stored."""
    try:
        result = await db.execute(select(BookingSettings).order_by(BookingSettings.id).limit(1))
    except SQLAlchemyError as exc:
        logger.exception("Loading settings failed")
        raise LoadFailed("Settings could not be loaded") from exc

    booking_settings = result.scalar_one_or_none()
    if booking_settings is None:
        # Unsaved instance: column defaults are only applied on insert.
        booking_settings = BookingSettings(
            min_booking_length=1,
            max_booking_length=90,
            max_guests_per_booking=10,
            breakfast_price=Decimal("0"),
        )
    return booking_settings
