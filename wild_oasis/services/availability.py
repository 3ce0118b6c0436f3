"""Availability — which days of a cabin are already taken.

A booking blocks its cabin while it is *active*: it starts today or later
(UTC), or the guest is currently checked in. Every day of an active booking,
both endpoints included, is unavailable for new reservations.
"""

import logging
import uuid
from datetime import date, datetime, timedelta, timezone

from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wild_oasis.models.booking import STATUS_CHECKED_IN, Booking
from wild_oasis.services.errors import BookingConflict, LoadFailed

logger = logging.getLogger(__name__)


def utc_today() -> date:
    """Current calendar day at UTC midnight."""
    return datetime.now(timezone.utc).date()


def _active_booking_filter(today: date):
    return or_(Booking.start_date >= today, Booking.status == STATUS_CHECKED_IN)


def expand_days(start: date, end: date) -> list[date]:
    """Every calendar day from ``start`` to ``end``, both inclusive."""
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


async def get_booked_dates(
    db: AsyncSession,
    cabin_id: uuid.UUID,
    today: date | None = None,
) -> list[date]:
    """Return the booked-dates set of a cabin as a flat list of days.

    Days are not deduplicated across bookings; callers only test membership.

    Raises:
        LoadFailed: The bookings query failed. No partial list is returned.
    """
    today = today or utc_today()
    try:
        result = await db.execute(
            select(Booking.start_date, Booking.end_date).where(
                Booking.cabin_id == cabin_id,
                _active_booking_filter(today),
            )
        )
    except SQLAlchemyError as exc:
        logger.exception("Loading booked dates for cabin %s failed", cabin_id)
        raise LoadFailed() from exc

    booked: list[date] = []
    for start_date, end_date in result.all():
        booked.extend(expand_days(start_date, end_date))
    return booked


async def check_date_conflict(
    db: AsyncSession,
    cabin_id: uuid.UUID,
    start_date: date,
    end_date: date,
    today: date | None = None,
) -> None:
    """Raise ``BookingConflict`` if the range shares a day with an active booking.

    Uses the same inclusive-day semantics as :func:`get_booked_dates`.
    """
    today = today or utc_today()
    result = await db.execute(
        select(Booking.id)
        .where(
            Booking.cabin_id == cabin_id,
            _active_booking_filter(today),
            Booking.start_date <= end_date,
            Booking.end_date >= start_date,
        )
        .limit(1)
    )
    if result.scalar_one_or_none() is not None:
        raise BookingConflict()
