"""Reservation service — create, update, delete and list a guest's bookings.

Ownership rule: a guest can only modify bookings whose ``guest_id`` is their
own. Update and delete carry that rule in the WHERE clause of the single
statement that writes, so the check and the write cannot drift apart. A
statement that matches no row means the booking is not the caller's (or no
longer exists) and is reported as ``Forbidden``. An update also requires the
new guest count to fit the cabin; a caller-owned booking that fails only
that condition is reported as ``InvalidInput``.
"""

import logging
import uuid
from decimal import Decimal

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wild_oasis.cache import revalidate_path
from wild_oasis.models.booking import MAX_OBSERVATIONS_LENGTH, STATUS_UNCONFIRMED, Booking
from wild_oasis.models.cabin import Cabin
from wild_oasis.schemas.auth import SessionGuest
from wild_oasis.schemas.booking import BookingDraft, BookingListItem, CabinPreview
from wild_oasis.schemas.forms import ReservationUpdateForm
from wild_oasis.services.availability import check_date_conflict
from wild_oasis.services.cabin_service import get_cabin
from wild_oasis.services.errors import (
    CreateFailed,
    DeleteFailed,
    Forbidden,
    InvalidInput,
    LoadFailed,
    NotFound,
    Unauthorized,
    UpdateFailed,
)

logger = logging.getLogger(__name__)


def truncate_observations(observations: str | None) -> str:
    return (observations or "")[:MAX_OBSERVATIONS_LENGTH]


def _require_guest(guest: SessionGuest | None) -> SessionGuest:
    if guest is None:
        raise Unauthorized()
    return guest


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------


async def get_bookings(db: AsyncSession, guest_id: uuid.UUID) -> list[BookingListItem]:
    """Return the guest's bookings by start date, with cabin name and image.

    The cabin columns come from the same joined query rather than one lookup
    per booking.
    """
    query = (
        select(Booking, Cabin.name, Cabin.image)
        .join(Cabin, Booking.cabin_id == Cabin.id)
        .where(Booking.guest_id == guest_id)
        .order_by(Booking.start_date)
    )
    try:
        result = await db.execute(query)
    except SQLAlchemyError as exc:
        logger.exception("Loading bookings for guest %s failed", guest_id)
        raise LoadFailed() from exc

    return [
        BookingListItem(
            id=booking.id,
            created_at=booking.created_at,
            start_date=booking.start_date,
            end_date=booking.end_date,
            num_nights=booking.num_nights,
            num_guests=booking.num_guests,
            total_price=booking.total_price,
            guest_id=booking.guest_id,
            cabin_id=booking.cabin_id,
            cabin=CabinPreview(name=cabin_name, image=cabin_image),
        )
        for booking, cabin_name, cabin_image in result.all()
    ]


async def get_booking(db: AsyncSession, booking_id: uuid.UUID, guest_id: uuid.UUID) -> Booking:
    """Fetch one of the guest's bookings or raise ``NotFound``."""
    result = await db.execute(select(Booking).where(Booking.id == booking_id, Booking.guest_id == guest_id))
    booking = result.scalar_one_or_none()
    if booking is None:
        raise NotFound("Booking could not get loaded")
    return booking


# ---------------------------------------------------------------------------
# Mutations
# ---------------------------------------------------------------------------


async def create_reservation(
    db: AsyncSession,
    guest: SessionGuest | None,
    draft: BookingDraft,
    num_guests: int,
    observations: str | None = None,
) -> Booking:
    """Insert an unconfirmed, unpaid booking for the signed-in guest.

    Raises:
        Unauthorized: No session.
        NotFound: The draft's cabin does not exist.
        InvalidInput: ``num_guests`` exceeds the cabin's capacity.
        BookingConflict: The range overlaps an active booking of the cabin.
        CreateFailed: The insert failed.
    """
    guest = _require_guest(guest)

    cabin = await get_cabin(db, draft.cabin_id)
    if num_guests < 1 or num_guests > cabin.max_capacity:
        raise InvalidInput(f"Number of guests must be between 1 and {cabin.max_capacity}")

    await check_date_conflict(db, cabin.id, draft.start_date, draft.end_date)

    booking = Booking(
        guest_id=guest.guest_id,
        cabin_id=draft.cabin_id,
        start_date=draft.start_date,
        end_date=draft.end_date,
        num_nights=draft.num_nights,
        num_guests=num_guests,
        observations=truncate_observations(observations),
        cabin_price=draft.cabin_price,
        extras_price=Decimal("0"),
        total_price=draft.cabin_price,
        is_paid=False,
        has_breakfast=False,
        status=STATUS_UNCONFIRMED,
    )
    db.add(booking)
    try:
        await db.flush()
        await db.refresh(booking)
    except SQLAlchemyError as exc:
        logger.exception("Creating booking for guest %s failed", guest.guest_id)
        raise CreateFailed() from exc

    logger.info("Guest %s booked cabin %s (%s -> %s)", guest.guest_id, cabin.id, draft.start_date, draft.end_date)
    revalidate_path(db, f"/cabins/{cabin.id}")
    return booking


async def update_reservation(
    db: AsyncSession,
    guest: SessionGuest | None,
    form: ReservationUpdateForm,
) -> None:
    """Change the guest count and observations of one of the guest's bookings.

    The cabin's capacity is part of the same conditional write as the
    ownership rule.

    Raises:
        Unauthorized: No session.
        Forbidden: The booking is not the caller's.
        InvalidInput: ``num_guests`` exceeds the cabin's capacity.
        UpdateFailed: The update failed.
    """
    guest = _require_guest(guest)

    cabin_capacity = select(Cabin.max_capacity).where(Cabin.id == Booking.cabin_id).scalar_subquery()
    statement = (
        update(Booking)
        .where(
            Booking.id == form.booking_id,
            Booking.guest_id == guest.guest_id,
            cabin_capacity >= form.num_guests,
        )
        .values(
            num_guests=form.num_guests,
            observations=truncate_observations(form.observations),
        )
        .returning(Booking.id)
        .execution_options(synchronize_session="fetch")
    )
    try:
        result = await db.execute(statement)
        updated_id = result.scalar_one_or_none()
    except SQLAlchemyError as exc:
        logger.exception("Updating booking %s failed", form.booking_id)
        raise UpdateFailed() from exc

    if updated_id is None:
        await _raise_update_rejected(db, guest, form)

    revalidate_path(db, f"/account/reservations/edit/{form.booking_id}")
    revalidate_path(db, "/account/reservations")


async def _raise_update_rejected(db: AsyncSession, guest: SessionGuest, form: ReservationUpdateForm) -> None:
    """Tell an over-capacity update apart from one on someone else's booking."""
    result = await db.execute(
        select(Cabin.max_capacity)
        .join(Booking, Booking.cabin_id == Cabin.id)
        .where(Booking.id == form.booking_id, Booking.guest_id == guest.guest_id)
    )
    capacity = result.scalar_one_or_none()
    if capacity is None:
        raise Forbidden("You are not allowed to update this booking")
    raise InvalidInput(f"Number of guests must be between 1 and {capacity}")


async def delete_reservation(
    db: AsyncSession,
    guest: SessionGuest | None,
    booking_id: uuid.UUID,
) -> None:
    """Delete one of the guest's bookings.

    Deleting a booking that is already gone matches no row and raises the
    same ``Forbidden`` as deleting someone else's booking. The freed days
    leave the cabin's calendar once the deletion commits.

    Raises:
        Unauthorized: No session.
        Forbidden: The booking is not the caller's.
        DeleteFailed: The delete failed.
    """
    guest = _require_guest(guest)

    statement = (
        delete(Booking)
        .where(Booking.id == booking_id, Booking.guest_id == guest.guest_id)
        .returning(Booking.cabin_id)
    )
    try:
        result = await db.execute(statement)
        cabin_id = result.scalar_one_or_none()
    except SQLAlchemyError as exc:
        logger.exception("Deleting booking %s failed", booking_id)
        raise DeleteFailed() from exc

    if cabin_id is None:
        raise Forbidden("You are not allowed to delete this booking")

    logger.info("Guest %s deleted booking %s", guest.guest_id, booking_id)
    revalidate_path(db, "/account/reservations")
    revalidate_path(db, f"/cabins/{cabin_id}")
