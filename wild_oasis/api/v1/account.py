"""Account API router — the signed-in guest's reservations and profile.

Ownership rule: every read filters by the session's guest id and every
write carries it in its WHERE clause (see ``reservation_service``).
"""

import uuid

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from wild_oasis.api.deps import get_current_guest, get_db, get_optional_guest
from wild_oasis.cache import page_cache
from wild_oasis.config import settings
from wild_oasis.models.booking import Booking
from wild_oasis.schemas.auth import MessageResponse, SessionGuest
from wild_oasis.schemas.booking import BookingListResponse, BookingResponse
from wild_oasis.schemas.forms import GuestProfileForm, ReservationUpdateForm, parse_form
from wild_oasis.schemas.guest import GuestResponse
from wild_oasis.services.guest_service import get_guest, update_guest_profile
from wild_oasis.services.reservation_service import (
    delete_reservation,
    get_booking,
    get_bookings,
    update_reservation,
)

router = APIRouter(prefix="/api/v1/account", tags=["account"])


# ---------------------------------------------------------------------------
# Reservations
# ---------------------------------------------------------------------------


@router.get(
    "/reservations",
    response_model=BookingListResponse,
    summary="List the guest's reservations",
)
async def list_reservations(
    db: AsyncSession = Depends(get_db),
    guest: SessionGuest = Depends(get_current_guest),
) -> dict:
    """Return the guest's reservations ordered by start date."""

    async def load() -> dict:
        items = await get_bookings(db, guest.guest_id)
        return BookingListResponse(items=items, total=len(items)).model_dump(mode="json")

    return await page_cache.get_or_load("/account/reservations", load, scope=str(guest.guest_id))


@router.get(
    "/reservations/{booking_id}",
    response_model=BookingResponse,
    summary="Get one of the guest's reservations",
)
async def read_reservation(
    booking_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    guest: SessionGuest = Depends(get_current_guest),
) -> Booking:
    return await get_booking(db, booking_id, guest.guest_id)


@router.post(
    "/reservations/edit",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Update a reservation",
)
async def update_reservation_from_form(
    request: Request,
    db: AsyncSession = Depends(get_db),
    guest: SessionGuest | None = Depends(get_optional_guest),
) -> RedirectResponse:
    """Apply the edit form (``bookingId``, ``numGuests``, ``observations``).

    The form is validated before the session so a half-filled form reports
    its missing fields.
    """
    form = parse_form(ReservationUpdateForm, await request.form())
    await update_reservation(db, guest, form)
    return RedirectResponse(url=f"{settings.frontend_url}/account/reservations", status_code=status.HTTP_303_SEE_OTHER)


@router.delete(
    "/reservations/{booking_id}",
    response_model=MessageResponse,
    summary="Delete a reservation",
)
async def delete_reservation_endpoint(
    booking_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    guest: SessionGuest = Depends(get_current_guest),
) -> dict:
    await delete_reservation(db, guest, booking_id)
    return {"message": "Booking deleted"}


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


@router.get(
    "/profile",
    response_model=GuestResponse,
    summary="Get the guest's profile",
)
async def read_profile(
    db: AsyncSession = Depends(get_db),
    guest: SessionGuest = Depends(get_current_guest),
) -> dict:
    async def load() -> dict:
        return GuestResponse.model_validate(await get_guest(db, guest.guest_id)).model_dump(mode="json")

    return await page_cache.get_or_load("/account/profile", load, scope=str(guest.guest_id))


@router.post(
    "/profile",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Update the guest's profile",
)
async def update_profile_from_form(
    request: Request,
    db: AsyncSession = Depends(get_db),
    guest: SessionGuest = Depends(get_current_guest),
) -> RedirectResponse:
    """Apply the profile form (``nationality`` as ``name%flag``, ``nationalID``)."""
    form = parse_form(GuestProfileForm, await request.form())
    await update_guest_profile(db, guest, form)
    return RedirectResponse(url=f"{settings.frontend_url}/account/profile", status_code=status.HTTP_303_SEE_OTHER)
