"""Reservations form endpoint — turns a selected date range into a booking."""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from wild_oasis.api.deps import get_current_guest, get_db
from wild_oasis.config import settings
from wild_oasis.schemas.auth import SessionGuest
from wild_oasis.schemas.forms import ReservationCreateForm, parse_form
from wild_oasis.services.cabin_service import get_booking_settings, get_cabin
from wild_oasis.services.draft import ReservationDraft
from wild_oasis.services.reservation_service import create_reservation

router = APIRouter(prefix="/api/v1/reservations", tags=["reservations"])


@router.post(
    "",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Reserve a cabin",
)
async def create_reservation_from_form(
    request: Request,
    db: AsyncSession = Depends(get_db),
    guest: SessionGuest = Depends(get_current_guest),
) -> RedirectResponse:
    """Create a reservation from the cabin page form and go to the thank-you page.

    Form fields: ``cabinId``, ``startDate``, ``endDate``, ``numGuests``,
    ``observations``. Nights and price are derived here from the cabin, not
    taken from the browser.
    """
    form = parse_form(ReservationCreateForm, await request.form())

    cabin = await get_cabin(db, form.cabin_id)
    booking_settings = await get_booking_settings(db)
    draft = ReservationDraft(form.start_date, form.end_date).to_booking_draft(cabin, booking_settings)

    await create_reservation(db, guest, draft, form.num_guests, form.observations)

    return RedirectResponse(url=f"{settings.frontend_url}/cabins/thankyou", status_code=status.HTTP_303_SEE_OTHER)
