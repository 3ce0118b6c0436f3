"""Guest service — lookups by email and profile updates."""

import logging
import uuid

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wild_oasis.cache import revalidate_path
from wild_oasis.models.guest import Guest
from wild_oasis.schemas.auth import SessionGuest
from wild_oasis.schemas.forms import GuestProfileForm
from wild_oasis.services.errors import NotFound, Unauthorized, UpdateFailed

logger = logging.getLogger(__name__)


async def get_guest_by_email(db: AsyncSession, email: str) -> Guest | None:
    """Guests are uniquely identified by their email address."""
    result = await db.execute(select(Guest).where(Guest.email == email))
    return result.scalar_one_or_none()


async def get_guest(db: AsyncSession, guest_id: uuid.UUID) -> Guest:
    result = await db.execute(select(Guest).where(Guest.id == guest_id))
    guest = result.scalar_one_or_none()
    if guest is None:
        raise NotFound("Guest not found")
    return guest


async def create_guest(db: AsyncSession, email: str, full_name: str) -> Guest:
    logger.info("Creating guest for %s", email)
    guest = Guest(email=email, full_name=full_name)
    db.add(guest)
    await db.flush()
    await db.refresh(guest)
    return guest


async def update_guest_profile(
    db: AsyncSession,
    guest: SessionGuest | None,
    form: GuestProfileForm,
) -> None:
    """Store nationality, flag and national ID on the signed-in guest's row.

    ``form`` is already validated, so nothing is written for bad input.

    Raises:
        Unauthorized: No session.
        UpdateFailed: The update failed.
    """
    if guest is None:
        raise Unauthorized()

    statement = (
        update(Guest)
        .where(Guest.id == guest.guest_id)
        .values(
            nationality=form.nationality,
            country_flag=form.country_flag,
            national_id=form.national_id,
        )
    )
    try:
        await db.execute(statement)
    except SQLAlchemyError as exc:
        logger.exception("Updating guest %s failed", guest.guest_id)
        raise UpdateFailed("Guest could not be updated") from exc

    revalidate_path(db, "/account/profile")
