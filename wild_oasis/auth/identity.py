"""Bridge between identity-provider sign-ins and internal guest records."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from wild_oasis.schemas.auth import SessionClaims, SessionGuest
from wild_oasis.services.errors import NotFound
from wild_oasis.services.guest_service import create_guest, get_guest_by_email

logger = logging.getLogger(__name__)


async def sign_in_guest(db: AsyncSession, user_info: dict) -> bool:
    """Accept or reject a sign-in, creating the guest on first visit.

    Fails closed: a profile without both email and name is rejected, and any
    error while looking up or creating the guest rejects the sign-in instead
    of propagating.
    """
    email = user_info.get("email")
    name = user_info.get("name")
    if not email or not name:
        logger.warning("Rejecting sign-in without email or name")
        return False

    try:
        existing = await get_guest_by_email(db, email)
        if existing is None:
            await create_guest(db, email=email, full_name=name)
    except Exception:
        logger.exception("Sign-in for %s failed while resolving guest", email)
        return False
    return True


async def resolve_session_guest(db: AsyncSession, claims: SessionClaims) -> SessionGuest:
    """Attach the guest id to a session. Runs on every session read.

    Raises:
        NotFound: No guest exists for the session's email.
    """
    guest = await get_guest_by_email(db, claims.email)
    if guest is None:
        raise NotFound("Guest not found")
    return SessionGuest(**claims.model_dump(), guest_id=guest.id)
