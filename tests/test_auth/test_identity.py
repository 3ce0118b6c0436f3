"""Tests for the sign-in bridge between identity-provider profiles and guests."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wild_oasis.auth.identity import resolve_session_guest, sign_in_guest
from wild_oasis.models.guest import Guest
from wild_oasis.schemas.auth import SessionClaims
from wild_oasis.services.errors import NotFound

pytestmark = pytest.mark.asyncio


async def _guest_count(db_session: AsyncSession) -> int:
    return (await db_session.execute(select(func.count()).select_from(Guest))).scalar_one()


class TestSignInGuest:
    """sign_in_guest accepts, creates or rejects."""

    async def test_first_sign_in_creates_guest(self, db_session: AsyncSession) -> None:
        accepted = await sign_in_guest(db_session, {"email": "new@wildoasis.io", "name": "New Guest"})
        assert accepted is True

        guest = (await db_session.execute(select(Guest).where(Guest.email == "new@wildoasis.io"))).scalar_one()
        assert guest.full_name == "New Guest"

    async def test_returning_guest_not_duplicated(self, db_session: AsyncSession, test_guest: Guest) -> None:
        accepted = await sign_in_guest(db_session, {"email": test_guest.email, "name": "Renamed"})
        assert accepted is True
        assert await _guest_count(db_session) == 1

        await db_session.refresh(test_guest)
        assert test_guest.full_name == "Test Guest"

    @pytest.mark.parametrize(
        "user_info",
        [
            {"email": "", "name": "No Email"},
            {"email": "noname@wildoasis.io", "name": ""},
            {"name": "Only Name"},
            {},
        ],
    )
    async def test_incomplete_profile_rejected(self, db_session: AsyncSession, user_info: dict) -> None:
        assert await sign_in_guest(db_session, user_info) is False
        assert await _guest_count(db_session) == 0

    async def test_store_failure_rejects_sign_in(self) -> None:
        db = AsyncMock()
        db.execute.side_effect = SQLAlchemyError("connection lost")
        assert await sign_in_guest(db, {"email": "a@wildoasis.io", "name": "A"}) is False


class TestResolveSessionGuest:
    """resolve_session_guest attaches the guest id on every session read."""

    async def test_attaches_guest_id(self, db_session: AsyncSession, test_guest: Guest) -> None:
        claims = SessionClaims(email=test_guest.email, name="Test Guest", image="https://example.com/a.jpg")
        session = await resolve_session_guest(db_session, claims)
        assert session.guest_id == test_guest.id
        assert session.email == test_guest.email
        assert session.image == "https://example.com/a.jpg"

    async def test_unknown_email(self, db_session: AsyncSession) -> None:
        claims = SessionClaims(email="ghost@wildoasis.io", name="Ghost")
        with pytest.raises(NotFound):
            await resolve_session_guest(db_session, claims)
