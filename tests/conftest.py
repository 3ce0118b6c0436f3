"""Shared test configuration and fixtures.

Each test runs against a fresh database:
- By default an in-memory SQLite database (aiosqlite) that lives as long as
  the test's engine, so no server is needed.
- Set ``TEST_DATABASE_URL`` to run against a real PostgreSQL test database;
  tables are created before and dropped after every test.
"""

import os
import uuid
from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import date
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from wild_oasis.auth.session import create_session_token
from wild_oasis.cache import page_cache
from wild_oasis.database import Base, get_db
from wild_oasis.main import app
from wild_oasis.models.booking import STATUS_UNCONFIRMED, Booking
from wild_oasis.models.cabin import Cabin
from wild_oasis.models.guest import Guest
from wild_oasis.schemas.auth import SessionClaims, SessionGuest

_test_db_url = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


def _make_engine() -> AsyncEngine:
    if _test_db_url.startswith("sqlite"):
        # One shared connection so every session sees the same in-memory DB.
        return create_async_engine(
            _test_db_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(_test_db_url, poolclass=NullPool)


# ---------------------------------------------------------------------------
# Per-test: fresh schema, one session shared by the test and the app
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an engine with every table in place, dropped after the test."""
    engine = _make_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Yield the async session used by both the test and the request handlers."""
    session = AsyncSession(bind=test_engine, expire_on_commit=False)
    try:
        yield session
    finally:
        await session.close()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient wired to use the test DB session."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        # Commits like get_db. A failed request is left uncommitted, not rolled
        # back, so fixtures flushed by the test survive it.
        yield db_session
        await db_session.commit()

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def clear_page_cache():
    """Cached views must not leak between tests."""
    page_cache.clear()
    yield
    page_cache.clear()


# ---------------------------------------------------------------------------
# Convenience fixtures: cabins and guests
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def test_cabin(db_session: AsyncSession) -> Cabin:
    """A four-guest cabin at 120/night with a 20 discount (100/night)."""
    cabin = Cabin(
        name="001",
        max_capacity=4,
        regular_price=Decimal("120.00"),
        discount=Decimal("20.00"),
        image="cabin-001.jpg",
        description="A cozy wooden cabin for a small family.",
    )
    db_session.add(cabin)
    await db_session.flush()
    await db_session.refresh(cabin)
    return cabin


async def _create_guest(db_session: AsyncSession, full_name: str) -> Guest:
    unique = uuid.uuid4().hex[:8]
    guest = Guest(full_name=full_name, email=f"guest-{unique}@wildoasis.io")
    db_session.add(guest)
    await db_session.flush()
    await db_session.refresh(guest)
    return guest


@pytest_asyncio.fixture
async def test_guest(db_session: AsyncSession) -> Guest:
    """Create and return a guest directly in the DB."""
    return await _create_guest(db_session, "Test Guest")


@pytest_asyncio.fixture
async def other_guest(db_session: AsyncSession) -> Guest:
    """A second guest, used to check that bookings stay private."""
    return await _create_guest(db_session, "Other Guest")


def _auth_headers_for(guest: Guest) -> dict[str, str]:
    token = create_session_token(SessionClaims(email=guest.email, name=guest.full_name))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(test_guest: Guest) -> dict[str, str]:
    """Return Authorization headers carrying the test guest's session."""
    return _auth_headers_for(test_guest)


@pytest.fixture
def other_auth_headers(other_guest: Guest) -> dict[str, str]:
    return _auth_headers_for(other_guest)


@pytest.fixture
def session_guest(test_guest: Guest) -> SessionGuest:
    """The enriched session the request handlers see for the test guest."""
    return SessionGuest(email=test_guest.email, name=test_guest.full_name, guest_id=test_guest.id)


@pytest.fixture
def other_session_guest(other_guest: Guest) -> SessionGuest:
    return SessionGuest(email=other_guest.email, name=other_guest.full_name, guest_id=other_guest.id)


# ---------------------------------------------------------------------------
# Convenience fixtures: bookings
# ---------------------------------------------------------------------------


@pytest.fixture
def make_booking(db_session: AsyncSession) -> Callable[..., Awaitable[Booking]]:
    """Factory that inserts a booking directly in the DB.

    Prices follow the nightly price of the cabin the same way a reservation
    made through the API would.
    """

    async def _make(
        cabin: Cabin,
        guest: Guest,
        start_date: date,
        end_date: date,
        num_guests: int = 2,
        status: str = STATUS_UNCONFIRMED,
        observations: str = "",
    ) -> Booking:
        nights = (end_date - start_date).days
        cabin_price = nights * (cabin.regular_price - cabin.discount)
        booking = Booking(
            cabin_id=cabin.id,
            guest_id=guest.id,
            start_date=start_date,
            end_date=end_date,
            num_nights=nights,
            num_guests=num_guests,
            cabin_price=cabin_price,
            extras_price=Decimal("0"),
            total_price=cabin_price,
            is_paid=False,
            has_breakfast=False,
            status=status,
            observations=observations,
        )
        db_session.add(booking)
        await db_session.flush()
        await db_session.refresh(booking)
        return booking

    return _make
