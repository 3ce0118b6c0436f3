"""Tests for the public cabin catalogue, cabin detail and settings endpoints."""

import uuid
from datetime import timedelta
from decimal import Decimal

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from wild_oasis.models.booking import STATUS_CHECKED_OUT
from wild_oasis.models.booking_settings import BookingSettings
from wild_oasis.models.cabin import Cabin
from wild_oasis.services.availability import utc_today

pytestmark = pytest.mark.asyncio


async def _add_cabins(db_session: AsyncSession) -> None:
    for name, capacity in (("003", 10), ("001", 2), ("002", 5)):
        db_session.add(
            Cabin(
                name=name,
                max_capacity=capacity,
                regular_price=Decimal("200.00"),
                discount=Decimal("0.00"),
            )
        )
    await db_session.flush()


# ---------------------------------------------------------------------------
# GET /api/v1/cabins
# ---------------------------------------------------------------------------


class TestListCabins:
    """Tests for the cabin catalogue."""

    async def test_list_ordered_by_name(self, client: AsyncClient, db_session: AsyncSession) -> None:
        await _add_cabins(db_session)
        response = await client.get("/api/v1/cabins")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert [item["name"] for item in data["items"]] == ["001", "002", "003"]

    async def test_list_empty(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/cabins")
        assert response.status_code == 200
        assert response.json() == {"items": [], "total": 0}

    @pytest.mark.parametrize(
        ("capacity", "expected"),
        [("small", ["001"]), ("medium", ["002"]), ("large", ["003"]), ("all", ["001", "002", "003"])],
    )
    async def test_capacity_filter(
        self,
        client: AsyncClient,
        db_session: AsyncSession,
        capacity: str,
        expected: list[str],
    ) -> None:
        await _add_cabins(db_session)
        response = await client.get("/api/v1/cabins", params={"capacity": capacity})
        assert response.status_code == 200
        assert [item["name"] for item in response.json()["items"]] == expected


# ---------------------------------------------------------------------------
# GET /api/v1/cabins/{id}
# ---------------------------------------------------------------------------


class TestCabinDetail:
    """Tests for a cabin with its booked dates."""

    async def test_detail_with_booked_dates(
        self, client: AsyncClient, test_cabin: Cabin, test_guest, make_booking
    ) -> None:
        start = utc_today() + timedelta(days=20)
        await make_booking(test_cabin, test_guest, start, start + timedelta(days=2))

        response = await client.get(f"/api/v1/cabins/{test_cabin.id}")
        assert response.status_code == 200
        data = response.json()
        assert data["cabin"]["id"] == str(test_cabin.id)
        assert data["cabin"]["max_capacity"] == 4
        assert data["bookedDates"] == [(start + timedelta(days=i)).isoformat() for i in range(3)]

    async def test_past_bookings_not_blocking(
        self, client: AsyncClient, test_cabin: Cabin, test_guest, make_booking
    ) -> None:
        start = utc_today() - timedelta(days=10)
        await make_booking(test_cabin, test_guest, start, start + timedelta(days=3), status=STATUS_CHECKED_OUT)

        response = await client.get(f"/api/v1/cabins/{test_cabin.id}")
        assert response.status_code == 200
        assert response.json()["bookedDates"] == []

    async def test_unknown_cabin(self, client: AsyncClient) -> None:
        response = await client.get(f"/api/v1/cabins/{uuid.uuid4()}")
        assert response.status_code == 200
        assert response.json() == {"message": "cabin not found"}

    async def test_malformed_id(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/cabins/not-a-cabin")
        assert response.status_code == 200
        assert response.json() == {"message": "cabin not found"}

    async def test_new_reservation_revalidates_detail(
        self, client: AsyncClient, test_cabin: Cabin, auth_headers: dict
    ) -> None:
        first = await client.get(f"/api/v1/cabins/{test_cabin.id}")
        assert first.json()["bookedDates"] == []

        start = utc_today() + timedelta(days=40)
        response = await client.post(
            "/api/v1/reservations",
            data={
                "cabinId": str(test_cabin.id),
                "startDate": start.isoformat(),
                "endDate": (start + timedelta(days=1)).isoformat(),
                "numGuests": "2",
            },
            headers=auth_headers,
        )
        assert response.status_code == 303

        second = await client.get(f"/api/v1/cabins/{test_cabin.id}")
        assert second.json()["bookedDates"] == [start.isoformat(), (start + timedelta(days=1)).isoformat()]


# ---------------------------------------------------------------------------
# GET /api/v1/cabins/{id}/price
# ---------------------------------------------------------------------------


class TestCabinPrice:
    async def test_price(self, client: AsyncClient, test_cabin: Cabin) -> None:
        response = await client.get(f"/api/v1/cabins/{test_cabin.id}/price")
        assert response.status_code == 200
        data = response.json()
        assert float(data["regular_price"]) == 120.00
        assert float(data["discount"]) == 20.00

    async def test_price_unknown_cabin(self, client: AsyncClient) -> None:
        response = await client.get(f"/api/v1/cabins/{uuid.uuid4()}/price")
        assert response.status_code == 404
        assert response.json()["detail"] == "Cabin not found"


# ---------------------------------------------------------------------------
# GET /api/v1/settings
# ---------------------------------------------------------------------------


class TestBookingSettings:
    async def test_defaults_without_row(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/settings")
        assert response.status_code == 200
        data = response.json()
        assert data["min_booking_length"] == 1
        assert data["max_booking_length"] == 90
        assert data["max_guests_per_booking"] == 10

    async def test_stored_settings(self, client: AsyncClient, db_session: AsyncSession) -> None:
        db_session.add(
            BookingSettings(
                min_booking_length=3,
                max_booking_length=30,
                max_guests_per_booking=8,
                breakfast_price=Decimal("15.00"),
            )
        )
        await db_session.flush()

        response = await client.get("/api/v1/settings")
        assert response.status_code == 200
        data = response.json()
        assert data["min_booking_length"] == 3
        assert data["max_booking_length"] == 30
        assert data["max_guests_per_booking"] == 8
        assert float(data["breakfast_price"]) == 15.00
