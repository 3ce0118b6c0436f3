"""Cabins API router — public catalogue, cabin detail with booked dates, settings."""

import logging
import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from wild_oasis.api.deps import get_db
from wild_oasis.cache import page_cache
from wild_oasis.models.cabin import Cabin
from wild_oasis.schemas.cabin import (
    BookingSettingsResponse,
    CabinDetailResponse,
    CabinListResponse,
    CabinNotFoundResponse,
    CabinPriceResponse,
    CabinResponse,
)
from wild_oasis.services.availability import get_booked_dates
from wild_oasis.services.cabin_service import get_booking_settings, get_cabin, get_cabins
from wild_oasis.services.errors import ReservationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/cabins", tags=["cabins"])

settings_router = APIRouter(prefix="/api/v1/settings", tags=["settings"])


async def _load_cabin_detail(db: AsyncSession, cabin_id: uuid.UUID) -> dict:
    cabin = await get_cabin(db, cabin_id)
    booked_dates = await get_booked_dates(db, cabin_id)
    detail = CabinDetailResponse(cabin=CabinResponse.model_validate(cabin), booked_dates=booked_dates)
    return detail.model_dump(mode="json", by_alias=True)


@router.get(
    "",
    response_model=CabinListResponse,
    summary="List cabins",
)
async def list_cabins(
    capacity: str | None = Query(None, description="small (1-3), medium (4-7), large (8+) or all"),
    db: AsyncSession = Depends(get_db),
) -> dict:
    """Return every cabin ordered by name, optionally filtered by capacity."""
    items = await get_cabins(db, capacity)
    return {"items": items, "total": len(items)}


@router.get(
    "/{cabin_id}",
    summary="Get a cabin with the dates it is booked",
)
async def get_cabin_detail(cabin_id: str, db: AsyncSession = Depends(get_db)) -> dict:
    """Return ``{cabin, bookedDates}``.

    Any failure, including a partially loaded calendar, answers with
    ``{"message": "cabin not found"}`` instead of an incomplete payload.
    """
    try:
        cabin_uuid = uuid.UUID(cabin_id)
        return await page_cache.get_or_load(
            f"/cabins/{cabin_uuid}",
            lambda: _load_cabin_detail(db, cabin_uuid),
        )
    except (ValueError, ReservationError) as exc:
        logger.info("Cabin %s could not be loaded: %s", cabin_id, exc)
        return CabinNotFoundResponse().model_dump()


@router.get(
    "/{cabin_id}/price",
    response_model=CabinPriceResponse,
    summary="Get a cabin's regular price and discount",
)
async def get_cabin_price(cabin_id: uuid.UUID, db: AsyncSession = Depends(get_db)) -> Cabin:
    return await get_cabin(db, cabin_id)


@settings_router.get(
    "",
    response_model=BookingSettingsResponse,
    summary="Get booking limits",
)
async def read_booking_settings(db: AsyncSession = Depends(get_db)):
    """Return the minimum/maximum stay, guest limit and breakfast price."""
    return await get_booking_settings(db)
