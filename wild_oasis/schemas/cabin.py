"""Pydantic v2 response schemas for cabin and settings endpoints."""

import uuid
from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class CabinResponse(BaseModel):
    """Public cabin information."""

    id: uuid.UUID
    name: str
    max_capacity: int
    regular_price: Decimal
    discount: Decimal
    image: str | None = None
    description: str | None = None

    model_config = ConfigDict(from_attributes=True)


class CabinListResponse(BaseModel):
    """Cabins ordered by name."""

    items: list[CabinResponse]
    total: int


class CabinDetailResponse(BaseModel):
    """A cabin together with the days it cannot be reserved for."""

    cabin: CabinResponse
    booked_dates: list[date] = Field(serialization_alias="bookedDates")


class CabinNotFoundResponse(BaseModel):
    message: str = "cabin not found"


class CabinPriceResponse(BaseModel):
    regular_price: Decimal
    discount: Decimal

    model_config = ConfigDict(from_attributes=True)


class BookingSettingsResponse(BaseModel):
    """Limits applied to new reservations."""

    min_booking_length: int
    max_booking_length: int
    max_guests_per_booking: int
    breakfast_price: Decimal

    model_config = ConfigDict(from_attributes=True)
