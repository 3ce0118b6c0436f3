"""Pydantic v2 schemas for reservations."""

import uuid
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# ---------------------------------------------------------------------------
# Internal schemas
# ---------------------------------------------------------------------------


class BookingDraft(BaseModel):
    """Dates and price of a reservation, derived from the guest's selection."""

    cabin_id: uuid.UUID
    start_date: date
    end_date: date
    num_nights: int = Field(..., ge=1)
    cabin_price: Decimal = Field(..., ge=0)

    @model_validator(mode="after")
    def check_dates(self) -> "BookingDraft":
        """Validate that end_date is strictly after start_date."""
        if self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class BookingResponse(BaseModel):
    """Full booking record."""

    id: uuid.UUID
    cabin_id: uuid.UUID
    guest_id: uuid.UUID
    start_date: date
    end_date: date
    num_nights: int
    num_guests: int
    cabin_price: Decimal
    extras_price: Decimal
    total_price: Decimal
    is_paid: bool
    has_breakfast: bool
    status: str
    observations: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CabinPreview(BaseModel):
    """The two cabin columns the reservation list shows."""

    name: str
    image: str | None = None


class BookingListItem(BaseModel):
    """One row of a guest's reservation list."""

    id: uuid.UUID
    created_at: datetime
    start_date: date
    end_date: date
    num_nights: int
    num_guests: int
    total_price: Decimal
    guest_id: uuid.UUID
    cabin_id: uuid.UUID
    cabin: CabinPreview

    model_config = ConfigDict(from_attributes=True)


class BookingListResponse(BaseModel):
    """A guest's reservations ordered by start date."""

    items: list[BookingListItem]
    total: int
