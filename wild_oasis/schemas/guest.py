"""Pydantic v2 response schemas for guest endpoints."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class GuestResponse(BaseModel):
    """The signed-in guest's profile."""

    id: uuid.UUID
    full_name: str
    email: str
    national_id: str | None = None
    nationality: str | None = None
    country_flag: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
