"""Pydantic v2 schemas for sessions and authentication endpoints."""

import uuid

from pydantic import BaseModel, EmailStr


class SessionClaims(BaseModel):
    """Identity-provider data carried in the session token."""

    email: EmailStr
    name: str
    image: str | None = None


class SessionGuest(SessionClaims):
    """Session claims enriched with the internal guest id."""

    guest_id: uuid.UUID


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str
