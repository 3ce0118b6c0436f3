"""Pydantic v2 schemas for the contact form."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ContactRequest(BaseModel):
    """Message submitted through the public contact form."""

    full_name: str = Field(..., min_length=1, max_length=255, alias="fullName")
    email: EmailStr
    subject: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)

    model_config = ConfigDict(populate_by_name=True)


class ContactResponse(BaseModel):
    success: bool
    message: str
