"""Typed form submissions for the reservation and profile handlers.

Browsers post these as ``application/x-www-form-urlencoded`` with the field
names the account pages use (``numGuests``, ``bookingId``, ``nationalID`` ...).
:func:`parse_form` turns the raw form into one of the models below or raises
``MissingFields`` / ``InvalidInput``.
"""

import re
import uuid
from collections.abc import Mapping
from datetime import date
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from wild_oasis.services.errors import InvalidInput, MissingFields

NATIONAL_ID_PATTERN = re.compile(r"^[a-zA-Z0-9]{6,12}$")
NATIONALITY_SEPARATOR = "%"

FormT = TypeVar("FormT", bound="FormModel")


class FormModel(BaseModel):
    """Base for form submissions; fields are addressed by their HTML names."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    # Fields for which an empty string is a real value rather than "not sent".
    blank_allowed: ClassVar[frozenset[str]] = frozenset()


class ReservationCreateForm(FormModel):
    cabin_id: uuid.UUID = Field(..., alias="cabinId")
    start_date: date = Field(..., alias="startDate")
    end_date: date = Field(..., alias="endDate")
    num_guests: int = Field(..., ge=1, alias="numGuests")
    observations: str = ""

    blank_allowed: ClassVar[frozenset[str]] = frozenset({"observations"})


class ReservationUpdateForm(FormModel):
    booking_id: uuid.UUID = Field(..., alias="bookingId")
    num_guests: int = Field(..., ge=1, alias="numGuests")
    observations: str

    blank_allowed: ClassVar[frozenset[str]] = frozenset({"observations"})


class GuestProfileForm(FormModel):
    """Profile update: ``nationality`` arrives as ``"<name>%<flag url>"``."""

    nationality_flag: str | None = Field(None, alias="nationality", validate_default=True)
    national_id: str | None = Field(None, alias="nationalID", validate_default=True)

    @field_validator("nationality_flag")
    @classmethod
    def check_nationality(cls, value: str | None) -> str:
        if not value:
            raise ValueError("invalid nationality")
        parts = value.split(NATIONALITY_SEPARATOR)
        if len(parts) != 2 or not all(parts):
            raise ValueError("invalid nationality")
        return value

    @field_validator("national_id")
    @classmethod
    def check_national_id(cls, value: str | None) -> str:
        if value is None or not NATIONAL_ID_PATTERN.fullmatch(value):
            raise ValueError("Please provide a valid nationalID")
        return value

    @property
    def nationality(self) -> str:
        return self.nationality_flag.split(NATIONALITY_SEPARATOR)[0]

    @property
    def country_flag(self) -> str:
        return self.nationality_flag.split(NATIONALITY_SEPARATOR)[1]


def _error_message(error: dict[str, Any]) -> str:
    ctx_error = error.get("ctx", {}).get("error")
    if ctx_error is not None:
        return str(ctx_error)
    field = ".".join(str(part) for part in error["loc"])
    return f"{field}: {error['msg']}"


def parse_form(model: type[FormT], form: Mapping[str, Any]) -> FormT:
    """Validate raw form data into ``model``.

    Empty strings count as "not sent" unless the field is in
    ``model.blank_allowed``; uploads and other non-string values are ignored.

    Raises:
        MissingFields: A required field was not submitted.
        InvalidInput: A submitted field failed its format check.
    """
    data = {
        key: value
        for key, value in form.items()
        if isinstance(value, str) and (value.strip() or key in model.blank_allowed)
    }
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        errors = exc.errors()
        missing = [str(err["loc"][0]) for err in errors if err["type"] == "missing"]
        if missing:
            raise MissingFields(missing) from None
        raise InvalidInput(_error_message(errors[0])) from None
