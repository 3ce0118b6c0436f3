"""Reservation draft — the date range a guest is selecting for one cabin.

The draft lives only as long as the page that owns it: each reservation
form builds its own ``ReservationDraft`` and resets it after a successful
submission or when the guest clears the selection. Nothing here is stored.
"""

from datetime import date
from decimal import Decimal

from wild_oasis.models.booking_settings import BookingSettings
from wild_oasis.models.cabin import Cabin
from wild_oasis.schemas.booking import BookingDraft
from wild_oasis.services.errors import InvalidInput


class ReservationDraft:
    """Selected ``{from, to}`` range plus the nights and price derived from it."""

    def __init__(self, range_from: date | None = None, range_to: date | None = None) -> None:
        self.range_from = range_from
        self.range_to = range_to

    def select(self, range_from: date | None, range_to: date | None) -> None:
        self.range_from = range_from
        self.range_to = range_to

    def reset(self) -> None:
        self.range_from = None
        self.range_to = None

    @property
    def is_complete(self) -> bool:
        """Whether both endpoints are chosen; the form offers submit only then."""
        return self.range_from is not None and self.range_to is not None

    @property
    def num_nights(self) -> int:
        if not self.is_complete:
            return 0
        return (self.range_to - self.range_from).days

    def cabin_price(self, cabin: Cabin) -> Decimal:
        return self.num_nights * (Decimal(cabin.regular_price) - Decimal(cabin.discount))

    def to_booking_draft(
        self,
        cabin: Cabin,
        booking_settings: BookingSettings | None = None,
    ) -> BookingDraft:
        """Freeze the selection into the draft a reservation is created from.

        Raises:
            InvalidInput: Dates are unset, out of order, or the stay length is
                outside the configured booking length.
        """
        if not self.is_complete:
            raise InvalidInput("Start by selecting dates")

        nights = self.num_nights
        if nights < 1:
            raise InvalidInput("End date must be after start date")

        if booking_settings is not None:
            if nights < booking_settings.min_booking_length:
                raise InvalidInput(f"Minimum stay is {booking_settings.min_booking_length} nights")
            if nights > booking_settings.max_booking_length:
                raise InvalidInput(f"Maximum stay is {booking_settings.max_booking_length} nights")

        return BookingDraft(
            cabin_id=cabin.id,
            start_date=self.range_from,
            end_date=self.range_to,
            num_nights=nights,
            cabin_price=self.cabin_price(cabin),
        )
