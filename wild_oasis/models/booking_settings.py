"""Booking settings model — single-row limits applied to new reservations."""

from decimal import Decimal

from sqlalchemy import Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from wild_oasis.database import Base


class BookingSettings(Base):
    """Hotel-wide booking limits. Only the first row is ever read."""

    __tablename__ = "settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    min_booking_length: Mapped[int] = mapped_column(Integer, default=1)
    max_booking_length: Mapped[int] = mapped_column(Integer, default=90)
    max_guests_per_booking: Mapped[int] = mapped_column(Integer, default=10)
    breakfast_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=Decimal("0"))
