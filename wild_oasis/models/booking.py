"""Booking model — tracks cabin reservations."""

import uuid
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import Boolean, CheckConstraint, Date, ForeignKey, Index, Integer, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wild_oasis.database import Base, UUIDPrimaryKeyMixin

STATUS_UNCONFIRMED = "unconfirmed"
STATUS_CHECKED_IN = "checked-in"
STATUS_CHECKED_OUT = "checked-out"

BOOKING_STATUSES = {STATUS_UNCONFIRMED, STATUS_CHECKED_IN, STATUS_CHECKED_OUT}

MAX_OBSERVATIONS_LENGTH = 1000


class Booking(UUIDPrimaryKeyMixin, Base):
    """A reservation linking a guest to a cabin for specific dates."""

    __tablename__ = "bookings"

    cabin_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("cabins.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    guest_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("guests.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    num_nights: Mapped[int] = mapped_column(Integer, nullable=False)
    num_guests: Mapped[int] = mapped_column(Integer, default=1)
    cabin_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    extras_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=Decimal("0"))
    total_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    is_paid: Mapped[bool] = mapped_column(Boolean, default=False)
    has_breakfast: Mapped[bool] = mapped_column(Boolean, default=False)
    status: Mapped[str] = mapped_column(
        String(50),
        default=STATUS_UNCONFIRMED,
        index=True,
    )  # unconfirmed, checked-in, checked-out
    observations: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(server_default=func.now())

    # Relationships
    cabin: Mapped["Cabin"] = relationship(back_populates="bookings", lazy="raise")  # type: ignore[name-defined]  # noqa: F821
    guest: Mapped["Guest"] = relationship(back_populates="bookings", lazy="raise")  # type: ignore[name-defined]  # noqa: F821

    __table_args__ = (
        Index("ix_bookings_start_date", "start_date"),
        CheckConstraint("end_date > start_date", name="ck_bookings_dates"),
        CheckConstraint("num_guests >= 1", name="ck_bookings_num_guests"),
    )

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, cabin_id={self.cabin_id}, guest_id={self.guest_id}, status={self.status})>"
