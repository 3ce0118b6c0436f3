"""Guest domain model."""

import uuid
from datetime import datetime

from sqlalchemy import String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wild_oasis.database import Base


class Guest(Base):
    """Guest model — one row per signed-in email address."""

    __tablename__ = "guests"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    full_name: Mapped[str] = mapped_column(String(255))
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    national_id: Mapped[str | None] = mapped_column(String(12))
    nationality: Mapped[str | None] = mapped_column(String(100))
    country_flag: Mapped[str | None] = mapped_column(String(512))
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())

    # Relationships
    bookings: Mapped[list["Booking"]] = relationship(  # noqa: F821
        back_populates="guest", lazy="raise", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Guest(id={self.id}, email={self.email!r})>"
