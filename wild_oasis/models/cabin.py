"""Cabin model — the rentable units guests browse and reserve."""

from decimal import Decimal

from sqlalchemy import CheckConstraint, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wild_oasis.database import Base, CreatedAtMixin, UUIDPrimaryKeyMixin


class Cabin(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    """A cabin with a nightly price and a guest capacity."""

    __tablename__ = "cabins"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    max_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    regular_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    discount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=Decimal("0"))
    image: Mapped[str | None] = mapped_column(String(512), default=None)
    description: Mapped[str | None] = mapped_column(Text, default=None)

    # Relationships
    bookings: Mapped[list["Booking"]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="cabin", lazy="raise", passive_deletes=True
    )

    __table_args__ = (
        CheckConstraint("max_capacity >= 1", name="ck_cabins_max_capacity"),
        CheckConstraint("discount <= regular_price", name="ck_cabins_discount"),
    )

    @property
    def nightly_price(self) -> Decimal:
        """Price of one night after the discount."""
        return self.regular_price - self.discount

    def __repr__(self) -> str:
        return f"<Cabin(id={self.id}, name={self.name!r}, max_capacity={self.max_capacity})>"
