"""Contact message model — messages sent through the public contact form."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from wild_oasis.database import Base, CreatedAtMixin, UUIDPrimaryKeyMixin


class ContactMessage(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "contact"

    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    subject: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
