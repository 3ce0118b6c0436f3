"""SQLAlchemy models for The Wild Oasis.

All models are imported here so that Alembic's autogenerate can discover
them via Base.metadata. If you add a new model, import it in this file.
"""

from wild_oasis.models.booking import Booking
from wild_oasis.models.booking_settings import BookingSettings
from wild_oasis.models.cabin import Cabin
from wild_oasis.models.contact import ContactMessage
from wild_oasis.models.guest import Guest

__all__ = [
    "Booking",
    "BookingSettings",
    "Cabin",
    "ContactMessage",
    "Guest",
]
