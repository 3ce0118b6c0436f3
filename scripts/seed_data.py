"""Seed the database with The Wild Oasis cabins, settings and sample bookings.

Run from the repository root:
    python -m scripts.seed_data
"""

import asyncio
import sys
from datetime import timedelta
from decimal import Decimal
from pathlib import Path

# Add the repository root to path so imports work when run as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import delete

from wild_oasis.database import Base, async_session_factory, engine
from wild_oasis.models.booking import STATUS_CHECKED_IN, STATUS_CHECKED_OUT, STATUS_UNCONFIRMED, Booking
from wild_oasis.models.booking_settings import BookingSettings
from wild_oasis.models.cabin import Cabin
from wild_oasis.models.guest import Guest
from wild_oasis.services.availability import utc_today

# ---------------------------------------------------------------------------
# Seed data definitions
# ---------------------------------------------------------------------------

SETTINGS = {
    "min_booking_length": 3,
    "max_booking_length": 90,
    "max_guests_per_booking": 8,
    "breakfast_price": Decimal("15.00"),
}

CABINS = [
    {
        "name": "001",
        "max_capacity": 2,
        "regular_price": Decimal("250.00"),
        "discount": Decimal("0.00"),
        "image": "cabin-001.jpg",
        "description": (
            "Discover the ultimate luxury getaway for couples in the cozy wooden cabin 001. "
            "Nestled in a picturesque forest, this stunning cabin offers a secluded and "
            "intimate retreat."
        ),
    },
    {
        "name": "002",
        "max_capacity": 2,
        "regular_price": Decimal("350.00"),
        "discount": Decimal("25.00"),
        "image": "cabin-002.jpg",
        "description": (
            "Escape to the serenity of nature and indulge in luxury in our cozy cabin 002. "
            "Perfect for couples, this cabin offers a secluded and intimate retreat in the "
            "heart of a picturesque forest."
        ),
    },
    {
        "name": "003",
        "max_capacity": 4,
        "regular_price": Decimal("300.00"),
        "discount": Decimal("0.00"),
        "image": "cabin-003.jpg",
        "description": (
            "Experience luxury family living in our medium-sized wooden cabin 003. "
            "Designed to comfortably accommodate families of up to 4 people."
        ),
    },
    {
        "name": "004",
        "max_capacity": 4,
        "regular_price": Decimal("500.00"),
        "discount": Decimal("50.00"),
        "image": "cabin-004.jpg",
        "description": (
            "Indulge in the ultimate luxury family vacation in this medium-sized cabin 004. "
            "Designed for families of up to 4, with a hot tub on the private deck."
        ),
    },
    {
        "name": "005",
        "max_capacity": 6,
        "regular_price": Decimal("350.00"),
        "discount": Decimal("0.00"),
        "image": "cabin-005.jpg",
        "description": (
            "Enjoy a comfortable and cozy getaway with your group or family in our spacious "
            "cabin 005. Designed to accommodate up to 6 people."
        ),
    },
    {
        "name": "006",
        "max_capacity": 6,
        "regular_price": Decimal("800.00"),
        "discount": Decimal("100.00"),
        "image": "cabin-006.jpg",
        "description": (
            "Experience the epitome of luxury with your group or family in our spacious "
            "wooden cabin 006. Designed to comfortably accommodate up to 6 people."
        ),
    },
    {
        "name": "007",
        "max_capacity": 8,
        "regular_price": Decimal("600.00"),
        "discount": Decimal("100.00"),
        "image": "cabin-007.jpg",
        "description": (
            "Accommodate your large group or multiple families in the spacious and grand "
            "wooden cabin 007. Designed to fit up to 8 people."
        ),
    },
    {
        "name": "008",
        "max_capacity": 10,
        "regular_price": Decimal("1400.00"),
        "discount": Decimal("0.00"),
        "image": "cabin-008.jpg",
        "description": (
            "Experience the epitome of luxury and grandeur with your large group or multiple "
            "families in our grand cabin 008. This cabin offers a lavish retreat for up to 10."
        ),
    },
]

GUESTS = [
    {"full_name": "Jonas Schmedtmann", "email": "hello@jonas.io", "nationality": "Portugal"},
    {"full_name": "Jonathan Smith", "email": "johnsmith@test.eu", "nationality": "Great Britain"},
    {"full_name": "Jonatan Johansson", "email": "jonatan@example.com", "nationality": "Finland"},
    {"full_name": "Maria Gomez", "email": "maria@example.com", "nationality": "Spain"},
]


def _build_bookings(cabins: list[Cabin], guests: list[Guest]) -> list[Booking]:
    """One past, one in-house and two upcoming stays spread across cabins."""
    today = utc_today()
    plan = [
        # cabin index, guest index, start offset, nights, guests, status
        (0, 0, -20, 3, 2, STATUS_CHECKED_OUT),
        (1, 1, -2, 5, 2, STATUS_CHECKED_IN),
        (2, 2, 10, 4, 3, STATUS_UNCONFIRMED),
        (6, 3, 30, 7, 6, STATUS_UNCONFIRMED),
    ]
    bookings = []
    for cabin_idx, guest_idx, offset, nights, num_guests, status in plan:
        cabin = cabins[cabin_idx]
        start = today + timedelta(days=offset)
        cabin_price = nights * cabin.nightly_price
        bookings.append(
            Booking(
                cabin_id=cabin.id,
                guest_id=guests[guest_idx].id,
                start_date=start,
                end_date=start + timedelta(days=nights),
                num_nights=nights,
                num_guests=num_guests,
                cabin_price=cabin_price,
                extras_price=Decimal("0"),
                total_price=cabin_price,
                is_paid=status != STATUS_UNCONFIRMED,
                has_breakfast=False,
                status=status,
                observations="",
            )
        )
    return bookings


async def seed() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_factory() as session:
        # Start from an empty catalogue so the script can be re-run
        await session.execute(delete(Booking))
        await session.execute(delete(Guest))
        await session.execute(delete(Cabin))
        await session.execute(delete(BookingSettings))
        await session.flush()

        session.add(BookingSettings(**SETTINGS))

        created_cabins: list[Cabin] = []
        for cabin_data in CABINS:
            cabin = Cabin(**cabin_data)
            session.add(cabin)
            created_cabins.append(cabin)
        await session.flush()
        print(f"✅ Created {len(created_cabins)} cabins")

        created_guests: list[Guest] = []
        for guest_data in GUESTS:
            guest = Guest(**guest_data)
            session.add(guest)
            created_guests.append(guest)
        await session.flush()
        print(f"✅ Created {len(created_guests)} guests")

        bookings = _build_bookings(created_cabins, created_guests)
        session.add_all(bookings)
        await session.flush()
        await session.commit()
        print(f"✅ Created {len(bookings)} bookings")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed())
