"""Optimistic view of a guest's reservation list.

The account page removes a reservation from what it shows as soon as the
guest clicks delete, then waits for the server. If the server call fails
the reservation is put back in its original position and the error is
re-raised for the page to display.
"""

import logging
import uuid
from collections.abc import Awaitable, Callable, Iterable

from wild_oasis.schemas.booking import BookingListItem

logger = logging.getLogger(__name__)


class OptimisticReservationList:
    """Authoritative booking list plus the ids with a delete in flight."""

    def __init__(self, bookings: Iterable[BookingListItem]) -> None:
        self._bookings: list[BookingListItem] = list(bookings)
        self._pending: set[uuid.UUID] = set()

    @property
    def pending(self) -> frozenset[uuid.UUID]:
        return frozenset(self._pending)

    @property
    def visible(self) -> list[BookingListItem]:
        """Bookings to render: the authoritative list minus pending deletes."""
        return [booking for booking in self._bookings if booking.id not in self._pending]

    def mark_deleted(self, booking_id: uuid.UUID) -> None:
        self._pending.add(booking_id)

    def confirm(self, booking_id: uuid.UUID) -> None:
        """The server deleted the booking; drop it from the authoritative list."""
        self._pending.discard(booking_id)
        self._bookings = [booking for booking in self._bookings if booking.id != booking_id]

    def rollback(self, booking_id: uuid.UUID) -> None:
        """The server refused; show the booking again."""
        self._pending.discard(booking_id)

    def replace(self, bookings: Iterable[BookingListItem]) -> None:
        """Adopt a freshly loaded list; deletes still in flight stay hidden."""
        self._bookings = list(bookings)

    async def delete(
        self,
        booking_id: uuid.UUID,
        deleter: Callable[[uuid.UUID], Awaitable[object]],
    ) -> None:
        """Hide ``booking_id`` immediately, then run ``deleter`` for it.

        A second delete of an id already in flight is a no-op.
        """
        if booking_id in self._pending:
            return

        self.mark_deleted(booking_id)
        try:
            await deleter(booking_id)
        except Exception:
            logger.warning("Delete of booking %s failed; restoring it", booking_id)
            self.rollback(booking_id)
            raise
        self.confirm(booking_id)
