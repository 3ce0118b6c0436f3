"""Domain errors raised by the reservation services.

Routers never catch these; ``wild_oasis.main`` registers one exception
handler that renders any ``ReservationError`` as ``{"detail": message}``
with the class's HTTP status.
"""

from fastapi import status


class ReservationError(Exception):
    """Base class for every failure the booking flow reports to a caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Reservation request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(ReservationError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "You must be logged in"


class Forbidden(ReservationError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "You are not allowed to modify this booking"


class NotFound(ReservationError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class MissingFields(ReservationError):
    status_code = 422
    default_message = "Required fields are missing"

    def __init__(self, fields: list[str] | None = None, message: str | None = None) -> None:
        self.fields = fields or []
        if message is None and self.fields:
            message = f"Missing required fields: {', '.join(self.fields)}"
        super().__init__(message)


class InvalidInput(ReservationError):
    status_code = 422
    default_message = "Invalid input"


class BookingConflict(ReservationError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Dates conflict with an existing booking"


class LoadFailed(ReservationError):
    default_message = "Bookings could not get loaded"


class CreateFailed(ReservationError):
    default_message = "Booking could not be created"


class UpdateFailed(ReservationError):
    default_message = "Booking could not be updated"


class DeleteFailed(ReservationError):
    default_message = "Booking could not be deleted"
