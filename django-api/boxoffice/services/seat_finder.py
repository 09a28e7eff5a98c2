"""Contiguous free-seat search within one row of an event plan."""

from boxoffice.services import validators
from boxoffice.services.booking_service import BookingService


def find_contiguous(booking: BookingService, event_id: int, row_index: int, n: int) -> list[int]:
    """Return the first run of ``n`` adjacent free seat ids in a row, or []."""
    event = booking.get_event(event_id)
    if event is None or n < 1 or not 0 <= row_index < event.rows:
        return []
    window: list[int] = []
    for column in range(event.columns):
        seat_id = booking.plan_seat_id(event, row_index, column)
        if validators.is_occupied(event, seat_id):
            window.clear()
            continue
        window.append(seat_id)
        if len(window) == n:
            return window
    return []
