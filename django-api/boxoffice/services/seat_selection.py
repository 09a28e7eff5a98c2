"""Parsing of seat selections typed by a user.

Both parsers accept comma-separated tokens and ascending ranges, and skip
tokens they cannot understand. Checking the number of seats is left to the
caller.
"""

import re

from boxoffice.services import seat_mapping, validators
from boxoffice.services.booking_service import BookingService

_NUMBER_RE = re.compile(r"[0-9]+")


def _tokens(text: str) -> list[str]:
    return [t for t in re.sub(r"\s+", "", text).split(",") if t]


def _to_int(token: str) -> int | None:
    return int(token) if _NUMBER_RE.fullmatch(token) else None


def parse_labels(booking: BookingService, event_id: int, text: str) -> list[int]:
    """Resolve "A3,A4,B2" or "A3-A6" to seat ids of the event.

    Ranges must stay within one row and go left to right.
    """
    seat_ids: list[int] = []
    for token in _tokens(text.upper()):
        if "-" not in token:
            seat_id = booking.label_to_id(event_id, token)
            if seat_id != seat_mapping.INVALID_SEAT_ID:
                seat_ids.append(seat_id)
            continue

        bounds = token.split("-")
        if len(bounds) != 2:
            continue
        first, last = (booking.label_to_id(event_id, b) for b in bounds)
        if seat_mapping.INVALID_SEAT_ID in (first, last):
            continue
        left = validators.find_seat(booking.seats, first)
        right = validators.find_seat(booking.seats, last)
        if left is None or right is None or left.row != right.row or first > last:
            continue
        seat_ids.extend(range(first, last + 1))
    return seat_ids


def parse_ids(text: str) -> list[int]:
    """Resolve "3,4,5" or "3-6" to positive seat ids."""
    seat_ids: list[int] = []
    for token in _tokens(text):
        if "-" not in token:
            value = _to_int(token)
            if value is not None and value > 0:
                seat_ids.append(value)
            continue

        bounds = token.split("-")
        if len(bounds) != 2:
            continue
        first, last = (_to_int(b) for b in bounds)
        if first is None or last is None or first <= 0 or last < first:
            continue
        seat_ids.extend(range(first, last + 1))
    return seat_ids
