"""Seat label <-> seat id conversion scoped to an event's sub-rectangle.

Lookups signal failure with sentinels instead of raising: a malformed or
out-of-plan label is an expected outcome of parsing user input.

Label to id uses the event's own column width (``row * event.columns +
column``). When an event is narrower than the venue the resulting ids do not
coincide with base-grid ids; id to label always reports the base-grid label.
"""

import re
from collections.abc import Sequence

from boxoffice.domain import Event, Seat
from boxoffice.services.validators import find_seat

INVALID_SEAT_ID = -1
UNKNOWN_LABEL = "?"

_LABEL_RE = re.compile(r"([A-Z])\s*([0-9]+)")


def label_to_id(event: Event, label: str | None) -> int:
    """Return the seat id for a label such as "A3", or INVALID_SEAT_ID."""
    if label is None:
        return INVALID_SEAT_ID
    match = _LABEL_RE.fullmatch(label.strip().upper())
    if match is None:
        return INVALID_SEAT_ID
    row = ord(match.group(1)) - ord("A")
    column = int(match.group(2))
    if row >= event.rows or column < 1 or column > event.columns:
        return INVALID_SEAT_ID
    return row * event.columns + column


def id_to_label(event: Event, seats: Sequence[Seat], seat_id: int) -> str:
    """Return the base-grid label of a seat inside the event plan, or UNKNOWN_LABEL."""
    seat = find_seat(seats, seat_id)
    if seat is None or seat.row >= event.rows or seat.column >= event.columns:
        return UNKNOWN_LABEL
    return seat.label
