"""Inventory predicates shared by the booking service and the renderers.

All functions are side-effect free.
"""

from collections.abc import Iterable, Sequence

from boxoffice.domain import Event, Seat
from boxoffice.stores.interfaces import InventoryStore


def customer_exists(store: InventoryStore, customer_id: int) -> bool:
    return store.get_customer(customer_id) is not None


def find_seat(seats: Sequence[Seat], seat_id: int) -> Seat | None:
    """Return the base-grid seat with this id, or None."""
    # Seats are generated row-major with id == index + 1.
    if 1 <= seat_id <= len(seats):
        seat = seats[seat_id - 1]
        if seat.id == seat_id:
            return seat
    return next((s for s in seats if s.id == seat_id), None)


def is_occupied(event: Event, seat_id: int) -> bool:
    return any(seat_id in t.seat_ids for t in event.transactions)


def all_free(event: Event, seat_ids: Iterable[int]) -> bool:
    return not any(is_occupied(event, seat_id) for seat_id in seat_ids)


def occupancy_invariant_holds(event: Event) -> bool:
    """True when no seat appears in more than one transaction of the event."""
    sold: set[int] = set()
    total = 0
    for transaction in event.transactions:
        sold.update(transaction.seat_ids)
        total += len(transaction.seat_ids)
    return len(sold) == total
