"""Domain models representing the in-memory inventory state.

These are plain domain objects with no API input rules. Seats and
transactions are frozen; customers and events carry mutable fields that the
booking service updates in place.
"""

from dataclasses import dataclass, field
from datetime import datetime

from boxoffice.domain.value_objects import Capacity, CustomerClass, Money


@dataclass(frozen=True)
class Seat:
    """Physical seat of the base venue grid."""

    id: int
    row: int
    column: int
    label: str


@dataclass
class Customer:
    """Domain representation of a Customer."""

    id: int
    name: str
    classification: CustomerClass


@dataclass(frozen=True)
class Transaction:
    """A completed sale of one or more seats for one event."""

    id: int
    event_id: int
    customer_id: int
    seat_ids: tuple[int, ...]
    timestamp: datetime
    gross_amount: Money
    discount_amount: Money
    net_amount: Money


@dataclass
class Event:
    """Domain representation of an Event selling a sub-rectangle of the venue."""

    id: int
    name: str
    rows: int
    columns: int
    base_price: Money
    transactions: list[Transaction] = field(default_factory=list)

    @property
    def capacity(self) -> Capacity:
        return Capacity(self.rows * self.columns)

    @property
    def sold_seat_count(self) -> int:
        return sum(len(t.seat_ids) for t in self.transactions)
