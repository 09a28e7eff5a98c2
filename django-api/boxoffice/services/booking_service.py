"""Booking service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Entity creation and sales raise domain errors. Updates, retirements and
lookups report failure through their return value instead.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from django.utils import timezone

from boxoffice.domain import Customer, CustomerClass, Event, Money, Seat, Transaction
from boxoffice.domain.errors import (
    ConsistencyError,
    CustomerNotFoundError,
    ErrorCode,
    EventNotFoundError,
    ValidationError,
)
from boxoffice.domain.value_objects import round_half_up
from boxoffice.services import seat_mapping, validators
from boxoffice.services.discounts import discount_factor
from boxoffice.services.seat_grid import generate_seats
from boxoffice.stores.interfaces import InventoryStore

logger = logging.getLogger(__name__)

DEFAULT_MAX_SEATS_PER_SALE = 6
MAX_ROW_LETTERS = 26


@dataclass(frozen=True)
class PriceQuote:
    """Amounts for a prospective sale."""

    gross: Money
    discount: Money
    net: Money


class BookingService:
    """Service owning the venue grid and every sale made against it."""

    def __init__(
        self,
        store: InventoryStore,
        base_rows: int,
        base_columns: int,
        max_seats_per_sale: int = DEFAULT_MAX_SEATS_PER_SALE,
    ) -> None:
        if not 1 <= base_rows <= MAX_ROW_LETTERS:
            raise ValueError(f"Venue rows must be between 1 and {MAX_ROW_LETTERS}")
        if base_columns < 1:
            raise ValueError("Venue columns must be positive")
        if max_seats_per_sale < 1:
            raise ValueError("Seats per sale must be positive")
        self._store = store
        self._base_rows = base_rows
        self._base_columns = base_columns
        self._max_seats_per_sale = max_seats_per_sale
        self._seats = generate_seats(base_rows, base_columns)

    @property
    def base_rows(self) -> int:
        return self._base_rows

    @property
    def base_columns(self) -> int:
        return self._base_columns

    @property
    def max_seats_per_sale(self) -> int:
        return self._max_seats_per_sale

    @property
    def seats(self) -> tuple[Seat, ...]:
        return self._seats

    @property
    def store(self) -> InventoryStore:
        return self._store

    # Customers

    def register_customer(self, name: str, classification: CustomerClass) -> Customer:
        """Create a customer with the next id.

        Raises:
            ValidationError: If the name is empty or blank.
        """
        if name is None or not name.strip():
            raise ValidationError(ErrorCode.INVALID_NAME, "Customer name cannot be blank")
        customer = Customer(
            id=self._store.next_customer_id(),
            name=name.strip(),
            classification=classification,
        )
        self._store.add_customer(customer)
        logger.info("Registered customer %s (%s)", customer.id, classification.value)
        return customer

    def get_customer(self, customer_id: int) -> Customer | None:
        return self._store.get_customer(customer_id)

    def list_customers(self) -> list[Customer]:
        return self._store.list_customers()

    def update_customer(
        self,
        customer_id: int,
        name: str | None = None,
        classification: CustomerClass | None = None,
    ) -> bool:
        """Apply the supplied fields; blank names and None values are left unchanged."""
        customer = self._store.get_customer(customer_id)
        if customer is None:
            return False
        if name is not None and name.strip():
            customer.name = name.strip()
        if classification is not None:
            customer.classification = classification
        return True

    def retire_customer(self, customer_id: int) -> bool:
        retired = self._store.remove_customer(customer_id)
        if retired:
            logger.info("Retired customer %s", customer_id)
        return retired

    def compact_customers(self) -> None:
        self._store.compact_customers()

    # Events

    def create_event(self, name: str, rows: int, columns: int, base_price) -> Event:
        """Create an event selling the top-left rows x columns of the venue.

        Raises:
            ValidationError: If the plan does not fit the venue or the price is
                negative or finer than a cent.
        """
        if not 1 <= rows <= self._base_rows:
            raise ValidationError(
                ErrorCode.INVALID_DIMENSIONS, f"Rows must be between 1 and {self._base_rows}"
            )
        if not 1 <= columns <= self._base_columns:
            raise ValidationError(
                ErrorCode.INVALID_DIMENSIONS,
                f"Columns must be between 1 and {self._base_columns}",
            )
        price = self._to_price(base_price)
        event = Event(
            id=self._store.next_event_id(),
            name=name,
            rows=rows,
            columns=columns,
            base_price=price,
        )
        self._store.add_event(event)
        logger.info("Created event %s (%sx%s at %s)", event.id, rows, columns, event.base_price)
        return event

    def get_event(self, event_id: int) -> Event | None:
        return self._store.get_event(event_id)

    def list_events(self) -> list[Event]:
        return self._store.list_events()

    def rename_event(self, event_id: int, name: str | None) -> bool:
        event = self._store.get_event(event_id)
        if event is None:
            return False
        if name is not None and name.strip():
            event.name = name.strip()
        return True

    def set_event_price(self, event_id: int, price) -> bool:
        """Change the base price of future sales.

        Raises:
            ValidationError: If the price is negative, finer than a cent or not
                a number.
        """
        event = self._store.get_event(event_id)
        if event is None:
            return False
        event.base_price = self._to_price(price)
        return True

    def delete_event_if_no_sales(self, event_id: int) -> bool:
        event = self._store.get_event(event_id)
        if event is None or event.transactions:
            return False
        self._store.remove_event(event_id)
        logger.info("Deleted event %s", event_id)
        return True

    # Availability

    def total_seats(self, event: Event) -> int:
        return event.capacity.value

    def occupied_seat_count(self, event: Event) -> int:
        return event.sold_seat_count

    def free_seat_count(self, event: Event) -> int:
        return self.total_seats(event) - self.occupied_seat_count(event)

    def plan_seat_id(self, event: Event, row: int, column: int) -> int:
        """Seat id shown at a cell of the event plan."""
        return self._seats[row * event.columns + column].id

    def free_seats_in_row(self, event_id: int, row_index: int) -> list[int]:
        event = self._store.get_event(event_id)
        if event is None or not 0 <= row_index < event.rows:
            return []
        ids = (self.plan_seat_id(event, row_index, c) for c in range(event.columns))
        return [seat_id for seat_id in ids if not validators.is_occupied(event, seat_id)]

    # Labels

    def label_to_id(self, event_id: int, label: str | None) -> int:
        event = self._store.get_event(event_id)
        if event is None:
            return seat_mapping.INVALID_SEAT_ID
        return seat_mapping.label_to_id(event, label)

    def id_to_label(self, event_id: int, seat_id: int) -> str:
        event = self._store.get_event(event_id)
        if event is None:
            return seat_mapping.UNKNOWN_LABEL
        return seat_mapping.id_to_label(event, self._seats, seat_id)

    # Sales

    def quote(self, event_id: int, customer_id: int, seat_count: int) -> PriceQuote:
        """Price a prospective sale without selling anything.

        Raises:
            EventNotFoundError: If the event does not exist.
            CustomerNotFoundError: If the customer does not exist.
        """
        event = self._require_event(event_id)
        customer = self._require_customer(customer_id)
        return self._price(event, customer, seat_count)

    def sell_seats(self, event_id: int, customer_id: int, seat_ids: Iterable[int] | None) -> Transaction:
        """Sell seats of one event to one customer, atomically.

        Either the transaction is recorded in the global registry and in the
        event, with the occupancy invariant holding, or nothing changes.

        Raises:
            EventNotFoundError: If the event does not exist.
            CustomerNotFoundError: If the customer does not exist.
            ValidationError: If the selection is empty, too large, exceeds the
                free capacity, leaves the event plan, repeats a seat or hits an
                occupied seat.
            ConsistencyError: If the committed sale broke the occupancy
                invariant; the sale has been rolled back.
        """
        event = self._require_event(event_id)
        customer = self._require_customer(customer_id)
        seat_ids = tuple(seat_ids or ())

        if not seat_ids:
            raise ValidationError(ErrorCode.EMPTY_SELECTION, "No seats selected")
        if len(seat_ids) > self._max_seats_per_sale:
            raise ValidationError(
                ErrorCode.SEAT_LIMIT_EXCEEDED,
                f"At most {self._max_seats_per_sale} seats per sale",
            )
        if len(seat_ids) > self.free_seat_count(event):
            raise ValidationError(ErrorCode.INSUFFICIENT_CAPACITY, "Not enough free seats")

        for seat_id in seat_ids:
            seat = validators.find_seat(self._seats, seat_id)
            if seat is None:
                raise ValidationError(
                    ErrorCode.SEAT_OUT_OF_PLAN, f"Invalid seat id: {seat_id}", seat_id=seat_id
                )
            if seat.row >= event.rows or seat.column >= event.columns:
                raise ValidationError(
                    ErrorCode.SEAT_OUT_OF_PLAN,
                    f"Seat {seat_id} is outside the event plan",
                    seat_id=seat_id,
                )

        seen: set[int] = set()
        for seat_id in seat_ids:
            if seat_id in seen:
                raise ValidationError(
                    ErrorCode.DUPLICATE_SEAT, f"Repeated seat id: {seat_id}", seat_id=seat_id
                )
            seen.add(seat_id)

        if not validators.all_free(event, seat_ids):
            taken = next(s for s in seat_ids if validators.is_occupied(event, s))
            raise ValidationError(
                ErrorCode.SEAT_OCCUPIED, f"Seat {taken} is already sold", seat_id=taken
            )

        price = self._price(event, customer, len(seat_ids))
        transaction = Transaction(
            id=self._store.next_transaction_id(),
            event_id=event.id,
            customer_id=customer.id,
            seat_ids=seat_ids,
            timestamp=timezone.now(),
            gross_amount=price.gross,
            discount_amount=price.discount,
            net_amount=price.net,
        )
        self._commit(event, transaction)

        if not validators.occupancy_invariant_holds(event):
            self._rollback(event, transaction)
            logger.error(
                "Occupancy invariant violated for event %s; rolled back sale %s",
                event.id,
                transaction.id,
            )
            raise ConsistencyError(event.id, transaction.id)

        logger.info(
            "Sold seats %s of event %s to customer %s (sale %s, net %s)",
            list(seat_ids),
            event.id,
            customer.id,
            transaction.id,
            transaction.net_amount,
        )
        return transaction

    def get_transaction(self, transaction_id: int) -> Transaction | None:
        return self._store.get_transaction(transaction_id)

    def list_transactions(self) -> list[Transaction]:
        return self._store.list_transactions()

    def delete_transaction(self, transaction_id: int) -> bool:
        """Remove a sale from the global registry and from every event."""
        removed = self._store.remove_transaction(transaction_id)
        for event in self._store.list_events():
            kept = [t for t in event.transactions if t.id != transaction_id]
            if len(kept) != len(event.transactions):
                event.transactions[:] = kept
                removed = True
        if removed:
            logger.info("Deleted sale %s", transaction_id)
        return removed

    def _commit(self, event: Event, transaction: Transaction) -> None:
        self._store.add_transaction(transaction)
        event.transactions.append(transaction)

    def _rollback(self, event: Event, transaction: Transaction) -> None:
        self._store.remove_transaction(transaction.id)
        event.transactions.remove(transaction)

    def _price(self, event: Event, customer: Customer, seat_count: int) -> PriceQuote:
        gross = event.base_price.amount * seat_count
        discount = round_half_up(gross * discount_factor(customer.classification))
        net = round_half_up(gross - discount)
        return PriceQuote(gross=Money(gross), discount=Money(discount), net=Money(net))

    def _require_event(self, event_id: int) -> Event:
        event = self._store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def _require_customer(self, customer_id: int) -> Customer:
        if not validators.customer_exists(self._store, customer_id):
            raise CustomerNotFoundError(customer_id)
        return self._store.get_customer(customer_id)

    @staticmethod
    def _to_price(value) -> Money:
        try:
            price = Money.of(value)
        except ValueError as exc:
            raise ValidationError(ErrorCode.INVALID_PRICE, str(exc)) from exc
        if price.amount != round_half_up(price.amount):
            raise ValidationError(ErrorCode.INVALID_PRICE, "Price cannot have fractions of a cent")
        return price
