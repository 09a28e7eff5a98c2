"""In-memory implementation of the InventoryStore.

Nothing survives a process restart.
"""

from itertools import count

from boxoffice.domain import Customer, Event, Transaction
from boxoffice.stores.interfaces import InventoryStore


class InMemoryInventoryStore(InventoryStore):
    """Dict-backed store; one instance per venue."""

    def __init__(self) -> None:
        self._customers: dict[int, Customer] = {}
        # Registration order, including retired ids until compaction.
        self._customer_order: list[int] = []
        self._events: dict[int, Event] = {}
        self._transactions: dict[int, Transaction] = {}
        self._customer_ids = count(1)
        self._event_ids = count(1)
        self._transaction_ids = count(1)

    def next_customer_id(self) -> int:
        return next(self._customer_ids)

    def next_event_id(self) -> int:
        return next(self._event_ids)

    def next_transaction_id(self) -> int:
        return next(self._transaction_ids)

    def add_customer(self, customer: Customer) -> None:
        self._customers[customer.id] = customer
        self._customer_order.append(customer.id)

    def get_customer(self, customer_id: int) -> Customer | None:
        return self._customers.get(customer_id)

    def remove_customer(self, customer_id: int) -> bool:
        return self._customers.pop(customer_id, None) is not None

    def compact_customers(self) -> None:
        self._customer_order = [cid for cid in self._customer_order if cid in self._customers]

    def list_customers(self) -> list[Customer]:
        return [self._customers[cid] for cid in self._customer_order if cid in self._customers]

    @property
    def retired_slots(self) -> int:
        """Number of retired customers still occupying an ordering slot."""
        return len(self._customer_order) - len(self._customers)

    def add_event(self, event: Event) -> None:
        self._events[event.id] = event

    def get_event(self, event_id: int) -> Event | None:
        return self._events.get(event_id)

    def remove_event(self, event_id: int) -> bool:
        return self._events.pop(event_id, None) is not None

    def list_events(self) -> list[Event]:
        return list(self._events.values())

    def add_transaction(self, transaction: Transaction) -> None:
        self._transactions[transaction.id] = transaction

    def get_transaction(self, transaction_id: int) -> Transaction | None:
        return self._transactions.get(transaction_id)

    def remove_transaction(self, transaction_id: int) -> bool:
        return self._transactions.pop(transaction_id, None) is not None

    def list_transactions(self) -> list[Transaction]:
        return list(self._transactions.values())
