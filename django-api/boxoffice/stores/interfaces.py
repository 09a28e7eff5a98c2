"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. A store is the single
owned aggregate holding every registry and id counter of one venue.
"""

from abc import ABC, abstractmethod

from boxoffice.domain import Customer, Event, Transaction


class InventoryStore(ABC):
    """Interface for customer, event and transaction bookkeeping."""

    @abstractmethod
    def next_customer_id(self) -> int:
        """Reserve and return the next customer id. Ids are never reused."""
        ...

    @abstractmethod
    def next_event_id(self) -> int:
        """Reserve and return the next event id."""
        ...

    @abstractmethod
    def next_transaction_id(self) -> int:
        """Reserve and return the next global transaction id."""
        ...

    @abstractmethod
    def add_customer(self, customer: Customer) -> None:
        ...

    @abstractmethod
    def get_customer(self, customer_id: int) -> Customer | None:
        """Return a live customer by ID, or None if absent or retired."""
        ...

    @abstractmethod
    def remove_customer(self, customer_id: int) -> bool:
        """Retire a customer, leaving a gap in the ordering until compaction."""
        ...

    @abstractmethod
    def compact_customers(self) -> None:
        """Drop retired gaps from the ordering without touching ids."""
        ...

    @abstractmethod
    def list_customers(self) -> list[Customer]:
        """Return live customers in registration order."""
        ...

    @abstractmethod
    def add_event(self, event: Event) -> None:
        ...

    @abstractmethod
    def get_event(self, event_id: int) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def remove_event(self, event_id: int) -> bool:
        ...

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events in creation order."""
        ...

    @abstractmethod
    def add_transaction(self, transaction: Transaction) -> None:
        ...

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Transaction | None:
        ...

    @abstractmethod
    def remove_transaction(self, transaction_id: int) -> bool:
        """Remove from the global registry only; event lists are the service's job."""
        ...

    @abstractmethod
    def list_transactions(self) -> list[Transaction]:
        ...
