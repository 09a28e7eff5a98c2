from boxoffice.domain.models import Customer, Event, Seat, Transaction
from boxoffice.domain.value_objects import Capacity, CustomerClass, Money

__all__ = [
    "Customer",
    "Event",
    "Seat",
    "Transaction",
    "CustomerClass",
    "Money",
    "Capacity",
]
