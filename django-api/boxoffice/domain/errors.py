"""Domain error codes for the boxoffice module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_NAME = "INVALID_NAME"
    INVALID_DIMENSIONS = "INVALID_DIMENSIONS"
    INVALID_PRICE = "INVALID_PRICE"
    EMPTY_SELECTION = "EMPTY_SELECTION"
    SEAT_LIMIT_EXCEEDED = "SEAT_LIMIT_EXCEEDED"
    INSUFFICIENT_CAPACITY = "INSUFFICIENT_CAPACITY"
    SEAT_OUT_OF_PLAN = "SEAT_OUT_OF_PLAN"
    DUPLICATE_SEAT = "DUPLICATE_SEAT"
    SEAT_OCCUPIED = "SEAT_OCCUPIED"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    CUSTOMER_NOT_FOUND = "CUSTOMER_NOT_FOUND"
    INVARIANT_VIOLATION = "INVARIANT_VIOLATION"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when caller input is invalid or out of range."""

    def __init__(self, code: ErrorCode, message: str, seat_id: int | None = None) -> None:
        super().__init__(code=code, message=message)
        self.seat_id = seat_id


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    def __init__(self, event_id: int) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message=f"Event {event_id} not found",
        )
        self.event_id = event_id


class CustomerNotFoundError(NotFoundError):
    """Raised when a customer is not found."""

    def __init__(self, customer_id: int) -> None:
        super().__init__(
            code=ErrorCode.CUSTOMER_NOT_FOUND,
            message=f"Customer {customer_id} not found",
        )
        self.customer_id = customer_id


class ConsistencyError(DomainError):
    """Raised when a committed sale broke the occupancy invariant and was rolled back.

    Signals an internal bug rather than bad caller input.
    """

    def __init__(self, event_id: int, transaction_id: int) -> None:
        super().__init__(
            code=ErrorCode.INVARIANT_VIOLATION,
            message="Occupancy invariant violated; sale rolled back",
        )
        self.event_id = event_id
        self.transaction_id = transaction_id
