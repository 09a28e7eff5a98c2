"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Self

CENTS = Decimal("0.01")


class CustomerClass(Enum):
    """Customer classification; drives the discount applied to a sale."""

    STANDARD = "STANDARD"
    STUDENT = "STUDENT"
    SENIOR = "SENIOR"

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value.strip().upper())


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", self._coerce(self.amount))
        if not self.amount.is_finite():
            raise ValueError("Money amount must be a finite number")
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @staticmethod
    def _coerce(value) -> Decimal:
        try:
            return Decimal(str(value))
        except InvalidOperation as exc:
            raise ValueError(f"Invalid money amount: {value!r}") from exc

    @classmethod
    def of(cls, value) -> Self:
        return cls(amount=cls._coerce(value))

    def __str__(self) -> str:
        return str(round_half_up(self.amount))


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")


def round_half_up(amount: Decimal) -> Decimal:
    """Round to two decimal places, halves away from zero."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
