"""Discount policy by customer classification."""

from decimal import Decimal

from boxoffice.domain import CustomerClass

_FACTORS: dict[CustomerClass, Decimal] = {
    CustomerClass.STANDARD: Decimal("0"),
    CustomerClass.STUDENT: Decimal("0.10"),
    CustomerClass.SENIOR: Decimal("0.15"),
}


def discount_factor(classification: CustomerClass) -> Decimal:
    """Return the fraction of the gross amount taken off for this classification."""
    return _FACTORS[classification]
