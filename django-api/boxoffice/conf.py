"""App settings, read from the ``BOXOFFICE`` dict in Django settings."""

from dataclasses import dataclass
from decimal import Decimal

from django.conf import settings

DEFAULTS = {
    "BASE_ROWS": 8,
    "BASE_COLUMNS": 12,
    "MAX_SEATS_PER_SALE": 6,
    "INITIAL_EVENT_NAME": "Evento Inicial",
    "INITIAL_EVENT_PRICE": "5000.00",
    "SEED_DEMO": True,
}


@dataclass(frozen=True)
class BoxofficeSettings:
    base_rows: int
    base_columns: int
    max_seats_per_sale: int
    initial_event_name: str
    initial_event_price: Decimal
    seed_demo: bool


def get_settings() -> BoxofficeSettings:
    values = {**DEFAULTS, **getattr(settings, "BOXOFFICE", {})}
    return BoxofficeSettings(
        base_rows=int(values["BASE_ROWS"]),
        base_columns=int(values["BASE_COLUMNS"]),
        max_seats_per_sale=int(values["MAX_SEATS_PER_SALE"]),
        initial_event_name=str(values["INITIAL_EVENT_NAME"]),
        initial_event_price=Decimal(str(values["INITIAL_EVENT_PRICE"])),
        seed_demo=bool(values["SEED_DEMO"]),
    )
