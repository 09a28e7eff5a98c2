"""Construction of a booking service from settings, with optional demo data."""

import logging

from boxoffice.conf import BoxofficeSettings
from boxoffice.domain import CustomerClass
from boxoffice.services.booking_service import BookingService
from boxoffice.stores.memory_store import InMemoryInventoryStore

logger = logging.getLogger(__name__)

DEMO_CUSTOMERS = (
    ("Ana Perez", CustomerClass.STUDENT),
    ("Luis Munoz", CustomerClass.SENIOR),
    ("Maria Lopez", CustomerClass.STANDARD),
)


def build_booking_service(config: BoxofficeSettings) -> BookingService:
    booking = BookingService(
        InMemoryInventoryStore(),
        base_rows=config.base_rows,
        base_columns=config.base_columns,
        max_seats_per_sale=config.max_seats_per_sale,
    )
    if config.seed_demo:
        seed_demo(booking, config)
    return booking


def seed_demo(booking: BookingService, config: BoxofficeSettings) -> None:
    """Create the full-venue opening event and the sample customers."""
    booking.create_event(
        config.initial_event_name,
        booking.base_rows,
        booking.base_columns,
        config.initial_event_price,
    )
    for name, classification in DEMO_CUSTOMERS:
        booking.register_customer(name, classification)
    logger.info(
        "Seeded demo data: %s event(s), %s customer(s)",
        len(booking.list_events()),
        len(booking.list_customers()),
    )
