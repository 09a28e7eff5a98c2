"""Pytest configuration and shared fixtures."""

from decimal import Decimal

import pytest
from django.apps import apps
from rest_framework.test import APIClient

from boxoffice.conf import BoxofficeSettings
from boxoffice.domain import CustomerClass
from boxoffice.services.booking_service import BookingService
from boxoffice.services.bootstrap import build_booking_service
from boxoffice.stores.memory_store import InMemoryInventoryStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def demo_settings() -> BoxofficeSettings:
    return BoxofficeSettings(
        base_rows=8,
        base_columns=12,
        max_seats_per_sale=6,
        initial_event_name="Evento Inicial",
        initial_event_price=Decimal("5000.00"),
        seed_demo=True,
    )


@pytest.fixture
def booking() -> BookingService:
    """An empty 8x12 venue."""
    return BookingService(InMemoryInventoryStore(), base_rows=8, base_columns=12)


@pytest.fixture
def seeded_booking(demo_settings) -> BookingService:
    """The demo venue: one full-venue event and three customers."""
    return build_booking_service(demo_settings)


@pytest.fixture
def event(booking):
    return booking.create_event("Concierto", 8, 12, Decimal("5000"))


@pytest.fixture
def student(booking):
    return booking.register_customer("Ana Perez", CustomerClass.STUDENT)


@pytest.fixture
def app_booking() -> BookingService:
    """Fresh seeded state behind the API."""
    return apps.get_app_config("boxoffice").reset_booking()
