from django.apps import AppConfig

from boxoffice.conf import get_settings


class BoxofficeConfig(AppConfig):
    """Holds the process-wide booking service used by the API."""

    name = "boxoffice"
    verbose_name = "Box office"

    booking = None

    def ready(self) -> None:
        self.reset_booking()

    def reset_booking(self):
        """Replace the in-memory state with a freshly built service."""
        from boxoffice.services.bootstrap import build_booking_service

        self.booking = build_booking_service(get_settings())
        return self.booking
