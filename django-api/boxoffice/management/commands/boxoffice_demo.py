"""
Django management command that runs a quick sale against a fresh demo venue
and prints the resulting plan and report.
"""

import logging
from dataclasses import replace

from django.core.management.base import BaseCommand, CommandError

from boxoffice.conf import get_settings
from boxoffice.domain.errors import DomainError
from boxoffice.services.bootstrap import build_booking_service
from boxoffice.services.plan_renderer import PlanRenderer
from boxoffice.services.seat_selection import parse_ids

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Sell seats to the first demo customer and print the event plan and report"

    def add_arguments(self, parser):
        parser.add_argument(
            "--seats",
            type=str,
            default="1,2,3",
            help='Seat ids to sell, e.g. "1,2,3" or "4-6" (default: 1,2,3)',
        )
        parser.add_argument(
            "--colors",
            action="store_true",
            help="Highlight free and occupied seats with ANSI colors",
        )

    def handle(self, *args, **options):
        booking = build_booking_service(replace(get_settings(), seed_demo=True))
        renderer = PlanRenderer(booking)
        event = booking.list_events()[0]
        customer = booking.list_customers()[0]

        seat_ids = parse_ids(options["seats"])
        if not seat_ids:
            raise CommandError(f"No valid seat ids in {options['seats']!r}")

        try:
            sale = booking.sell_seats(event.id, customer.id, seat_ids)
        except DomainError as exc:
            self.stdout.write(self.style.ERROR(f"Sale failed: {exc.message}"))
        else:
            labels = [booking.id_to_label(event.id, s) for s in sale.seat_ids]
            self.stdout.write(
                self.style.SUCCESS(
                    f"Sale {sale.id}: {customer.name} bought {', '.join(labels)}"
                    f" | Gross: {sale.gross_amount} Discount: {sale.discount_amount}"
                    f" Net: {sale.net_amount}"
                )
            )

        self.stdout.write(renderer.occupancy_view(event.id, use_colors=options["colors"]))
        self.stdout.write(renderer.report(event.id))
