"""Text views of an event plan.

Unknown events render as a message instead of raising, so callers can print
whatever comes back.
"""

from boxoffice.domain import Event
from boxoffice.services import validators
from boxoffice.services.booking_service import BookingService

NOT_FOUND_MESSAGE = "Event not found."

RESET = "\033[0m"
GREEN = "\033[32m"
RED = "\033[31m"
CYAN = "\033[36m"
BOLD = "\033[1m"


class PlanRenderer:
    """Renders occupancy, id maps and reports for the events of one service."""

    def __init__(self, booking: BookingService) -> None:
        self._booking = booking

    def occupancy_view(self, event_id: int, use_colors: bool = False) -> str:
        """Grid of O (free) and X (occupied) with a header and a legend."""
        event = self._booking.get_event(event_id)
        if event is None:
            return NOT_FOUND_MESSAGE

        def paint(text: str, color: str) -> str:
            return f"{color}{text}{RESET}" if use_colors else text

        lines = [
            f"{paint('Plan - ' + event.name, BOLD)} | Price: {event.base_price}"
            f" | Free: {self._booking.free_seat_count(event)}/{self._booking.total_seats(event)}",
            "    " + "".join(f"{c:3d}" for c in range(1, event.columns + 1)),
            self._border(event, 3),
        ]
        for row in range(event.rows):
            cells = []
            for column in range(event.columns):
                seat_id = self._booking.plan_seat_id(event, row, column)
                if validators.is_occupied(event, seat_id):
                    cells.append(f" {paint('X', RED)} ")
                else:
                    cells.append(f" {paint('O', GREEN)} ")
            lines.append(f" {self._row_letter(row)} |{''.join(cells)}|")
        lines.append(self._border(event, 3))
        lines.append(paint("Legend: ", CYAN) + paint("O Free ", GREEN) + paint("X Occupied", RED))
        return "\n".join(lines) + "\n"

    def id_map_view(self, event_id: int) -> str:
        """Grid of the seat ids used when selecting by id."""
        event = self._booking.get_event(event_id)
        if event is None:
            return NOT_FOUND_MESSAGE

        lines = [
            f"Plan with IDs - {event.name}",
            "     " + "".join(f"{c:4d}" for c in range(1, event.columns + 1)),
            self._border(event, 4),
        ]
        for row in range(event.rows):
            ids = "".join(
                f"{self._booking.plan_seat_id(event, row, column):4d}"
                for column in range(event.columns)
            )
            lines.append(f" {self._row_letter(row)} |{ids}|")
        lines.append(self._border(event, 4))
        lines.append("ID = (row_index * columns + column), starting at 1.")
        return "\n".join(lines) + "\n"

    def report(self, event_id: int) -> str:
        event = self._booking.get_event(event_id)
        if event is None:
            return NOT_FOUND_MESSAGE
        occupied = self._booking.occupied_seat_count(event)
        total = self._booking.total_seats(event)
        percent = 0.0 if total == 0 else 100.0 * occupied / total
        return (
            f"Event: {event.name} | Sales: {len(event.transactions)}"
            f" | Occupied: {occupied}/{total} ({percent:.1f}%)"
            f" | Free: {self._booking.free_seat_count(event)}"
        )

    @staticmethod
    def _border(event: Event, cell_width: int) -> str:
        return "   +" + "-" * (event.columns * cell_width) + "+"

    @staticmethod
    def _row_letter(row: int) -> str:
        return chr(ord("A") + row)
