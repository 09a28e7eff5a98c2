"""Tests for the text plan views and the contiguous seat finder."""

import pytest

from boxoffice.domain import CustomerClass
from boxoffice.services.plan_renderer import GREEN, NOT_FOUND_MESSAGE, RED, PlanRenderer
from boxoffice.services.seat_finder import find_contiguous


@pytest.fixture
def small_event(booking):
    return booking.create_event("Mini", 2, 3, 10)


@pytest.fixture
def renderer(booking) -> PlanRenderer:
    return PlanRenderer(booking)


class TestOccupancyView:
    def test_layout(self, booking, renderer, small_event, student):
        booking.sell_seats(small_event.id, student.id, [2])
        lines = renderer.occupancy_view(small_event.id).splitlines()
        assert lines == [
            "Plan - Mini | Price: 10.00 | Free: 5/6",
            "      1  2  3",
            "   +---------+",
            " A | O  X  O |",
            " B | O  O  O |",
            "   +---------+",
            "Legend: O Free X Occupied",
        ]

    def test_colors_are_opt_in(self, booking, renderer, small_event, student):
        booking.sell_seats(small_event.id, student.id, [1])
        plain = renderer.occupancy_view(small_event.id)
        colored = renderer.occupancy_view(small_event.id, use_colors=True)
        assert "\033[" not in plain
        assert f"{RED}X" in colored
        assert f"{GREEN}O" in colored

    def test_unknown_event(self, renderer):
        assert renderer.occupancy_view(404) == NOT_FOUND_MESSAGE


class TestIdMapView:
    def test_layout(self, renderer, small_event):
        lines = renderer.id_map_view(small_event.id).splitlines()
        assert lines == [
            "Plan with IDs - Mini",
            "        1   2   3",
            "   +------------+",
            " A |   1   2   3|",
            " B |   4   5   6|",
            "   +------------+",
            "ID = (row_index * columns + column), starting at 1.",
        ]

    def test_unknown_event(self, renderer):
        assert renderer.id_map_view(404) == NOT_FOUND_MESSAGE


class TestReport:
    def test_summary_line(self, booking, renderer, event, student):
        booking.sell_seats(event.id, student.id, [1, 2, 3])
        assert renderer.report(event.id) == (
            "Event: Concierto | Sales: 1 | Occupied: 3/96 (3.1%) | Free: 93"
        )

    def test_empty_event(self, renderer, small_event):
        assert renderer.report(small_event.id) == (
            "Event: Mini | Sales: 0 | Occupied: 0/6 (0.0%) | Free: 6"
        )

    def test_unknown_event(self, renderer):
        assert renderer.report(404) == NOT_FOUND_MESSAGE


class TestFindContiguous:
    def test_first_free_run(self, booking, event):
        assert find_contiguous(booking, event.id, 0, 3) == [1, 2, 3]

    def test_occupied_seat_resets_the_run(self, booking, event, student):
        booking.sell_seats(event.id, student.id, [3])
        assert find_contiguous(booking, event.id, 0, 3) == [4, 5, 6]
        assert find_contiguous(booking, event.id, 0, 2) == [1, 2]

    def test_no_run_long_enough(self, booking, small_event):
        customer = booking.register_customer("Luis Munoz", CustomerClass.SENIOR)
        booking.sell_seats(small_event.id, customer.id, [2])
        assert find_contiguous(booking, small_event.id, 0, 2) == []
        assert find_contiguous(booking, small_event.id, 1, 4) == []
        assert find_contiguous(booking, small_event.id, 1, 2) == [4, 5]

    def test_second_row_uses_plan_ids(self, booking, event):
        assert find_contiguous(booking, event.id, 1, 2) == [13, 14]

    @pytest.mark.parametrize("event_id, row, n", [(404, 0, 1), (1, 8, 1), (1, 0, 0)])
    def test_invalid_requests(self, booking, event, event_id, row, n):
        assert find_contiguous(booking, event_id, row, n) == []
