"""Base venue seating plan."""

from boxoffice.domain import Seat


def seat_label(row: int, column: int) -> str:
    """Human label for a 0-based coordinate, e.g. (1, 6) -> "B7"."""
    return f"{chr(ord('A') + row)}{column + 1}"


def generate_seats(rows: int, columns: int) -> tuple[Seat, ...]:
    """Return the venue grid in row-major order with ids 1..rows*columns."""
    return tuple(
        Seat(id=row * columns + column + 1, row=row, column=column, label=seat_label(row, column))
        for row in range(rows)
        for column in range(columns)
    )
