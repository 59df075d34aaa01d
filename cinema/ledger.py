from decimal import ROUND_HALF_UP, Decimal
from typing import List

from cinema.config import (
    BACK_ROW_TICKET_PRICE,
    FRONT_ROW_TICKET_PRICE,
    SMALL_CINEMA_TICKET_PRICE,
)
from cinema.exceptions import InvalidConfiguration, SeatAlreadySold, SeatOutOfRange
from cinema.logger import logger
from cinema.models import Hall, SeatState, Statistics, TicketCount


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class SeatLedger:
    """Seat grid of a single hall together with its pricing and sales statistics.

    Rows and seats are 1-indexed everywhere in the public interface. A seat
    moves from AVAILABLE to SOLD exactly once; nothing moves it back.
    """

    def __init__(self, rows: int, seats_per_row: int):
        if not _is_positive_int(rows) or not _is_positive_int(seats_per_row):
            raise InvalidConfiguration(
                f"Rows and seats must be greater than 0 (got rows={rows!r}, seats_per_row={seats_per_row!r})"
            )
        self.hall = Hall(rows=rows, seats_per_row=seats_per_row)
        self._seats = [[SeatState.AVAILABLE] * seats_per_row for _ in range(rows)]
        logger.info(f"Hall created: {rows} rows x {seats_per_row} seats")

    def display_grid(self) -> List[List[SeatState]]:
        """Snapshot of the seat states, row 1 first"""
        return [list(row) for row in self._seats]

    def render(self) -> str:
        """Text layout of the hall, B for sold seats and S for available ones"""
        header = "  " + "".join(f"{number} " for number in range(1, self.hall.seats_per_row + 1))
        lines = ["Cinema:", header]
        for index, row in enumerate(self._seats, start=1):
            lines.append(f"{index} " + " ".join(seat.symbol for seat in row))
        return "\n".join(lines)

    def _check_range(self, row: int, seat: int = 1):
        in_range = (
            _is_positive_int(row) and _is_positive_int(seat)
            and row <= self.hall.rows and seat <= self.hall.seats_per_row
        )
        if not in_range:
            logger.warning(f"Seat {row}-{seat} out of range")
            raise SeatOutOfRange(f"Seat {row}-{seat} is outside a {self.hall.rows}x{self.hall.seats_per_row} hall")

    def ticket_price(self, row: int) -> int:
        self._check_range(row)
        if self.hall.is_small:
            return SMALL_CINEMA_TICKET_PRICE
        if row <= self.hall.front_rows:
            return FRONT_ROW_TICKET_PRICE
        return BACK_ROW_TICKET_PRICE

    def is_sold(self, row: int, seat: int) -> bool:
        self._check_range(row, seat)
        return self._seats[row - 1][seat - 1] is SeatState.SOLD

    def book_seat(self, row: int, seat: int) -> int:
        """Sell the seat and return its ticket price.

        Raises SeatOutOfRange or SeatAlreadySold without touching the grid.
        """
        self._check_range(row, seat)
        if self._seats[row - 1][seat - 1] is SeatState.SOLD:
            logger.warning(f"Seat {row}-{seat} already sold")
            raise SeatAlreadySold(f"Seat {row}-{seat} has already been purchased")

        self._seats[row - 1][seat - 1] = SeatState.SOLD
        price = self.ticket_price(row)
        logger.info(f"Seat {row}-{seat} sold for {price}")
        return price

    def purchased_tickets(self) -> TicketCount:
        front = back = 0
        for index, row in enumerate(self._seats, start=1):
            sold = sum(1 for seat in row if seat is SeatState.SOLD)
            if index <= self.hall.front_rows:
                front += sold
            else:
                back += sold
        return TicketCount(total=front + back, front=front, back=back)

    def statistics(self) -> Statistics:
        hall = self.hall
        tickets = self.purchased_tickets()
        percentage = (Decimal(tickets.total * 100) / hall.total_seats).quantize(Decimal("0.01"), ROUND_HALF_UP)

        if hall.is_small:
            current_income = tickets.total * SMALL_CINEMA_TICKET_PRICE
            total_income = hall.total_seats * SMALL_CINEMA_TICKET_PRICE
        else:
            current_income = tickets.front * FRONT_ROW_TICKET_PRICE + tickets.back * BACK_ROW_TICKET_PRICE
            total_income = hall.seats_per_row * (
                hall.front_rows * FRONT_ROW_TICKET_PRICE + hall.back_rows * BACK_ROW_TICKET_PRICE
            )

        return Statistics(
            sold_count=tickets.total,
            sold_front=tickets.front,
            sold_back=tickets.back,
            percentage_sold=str(percentage),
            current_income=current_income,
            total_income=total_income,
        )
