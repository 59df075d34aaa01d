from dataclasses import dataclass
from enum import Enum

from cinema.config import SMALL_CINEMA_SEATS


class SeatState(str, Enum):
    AVAILABLE = "AVAILABLE"
    SOLD = "SOLD"

    @property
    def symbol(self) -> str:
        return "B" if self is SeatState.SOLD else "S"


@dataclass(frozen=True)
class Hall:
    rows: int
    seats_per_row: int

    @property
    def total_seats(self) -> int:
        return self.rows * self.seats_per_row

    @property
    def front_rows(self) -> int:
        return self.rows // 2

    @property
    def back_rows(self) -> int:
        return self.rows - self.front_rows

    @property
    def is_small(self) -> bool:
        return self.total_seats <= SMALL_CINEMA_SEATS


@dataclass(frozen=True)
class TicketCount:
    total: int
    front: int
    back: int


@dataclass(frozen=True)
class Statistics:
    sold_count: int
    sold_front: int
    sold_back: int
    percentage_sold: str
    current_income: int
    total_income: int
