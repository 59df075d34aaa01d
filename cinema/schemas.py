from pydantic import BaseModel, StrictInt
from typing import Any, Dict, List

from cinema.models import SeatState


class HallSchema(BaseModel):
    rows: StrictInt
    seats_per_row: StrictInt


class HallResponse(BaseModel):
    rows: int
    seats_per_row: int
    total_seats: int
    front_rows: int
    back_rows: int


class SeatGridSchema(BaseModel):
    rows: List[List[SeatState]]
    layout: str


class BookSeatRequest(BaseModel):
    row: StrictInt
    seat: StrictInt


class TicketResponse(BaseModel):
    row: int
    seat: int
    price: int


class StatisticsSchema(BaseModel):
    sold_count: int
    sold_front: int
    sold_back: int
    percentage_sold: str
    current_income: int
    total_income: int


class ActionLogSchema(BaseModel):
    logs: List[Dict[str, Any]]
    total_lines: int


class ErrorResponse(BaseModel):
    detail: str
    error: str
