from dataclasses import asdict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cinema.exceptions import CinemaError, LedgerUnavailable, SeatAlreadySold
from cinema.ledger import SeatLedger
from cinema.logger import logger
from cinema.logging_service import get_logs, log_action
from cinema.schemas import (
    ActionLogSchema,
    BookSeatRequest,
    ErrorResponse,
    HallResponse,
    HallSchema,
    SeatGridSchema,
    StatisticsSchema,
    TicketResponse,
)
from cinema import storage

app = FastAPI(
    title="Cinema Ledger",
    docs_url="/docs",
    default_response_class=JSONResponse
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_STATUS = {
    LedgerUnavailable: 404,
    SeatAlreadySold: 409,
}

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
}


@app.exception_handler(CinemaError)
async def cinema_error_handler(request: Request, exc: CinemaError):
    status_code = ERROR_STATUS.get(type(exc), 400)
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.kind}: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc), "error": exc.kind})


def _hall_response(ledger: SeatLedger) -> HallResponse:
    hall = ledger.hall
    return HallResponse(
        rows=hall.rows,
        seats_per_row=hall.seats_per_row,
        total_seats=hall.total_seats,
        front_rows=hall.front_rows,
        back_rows=hall.back_rows
    )


@app.on_event("startup")
def startup():
    logger.info("Cinema Ledger started")


@app.get("/health")
def health_check():
    return {"status": "healthy", "service": "cinema-ledger"}


@app.post("/cinema", response_model=HallResponse, responses=ERROR_RESPONSES)
def create_hall(data: HallSchema):
    """Configure the hall, discarding any previous bookings"""
    logger.info(f"POST /cinema - {data.rows}x{data.seats_per_row}")

    ledger = SeatLedger(data.rows, data.seats_per_row)
    storage.set_ledger(ledger)

    log_action(
        action="CREATE_HALL",
        user_id="api",
        details={"rows": data.rows, "seats_per_row": data.seats_per_row}
    )
    return _hall_response(ledger)


@app.get("/cinema", response_model=HallResponse, responses=ERROR_RESPONSES)
def get_hall():
    logger.info("GET /cinema")
    return _hall_response(storage.get_ledger())


@app.get("/cinema/seats", response_model=SeatGridSchema, responses=ERROR_RESPONSES)
def get_seats():
    logger.info("GET /cinema/seats")
    ledger = storage.get_ledger()
    return SeatGridSchema(rows=ledger.display_grid(), layout=ledger.render())


@app.post("/cinema/tickets", response_model=TicketResponse, responses=ERROR_RESPONSES)
def book_seat(request: BookSeatRequest):
    """Buy the ticket for one seat"""
    logger.info(f"POST /cinema/tickets - row {request.row}, seat {request.seat}")

    with storage.booking_lock:
        ledger = storage.get_ledger()
        price = ledger.book_seat(request.row, request.seat)

    log_action(
        action="BOOK_SEAT",
        user_id="api",
        details={"row": request.row, "seat": request.seat, "price": price}
    )
    return TicketResponse(row=request.row, seat=request.seat, price=price)


@app.get("/cinema/statistics", response_model=StatisticsSchema, responses=ERROR_RESPONSES)
def get_statistics():
    logger.info("GET /cinema/statistics")
    return StatisticsSchema(**asdict(storage.get_ledger().statistics()))


@app.get("/cinema/actions", response_model=ActionLogSchema)
def get_actions(limit: int = 100):
    """Most recent entries of the user action log"""
    logger.info(f"GET /cinema/actions - limit {limit}")
    logs = get_logs(limit)
    return ActionLogSchema(logs=logs, total_lines=len(logs))
