import requests

from cinema.config import CINEMA_SERVICE_URL, HTTP_TIMEOUT
from cinema.exceptions import ERRORS_BY_KIND, CinemaError, LedgerUnavailable
from cinema.logger import logger
from cinema.models import SeatState, Statistics


class LedgerClient:
    """Seat ledger interface backed by a remote cinema service"""

    def __init__(self, base_url: str = CINEMA_SERVICE_URL, timeout: float = HTTP_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _request(self, method: str, path: str, payload: dict = None) -> dict:
        url = f"{self.base_url}{path}"
        try:
            response = requests.request(method, url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Cinema service unavailable: {e}")
            raise LedgerUnavailable(f"Cinema service unavailable: {e}") from e

        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = {}
            error = ERRORS_BY_KIND.get(body.get("error"), CinemaError)
            detail = body.get("detail", response.text)
            logger.warning(f"{method} {path} failed with {response.status_code}: {detail}")
            raise error(detail)

        return response.json()

    def create(self, rows: int, seats_per_row: int) -> dict:
        return self._request("POST", "/cinema", {"rows": rows, "seats_per_row": seats_per_row})

    def display_grid(self):
        data = self._request("GET", "/cinema/seats")
        return [[SeatState(state) for state in row] for row in data["rows"]]

    def render(self) -> str:
        return self._request("GET", "/cinema/seats")["layout"]

    def book_seat(self, row: int, seat: int) -> int:
        data = self._request("POST", "/cinema/tickets", {"row": row, "seat": seat})
        logger.info(f"Seat {row}-{seat} booked remotely for {data['price']}")
        return data["price"]

    def statistics(self) -> Statistics:
        return Statistics(**self._request("GET", "/cinema/statistics"))
