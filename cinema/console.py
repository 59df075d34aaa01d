import argparse
import sys

from cinema.config import CINEMA_SERVICE_URL, HOST, PORT
from cinema.exceptions import LedgerUnavailable, SeatAlreadySold, SeatOutOfRange
from cinema.ledger import SeatLedger
from cinema.logging_service import log_action

MENU = (
    "1. Show the seats",
    "2. Buy a ticket",
    "3. Statistics",
    "0. Exit",
)


class ConsoleDriver:
    """Text menu around a seat ledger.

    Works with anything exposing render(), book_seat() and statistics(): a
    local SeatLedger or a LedgerClient talking to the HTTP service. Every
    re-prompt is a loop; the ledger itself never retries.
    """

    def __init__(self, ledger, input_func=None, output=None):
        self.ledger = ledger
        self.input = input_func or input
        self.output = output or print

    def _notice(self, message: str):
        self.output()
        self.output(message)

    def _read_menu_choice(self) -> int:
        while True:
            try:
                return int(self.input())
            except ValueError:
                self._notice("Invalid command, please enter a valid option")

    def run(self):
        try:
            while True:
                self.output()
                for line in MENU:
                    self.output(line)
                choice = self._read_menu_choice()
                if choice == 1:
                    self.show_seats()
                elif choice == 2:
                    self.buy_ticket()
                elif choice == 3:
                    self.show_statistics()
                else:
                    return
        except EOFError:
            return

    def show_seats(self):
        self.output()
        self.output(self.ledger.render())

    def _request_seat(self):
        while True:
            try:
                self.output()
                row = int(self.input("Enter a row number: "))
                if row < 0:
                    raise ValueError("negative")
                seat = int(self.input("Enter a seat number in that row: "))
                if seat < 0:
                    raise ValueError("negative")
                return row, seat
            except ValueError as e:
                if str(e) == "negative":
                    self._notice("Rows and seats must be greater than 0")
                else:
                    self._notice("Invalid number, please enter a valid number")

    def buy_ticket(self):
        while True:
            row, seat = self._request_seat()
            try:
                price = self.ledger.book_seat(row, seat)
            except SeatAlreadySold:
                self._notice("That ticket has already been purchased!")
            except SeatOutOfRange:
                self._notice("Wrong input!")
            else:
                # A remote service records its own bookings
                if isinstance(self.ledger, SeatLedger):
                    log_action(action="BOOK_SEAT", details={"row": row, "seat": seat, "price": price})
                self._notice(f"Ticket price: ${price}")
                return

    def show_statistics(self):
        stats = self.ledger.statistics()
        self.output()
        self.output(f"Number of purchased tickets: {stats.sold_count}")
        self.output(f"Percentage: {stats.percentage_sold}%")
        self.output(f"Current income: ${stats.current_income}")
        self.output(f"Total income: ${stats.total_income}")


def read_cinema_size(input_func=None, output=None):
    """Prompt until both the row count and the seats per row are positive"""
    input_func = input_func or input
    output = output or print
    while True:
        try:
            rows = int(input_func("Enter the number of rows: "))
            if rows <= 0:
                raise ValueError("non-positive")
            seats_per_row = int(input_func("Enter the number of seats in each row: "))
            if seats_per_row <= 0:
                raise ValueError("non-positive")
            return rows, seats_per_row
        except ValueError as e:
            output()
            if str(e) == "non-positive":
                output("Rows and seats must be greater than 0")
            else:
                output("Invalid number, please enter a valid number")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cinema-ledger", description="Cinema seat reservation simulator")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--url", nargs="?", const=CINEMA_SERVICE_URL, default=None,
                      help="drive a remote cinema service instead of an in-process hall")
    mode.add_argument("--serve", action="store_true", help="run the HTTP service")
    parser.add_argument("--host", default=HOST)
    parser.add_argument("--port", type=int, default=PORT)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.serve:
        import uvicorn
        uvicorn.run("cinema.main:app", host=args.host, port=args.port)
        return 0

    try:
        rows, seats_per_row = read_cinema_size()
    except EOFError:
        return 0

    try:
        if args.url:
            from cinema.ledger_client import LedgerClient
            ledger = LedgerClient(args.url)
            ledger.create(rows, seats_per_row)
        else:
            ledger = SeatLedger(rows, seats_per_row)
            log_action(action="CREATE_HALL", details={"rows": rows, "seats_per_row": seats_per_row})

        ConsoleDriver(ledger).run()
    except LedgerUnavailable as e:
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
