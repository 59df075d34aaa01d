from threading import Lock
from typing import Optional

from cinema.exceptions import LedgerUnavailable
from cinema.ledger import SeatLedger

# One hall per process; configuring a new hall replaces the old ledger
_ledger: Optional[SeatLedger] = None

# Booking is check-then-set, so it runs under a single lock per ledger
booking_lock = Lock()


def set_ledger(ledger: SeatLedger):
    global _ledger
    with booking_lock:
        _ledger = ledger


def get_ledger() -> SeatLedger:
    if _ledger is None:
        raise LedgerUnavailable("No hall configured, POST /cinema first")
    return _ledger


def reset():
    set_ledger(None)
