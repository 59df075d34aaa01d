class CinemaError(Exception):
    """Base class for every seat ledger failure"""

    kind = "CinemaError"


class InvalidConfiguration(CinemaError):
    kind = "InvalidConfiguration"


class SeatOutOfRange(CinemaError):
    kind = "SeatOutOfRange"


class SeatAlreadySold(CinemaError):
    kind = "SeatAlreadySold"


class LedgerUnavailable(CinemaError):
    """The remote cinema service could not be reached or has no hall"""

    kind = "LedgerUnavailable"


ERRORS_BY_KIND = {
    error.kind: error
    for error in (InvalidConfiguration, SeatOutOfRange, SeatAlreadySold, LedgerUnavailable)
}
