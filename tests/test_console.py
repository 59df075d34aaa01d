import json

import pytest

from cinema.console import ConsoleDriver, main, read_cinema_size
from cinema.ledger import SeatLedger


def scripted(*answers):
    """input() replacement that replays answers and then hits end of input"""
    remaining = list(answers)

    def fake_input(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return fake_input


def run_driver(ledger, *answers):
    ConsoleDriver(ledger, input_func=scripted(*answers)).run()


def test_show_seats(capsys):
    ledger = SeatLedger(2, 3)
    run_driver(ledger, "1", "0")

    out = capsys.readouterr().out
    assert "1. Show the seats" in out
    assert "Cinema:\n  1 2 3 \n1 S S S\n2 S S S" in out


def test_buy_ticket_prints_price(capsys):
    ledger = SeatLedger(10, 9)
    run_driver(ledger, "2", "10", "1", "0")

    assert "Ticket price: $8" in capsys.readouterr().out
    assert ledger.is_sold(10, 1)


def test_buy_ticket_reprompts_on_sold_seat(capsys):
    ledger = SeatLedger(4, 9)
    ledger.book_seat(1, 1)
    run_driver(ledger, "2", "1", "1", "1", "2", "0")

    out = capsys.readouterr().out
    assert "That ticket has already been purchased!" in out
    assert "Ticket price: $10" in out
    assert ledger.is_sold(1, 2)


def test_buy_ticket_reprompts_on_wrong_seat(capsys):
    ledger = SeatLedger(4, 9)
    run_driver(ledger, "2", "5", "1", "0", "1", "4", "9", "0")

    out = capsys.readouterr().out
    assert out.count("Wrong input!") == 2
    assert ledger.is_sold(4, 9)


def test_buy_ticket_rejects_bad_numbers(capsys):
    ledger = SeatLedger(4, 9)
    run_driver(ledger, "2", "abc", "-1", "1", "x", "1", "1", "0")

    out = capsys.readouterr().out
    assert "Invalid number, please enter a valid number" in out
    assert "Rows and seats must be greater than 0" in out
    assert ledger.statistics().sold_count == 1


def test_statistics_report(capsys):
    ledger = SeatLedger(4, 9)
    run_driver(ledger, "2", "1", "1", "3", "0")

    out = capsys.readouterr().out
    assert "Number of purchased tickets: 1" in out
    assert "Percentage: 2.78%" in out
    assert "Current income: $10" in out
    assert "Total income: $360" in out


def test_invalid_menu_choice(capsys):
    run_driver(SeatLedger(1, 1), "menu", "0")

    assert "Invalid command, please enter a valid option" in capsys.readouterr().out


def test_unknown_menu_number_exits(capsys):
    ledger = SeatLedger(2, 2)
    run_driver(ledger, "7", "2", "1", "1")

    assert ledger.statistics().sold_count == 0


def test_end_of_input_stops_driver():
    run_driver(SeatLedger(2, 2), "1")


def test_booking_is_recorded_in_action_log(action_log):
    run_driver(SeatLedger(2, 2), "2", "1", "2", "0")

    entries = [json.loads(line) for line in action_log.read_text().splitlines()]
    assert entries[-1]["action"] == "BOOK_SEAT"
    assert entries[-1]["details"] == {"row": 1, "seat": 2, "price": 10}


def test_read_cinema_size_reprompts(capsys):
    answers = scripted("seven", "0", "4", "-2", "4", "9")

    assert read_cinema_size(input_func=answers) == (4, 9)

    out = capsys.readouterr().out
    assert "Invalid number, please enter a valid number" in out
    assert out.count("Rows and seats must be greater than 0") == 2


def test_main_runs_local_hall(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", scripted("4", "9", "2", "1", "1", "3", "0"))

    assert main([]) == 0

    out = capsys.readouterr().out
    assert "Ticket price: $10" in out
    assert "Total income: $360" in out


def test_main_handles_end_of_input_during_setup(monkeypatch):
    monkeypatch.setattr("builtins.input", scripted("4"))
    assert main([]) == 0


def test_serve_and_url_are_exclusive():
    with pytest.raises(SystemExit):
        main(["--serve", "--url", "http://cinema.test"])
