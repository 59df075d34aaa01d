from cinema.logging_service import get_logs, log_action


def test_log_action_appends_entries(action_log):
    log_action("CREATE_HALL", details={"rows": 4, "seats_per_row": 9})
    log_action("BOOK_SEAT", user_id="api", details={"row": 1, "seat": 1, "price": 10})

    logs = get_logs()

    assert [entry["action"] for entry in logs] == ["CREATE_HALL", "BOOK_SEAT"]
    assert logs[0]["user_id"] == "console"
    assert logs[1]["details"]["price"] == 10
    assert "timestamp" in logs[0]


def test_get_logs_limit(action_log):
    for seat in range(1, 6):
        log_action("BOOK_SEAT", details={"row": 1, "seat": seat})

    logs = get_logs(limit=2)

    assert [entry["details"]["seat"] for entry in logs] == [4, 5]


def test_get_logs_without_file(action_log):
    assert not action_log.exists()
    assert get_logs() == []


def test_get_logs_skips_malformed_lines(action_log):
    log_action("BOOK_SEAT", details={"row": 1, "seat": 1})
    with open(action_log, "a", encoding="utf-8") as f:
        f.write("not json\n")

    assert len(get_logs()) == 1
