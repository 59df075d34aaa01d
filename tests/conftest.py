import os
import tempfile

import pytest

os.environ.setdefault("CINEMA_LOG_DIR", tempfile.mkdtemp(prefix="cinema-ledger-logs-"))

from fastapi.testclient import TestClient  # noqa: E402

from cinema import logging_service, storage  # noqa: E402
from cinema.main import app  # noqa: E402


@pytest.fixture(autouse=True)
def action_log(tmp_path, monkeypatch):
    """Route the action log of every test into its own file"""
    log_file = tmp_path / "user_actions.log"
    monkeypatch.setattr(logging_service, "LOG_FILE", log_file)
    return log_file


@pytest.fixture(autouse=True)
def fresh_storage():
    storage.reset()
    yield
    storage.reset()


@pytest.fixture
def client():
    return TestClient(app)
