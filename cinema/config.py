import os

# Pricing
SMALL_CINEMA_SEATS = 60
SMALL_CINEMA_TICKET_PRICE = 10
FRONT_ROW_TICKET_PRICE = 10
BACK_ROW_TICKET_PRICE = 8

# Logging
LOG_DIR = os.getenv("CINEMA_LOG_DIR", "logs")
LOG_FILE = os.path.join(LOG_DIR, "cinema-ledger.log")
ACTION_LOG_FILE = os.getenv("CINEMA_ACTION_LOG", os.path.join(LOG_DIR, "user_actions.log"))

# HTTP facade
HOST = os.getenv("CINEMA_HOST", "0.0.0.0")
PORT = int(os.getenv("CINEMA_PORT", 8000))
CINEMA_SERVICE_URL = os.getenv("CINEMA_SERVICE_URL", "http://localhost:8000")
HTTP_TIMEOUT = float(os.getenv("CINEMA_HTTP_TIMEOUT", 3))
