"""Runtime configuration defaults for the catalog API and debug logging."""

from __future__ import annotations

from os import getenv

API_BASE_URL = getenv("FOOD_API_BASE_URL", "http://localhost:3333")
API_TIMEOUT_SECONDS = float(getenv("FOOD_API_TIMEOUT_SECONDS", "8.0"))

# "1" serves foods from the bundled sample data instead of the API.
OFFLINE = getenv("FOOD_DETAILS_OFFLINE", "0") == "1"

DEBUG_LOG_PATH = getenv("FOOD_DETAILS_DEBUG_LOG", "/tmp/food-details-debug.log")

CURRENCY_SYMBOL = "R$"
