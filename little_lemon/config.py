"""Runtime configuration defaults for the menu cache and UI."""

from __future__ import annotations

import os

DB_PATH = os.environ.get("LITTLE_LEMON_DB_PATH", "data/little_lemon.db")
LOG_PATH = os.environ.get("LITTLE_LEMON_LOG_PATH", "/tmp/little-lemon.log")

MENU_API_URL = (
    "https://raw.githubusercontent.com/Meta-Mobile-Developer-PC/"
    "Working-With-Data-API/main/menu-items-by-category.json"
)
FETCH_TIMEOUT_SECONDS = 10.0

# Drives the filter toggles and doubles as the "all categories" default.
MENU_CATEGORIES: tuple[str, ...] = ("Appetizers", "Salads", "Beverages")

SEARCH_DEBOUNCE_SECONDS = 0.5

FETCH_ALERT_MESSAGE = "Error fetching data. Please try again later."
