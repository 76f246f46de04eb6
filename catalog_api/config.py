# catalog_api/config.py
"""Runtime settings, read from the environment (and a ``.env`` file if present)."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent

CATALOG_DATA_FILE = Path(
    os.getenv("CATALOG_DATA_FILE", str(PACKAGE_DIR / "data" / "products.json"))
)

RATE_LIMIT_MAX_REQUESTS = int(os.getenv("RATE_LIMIT_MAX_REQUESTS", "256"))  # per window
RATE_LIMIT_WINDOW_SECONDS = float(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "15"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
