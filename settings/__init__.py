"""Application settings."""

import os
from pathlib import Path

# Storage
DATA_PATH = Path(os.getenv("ITEMS_DATA_PATH", "data/items.json"))
READ_TIMEOUT = float(os.getenv("ITEMS_READ_TIMEOUT", "5.0"))

# Statistics cache
WATCH_INTERVAL = float(os.getenv("ITEMS_WATCH_INTERVAL", "1.0"))
STATS_MAX_WAIT_RETRIES = int(os.getenv("ITEMS_STATS_MAX_WAIT_RETRIES", "3"))

# Query
DEFAULT_PAGE_SIZE = int(os.getenv("ITEMS_DEFAULT_PAGE_SIZE", "10"))

# Logging
LOG_DIR = Path(os.getenv("ITEMS_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("ITEMS_LOG_LEVEL", "INFO")
LOG_FILE_PREFIX = os.getenv("ITEMS_LOG_PREFIX", "items")
LOG_RETENTION = os.getenv("ITEMS_LOG_RETENTION", "7 days")
