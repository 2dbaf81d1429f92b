"""
Global settings configurable via environment variables.
"""

import os

OKEX_ENDPOINT = os.getenv("OKEX_ENDPOINT", "https://www.okex.com")
OKEX_API_KEY = os.getenv("OKEX_API_KEY", "")
OKEX_API_SECRET = os.getenv("OKEX_API_SECRET", "")
OKEX_PASSPHRASE = os.getenv("OKEX_PASSPHRASE", "")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))
DEPTH_SIZE = int(os.getenv("DEPTH_SIZE", "20"))
UNFINISHED_PAGE_LIMIT = int(os.getenv("UNFINISHED_PAGE_LIMIT", "100"))
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
