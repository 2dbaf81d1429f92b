"""
Simple structured logger for console and file output.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional

from config import settings


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: Optional[str] = None, level: Optional[int] = None) -> logging.Logger:
    """
    Return a configured logger instance.

    Ensures handlers are attached only once to avoid duplicate logs. File output
    goes to LOG_DIR/YYYY-MM-DD/swap-HHMMSS-<pid>.log unless LOG_DIR is empty.
    """
    logger = logging.getLogger(name if name else "okex_swap")
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)

        log_root = getattr(settings, "LOG_DIR", "")
        if log_root:
            now = datetime.now(timezone.utc)
            log_dir = os.path.join(log_root, now.strftime("%Y-%m-%d"))
            os.makedirs(log_dir, exist_ok=True)
            file_path = os.path.join(log_dir, f"swap-{now.strftime('%H%M%S')}-{os.getpid()}.log")
            file_handler = logging.FileHandler(file_path, encoding="utf-8")
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(file_handler)

        if level is None:
            level = logging.getLevelName(getattr(settings, "LOG_LEVEL", "INFO"))
            if not isinstance(level, int):
                level = logging.INFO
        logger.setLevel(level)
        logger.propagate = False
    return logger
