"""
Root logging setup.

Messages follow the `event key=value` convention used across the API, e.g.
`store_failure operation=create error=...`.
"""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def setup_logging(level: str | None = None) -> None:
    """
    Attach a console handler to the root logger once.

    Repeated calls (tests, app reloads) only adjust the level.
    """
    root = logging.getLogger()
    numeric_level = getattr(logging, (level or log_level()).upper(), logging.INFO)
    root.setLevel(numeric_level)
    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
