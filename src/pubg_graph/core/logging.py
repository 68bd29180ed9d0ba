from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - [%(levelname)s] - %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Install one stream handler on the root logger (idempotent)."""
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    # httpx logs every request at INFO, which duplicates ours.
    logging.getLogger("httpx").setLevel(logging.WARNING)
