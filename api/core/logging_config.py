"""Root logger configuration for the records API."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """
    Attach a console handler to the root logger and set its level.

    Does nothing when the root logger already has handlers (uvicorn, pytest's
    caplog or a second create_app call), so it is safe to call repeatedly.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
