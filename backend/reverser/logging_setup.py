from __future__ import annotations

import logging

from .settings import get_settings


def setup_logging(level: str | None = None) -> logging.Logger:
    """Attach a console handler to the ``reverser`` logger (once)."""
    level = level or get_settings().log_level
    logger = logging.getLogger("reverser")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        logger.addHandler(handler)

    return logger
