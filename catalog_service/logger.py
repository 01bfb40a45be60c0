# catalog_service/logger.py
import logging
import sys
from typing import Optional

_configured = False


def setup_logging(level: Optional[str] = None):
    global _configured
    root = logging.getLogger()
    if level is not None:
        root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if _configured:
        return

    if level is None:
        root.setLevel(logging.INFO)

    # Avoid duplicate handlers when gunicorn or pytest already attached some
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
        root.addHandler(handler)

    _configured = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    setup_logging()
    return logging.getLogger(name)
