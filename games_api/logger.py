from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install the service log format and set the ``games_api`` log level."""
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    logging.getLogger("games_api").setLevel(level.upper())


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
