# This project was developed with assistance from AI tools.
"""Process-wide logging setup for entry points."""

import logging

from .config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger once per process.

    SQLAlchemy engine logging stays at WARNING unless DEBUG is on, otherwise
    every statement would be echoed at INFO.
    """
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)
    if not settings.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
