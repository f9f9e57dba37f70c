import logging
from typing import Optional

from hexgraph import config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Install a root handler for entry points. The library itself never calls this."""
    name = (level or config.LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, name, logging.WARNING), format=LOG_FORMAT)
