"""
Logging setup shared by the API and the CLI
"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Libraries that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once; level defaults to LOG_LEVEL from settings"""
    if level is None:
        from citedby.config import get_settings
        level = get_settings().LOG_LEVEL

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("citedby").setLevel(level.upper())

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
