"""
Logging setup for the benefits service.

One pipe-separated line per record on stdout. Application modules log
under the ``benefits_api`` namespace at the configured level; chatty
server and client libraries are held at WARNING.

Payroll data stays out of the log: employee and dependent IDs and the
store path may appear, salaries, names and birth dates must not.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

APP_LOGGER = "benefits_api"
QUIET_LOGGERS = ("uvicorn.access", "slowapi", "httpx")


def configure_logging(level: str = "INFO") -> None:
    """Install the stdout handler and set logger levels.

    Unknown level names fall back to INFO.

    Args:
        level: Level name for the service's own loggers.
    """
    app_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=max(app_level, logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger(APP_LOGGER).setLevel(app_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
