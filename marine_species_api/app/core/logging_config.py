"""
Logging configuration for the service.

``setup_logging`` installs a console handler, and a file handler when
a log file is configured, on the root logger.  Every module logs
through ``logging.getLogger(__name__)`` and inherits this setup.
Uvicorn's per-request access log is kept at WARNING unless the service
itself runs at DEBUG.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the root logger once and return it.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives the same records as the console.

    Returns
    -------
    logging.Logger
        The root logger.  If it already had handlers (for example when
        ``create_app`` is called repeatedly in tests) it is returned
        unchanged.
    """
    root = logging.getLogger()
    if root.handlers:
        return root

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if numeric_level > logging.DEBUG:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return root
