"""
Logging configuration for the CRUD Demo API.

``setup_logging`` is called by every ``create_app``.  The console and
optional file handlers are attached to the root logger only once per
process; they are recognized by name, so handlers installed by other
tools (uvicorn, pytest) neither block nor duplicate them.  The level,
however, is applied on every call: the most recently created app
decides how verbose the process is, and the uvicorn loggers follow the
same level so server and application output stay consistent.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "crud_demo_api.console"
FILE_HANDLER_NAME = "crud_demo_api.file"

# Loggers created by uvicorn; run.py passes the same level to uvicorn.
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> int:
    """Configure the root and uvicorn loggers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted or empty, no
        file handler is added.  A file handler is added at most once.

    Returns
    -------
    int
        The numeric level that was applied.
    """
    numeric_level = getattr(logging, str(level).upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root = logging.getLogger()
    root.setLevel(numeric_level)
    for name in UVICORN_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_handler(root, CONSOLE_HANDLER_NAME):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile and not _has_handler(root, FILE_HANDLER_NAME):
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    return numeric_level
