"""
Logging setup for the API process.

``setup_logging`` puts a console handler on the root logger, plus a
file handler when ``LOG_FILE`` is set, all sharing one format.
Uvicorn's loggers lose their own handlers and propagate to the root,
so server and application records look the same.  Every
``create_app`` call reconfigures logging; the handlers installed by a
previous call are swapped out, not stacked.
"""

import logging
from pathlib import Path
from typing import List

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER = "sport_community.console"
FILE_HANDLER = "sport_community.file"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _build_handlers(settings: Settings) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.set_name(CONSOLE_HANDLER)
    handlers: List[logging.Handler] = [console]

    if settings.log_file:
        log_path = Path(settings.log_file).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER)
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(settings: Settings) -> None:
    """Configure the root and uvicorn loggers from ``settings``.

    Parameters
    ----------
    settings : Settings
        ``log_level`` is a level name such as ``"DEBUG"`` (case
        insensitive; unknown names mean ``INFO``).  ``log_file``, when
        non-empty, adds a file handler writing to that path.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() in (CONSOLE_HANDLER, FILE_HANDLER):
            root.removeHandler(handler)
            handler.close()

    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    root.setLevel(level)
    for handler in _build_handlers(settings):
        root.addHandler(handler)

    for name in UVICORN_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
        server_logger.setLevel(level)
