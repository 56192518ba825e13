"""
Logging setup driven by the application settings.

``setup_logging`` applies ``Settings.log_level`` to the root logger on
every call and attaches handlers only once: a console handler, plus a
file handler when ``Settings.log_file`` is set.  When something else
(uvicorn, pytest) has already installed root handlers, those are kept
and only the level changes.
"""

import logging
from pathlib import Path

from .config import Settings, settings as default_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(config: Settings = default_settings) -> None:
    """Configure the root logger from ``config``.

    Unknown level names fall back to ``INFO``.  A relative ``log_file``
    is resolved against the current working directory.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
    if root.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if config.log_file:
        file_handler = logging.FileHandler(Path(config.log_file).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
