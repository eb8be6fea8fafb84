# termsnake/logs.py
from __future__ import annotations
import logging

from termsnake.config import AppConfig

FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(cfg: AppConfig) -> logging.Logger:
    """Route the package logger to cfg.log_file, or silence it.

    The terminal belongs to the game while it runs, so nothing goes to stderr.
    """
    log = logging.getLogger("termsnake")
    for h in list(log.handlers):
        log.removeHandler(h)
        h.close()

    if cfg.log_file:
        handler: logging.Handler = logging.FileHandler(cfg.log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(FORMAT))
        log.setLevel(cfg.log_level.upper())
    else:
        handler = logging.NullHandler()
    log.addHandler(handler)
    log.propagate = False
    return log
