# logger_config.py
import logging
import sys
from typing import Optional

from config import LOG_FORMAT, LOG_LEVEL


def setup_logging(level: int = LOG_LEVEL, log_file: Optional[str] = None) -> None:
    """Configure the root logger once; writes to ``log_file`` if given, else stderr."""
    if log_file is not None:
        handler = logging.FileHandler(log_file, mode='a')
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    if root.hasHandlers():
        root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
