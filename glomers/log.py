from __future__ import annotations
from typing import Optional, Union
import logging
import os
import sys

LEVEL_ENV = "GLOMERS_LOG_LEVEL"
FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_CONFIGURED = False

def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """
    Route the 'glomers' loggers to stderr; stdout carries protocol traffic.
    Level comes from `level`, else $GLOMERS_LOG_LEVEL, else INFO.
    """
    global _CONFIGURED
    logger = logging.getLogger("glomers")
    logger.setLevel(_resolve(level))
    if _CONFIGURED:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    _CONFIGURED = True

def _resolve(level: Optional[Union[str, int]]) -> int:
    if isinstance(level, int):
        return level
    name = (level or os.getenv(LEVEL_ENV, "INFO")).upper()
    value = getattr(logging, name, None)
    return value if isinstance(value, int) else logging.INFO
