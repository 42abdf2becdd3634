"""Logging configuration for the Clinic Recruit AI extraction pipeline."""

import logging
import sys
from typing import Optional

from clinic_recruit_ai.config import LOG_LEVEL


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Get a configured logger instance."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.setLevel(level if level is not None else LOG_LEVEL)
    elif level is not None:
        logger.setLevel(level)
    return logger
