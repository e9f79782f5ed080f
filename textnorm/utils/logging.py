# textnorm/utils/logging.py

import logging
import sys
from typing import Optional

from textnorm.core.config import settings

LOGGER_NAME = "textnorm"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    logger.handlers = []

    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
    )

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    logger.debug("Logging system initialized (env=%s)", settings.ENV)
    return logger
