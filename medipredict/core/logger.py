# medipredict/core/logger.py
import logging

from medipredict.core.config import settings

_fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str = None):
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=_fmt)
