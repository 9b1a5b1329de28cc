import logging
import sys
from datetime import datetime


class TimestampFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        return f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a single stderr handler to the package logger; repeated calls replace it"""
    logger = logging.getLogger("arithcalc")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(TimestampFormatter())
    logger.addHandler(handler)
    return logger
