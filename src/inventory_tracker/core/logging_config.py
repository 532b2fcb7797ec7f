import logging

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Configures the package logger with a timestamped console handler.
    Safe to call more than once; handlers are only attached the first time.
    """
    logger = logging.getLogger("inventory_tracker")
    logger.setLevel(level.upper())

    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT))
    logger.addHandler(handler)

    logger.info("Logging configured (level=%s)", level.upper())
    return logger
