import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Set the package log level, adding a stream handler only where needed.

    The Lambda runtime already installs a handler on the root logger, and
    package records propagate to it; a second handler would print every
    record twice. Local runs without any root handler get one here.
    """
    logger = logging.getLogger("contacts_api")
    if not logging.getLogger().handlers and not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
