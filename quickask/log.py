import logging


def get_logger(name: str, level: str = "WARNING") -> logging.Logger:
    """
    Logger that writes timestamped lines to stderr, keeping stdout for the answer.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
