import logging
from logging.handlers import RotatingFileHandler

import config


def get_logger(name: str = "") -> logging.Logger:
    if not name:
        return logging.getLogger(config.LOGGER_NAME)
    return logging.getLogger(f"{config.LOGGER_NAME}.{name}")


def setup_logger(level: str = "") -> logging.Logger:
    """
    Sets up the application logger: human readable lines on the console and,
    when config.LOG_FILE is set, the same lines in a rotating file.
    """
    logger = logging.getLogger(config.LOGGER_NAME)
    logger.setLevel(getattr(logging, (level or config.LOG_LEVEL).upper(), logging.INFO))

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    formatter = logging.Formatter("%(asctime)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if config.LOG_FILE:
        file_handler = RotatingFileHandler(
            config.LOG_FILE,
            maxBytes=config.LOG_FILE_MAX_BYTES,
            backupCount=config.LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
