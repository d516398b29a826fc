import logging
import os
from logging.handlers import RotatingFileHandler

from config.settings import Config

def resolve_level(level):
    """
    Accepts a level name ("debug", "INFO") or number.
    Unknown names fall back to INFO instead of failing at import time.
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if isinstance(value, int):
        return value
    return logging.INFO

def setup_logger(name="ExpirationCalc", log_dir=Config.LOG_DIR, level=Config.LOG_LEVEL):
    """
    Sets up a logger with Console and File handlers.
    Console output goes to stderr so stdout only carries the report.
    """
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    logger = logging.getLogger(name)
    logger.setLevel(resolve_level(level))

    # Avoid duplicate handlers if setup is called multiple times.
    # Only this logger's own handlers count, not the ones on root.
    if logger.handlers:
        return logger

    # Formatter
    formatter = logging.Formatter(
        '%(asctime)s - [%(levelname)s] - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # 1. File Handler (Rotating)
    log_file = os.path.join(log_dir, "expiration_calc.log")
    file_handler = RotatingFileHandler(log_file, maxBytes=5*1024*1024, backupCount=5)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    # 2. Console Handler (stderr)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger

# Create a default instance for easy import
logger = setup_logger()
