"""
Logging configuration for the classboard service.
Centralizes all logging setup to follow DRY and SoC principles.
"""
import os
import time
import threading
import logging
from logging.handlers import RotatingFileHandler

from classboard.config.settings import LoggingConfig

ROOT_LOGGER_NAME = "classboard"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Filter to prevent duplicate log messages
class DuplicateFilter(logging.Filter):
    def __init__(self, name='', window: float = 0.1):
        super().__init__(name)
        self.window = window
        self.last_log = None
        self.last_time = 0
        self._lock = threading.Lock()

    def filter(self, record):
        current_log = (record.name, record.msg, record.args)
        current_time = time.time()

        # Worker threads log through the same filter
        with self._lock:
            if current_log == self.last_log and current_time - self.last_time < self.window:
                return False

            self.last_log = current_log
            self.last_time = current_time
        return True

def setup_logging(log_dir: str = None, level: str = None) -> logging.Logger:
    """
    Configure the root ``classboard`` logger once.

    Args:
        log_dir: Directory for the rotating log file, defaults to LOG_DIR
        level: Log level name, defaults to LOG_LEVEL

    Returns:
        The configured ``classboard`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if logger.handlers:
        return logger

    # Suppress MongoDB connection messages
    logging.getLogger('pymongo').setLevel(logging.WARNING)

    logger.setLevel(getattr(logging, (level or LoggingConfig.LOG_LEVEL).upper(), logging.INFO))
    logger.addFilter(DuplicateFilter())
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_dir = log_dir or LoggingConfig.LOG_DIR
    try:
        os.makedirs(log_dir, exist_ok=True)
        # delay=True avoids opening the file until the first record
        file_handler = RotatingFileHandler(
            os.path.join(log_dir, LoggingConfig.LOG_FILE_NAME),
            maxBytes=LoggingConfig.MAX_LOG_SIZE,
            backupCount=LoggingConfig.BACKUP_COUNT,
            delay=True
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    except OSError as e:
        logger.warning(f"Could not set up file logging: {e}")

    return logger

def get_logger(module_name: str = None) -> logging.Logger:
    """Get a logger under the ``classboard`` hierarchy"""
    if not module_name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if module_name == ROOT_LOGGER_NAME or module_name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(module_name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{module_name}")
