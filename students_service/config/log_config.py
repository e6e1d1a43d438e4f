"""
Logging configuration for the students service.
Centralizes all logging setup so modules only call logging.getLogger(__name__).
"""
import time
import logging
from logging.handlers import RotatingFileHandler
from students_service.config.settings import LoggingConfig

ROOT_LOGGER_NAME = "students_service"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Filter to prevent duplicate log messages
class DuplicateFilter(logging.Filter):
    def __init__(self, name=''):
        super().__init__(name)
        self.last_log = None
        self.last_time = 0

    def filter(self, record):
        current_log = (record.msg, record.args)
        current_time = time.time()

        # Same message within 0.1 seconds is dropped
        if current_log == self.last_log and current_time - self.last_time < 0.1:
            return False

        self.last_log = current_log
        self.last_time = current_time
        return True

def setup_logging(level: str = None, log_file: str = None) -> logging.Logger:
    """
    Set up logging for the students service package.

    Args:
        level: Log level name, defaults to STUDENTS_LOG_LEVEL
        log_file: Optional path of a rotating log file, defaults to STUDENTS_LOG_FILE

    Returns:
        The package logger configured with console and optional file handlers
    """
    # Suppress MongoDB connection messages
    logging.getLogger('pymongo').setLevel(logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER_NAME)

    # Only configure if handlers haven't been added yet
    if not logger.handlers:
        logger.setLevel(level or LoggingConfig.LEVEL)
        logger.addFilter(DuplicateFilter())
        formatter = logging.Formatter(LOG_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        log_file = log_file or LoggingConfig.LOG_FILE
        if log_file:
            try:
                # delay=True avoids opening the file until the first record
                file_handler = RotatingFileHandler(
                    log_file,
                    maxBytes=LoggingConfig.MAX_LOG_SIZE,
                    backupCount=LoggingConfig.BACKUP_COUNT,
                    delay=True
                )
                file_handler.setFormatter(formatter)
                logger.addHandler(file_handler)
            except OSError as e:
                logger.warning(f"Could not set up file logging: {e}")

    return logger
