import logging
from logging.handlers import RotatingFileHandler

from env import LOG_FILE, LOG_LEVEL

# Configure the eco_scan logger
logger = logging.getLogger("eco_scan")
logger.setLevel(getattr(logging, LOG_LEVEL, logging.DEBUG))

# handlers are attached once even if the module is reloaded (uvicorn --reload, tests)
if not logger.handlers:
    # Rotating file handler keeps the full debug trail of scoring decisions
    file_handler = RotatingFileHandler(LOG_FILE, maxBytes=5*1024*1024, backupCount=3, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)

    # Console only shows errors
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s - %(pathname)s:%(lineno)d")
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

def log_debug(message: str):
    logger.debug(message)

def log_info(message: str):
    logger.info(message)

def log_warning(message: str):
    logger.warning(message)

def log_error(message: str, exc: Exception = None):
    # exc_info only when we actually have an exception to attach
    if exc:
        logger.error(message, exc_info=exc)
    else:
        logger.error(message)

def log_critical(message: str):
    logger.critical(message)
