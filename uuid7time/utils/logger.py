### SECTION :: Module Imports ############################################################
import os
import sys
import logging
from typing import Any, Dict
from uuid7time.utils.constants import APP_NAME, DEFAULT_LOG_LEVEL, LOG_PREFIX_APPLICATION



### CLASS :: Custom Log Formatter Class ##################################################
class LowercaseLevelFormatter(logging.Formatter):
    """Custom formatter to use lowercase level names and shortened 'warning' and 'critical'"""
    def format(self, record):
        levelname = record.levelname
        if levelname == "WARNING":
            levelname = "warn"
        elif levelname == "CRITICAL":
            levelname = "crit"
        else:
            levelname = levelname.lower()

        record.levelname_padded = f"{levelname:<5}"
        return super().format(record)



### SECTION :: Logger And Handler Configuration ##########################################
formatter = LowercaseLevelFormatter(
    fmt='%(levelname_padded)s %(asctime)s.%(msecs)03d: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

LEVEL_MAP = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARN': logging.WARNING,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRIT': logging.CRITICAL,
    'CRITICAL': logging.CRITICAL
}

# Get Application Logger
logger = logging.getLogger(APP_NAME)
logger.setLevel(LEVEL_MAP[DEFAULT_LOG_LEVEL])

# Create Stream Handler, stdout is reserved for timestamps
stream_handler = logging.StreamHandler(sys.stderr)
stream_handler.setFormatter(formatter)

# Add Handlers To Logger
logger.addHandler(stream_handler)
logger.propagate = False



### FUNCTION :: Format Log Data ##########################################################
def format_log_data(data: Dict[str, Any]) -> str:
    """Formats a dictionary into a key='value' string."""
    return ", ".join([f"{key}='{value}'" for key, value in data.items()])



### FUNCTION :: Add Log File #############################################################
def add_file_handler(log_fn: str) -> logging.FileHandler:
    """Attaches a file handler writing to log_fn, creating its directory if needed."""
    log_dir = os.path.dirname(os.path.abspath(log_fn))
    if not os.path.exists(log_dir):
        os.makedirs(log_dir, exist_ok=True)

    file_handler = logging.FileHandler(log_fn)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    return file_handler



### FUNCTION :: Set Log Level From Config ################################################
def set_log_level(level_str: str) -> int:
    """Sets the logger level based on a string name and returns the level applied."""
    log_level = LEVEL_MAP.get(level_str.upper(), LEVEL_MAP[DEFAULT_LOG_LEVEL])
    logger.setLevel(log_level)
    if level_str.upper() not in LEVEL_MAP and level_str:
        logger.warning(f"{LOG_PREFIX_APPLICATION} Invalid LOG_LEVEL set, defaulting to {DEFAULT_LOG_LEVEL} | {format_log_data({'log_level': level_str})}")
    return log_level



### SECTION :: Level-Based Logging Functions #############################################
def info(msg):
    logger.info(msg)

def warn(msg):
    logger.warning(msg)

def error(msg):
    logger.error(msg)

def debug(msg):
    logger.debug(msg)

def critical(msg):
    logger.critical(msg)
