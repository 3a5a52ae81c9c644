### SECTION :: Module Imports ############################################################
import os



### SECTION :: Application Name ##########################################################
APP_NAME = "uuid7time"



### SECTION :: Path Definitions ##########################################################
CONFIG_DIR_NAME = "uuid7time"
SETTINGS_FILE_NAME = "settings.json"
CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".config", CONFIG_DIR_NAME)
SETTINGS_FILE_PATH = os.path.join(CONFIG_DIR, SETTINGS_FILE_NAME)



### SECTION :: Environment Variables #####################################################
ENV_SETTINGS_FILE = "UUID7TIME_SETTINGS"
ENV_LOG_LEVEL = "UUID7TIME_LOG_LEVEL"



### SECTION :: Log Prefixes ##############################################################
LOG_PREFIX_APPLICATION = "[APP]"
LOG_PREFIX_SYSTEM = "[SYS]"
LOG_PREFIX_USER = "[USR]"
DEFAULT_LOG_LEVEL = "WARN"



### SECTION :: Output Formats ############################################################
FORMAT_ISO = "iso"
FORMAT_UNIX = "unix"
FORMAT_UNIX_MS = "unix-ms"
FORMAT_JSON = "json"
DEFAULT_FORMAT = FORMAT_ISO



### SECTION :: UUID Layout ###############################################################
TIMESTAMP_BYTE_LENGTH = 6
TIMESTAMP_MAX_MS = (1 << 48) - 1
URN_PREFIX = "urn:uuid:"



### SECTION :: Exit Codes ################################################################
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130
