# Application Global Variables
# This module serves as a way to share settings across the package's
# modules (global variables).

# Flag that indicates to run in Debug mode or not. When running in Debug mode
# setup_logging() defaults to DEBUG level so every fitted arc is logged.
# Generally, it's useful to set this to True while developing and set it to
# False when the package is embedded in a host application.
DEBUG = False

# Name of the package logger. Hosts can attach their own handlers to it.
LOGGER_NAME = 'pipe_bender'

# Format: Time - Module - Level - Message
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'
