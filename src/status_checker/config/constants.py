"""
Constants for the website status checker.

This module defines default values for all configurable parameters. These
constants are used as fallback values when neither command-line arguments nor
environment variables are provided.
"""

# Probe configuration defaults
DEFAULT_TIMEOUT = 10
DEFAULT_USER_AGENT = "Mozilla/5.0 (Website Status Checker)"

# Report configuration defaults
DEFAULT_POLICY = "status-200-403"
DEFAULT_VERBOSE = "false"

# Run configuration defaults
DEFAULT_RUN_ID_PREFIX = "status-checker-"

# Logging configuration defaults
DEFAULT_LOGGING_TYPE = "prod"
DEFAULT_LOGGING_CONFIG_FILE = ""

# Presentation defaults
PROGRESS_REFRESH_INTERVAL = 0.1
