"""
Constants for the projtrack CLI application.

Note: The display and threshold values serve as default fallback values.
Actual values are loaded from the config file at runtime via ConfigManager.
"""
from pathlib import Path

# =============================================================================
# File Locations
# =============================================================================

DEFAULT_DATA_FILENAME = ".projtrack.json"
DEFAULT_CONFIG_FILENAME = ".projtrack.config.json"
DATA_FILE_ENVVAR = "PROJTRACK_FILE"
CONFIG_FILE_ENVVAR = "PROJTRACK_CONFIG"


def default_data_path() -> Path:
    """Default data file location: ~/.projtrack.json"""
    return Path.home() / DEFAULT_DATA_FILENAME


def default_config_path() -> Path:
    """Default config file location: ~/.projtrack.config.json"""
    return Path.home() / DEFAULT_CONFIG_FILENAME


# =============================================================================
# Default Fallback Values
# These are used if the config file doesn't exist or doesn't specify a value.
# =============================================================================

# Status thresholds (days remaining, inclusive upper bounds)
DEFAULT_URGENT_DAYS = 2
DEFAULT_WARNING_DAYS = 7

# List table column widths
DEFAULT_NAME_WIDTH = 30
DEFAULT_TAGS_WIDTH = 20

# Date format (not configurable)
DATE_FORMAT = "%Y-%m-%d"
DATE_REGEX_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"
ID_REGEX_PATTERN = r"^[+-]?[0-9]+$"
DATE_FORMAT_ERROR = "Invalid date format. Expected YYYY-MM-DD, e.g. 2025-12-10."

# Status filters for the list command (not configurable)
STATUS_FILTER_ALL = "all"
STATUS_FILTER_ACTIVE = "active"
STATUS_FILTER_DONE = "done"
STATUS_FILTER_OVERDUE = "overdue"
VALID_STATUS_FILTERS = [
    STATUS_FILTER_ALL,
    STATUS_FILTER_ACTIVE,
    STATUS_FILTER_DONE,
    STATUS_FILTER_OVERDUE,
]

# Validation error messages (not configurable)
VALIDATION_NAME_REQUIRED = "--name is required"
VALIDATION_DUE_REQUIRED = "--due is required"
VALIDATION_ID_REQUIRED = "--id is required"

# Display messages
NO_PROJECTS_MESSAGE = "No projects found yet. Add one with `projtrack add`."
NO_MATCHES_MESSAGE = "No projects match the given filters."
