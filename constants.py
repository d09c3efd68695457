"""
Common constants used across the JSON Table Viewer.
"""

# Values that are considered "false" for boolean environment variables
# Include empty string to handle unset or blank environment variables
FALSE_VALUES = {'false', '0', 'no', 'off', ''}

# Startup data source
DEFAULT_DATA_FILE = 'data.json'

# Fallbacks used by the sort comparators for empty values
STRING_SORT_FALLBACK = 'z'
PHONE_STRIP_CHARACTERS = '()-'
DATE_SEPARATOR = '/'

# Log file rotation
LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
LOG_BACKUP_COUNT = 3
