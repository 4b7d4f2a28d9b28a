"""
Library-wide constants for the Seacloud API client.

Endpoint paths and defaults shared by the API layer and configuration.
"""

# Default service endpoint; overridable per client or via SEACLOUD_BASE_URL
DEFAULT_BASE_URL = "https://api.seacloud.no"

# Authentication endpoints
AUTHENTICATE_ENDPOINT = "/authenticate"
REFRESH_ENDPOINT = "/authenticate/refresh"

# Default request headers
DEFAULT_CONTENT_TYPE = "application/json"

# Default lookback for sensor value queries
DEFAULT_SENSOR_VALUES_MONTHS = 1

# Configuration defaults
DEFAULT_CONFIG_FILE = "config.json"
DEFAULT_LOGGER_NAME = "seacloud"
