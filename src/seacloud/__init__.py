"""
Seacloud API client

This package provides a typed client for the Seacloud maritime-monitoring
REST API: locations, areas, sensors, GPS positions and CO2 emissions.
"""

__version__ = "0.1.0"
__description__ = "Client library for the Seacloud maritime-monitoring API"

from .api import SeacloudAPI
from .core import (
    Config,
    SeacloudError,
    SeacloudPreconditionError,
    SeacloudDecodeError,
    setup_logger,
)

__all__ = [
    "SeacloudAPI",
    "Config",
    "SeacloudError",
    "SeacloudPreconditionError",
    "SeacloudDecodeError",
    "setup_logger",
]
