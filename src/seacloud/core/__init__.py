"""
Core utilities for the Seacloud client.

Provides configuration, logging, date handling and local exceptions.
"""

from .config import Config
from .logger import setup_logger, LoggerContext
from . import constants
from .date_utils import DateUtils
from .exceptions import SeacloudError, SeacloudPreconditionError, SeacloudDecodeError

__all__ = [
    "Config",
    "setup_logger",
    "LoggerContext",
    "constants",
    "DateUtils",
    "SeacloudError",
    "SeacloudPreconditionError",
    "SeacloudDecodeError",
]
