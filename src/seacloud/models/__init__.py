"""
Data models for the Seacloud API.

Contains DTOs for authentication, locations, sensors and positions.
"""

from .auth import AuthResult
from .location import Location, SimpleArea, Area, Node
from .sensor import Sensor, SensorValue, AggregatedSensorValue
from .position import Position, CO2Emission

__all__ = [
    "AuthResult",
    "Location",
    "SimpleArea",
    "Area",
    "Node",
    "Sensor",
    "SensorValue",
    "AggregatedSensorValue",
    "Position",
    "CO2Emission",
]
