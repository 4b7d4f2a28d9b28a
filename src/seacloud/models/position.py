"""
Position data models.

Contains DTOs for vessel positions and CO2 emission readings.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from .base import require


@dataclass(frozen=True)
class Position:
    """Timestamped GPS position."""

    timestamp: str
    latitude: float
    longitude: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Position":
        return cls(
            timestamp=require(data, "timestamp", "Position"),
            latitude=require(data, "latitude", "Position"),
            longitude=require(data, "longitude", "Position"),
        )


@dataclass(frozen=True)
class CO2Emission(Position):
    """CO2 emission value measured at a position."""

    value: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CO2Emission":
        return cls(
            timestamp=require(data, "timestamp", "CO2Emission"),
            latitude=require(data, "latitude", "CO2Emission"),
            longitude=require(data, "longitude", "CO2Emission"),
            value=require(data, "value", "CO2Emission"),
        )
