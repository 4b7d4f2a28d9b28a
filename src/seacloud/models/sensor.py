"""
Sensor data models.

Contains DTOs for sensors and their measured values.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .base import require


@dataclass(frozen=True)
class SensorValue:
    """Single timestamped measurement with the position it was taken at."""

    timestamp: str
    value: float
    lat: float
    lng: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SensorValue":
        return cls(
            timestamp=require(data, "timestamp", "SensorValue"),
            value=require(data, "value", "SensorValue"),
            lat=require(data, "lat", "SensorValue"),
            lng=require(data, "lng", "SensorValue"),
        )


@dataclass(frozen=True)
class AggregatedSensorValue:
    """Server-side aggregate of sensor values over a time window."""

    from_time: str
    to_time: str
    min: float
    max: float
    average: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AggregatedSensorValue":
        return cls(
            from_time=require(data, "from", "AggregatedSensorValue"),
            to_time=require(data, "to", "AggregatedSensorValue"),
            min=require(data, "min", "AggregatedSensorValue"),
            max=require(data, "max", "AggregatedSensorValue"),
            average=require(data, "average", "AggregatedSensorValue"),
        )


@dataclass(frozen=True)
class Sensor:
    """Sensor mounted on a node, with its latest reading."""

    id: int
    name: str
    type_id: int
    type: str
    unit: str
    depth: float
    sensor_value: Optional[SensorValue] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Sensor":
        # Locations fetched without sensor data carry no latest value
        raw_value = data.get("sensorValue") if isinstance(data, Mapping) else None
        return cls(
            id=require(data, "id", "Sensor"),
            name=require(data, "name", "Sensor"),
            type_id=require(data, "typeId", "Sensor"),
            type=require(data, "type", "Sensor"),
            unit=require(data, "unit", "Sensor"),
            depth=require(data, "depth", "Sensor"),
            sensor_value=SensorValue.from_dict(raw_value) if raw_value is not None else None,
        )
