"""
Location data models.

Contains DTOs for locations and the area/node hierarchy below them.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from .base import require
from .sensor import Sensor


@dataclass(frozen=True)
class Node:
    """Node within an area, grouping its sensors."""

    id: int
    name: str
    sensors: Tuple[Sensor, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Node":
        return cls(
            id=require(data, "id", "Node"),
            name=require(data, "name", "Node"),
            sensors=tuple(Sensor.from_dict(s) for s in data.get("sensors") or []),
        )


@dataclass(frozen=True)
class SimpleArea:
    """Area of a location without its nodes."""

    id: int
    name: str
    lat: float
    lng: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SimpleArea":
        return cls(
            id=require(data, "id", "SimpleArea"),
            name=require(data, "name", "SimpleArea"),
            lat=require(data, "lat", "SimpleArea"),
            lng=require(data, "lng", "SimpleArea"),
        )


@dataclass(frozen=True)
class Area(SimpleArea):
    """Area of a location with its nodes."""

    nodes: Tuple[Node, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Area":
        return cls(
            id=require(data, "id", "Area"),
            name=require(data, "name", "Area"),
            lat=require(data, "lat", "Area"),
            lng=require(data, "lng", "Area"),
            nodes=tuple(Node.from_dict(n) for n in data.get("nodes") or []),
        )


@dataclass(frozen=True)
class Location:
    """Monitored site or vessel."""

    id: int
    name: str
    lat: float
    lng: float
    aquaculture_register_site_nr: Optional[int] = None
    areas: Tuple[Area, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Location":
        return cls(
            id=require(data, "id", "Location"),
            name=require(data, "name", "Location"),
            lat=require(data, "lat", "Location"),
            lng=require(data, "lng", "Location"),
            aquaculture_register_site_nr=data.get("aquacultureRegisterSiteNr"),
            areas=tuple(Area.from_dict(a) for a in data.get("areas") or []),
        )
