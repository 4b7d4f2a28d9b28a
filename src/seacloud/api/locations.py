"""
Location operations for the Seacloud API.

Handles retrieval of locations, their areas, positions and emissions.
"""

import logging
from typing import List, Dict, Any, Optional

from .helpers import TimeValue, format_bool, time_range_params


class LocationsAPI:
    """Mixin for location-related API operations."""

    logger: logging.Logger

    def get(self, endpoint: str, params: Any = None) -> Any:
        """Method provided by APIClient base class."""
        ...

    def get_locations(self) -> List[Dict[str, Any]]:
        """
        Get all locations the user has access to.

        Returns:
            List of location objects, each with its areas
        """
        self.logger.info("Fetching locations")
        return self.get("/Locations")

    def get_location_by_id(
        self,
        location_id: int,
        include_sensor_data: bool = False
    ) -> Dict[str, Any]:
        """
        Get a single location.

        Args:
            location_id: Location ID
            include_sensor_data: Include the latest value of every sensor

        Returns:
            Location object
        """
        self.logger.info(f"Fetching location {location_id}")
        params = {"includeSensorData": format_bool(include_sensor_data)}
        return self.get(f"/Locations/{location_id}", params=params)

    def get_areas_for_location(self, location_id: int) -> List[Dict[str, Any]]:
        """Get the areas of a location, with their nodes."""
        self.logger.info(f"Fetching areas for location {location_id}")
        return self.get(f"/Locations/{location_id}/Areas")

    def get_area_by_id(self, location_id: int, area_id: int) -> Dict[str, Any]:
        """Get one area of a location."""
        self.logger.info(f"Fetching area {area_id} of location {location_id}")
        return self.get(f"/Locations/{location_id}/Areas/{area_id}")

    def get_latest_position_for_location(self, location_id: int) -> Dict[str, Any]:
        """Get the most recent GPS position of a location."""
        self.logger.info(f"Fetching latest position for location {location_id}")
        return self.get(f"/Locations/{location_id}/LatestPosition")

    def get_gps_positions_for_location(
        self,
        location_id: int,
        from_time: Optional[TimeValue] = None,
        to_time: Optional[TimeValue] = None
    ) -> List[Dict[str, Any]]:
        """
        Get the GPS track of a location.

        Args:
            location_id: Location ID
            from_time: Start of range (ISO string or datetime)
            to_time: End of range (ISO string or datetime)

        Returns:
            List of position objects
        """
        self.logger.info(f"Fetching positions for location {location_id}")
        params = time_range_params(from_time, to_time)
        return self.get(f"/Locations/{location_id}/Positions", params=params or None)

    def get_vessel_current_co2_emission(self, location_id: int) -> Dict[str, Any]:
        """Get the current CO2 emission of a vessel location."""
        self.logger.info(f"Fetching current CO2 emission for location {location_id}")
        return self.get(f"/Locations/{location_id}/VesselCurrentCo2Emission")
