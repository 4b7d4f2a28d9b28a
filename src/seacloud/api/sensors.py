"""
Sensor operations for the Seacloud API.

Handles retrieval of sensors and their raw or aggregated values.
"""

import logging
from typing import List, Dict, Any, Optional

from .helpers import TimeValue, time_range_params
from ..core import DateUtils


class SensorsAPI:
    """Mixin for sensor-related API operations."""

    # Type hints for attributes provided by APIClient base class
    logger: logging.Logger

    def get(self, endpoint: str, params: Any = None) -> Any:
        """Method provided by APIClient base class."""
        ...

    def get_sensor_by_id(self, sensor_id: int) -> Dict[str, Any]:
        """Get a sensor with its latest value."""
        self.logger.info(f"Fetching sensor {sensor_id}")
        return self.get(f"/Sensors/{sensor_id}")

    def get_aggregated_sensor_values(
        self,
        sensor_id: int,
        from_time: Optional[TimeValue] = None,
        to_time: Optional[TimeValue] = None,
        time_interval_in_minutes: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """
        Get sensor values aggregated by the service into time windows.

        Args:
            sensor_id: Sensor ID
            from_time: Start of range (ISO string or datetime)
            to_time: End of range (ISO string or datetime)
            time_interval_in_minutes: Width of each aggregation window

        Returns:
            List of aggregated value objects (from, to, min, max, average)
        """
        self.logger.info(f"Fetching aggregated values for sensor {sensor_id}")
        params = time_range_params(from_time, to_time)
        if time_interval_in_minutes is not None:
            params["timeIntervalInMinutes"] = time_interval_in_minutes
        return self.get(f"/Sensors/{sensor_id}/AggregatedValues", params=params or None)

    def get_sensor_values(
        self,
        sensor_id: int,
        from_time: Optional[TimeValue] = None,
        to_time: Optional[TimeValue] = None
    ) -> List[Dict[str, Any]]:
        """
        Get raw sensor values for a time range.

        Both bounds are always sent: 'to' defaults to now and 'from' to one
        calendar month before now.

        Args:
            sensor_id: Sensor ID
            from_time: Start of range (ISO string or datetime)
            to_time: End of range (ISO string or datetime)

        Returns:
            List of sensor value objects
        """
        default_from, default_to = DateUtils.default_sensor_value_range()
        params = time_range_params(
            from_time if from_time is not None else default_from,
            to_time if to_time is not None else default_to,
        )
        self.logger.info(
            f"Fetching values for sensor {sensor_id} from {params['from']} to {params['to']}"
        )
        return self.get(f"/Sensors/{sensor_id}/Values", params=params)

    def get_latest_sensor_value(self, sensor_id: int) -> Dict[str, Any]:
        """Get the most recent value of a sensor."""
        self.logger.info(f"Fetching latest value for sensor {sensor_id}")
        return self.get(f"/Sensors/{sensor_id}/LatestValue")
