"""
Helper functions for API operations.

Builds query parameter mappings for the endpoint mixins.
"""

from datetime import datetime
from typing import Dict, Any, Optional, Union

from ..core import DateUtils

TimeValue = Union[str, datetime]


def time_range_params(
    from_time: Optional[TimeValue] = None,
    to_time: Optional[TimeValue] = None
) -> Dict[str, Any]:
    """
    Build 'from'/'to' query parameters, leaving out any bound not supplied.

    Args:
        from_time: Start of range (ISO string or datetime)
        to_time: End of range (ISO string or datetime)

    Returns:
        Mapping containing only the supplied bounds
    """
    params: Dict[str, Any] = {}
    if from_time is not None:
        params["from"] = DateUtils.format_query_time(from_time)
    if to_time is not None:
        params["to"] = DateUtils.format_query_time(to_time)
    return params


def format_bool(value: bool) -> str:
    """Render a boolean the way the API expects it in a query string."""
    return "true" if value else "false"
