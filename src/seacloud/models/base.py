"""
Shared helpers for building records from decoded JSON.
"""

from typing import Any, Mapping

from ..core.exceptions import SeacloudDecodeError


def require(data: Mapping[str, Any], key: str, record: str) -> Any:
    """
    Fetch a required key from a JSON object.

    Args:
        data: Decoded JSON object
        key: Key expected in the object
        record: Record name used in the error message

    Returns:
        The value stored under ``key`` (may be None if the service sent null)

    Raises:
        SeacloudDecodeError: If ``data`` is not an object or lacks ``key``
    """
    if not isinstance(data, Mapping):
        raise SeacloudDecodeError(f"{record} must be a JSON object, got {type(data).__name__}")
    if key not in data:
        raise SeacloudDecodeError(f"{record} is missing required field '{key}'")
    return data[key]
