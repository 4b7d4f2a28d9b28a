"""
Authentication data models.

Contains DTOs for authentication-related data structures.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from .base import require
from ..core.exceptions import SeacloudDecodeError


def _token(data: Mapping[str, Any], key: str) -> str:
    """Fetch a token that must be a non-empty string."""
    value = require(data, key, "AuthResult")
    if not isinstance(value, str) or not value:
        raise SeacloudDecodeError(f"AuthResult field '{key}' must be a non-empty string")
    return value


@dataclass(frozen=True)
class AuthResult:
    """Token pair returned by the authenticate and refresh endpoints."""

    id_token: str
    refresh_token: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AuthResult":
        # Both tokens are validated before either is handed to the client
        return cls(
            id_token=_token(data, "idToken"),
            refresh_token=_token(data, "refreshToken"),
        )
