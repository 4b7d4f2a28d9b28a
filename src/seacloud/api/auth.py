"""
Authentication operations for the Seacloud API.

Handles the credential exchange and token refresh.
"""

import logging

import requests  # type: ignore

from .client import APIClient
from ..core import constants
from ..core.exceptions import SeacloudDecodeError, SeacloudPreconditionError
from ..models import AuthResult


class AuthAPI(APIClient):
    """API client with authentication capabilities."""

    logger: logging.Logger

    def _store_tokens(self, result: AuthResult) -> None:
        """Replace the stored token pair."""
        self.id_token = result.id_token
        self.refresh_token = result.refresh_token

    def authenticate(self, username: str, password: str) -> AuthResult:
        """
        Exchange credentials for an identity/refresh token pair.

        Stored tokens are only replaced once the response has been decoded;
        a failed attempt leaves the previous session untouched.

        Args:
            username: Account username
            password: Account password

        Returns:
            The token pair now held by the client

        Raises:
            requests.exceptions.RequestException: On transport, HTTP or JSON failure
            SeacloudDecodeError: If the response lacks a token
        """
        self.logger.info(f"Authenticating as {username}")

        try:
            response = self.post(
                constants.AUTHENTICATE_ENDPOINT,
                {"username": username, "password": password},
                headers={"Accept": "application/json"},
            )
            result = AuthResult.from_dict(response)
        except (requests.exceptions.RequestException, SeacloudDecodeError) as e:
            self.logger.error(f"Authentication failed: {e}")
            raise

        self._store_tokens(result)
        self.logger.info("Successfully authenticated")
        return result

    def refresh_authentication(self) -> AuthResult:
        """
        Exchange the stored refresh token for a new token pair.

        Returns:
            The new token pair now held by the client

        Raises:
            SeacloudPreconditionError: If no refresh token is stored
            requests.exceptions.RequestException: On transport, HTTP or JSON failure
            SeacloudDecodeError: If the response lacks a token
        """
        if not self.refresh_token:
            raise SeacloudPreconditionError(
                "No refresh token available. Please authenticate first."
            )

        self.logger.debug("Refreshing authentication")

        try:
            response = self.post(
                constants.REFRESH_ENDPOINT,
                {"refreshToken": self.refresh_token},
            )
            result = AuthResult.from_dict(response)
        except (requests.exceptions.RequestException, SeacloudDecodeError) as e:
            self.logger.error(f"Token refresh failed: {e}")
            raise

        self._store_tokens(result)
        self.logger.debug("Authentication refreshed successfully")
        return result
