"""
API layer for the Seacloud maritime-monitoring service.

Provides the client for authentication, locations, and sensor operations.
"""

import logging
from typing import Optional

from .client import APIClient
from .auth import AuthAPI
from .locations import LocationsAPI
from .sensors import SensorsAPI
from . import helpers
from ..core import Config, LoggerContext, constants


class SeacloudAPI(AuthAPI, LocationsAPI, SensorsAPI):
    """
    Unified API client for the Seacloud service.

    Combines authentication, location, and sensor operations.
    """

    def __init__(
        self,
        base_url: str = constants.DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize unified API client.

        Args:
            base_url: Base URL for the API
            timeout: Request timeout in seconds (None waits indefinitely)
            verify_ssl: Whether to verify SSL certificates
            logger: Logger instance
        """
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            verify_ssl=verify_ssl,
            logger=logger
        )

    @classmethod
    def create_authenticated_client(
        cls,
        username: str,
        password: str,
        base_url: str = constants.DEFAULT_BASE_URL,
        **kwargs
    ) -> "SeacloudAPI":
        """
        Construct a client and authenticate it in one step.

        Args:
            username: Account username
            password: Account password
            base_url: Base URL for the API
            **kwargs: Further constructor options (timeout, verify_ssl, logger)

        Returns:
            Authenticated client

        Raises:
            requests.exceptions.RequestException: If authentication fails
        """
        client = cls(base_url=base_url, **kwargs)
        try:
            client.authenticate(username, password)
        except Exception:
            client.session.close()
            raise
        return client

    @classmethod
    def from_config(
        cls,
        config: Optional[Config] = None,
        logger: Optional[logging.Logger] = None
    ) -> "SeacloudAPI":
        """
        Build an authenticated client from configuration.

        Args:
            config: Configuration (loaded from file/environment if None)
            logger: Logger instance

        Returns:
            Authenticated client

        Raises:
            ValueError: If username or password is not configured
        """
        config = config or Config()
        if not config.has_credentials:
            raise ValueError("Configuration must include both username and password")

        logger = logger or logging.getLogger(__name__)
        with LoggerContext(logger, f"connecting to {config.api_base_url}"):
            return cls.create_authenticated_client(
                config.auth_username,
                config.auth_password,
                base_url=config.api_base_url,
                timeout=config.api_timeout,
                verify_ssl=config.api_verify_ssl,
                logger=logger,
            )


__all__ = [
    "APIClient",
    "AuthAPI",
    "LocationsAPI",
    "SensorsAPI",
    "SeacloudAPI",
    "helpers",
]
