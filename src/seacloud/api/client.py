"""
Base API client for the Seacloud REST API.

Handles HTTP requests, header merging, session management, and error handling.
"""

import logging
from typing import Dict, Any, Optional, Mapping

import requests  # type: ignore
import urllib3  # type: ignore

from ..core import constants


class APIClient:
    """Base client for interacting with the Seacloud API."""

    def __init__(
        self,
        base_url: str = constants.DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize API client.

        Args:
            base_url: Base URL for the API
            timeout: Request timeout in seconds (None waits indefinitely)
            verify_ssl: Whether to verify SSL certificates
            logger: Logger instance
        """
        self._base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.logger = logger or logging.getLogger(__name__)

        # Session state: both set after authentication, both None before
        self.id_token: Optional[str] = None
        self.refresh_token: Optional[str] = None

        # Disable SSL warnings when verify_ssl is False
        if not verify_ssl:
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

        self.session = requests.Session()

    @property
    def base_url(self) -> str:
        """Root address prefixed to every endpoint path."""
        return self._base_url

    @property
    def is_authenticated(self) -> bool:
        """Whether a token pair is currently stored."""
        return self.id_token is not None

    def _build_headers(self, headers: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """
        Merge caller headers over the defaults and attach the bearer token.

        Args:
            headers: Caller-supplied headers; these win over the defaults

        Returns:
            Headers for the outgoing request
        """
        merged = {"Content-Type": constants.DEFAULT_CONTENT_TYPE}
        if headers:
            merged.update(headers)

        if self.id_token:
            # The stored token always replaces a caller-supplied Authorization
            for key in [k for k in merged if k.lower() == "authorization"]:
                del merged[key]
            merged["Authorization"] = f"Bearer {self.id_token}"

        return merged

    def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        json_body: Optional[Any] = None
    ) -> Any:
        """
        Make HTTP request to API and decode the JSON response.

        Args:
            method: HTTP method (GET, POST, ...)
            endpoint: API endpoint path (appended to the base URL)
            params: Query parameters, encoded in insertion order
            headers: Additional request headers
            json_body: Request body, serialized as JSON

        Returns:
            Decoded JSON response

        Raises:
            requests.exceptions.HTTPError: On a status outside 200-299
            requests.exceptions.JSONDecodeError: If the body is not valid JSON
            requests.exceptions.RequestException: On transport failure
        """
        url = f"{self._base_url}{endpoint}"

        self.logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                params=dict(params) if params else None,
                headers=self._build_headers(headers),
                json=json_body,
                timeout=self.timeout,
                verify=self.verify_ssl,
            )
            response.raise_for_status()
            return response.json()

        except requests.exceptions.RequestException as e:
            self.logger.error(f"API request failed: {method} {url} - {e}")
            raise

    def get(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Make GET request.

        Args:
            endpoint: API endpoint
            params: Query parameters

        Returns:
            Decoded JSON response
        """
        return self._request("GET", endpoint, params=params)

    def post(
        self,
        endpoint: str,
        data: Dict[str, Any],
        headers: Optional[Mapping[str, str]] = None
    ) -> Any:
        """
        Make POST request.

        Args:
            endpoint: API endpoint
            data: Request body data
            headers: Additional request headers

        Returns:
            Decoded JSON response
        """
        return self._request("POST", endpoint, headers=headers, json_body=data)

    def close(self) -> None:
        """Close the session and forget the stored tokens."""
        self.id_token = None
        self.refresh_token = None
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
