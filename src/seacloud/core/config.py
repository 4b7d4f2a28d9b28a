"""
Configuration module for the Seacloud client.

Loads configuration from an optional JSON file and environment variables
(including a local .env file).
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

from dotenv import load_dotenv

from . import constants


class Config:
    """Configuration manager for the client."""

    def __init__(self, config_file: Optional[str] = None, load_env_file: bool = True):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses SEACLOUD_CONFIG_FILE
                        env var or defaults to 'config.json'
            load_env_file: Whether to load a .env file into the environment first
        """
        if load_env_file:
            load_dotenv()

        self._explicit_file = config_file is not None or "SEACLOUD_CONFIG_FILE" in os.environ
        self.config_file = config_file or os.getenv(
            "SEACLOUD_CONFIG_FILE", constants.DEFAULT_CONFIG_FILE
        )
        self.config: Dict[str, Any] = {}
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            # Only a file the caller asked for is mandatory
            if self._explicit_file:
                raise FileNotFoundError(f"Configuration file not found: {self.config_file}")
            return

        with open(config_path, "r", encoding="utf-8") as f:
            self.config = json.load(f)

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        overrides = {
            "SEACLOUD_BASE_URL": ("api", "base_url"),
            "SEACLOUD_TIMEOUT": ("api", "timeout"),
            "SEACLOUD_USERNAME": ("authentication", "username"),
            "SEACLOUD_PASSWORD": ("authentication", "password"),
        }

        for env_var, (section, key) in overrides.items():
            value = os.getenv(env_var)
            if not value:
                continue
            if key == "timeout":
                value = float(value)
            self.config.setdefault(section, {})[key] = value

    def _validate_config(self) -> None:
        """Validate the types of configured values."""
        for section in ("api", "authentication"):
            if section in self.config and not isinstance(self.config[section], dict):
                raise ValueError(f"Configuration section '{section}' must be an object")

        timeout = self.get("api.timeout")
        if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float))):
            raise ValueError("Configuration key 'api.timeout' must be a number")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'api.base_url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def api_base_url(self) -> str:
        """Get API base URL."""
        return self.get("api.base_url", constants.DEFAULT_BASE_URL)

    @property
    def api_timeout(self) -> Optional[float]:
        """Get API timeout in seconds (None means wait indefinitely)."""
        return self.get("api.timeout")

    @property
    def api_verify_ssl(self) -> bool:
        """Get API SSL verification setting."""
        return self.get("api.verify_ssl", True)

    @property
    def auth_username(self) -> Optional[str]:
        """Get authentication username."""
        return self.get("authentication.username")

    @property
    def auth_password(self) -> Optional[str]:
        """Get authentication password."""
        return self.get("authentication.password")

    @property
    def has_credentials(self) -> bool:
        """Check whether both username and password are configured."""
        return bool(self.auth_username and self.auth_password)

    def __repr__(self) -> str:
        return f"Config(file={self.config_file}, base_url={self.api_base_url})"
