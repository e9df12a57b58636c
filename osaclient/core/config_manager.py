"""
Configuration management for the OSA scan client.

Handles loading, merging, and discovery of configuration files, and builds
the client configuration from YAML, environment and CLI arguments.
"""
import importlib.resources as importlib_resources
import logging
import os
from typing import Optional

import yaml

from osaclient.client.environment_detector import OSAEnvironmentDetector, validate_server_url
from osaclient.client.models import AuthenticationCredentials, OSAConfig
from osaclient.utils.exceptions import ConfigurationError

LOCAL_CONFIG_FILE = "osa.config.yaml"


class ConfigManager:
    """Manages configuration loading and merging operations."""

    def __init__(self, detector: Optional[OSAEnvironmentDetector] = None):
        self.detector = detector or OSAEnvironmentDetector()
        self.logger = logging.getLogger(self.__class__.__name__)

    def load_config(self, path: str) -> dict:
        """Load configuration from YAML file."""
        with open(path, "r") as f:
            try:
                return yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    def deep_merge(self, default: dict, user: dict) -> dict:
        """Deep merge user config into default config."""
        result = default.copy()
        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self.deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def load_package_default_config(self) -> dict:
        """Load default config from package."""
        config_files = importlib_resources.files("osaclient.config")
        with (config_files / "default.yaml").open("r") as f:
            return yaml.safe_load(f)

    def load_and_merge_config(self, user_config_path: str) -> dict:
        """Load user config and merge with package default."""
        default_config = self.load_package_default_config()
        user_config = self.load_config(user_config_path)
        return self.deep_merge(default_config, user_config)

    def discover_and_load_config(self, config_arg: Optional[str]) -> dict:
        """Discover config file with priority order."""

        # Priority 1: --config argument
        if config_arg:
            if os.path.exists(config_arg):
                self.logger.debug(f"Loading configuration from {config_arg}")
                return self.load_and_merge_config(config_arg)
            raise ConfigurationError(f"Config file not found: {config_arg}")

        # Priority 2: osa.config.yaml in current directory
        if os.path.exists(LOCAL_CONFIG_FILE):
            self.logger.debug(f"Loading configuration from {LOCAL_CONFIG_FILE}")
            return self.load_and_merge_config(LOCAL_CONFIG_FILE)

        # Priority 3: Package default config
        return self.load_package_default_config()

    def build_client_config(
        self,
        config: dict,
        server_url: Optional[str] = None,
        poll_interval: Optional[float] = None,
        max_attempts: Optional[int] = None,
        origin: Optional[int] = None,
    ) -> OSAConfig:
        """Merge YAML, environment and CLI values; CLI wins over environment over YAML."""
        client_config = self.detector.apply_to(OSAConfig.from_dict(config))

        if server_url:
            client_config.server_url = server_url
        if poll_interval is not None:
            client_config.poll_interval = poll_interval
        if max_attempts is not None:
            client_config.max_poll_attempts = max_attempts
        if origin is not None:
            client_config.origin = origin

        if not validate_server_url(client_config.server_url):
            raise ConfigurationError(
                f"Invalid or missing OSA server URL: {client_config.server_url or '<unset>'}",
                missing_vars=["OSA_SERVER_URL"] if not client_config.server_url else []
            )
        if client_config.poll_interval <= 0:
            raise ConfigurationError(f"Poll interval must be positive, got {client_config.poll_interval}")

        return client_config

    def resolve_credentials(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> AuthenticationCredentials:
        """CLI credentials take precedence over OSA_USERNAME / OSA_PASSWORD."""
        if not username and not password:
            return self.detector.get_credentials()

        username = username or os.getenv("OSA_USERNAME")
        password = password or os.getenv("OSA_PASSWORD")
        if not username or not password:
            missing = [
                name for name, value in (("OSA_USERNAME", username), ("OSA_PASSWORD", password))
                if not value
            ]
            raise ConfigurationError(
                f"Missing credentials: {', '.join(missing)}",
                missing_vars=missing
            )
        return AuthenticationCredentials(username=username, password=password)
