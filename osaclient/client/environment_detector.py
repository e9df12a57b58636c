"""
OSA Environment Detector

Detects and validates the environment variables that configure the OSA
client: server location, credentials and polling overrides.
"""

import os
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

from osaclient.utils.exceptions import ConfigurationError
from .models import AuthenticationCredentials, OSAConfig


class OSAEnvironmentDetector:
    """Detects and validates the OSA client environment"""

    REQUIRED_VARS = [
        "OSA_SERVER_URL",
        "OSA_USERNAME",
        "OSA_PASSWORD"
    ]

    OPTIONAL_VARS = {
        "OSA_TIMEOUT": ("timeout", int),
        "OSA_POLL_INTERVAL": ("poll_interval", float),
        "OSA_MAX_POLL_ATTEMPTS": ("max_poll_attempts", int),
        "OSA_ORIGIN": ("origin", int)
    }

    def is_configured(self) -> bool:
        """Check if all required environment variables are present"""
        return all(os.getenv(var) for var in self.REQUIRED_VARS)

    def get_missing_variables(self) -> List[str]:
        """Get list of missing required environment variables"""
        return [var for var in self.REQUIRED_VARS if not os.getenv(var)]

    def get_credentials(self) -> AuthenticationCredentials:
        """Extract credentials from the environment"""
        missing = [var for var in ("OSA_USERNAME", "OSA_PASSWORD") if not os.getenv(var)]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}",
                missing_vars=missing
            )
        return AuthenticationCredentials(
            username=os.getenv("OSA_USERNAME"),
            password=os.getenv("OSA_PASSWORD")
        )

    def get_overrides(self) -> Dict[str, Any]:
        """Optional settings found in the environment; unparsable values are ignored"""
        overrides = {}
        for var_name, (param, var_type) in self.OPTIONAL_VARS.items():
            env_value = os.getenv(var_name)
            if not env_value:
                continue
            try:
                overrides[param] = var_type(env_value)
            except ValueError:
                # Keep the configured default
                continue
        return overrides

    def apply_to(self, config: OSAConfig) -> OSAConfig:
        """Overlay environment settings on a configuration"""
        server_url = os.getenv("OSA_SERVER_URL")
        if server_url:
            config.server_url = server_url

        for param, value in self.get_overrides().items():
            setattr(config, param, value)
        return config

    def get_environment_summary(self) -> dict:
        """Get summary of environment configuration for debugging"""
        summary = {
            "configured": self.is_configured(),
            "missing_variables": self.get_missing_variables(),
            "detected_variables": {}
        }

        # Show which variables are set (but mask the password)
        for var in self.REQUIRED_VARS:
            value = os.getenv(var)
            if value and "PASSWORD" in var:
                summary["detected_variables"][var] = "********"
            else:
                summary["detected_variables"][var] = value or None

        for var in self.OPTIONAL_VARS:
            value = os.getenv(var)
            if value:
                summary["detected_variables"][var] = value

        return summary


def validate_server_url(url: Optional[str]) -> bool:
    """Validate server URL format"""
    if not url:
        return False

    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
