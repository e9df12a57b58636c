"""
Tests for OSA Environment Detector

Tests environment variable detection, validation, and configuration
extraction for the OSA client.
"""

import os
import pytest
from unittest.mock import patch

from osaclient.client.environment_detector import OSAEnvironmentDetector, validate_server_url
from osaclient.client.models import OSAConfig
from osaclient.utils.exceptions import ConfigurationError

VALID_ENV = {
    'OSA_SERVER_URL': 'https://osa.example.com',
    'OSA_USERNAME': 'jenkins',
    'OSA_PASSWORD': 's3cret'
}


class TestOSAEnvironmentDetector:
    """Test cases for environment detection and validation"""

    def setup_method(self):
        """Setup for each test"""
        self.detector = OSAEnvironmentDetector()

    def test_is_configured_with_all_vars(self):
        with patch.dict(os.environ, VALID_ENV, clear=True):
            assert self.detector.is_configured() is True

    def test_is_configured_missing_vars(self):
        with patch.dict(os.environ, {}, clear=True):
            assert self.detector.is_configured() is False

    def test_get_missing_variables(self):
        with patch.dict(os.environ, {'OSA_SERVER_URL': 'https://osa.example.com'}, clear=True):
            missing = self.detector.get_missing_variables()
            assert missing == ['OSA_USERNAME', 'OSA_PASSWORD']

    def test_get_credentials(self):
        with patch.dict(os.environ, VALID_ENV, clear=True):
            credentials = self.detector.get_credentials()
            assert credentials.username == 'jenkins'
            assert credentials.password == 's3cret'

    def test_get_credentials_missing_password(self):
        with patch.dict(os.environ, {'OSA_USERNAME': 'jenkins'}, clear=True):
            with pytest.raises(ConfigurationError) as exc_info:
                self.detector.get_credentials()
            assert exc_info.value.missing_vars == ['OSA_PASSWORD']

    def test_overrides_are_typed(self):
        with patch.dict(os.environ, {
            'OSA_TIMEOUT': '120',
            'OSA_POLL_INTERVAL': '2.5',
            'OSA_MAX_POLL_ATTEMPTS': '40',
            'OSA_ORIGIN': '3'
        }, clear=True):
            assert self.detector.get_overrides() == {
                'timeout': 120,
                'poll_interval': 2.5,
                'max_poll_attempts': 40,
                'origin': 3
            }

    def test_invalid_override_keeps_default(self):
        with patch.dict(os.environ, {'OSA_TIMEOUT': 'soon', 'OSA_ORIGIN': '2'}, clear=True):
            config = self.detector.apply_to(OSAConfig(server_url='https://a.example.com'))
            assert config.timeout == 60
            assert config.origin == 2

    def test_apply_to_sets_server_url(self):
        with patch.dict(os.environ, VALID_ENV, clear=True):
            config = self.detector.apply_to(OSAConfig(server_url=''))
            assert config.server_url == 'https://osa.example.com'

    def test_environment_summary_masks_password(self):
        with patch.dict(os.environ, VALID_ENV, clear=True):
            summary = self.detector.get_environment_summary()
            assert summary['configured'] is True
            assert summary['detected_variables']['OSA_PASSWORD'] == '********'
            assert summary['detected_variables']['OSA_USERNAME'] == 'jenkins'


@pytest.mark.parametrize("url,expected", [
    ("https://osa.example.com", True),
    ("http://10.0.0.5:8080/", True),
    ("osa.example.com", False),
    ("", False),
    (None, False),
])
def test_validate_server_url(url, expected):
    assert validate_server_url(url) is expected
