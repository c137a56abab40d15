"""
Unit tests for configuration module.
"""
import pytest
import os
from unittest.mock import patch
from config import ClientConfig, SDK_VERSION, get_config


class TestClientConfig:
    """Tests for ClientConfig class."""

    @patch.dict(os.environ, {}, clear=True)
    def test_from_env_defaults(self):
        """Test ClientConfig.from_env with nothing set."""
        config = ClientConfig.from_env()
        assert config.region == 'us-east-1'
        assert config.protocol == 'https'
        assert config.endpoint_url is None
        assert config.connection_timeout == 15.0
        assert config.socket_timeout == 15.0
        assert config.max_error_retry == 3
        assert config.user_agent == f'aws-json-clients/{SDK_VERSION}'
        assert config.profile_name is None
        assert config.log_level == 'INFO'

    @patch.dict(os.environ, {
        'AWS_REGION': 'eu-west-1',
        'AWS_SDK_PROTOCOL': 'HTTP',
        'AWS_ENDPOINT_URL': 'http://localhost:4566',
        'AWS_SDK_CONNECTION_TIMEOUT': '2.5',
        'AWS_SDK_SOCKET_TIMEOUT': '30',
        'AWS_SDK_MAX_ERROR_RETRY': '0',
        'AWS_SDK_USER_AGENT': 'my-app/2.0',
        'AWS_PROFILE': 'dev',
        'LOG_LEVEL': 'debug',
    }, clear=True)
    def test_from_env_all_variables(self):
        """Test ClientConfig.from_env with all variables set."""
        config = ClientConfig.from_env()
        assert config.region == 'eu-west-1'
        assert config.protocol == 'http'
        assert config.endpoint_url == 'http://localhost:4566'
        assert config.connection_timeout == 2.5
        assert config.socket_timeout == 30.0
        assert config.max_error_retry == 0
        assert config.user_agent == 'my-app/2.0'
        assert config.profile_name == 'dev'
        assert config.log_level == 'DEBUG'

    @patch.dict(os.environ, {'AWS_DEFAULT_REGION': 'ap-south-1'}, clear=True)
    def test_from_env_default_region_fallback(self):
        """Test AWS_DEFAULT_REGION is used when AWS_REGION is unset."""
        assert ClientConfig.from_env().region == 'ap-south-1'

    @patch.dict(os.environ, {
        'AWS_REGION': 'us-west-2',
        'AWS_DEFAULT_REGION': 'ap-south-1',
    }, clear=True)
    def test_from_env_region_precedence(self):
        """Test AWS_REGION wins over AWS_DEFAULT_REGION."""
        assert ClientConfig.from_env().region == 'us-west-2'

    @patch.dict(os.environ, {'AWS_SDK_PROTOCOL': 'ftp'}, clear=True)
    def test_from_env_invalid_protocol(self):
        """Test ClientConfig.from_env raises error for unknown protocol."""
        with pytest.raises(ValueError, match="AWS_SDK_PROTOCOL"):
            ClientConfig.from_env()

    @patch.dict(os.environ, {'AWS_SDK_CONNECTION_TIMEOUT': 'soon'}, clear=True)
    def test_from_env_invalid_timeout(self):
        """Test ClientConfig.from_env raises error for non-numeric timeout."""
        with pytest.raises(ValueError, match="AWS_SDK_CONNECTION_TIMEOUT"):
            ClientConfig.from_env()

    @patch.dict(os.environ, {'AWS_SDK_SOCKET_TIMEOUT': '0'}, clear=True)
    def test_from_env_non_positive_timeout(self):
        """Test ClientConfig.from_env rejects a zero timeout."""
        with pytest.raises(ValueError, match="AWS_SDK_SOCKET_TIMEOUT"):
            ClientConfig.from_env()

    @patch.dict(os.environ, {'AWS_SDK_MAX_ERROR_RETRY': '-1'}, clear=True)
    def test_from_env_negative_retry(self):
        """Test ClientConfig.from_env rejects a negative retry count."""
        with pytest.raises(ValueError, match="AWS_SDK_MAX_ERROR_RETRY"):
            ClientConfig.from_env()

    @patch.dict(os.environ, {'AWS_SDK_MAX_ERROR_RETRY': 'three'}, clear=True)
    def test_from_env_non_integer_retry(self):
        """Test ClientConfig.from_env rejects a non-integer retry count."""
        with pytest.raises(ValueError, match="AWS_SDK_MAX_ERROR_RETRY"):
            ClientConfig.from_env()

    @patch.dict(os.environ, {'LOG_LEVEL': 'INVALID'}, clear=True)
    def test_from_env_invalid_log_level(self):
        """Test ClientConfig.from_env raises error for invalid log level."""
        with pytest.raises(ValueError, match="LOG_LEVEL"):
            ClientConfig.from_env()

    @patch.dict(os.environ, {}, clear=True)
    def test_get_config_singleton(self):
        """Test get_config returns singleton instance."""
        # Reset global config
        import config
        config._config = None

        config1 = get_config()
        config2 = get_config()

        assert config1 is config2
        config._config = None
