"""
Unit tests for credentials providers.
"""
import pytest
from unittest.mock import Mock, patch
from botocore.credentials import Credentials
from botocore.exceptions import ProfileNotFound
from botocore import UNSIGNED
from services.credentials import (
    AnonymousCredentialsProvider, DefaultCredentialsProviderChain,
    StaticCredentialsProvider,
)
from utils.exceptions import AmazonClientError


class TestStaticCredentialsProvider:
    """Tests for StaticCredentialsProvider."""

    def test_get_credentials(self):
        provider = StaticCredentialsProvider("AKID", "secret", "token")

        credentials = provider.get_credentials()

        assert credentials.access_key == "AKID"
        assert credentials.secret_key == "secret"
        assert credentials.token == "token"

    @pytest.mark.parametrize("access_key,secret_key", [("", "secret"), ("AKID", None)])
    def test_missing_keys(self, access_key, secret_key):
        """Test both keys are required."""
        with pytest.raises(ValueError, match="access_key and secret_key are required"):
            StaticCredentialsProvider(access_key, secret_key)


class TestAnonymousCredentialsProvider:
    """Tests for AnonymousCredentialsProvider."""

    def test_get_credentials_is_unsigned(self):
        """Test the provider yields the botocore marker for unsigned calls."""
        assert AnonymousCredentialsProvider().get_credentials() is UNSIGNED


class TestDefaultCredentialsProviderChain:
    """Tests for DefaultCredentialsProviderChain."""

    def test_init(self):
        """Test the boto3 session is not built eagerly."""
        provider = DefaultCredentialsProviderChain("dev")
        assert provider.profile_name == "dev"
        assert provider._session is None

    @patch('services.credentials.boto3')
    def test_session_lazy_init(self, mock_boto3):
        """Test lazy initialization of the boto3 session."""
        mock_session = Mock()
        mock_boto3.Session.return_value = mock_session

        provider = DefaultCredentialsProviderChain("dev")

        assert provider.session == mock_session
        assert provider.session == mock_session
        mock_boto3.Session.assert_called_once_with(profile_name="dev")

    @patch('services.credentials.boto3')
    def test_get_credentials_frozen(self, mock_boto3):
        """Test resolved credentials are returned frozen."""
        mock_boto3.Session.return_value.get_credentials.return_value = Credentials(
            "AKID", "secret", "token"
        )

        credentials = DefaultCredentialsProviderChain().get_credentials()

        assert credentials.access_key == "AKID"
        assert credentials.token == "token"

    @patch('services.credentials.boto3')
    def test_no_credentials(self, mock_boto3):
        """Test an empty chain raises a client error."""
        mock_boto3.Session.return_value.get_credentials.return_value = None

        with pytest.raises(AmazonClientError, match="any provider in the chain"):
            DefaultCredentialsProviderChain().get_credentials()

    @patch('services.credentials.boto3')
    def test_botocore_error_wrapped(self, mock_boto3):
        """Test botocore failures become client errors."""
        mock_boto3.Session.side_effect = ProfileNotFound(profile="missing")

        with pytest.raises(AmazonClientError, match="Unable to load AWS credentials") as exc_info:
            DefaultCredentialsProviderChain("missing").get_credentials()

        assert isinstance(exc_info.value.__cause__, ProfileNotFound)
