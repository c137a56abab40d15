"""
Credentials providers for signing requests.
"""
import boto3
from typing import Optional
from botocore import UNSIGNED
from botocore.credentials import Credentials, ReadOnlyCredentials
from botocore.exceptions import BotoCoreError
from logger_config import get_logger
from utils.exceptions import AmazonClientError

logger = get_logger(__name__)


class StaticCredentialsProvider:
    """Provider that always returns the same credentials."""

    def __init__(
        self,
        access_key: str,
        secret_key: str,
        session_token: Optional[str] = None
    ) -> None:
        if not access_key or not secret_key:
            raise ValueError("access_key and secret_key are required")
        self._credentials = Credentials(access_key, secret_key, session_token)

    def get_credentials(self) -> ReadOnlyCredentials:
        return self._credentials.get_frozen_credentials()


class AnonymousCredentialsProvider:
    """
    Provider for calls that are sent without a signature.

    Cognito user pool operations such as InitiateAuth, SignUp and
    RespondToAuthChallenge accept unsigned requests from public app clients.
    """

    def get_credentials(self):
        return UNSIGNED


class DefaultCredentialsProviderChain:
    """
    Provider backed by the botocore credential chain.

    Looks in environment variables, the shared credentials and config files,
    container credentials and instance metadata, in that order.
    """

    def __init__(self, profile_name: Optional[str] = None) -> None:
        """
        Initialize provider chain.

        Args:
            profile_name: Optional named profile from the shared config files
        """
        self.profile_name = profile_name
        self._session: Optional[boto3.Session] = None

    @property
    def session(self) -> boto3.Session:
        """Lazy initialization of the boto3 session."""
        if self._session is None:
            self._session = boto3.Session(profile_name=self.profile_name)
        return self._session

    def get_credentials(self) -> ReadOnlyCredentials:
        """
        Resolve credentials through the chain.

        Returns:
            Frozen credentials safe to use for one signature

        Raises:
            AmazonClientError: If no provider in the chain has credentials
        """
        try:
            credentials = self.session.get_credentials()
        except BotoCoreError as e:
            logger.error(f'Failed to resolve AWS credentials: {str(e)}')
            raise AmazonClientError(
                f"Unable to load AWS credentials: {str(e)}"
            ) from e

        if credentials is None:
            raise AmazonClientError(
                "Unable to load AWS credentials from any provider in the chain"
            )
        return credentials.get_frozen_credentials()
