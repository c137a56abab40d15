"""
Base class for JSON service clients.

A service client turns a request model into a signed HTTP request, sends
it and turns the response into a result model or a typed exception.
Credential resolution and SigV4 signing are delegated to botocore; the
HTTP transport, connection pooling and transport retries to requests.
"""
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple, Type
from urllib.parse import urlparse

import requests
from botocore import UNSIGNED
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.exceptions import BotoCoreError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from config import ClientConfig, get_config
from logger_config import get_logger
from models.base import AwsModel, HEADER, PAYLOAD
from models.transform import (
    JsonErrorResponse, JsonErrorUnmarshaller, marshall_json, members_at,
    unmarshall_json,
)
from services.credentials import DefaultCredentialsProviderChain
from utils.decorators import client_execution
from utils.exceptions import AmazonClientError, AmazonServiceError
from utils.metrics import ExecutionContext, Field

logger = get_logger(__name__)

REQUEST_ID_HEADER = "x-amzn-RequestId"


@dataclass(frozen=True)
class Operation:
    """Static description of one API operation."""

    name: str
    request_uri: str = "/"
    http_method: str = "POST"


@dataclass(frozen=True)
class ResponseMetadata:
    """Metadata of a completed call."""

    request_id: Optional[str]


class BaseAWSService:
    """
    Common plumbing of the service clients.

    Subclasses describe their service through class attributes. Setting
    TARGET_PREFIX selects the AWS JSON protocol (X-Amz-Target header, every
    call POSTed to "/"); leaving it unset selects REST-JSON, where each
    operation has its own request URI.

    set_endpoint and set_region must be called before any request and not
    concurrently with requests in flight. Requests themselves may be issued
    from several threads.
    """

    SERVICE_NAME: str = ""
    ENDPOINT_PREFIX: str = ""
    SIGNING_NAME: str = ""
    TARGET_PREFIX: Optional[str] = None
    JSON_VERSION: str = "1.1"
    BASE_EXCEPTION: Type[AmazonServiceError] = AmazonServiceError
    EXCEPTIONS: Sequence[Type[AmazonServiceError]] = ()

    RESPONSE_METADATA_CACHE_SIZE = 50

    def __init__(
        self,
        credentials_provider: Any = None,
        config: Optional[ClientConfig] = None,
        http_session: Optional[requests.Session] = None
    ) -> None:
        """
        Initialize service client.

        Args:
            credentials_provider: Object with get_credentials(); defaults to
                the botocore provider chain. A provider returning
                botocore.UNSIGNED sends calls without a signature
            config: Client configuration; defaults to get_config()
            http_session: requests-compatible session; built lazily if omitted
        """
        self.config: ClientConfig = config or get_config()
        self.credentials_provider = (
            credentials_provider
            or DefaultCredentialsProviderChain(self.config.profile_name)
        )
        self._http_session = http_session
        self._is_shutdown = False
        self.error_unmarshaller = JsonErrorUnmarshaller(
            self.EXCEPTIONS,
            fallback=self.BASE_EXCEPTION,
            service_name=self.SERVICE_NAME,
        )
        # Entries hold the request itself so its id cannot be reused while cached
        self._response_metadata: "OrderedDict[int, Tuple[AwsModel, ResponseMetadata]]" = OrderedDict()
        self._metadata_lock = threading.Lock()

        self.region: str = self.config.region
        self.endpoint: str = ""
        if self.config.endpoint_url:
            self.set_endpoint(self.config.endpoint_url)
        else:
            self.set_region(self.config.region)

    @property
    def http_session(self) -> requests.Session:
        """Lazy initialization of the HTTP session."""
        if self._http_session is None:
            retry = Retry(
                total=self.config.max_error_retry,
                backoff_factor=0.1,
                status_forcelist=(500, 502, 503, 504),
                allowed_methods=None,
                raise_on_status=False,
            )
            adapter = HTTPAdapter(max_retries=retry)
            session = requests.Session()
            session.mount("https://", adapter)
            session.mount("http://", adapter)
            self._http_session = session
        return self._http_session

    def set_endpoint(self, endpoint: str) -> None:
        """
        Point the client at an endpoint.

        Args:
            endpoint: Host name or URL; a bare host uses the configured protocol

        Raises:
            ValueError: If the endpoint has no host
        """
        if not endpoint:
            raise ValueError("endpoint must not be empty")
        if "://" not in endpoint:
            endpoint = f"{self.config.protocol}://{endpoint}"
        parsed = urlparse(endpoint)
        if not parsed.hostname:
            raise ValueError(f"Invalid endpoint: {endpoint}")

        self.endpoint = endpoint.rstrip("/")
        region = parse_region(parsed.hostname)
        if region:
            self.region = region
        logger.debug(f'{self.SERVICE_NAME} endpoint set to {self.endpoint} (region {self.region})')

    def set_region(self, region: str) -> None:
        """
        Point the client at the regional endpoint of the service.

        Raises:
            ValueError: If region is empty
        """
        if not region:
            raise ValueError("region must not be empty")
        domain = "amazonaws.com.cn" if region.startswith("cn-") else "amazonaws.com"
        self.region = region
        self.endpoint = f"{self.config.protocol}://{self.ENDPOINT_PREFIX}.{region}.{domain}"
        logger.debug(f'{self.SERVICE_NAME} endpoint set to {self.endpoint}')

    def shutdown(self) -> None:
        """Release the HTTP session. The client must not be used afterwards."""
        if self._http_session is not None:
            self._http_session.close()
        self._is_shutdown = True

    def get_cached_response_metadata(self, request: AwsModel) -> Optional[ResponseMetadata]:
        """
        Return metadata of the last successful call made with this request object.

        Only the most recent calls are remembered.
        """
        with self._metadata_lock:
            entry = self._response_metadata.get(id(request))
        if entry is None or entry[0] is not request:
            return None
        return entry[1]

    def _cache_response_metadata(self, request: AwsModel, metadata: ResponseMetadata) -> None:
        with self._metadata_lock:
            key = id(request)
            self._response_metadata.pop(key, None)
            self._response_metadata[key] = (request, metadata)
            while len(self._response_metadata) > self.RESPONSE_METADATA_CACHE_SIZE:
                self._response_metadata.popitem(last=False)

    @client_execution
    def _invoke(
        self,
        operation: Operation,
        request: AwsModel,
        result_cls: Optional[Type[AwsModel]],
        context: ExecutionContext
    ) -> Optional[AwsModel]:
        """
        Run one call: marshall, sign, send, then unmarshall or raise.

        Returns:
            The result model, or None for operations without output

        Raises:
            AmazonServiceError: The typed exception for an error response
            AmazonClientError: If the call fails on the client side
        """
        if self._is_shutdown:
            raise AmazonClientError(f"{self.SERVICE_NAME} client has been shut down")

        metrics = context.metrics
        with metrics.timed(Field.REQUEST_MARSHALL_TIME):
            body = self._marshall(operation, request)

        provider = request.request_credentials_provider or self.credentials_provider
        with metrics.timed(Field.CREDENTIALS_REQUEST_TIME):
            credentials = provider.get_credentials()
        if credentials is None:
            raise AmazonClientError(
                f"Unable to load AWS credentials: {type(provider).__name__} returned none"
            )

        with metrics.timed(Field.REQUEST_SIGNING_TIME):
            aws_request = AWSRequest(
                method=operation.http_method,
                url=self.endpoint + operation.request_uri,
                data=body,
                headers=self._request_headers(operation, context),
            )
            if credentials is not UNSIGNED:
                self._sign(aws_request, credentials)

        with metrics.timed(Field.HTTP_REQUEST_TIME):
            response = self._send(aws_request)

        if response.status_code >= 300:
            error = JsonErrorResponse.from_http(
                response.status_code, response.headers, response.content
            )
            raise self.error_unmarshaller.unmarshall(error)

        self._cache_response_metadata(
            request, ResponseMetadata(request_id=response.headers.get(REQUEST_ID_HEADER))
        )
        if result_cls is None:
            return None

        with metrics.timed(Field.RESPONSE_PROCESSING_TIME):
            return self._unmarshall(result_cls, response)

    def _sign(self, aws_request: AWSRequest, credentials: Any) -> None:
        try:
            SigV4Auth(credentials, self.SIGNING_NAME, self.region).add_auth(aws_request)
        except BotoCoreError as e:
            raise AmazonClientError(f"Unable to sign request: {e}") from e

    def _marshall(self, operation: Operation, request: Optional[AwsModel]) -> bytes:
        if request is None:
            raise AmazonClientError(
                f"Invalid argument passed to marshall({operation.name}Request)"
            )
        try:
            return marshall_json(request)
        except (TypeError, ValueError) as e:
            raise AmazonClientError(f"Unable to marshall request to JSON: {e}") from e

    def _request_headers(self, operation: Operation, context: ExecutionContext) -> Dict[str, str]:
        headers = {
            "User-Agent": self.config.user_agent,
            "amz-sdk-invocation-id": context.correlation_id,
        }
        if self.TARGET_PREFIX:
            headers["X-Amz-Target"] = f"{self.TARGET_PREFIX}.{operation.name}"
            headers["Content-Type"] = f"application/x-amz-json-{self.JSON_VERSION}"
        else:
            headers["Content-Type"] = "application/json"
        return headers

    def _send(self, aws_request: AWSRequest) -> requests.Response:
        try:
            return self.http_session.request(
                aws_request.method,
                aws_request.url,
                data=aws_request.data,
                headers=dict(aws_request.headers.items()),
                timeout=(self.config.connection_timeout, self.config.socket_timeout),
            )
        except requests.RequestException as e:
            raise AmazonClientError(f"Unable to execute HTTP request: {e}") from e

    def _unmarshall(self, result_cls: Type[AwsModel], response: requests.Response) -> AwsModel:
        try:
            payload = members_at(result_cls, PAYLOAD)
            if payload:
                result = result_cls()
                setattr(result, payload[0].name, response.content)
            else:
                result = unmarshall_json(result_cls, response.content)
        except (TypeError, ValueError) as e:
            raise AmazonClientError(
                f"Unable to unmarshall response into {result_cls.__name__}: {e}"
            ) from e

        for member in members_at(result_cls, HEADER):
            value = response.headers.get(member.wire_name)
            if value is not None:
                setattr(result, member.name, value)
        return result


def parse_region(host: str) -> Optional[str]:
    """Extract the region from a <...>.<region>.amazonaws.com host name."""
    for suffix in (".amazonaws.com", ".amazonaws.com.cn"):
        if host.endswith(suffix):
            labels = host[: -len(suffix)].split(".")
            if len(labels) >= 2:
                return labels[-1]
    return None
