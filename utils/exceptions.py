"""
Exception taxonomy shared by all service clients.
"""
from enum import Enum
from typing import Optional, Dict, Any


class ErrorType(Enum):
    """Which side of the call caused a service error."""

    CLIENT = "Client"
    SERVICE = "Service"
    UNKNOWN = "Unknown"

    @classmethod
    def from_status_code(cls, status_code: Optional[int]) -> "ErrorType":
        if status_code is None:
            return cls.UNKNOWN
        if 400 <= status_code < 500:
            return cls.CLIENT
        if status_code >= 500:
            return cls.SERVICE
        return cls.UNKNOWN


class AmazonClientError(Exception):
    """Exception raised when a call fails on the client side.

    Covers connectivity problems, marshalling and unmarshalling failures,
    missing credentials and misuse of a client.
    """

    def __init__(self, message: str):
        """
        Initialize client error.

        Args:
            message: Error message
        """
        super().__init__(message)
        self.message = message


class AmazonServiceError(AmazonClientError):
    """Exception raised for an error response returned by a service.

    Subclasses declare the wire error code they stand for in ERROR_CODE.
    """

    ERROR_CODE: Optional[str] = None

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        status_code: Optional[int] = None,
        request_id: Optional[str] = None,
        service_name: Optional[str] = None,
        error_type: Optional[ErrorType] = None,
        response_data: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize service error.

        Args:
            message: Error message from the service
            error_code: Wire error code, defaults to the class ERROR_CODE
            status_code: HTTP status code if available
            request_id: AWS request id if available
            service_name: Name of the service that returned the error
            error_type: Client/Service fault, derived from status_code if omitted
            response_data: Decoded error body if available
        """
        super().__init__(message)
        self.error_message = message
        self.error_code = error_code or self.ERROR_CODE
        self.status_code = status_code
        self.request_id = request_id
        self.service_name = service_name
        self.error_type = error_type or ErrorType.from_status_code(status_code)
        self.response_data = response_data

    def __str__(self) -> str:
        return (
            f"{self.error_message} (Service: {self.service_name}; "
            f"Status Code: {self.status_code}; Error Code: {self.error_code}; "
            f"Request ID: {self.request_id})"
        )
