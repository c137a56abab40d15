"""
Unit tests for error response decoding and exception dispatch.
"""
import json
import pytest
from models.cognito_identity_provider import (
    COGNITO_IDENTITY_PROVIDER_EXCEPTIONS, CodeMismatchException,
    CognitoIdentityProviderServiceError, NotAuthorizedException,
)
from models.kinesis_video_archived_media import (
    KINESIS_VIDEO_ARCHIVED_MEDIA_EXCEPTIONS, InvalidMediaFrameException,
)
from models.kms import KMS_EXCEPTIONS, KMSServiceError, NotFoundException
from models.rekognition import REKOGNITION_EXCEPTIONS
from models.transform import JsonErrorResponse, JsonErrorUnmarshaller
from utils.exceptions import AmazonClientError, AmazonServiceError, ErrorType


class TestJsonErrorResponse:
    """Tests for JsonErrorResponse.from_http."""

    def test_code_from_type_member(self):
        """Test __type with a namespace prefix."""
        error = JsonErrorResponse.from_http(
            400,
            {"x-amzn-RequestId": "req-1"},
            json.dumps({
                "__type": "com.amazonaws.kms#NotFoundException",
                "message": "Key not found",
            }).encode(),
        )
        assert error.error_code == "NotFoundException"
        assert error.message == "Key not found"
        assert error.request_id == "req-1"
        assert error.status_code == 400

    def test_code_from_header_wins(self):
        """Test x-amzn-ErrorType takes precedence over the body."""
        error = JsonErrorResponse.from_http(
            404,
            {"x-amzn-ErrorType": "ResourceNotFoundException:http://internal.amazon.com/"},
            json.dumps({"__type": "Other", "Message": "Stream not found"}).encode(),
        )
        assert error.error_code == "ResourceNotFoundException"
        assert error.message == "Stream not found"

    def test_code_member(self):
        """Test the code member as last resort."""
        error = JsonErrorResponse.from_http(400, {}, b'{"code": "Throttled", "errorMessage": "slow down"}')
        assert error.error_code == "Throttled"
        assert error.message == "slow down"

    def test_unparsable_body(self):
        """Test non-JSON bodies decode to no code and no message."""
        error = JsonErrorResponse.from_http(502, {}, b"<html>Bad Gateway</html>")
        assert error.error_code is None
        assert error.message is None
        assert error.data == {}

    def test_empty_body(self):
        error = JsonErrorResponse.from_http(500, {}, b"")
        assert error.error_code is None
        assert error.data == {}


class TestJsonErrorUnmarshaller:
    """Tests for JsonErrorUnmarshaller dispatch."""

    @pytest.mark.parametrize("exceptions", [
        KMS_EXCEPTIONS,
        COGNITO_IDENTITY_PROVIDER_EXCEPTIONS,
        REKOGNITION_EXCEPTIONS,
        KINESIS_VIDEO_ARCHIVED_MEDIA_EXCEPTIONS,
    ])
    def test_every_code_dispatches_to_its_class(self, exceptions):
        """Test each registered wire code yields exactly its class."""
        unmarshaller = JsonErrorUnmarshaller(exceptions)
        for exception_cls in exceptions:
            code = exception_cls.ERROR_CODE
            error = JsonErrorResponse(400, code, "boom", "req", {})

            exception = unmarshaller.unmarshall(error)

            assert type(exception) is exception_cls
            assert exception.error_code == code

    def test_kms_exception_count(self):
        """Test the KMS table registers every documented code."""
        assert len(JsonErrorUnmarshaller(KMS_EXCEPTIONS).error_codes) == 33

    def test_match_and_fields(self):
        """Test the exception carries the response details."""
        unmarshaller = JsonErrorUnmarshaller(
            KMS_EXCEPTIONS, fallback=KMSServiceError, service_name="AWSKMS"
        )
        error = JsonErrorResponse(400, "NotFoundException", "Key 'abc' does not exist", "req-9", {"x": 1})

        exception = unmarshaller.unmarshall(error)

        assert isinstance(exception, NotFoundException)
        assert isinstance(exception, KMSServiceError)
        assert isinstance(exception, AmazonClientError)
        assert exception.error_message == "Key 'abc' does not exist"
        assert exception.status_code == 400
        assert exception.request_id == "req-9"
        assert exception.service_name == "AWSKMS"
        assert exception.error_type is ErrorType.CLIENT
        assert exception.response_data == {"x": 1}
        assert str(exception) == (
            "Key 'abc' does not exist (Service: AWSKMS; Status Code: 400; "
            "Error Code: NotFoundException; Request ID: req-9)"
        )

    def test_unknown_code_uses_fallback(self):
        """Test unrecognised codes produce the service base exception."""
        unmarshaller = JsonErrorUnmarshaller(
            COGNITO_IDENTITY_PROVIDER_EXCEPTIONS,
            fallback=CognitoIdentityProviderServiceError,
        )
        error = JsonErrorResponse(503, "BrandNewException", None, None, {})

        exception = unmarshaller.unmarshall(error)

        assert type(exception) is CognitoIdentityProviderServiceError
        assert exception.error_code == "BrandNewException"
        assert exception.error_message == "BrandNewException error"
        assert exception.error_type is ErrorType.SERVICE

    def test_missing_code_uses_fallback(self):
        """Test a response without any code falls back too."""
        unmarshaller = JsonErrorUnmarshaller(KINESIS_VIDEO_ARCHIVED_MEDIA_EXCEPTIONS)
        exception = unmarshaller.unmarshall(JsonErrorResponse(500, None, None, None, {}))
        assert type(exception) is AmazonServiceError
        assert exception.error_code is None
        assert exception.error_message == "Unknown error"

    def test_match_is_exact(self):
        """Test matching is case sensitive and exact."""
        unmarshaller = JsonErrorUnmarshaller(COGNITO_IDENTITY_PROVIDER_EXCEPTIONS)
        assert unmarshaller.match("NotAuthorizedException") is NotAuthorizedException
        assert unmarshaller.match("notauthorizedexception") is None
        assert unmarshaller.match("NotAuthorized") is None
        assert unmarshaller.match(None) is None

    def test_duplicate_code_rejected(self):
        """Test a code cannot be registered twice."""
        with pytest.raises(ValueError, match="CodeMismatchException"):
            JsonErrorUnmarshaller([CodeMismatchException, CodeMismatchException])

    def test_class_without_code_rejected(self):
        """Test classes must declare ERROR_CODE."""
        with pytest.raises(ValueError, match="KMSServiceError"):
            JsonErrorUnmarshaller([KMSServiceError])

    def test_error_code_defaults_to_class_code(self):
        """Test exceptions built directly default error_code."""
        exception = InvalidMediaFrameException("bad frame", status_code=400)
        assert exception.error_code == "InvalidMediaFrameException"
        assert exception.error_type is ErrorType.CLIENT
