"""
Unit tests for the REST-JSON Kinesis Video archived media client.
"""
import json
import pytest
import requests
from datetime import datetime, timezone
from unittest.mock import Mock
from requests.structures import CaseInsensitiveDict

from config import ClientConfig
from models.kinesis_video_archived_media import (
    ClipFragmentSelector, ClipFragmentSelectorType, ClipTimestampRange,
    FragmentSelector, FragmentSelectorType, GetClipRequest,
    GetDASHStreamingSessionURLRequest,
    GetHLSStreamingSessionURLRequest, GetImagesRequest,
    GetMediaForFragmentListRequest, HLSPlaybackMode, ImageError,
    InvalidMediaFrameException, KinesisVideoArchivedMediaServiceError,
    ListFragmentsRequest, ResourceNotFoundException, TimestampRange,
)
from services.credentials import StaticCredentialsProvider
from services.kinesis_video_archived_media_service import KinesisVideoArchivedMediaService

DATA_ENDPOINT = "https://b-1234abcd.kinesisvideo.us-west-2.amazonaws.com"


def make_response(status_code=200, body=b"{}", headers=None):
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.headers = CaseInsensitiveDict(headers or {})
    return response


@pytest.fixture
def http_session():
    session = Mock()
    session.request.return_value = make_response()
    return session


@pytest.fixture
def service(http_session):
    client = KinesisVideoArchivedMediaService(
        credentials_provider=StaticCredentialsProvider("AKID", "secret"),
        config=ClientConfig(region="us-east-1"),
        http_session=http_session,
    )
    client.set_endpoint(DATA_ENDPOINT)
    return client


def sent(http_session):
    args, kwargs = http_session.request.call_args
    return args[0], args[1], kwargs["data"], kwargs["headers"]


class TestKinesisVideoArchivedMediaService:
    """Tests for KinesisVideoArchivedMediaService."""

    def test_data_endpoint_sets_region(self, service):
        """Test the signing region follows the data endpoint."""
        assert service.endpoint == DATA_ENDPOINT
        assert service.region == "us-west-2"

    def test_get_clip_request(self, service, http_session):
        """Test REST-JSON path, headers and body of GetClip."""
        http_session.request.return_value = make_response(
            200, b"\x00\x00\x00\x18ftypmp42", {"Content-Type": "video/mp4"}
        )
        request = GetClipRequest(
            stream_name="front-door",
            clip_fragment_selector=ClipFragmentSelector(
                fragment_selector_type=ClipFragmentSelectorType.PRODUCER_TIMESTAMP,
                timestamp_range=ClipTimestampRange(
                    start_timestamp=datetime(2021, 1, 1, tzinfo=timezone.utc),
                    end_timestamp=datetime(2021, 1, 1, 0, 1, tzinfo=timezone.utc),
                ),
            ),
        )

        result = service.get_clip(request)

        method, url, body, headers = sent(http_session)
        assert method == "POST"
        assert url == f"{DATA_ENDPOINT}/getClip"
        assert "X-Amz-Target" not in headers
        assert headers["Content-Type"] == "application/json"
        assert "/us-west-2/kinesisvideo/aws4_request" in headers["Authorization"]
        assert json.loads(body) == {
            "StreamName": "front-door",
            "ClipFragmentSelector": {
                "FragmentSelectorType": "PRODUCER_TIMESTAMP",
                "TimestampRange": {"StartTimestamp": 1609459200.0, "EndTimestamp": 1609459260.0},
            },
        }
        assert result.content_type == "video/mp4"
        assert result.payload == b"\x00\x00\x00\x18ftypmp42"

    def test_get_media_for_fragment_list_payload(self, service, http_session):
        """Test the raw body is kept even when it is not JSON."""
        http_session.request.return_value = make_response(
            200, b"\x1a\x45\xdf\xa3", {"Content-Type": "video/webm"}
        )

        result = service.get_media_for_fragment_list(
            GetMediaForFragmentListRequest(stream_name="s", fragments=["9134385233318150666"])
        )

        _, url, body, _ = sent(http_session)
        assert url == f"{DATA_ENDPOINT}/getMediaForFragmentList"
        assert json.loads(body) == {"StreamName": "s", "Fragments": ["9134385233318150666"]}
        assert result.content_type == "video/webm"
        assert result.payload == b"\x1a\x45\xdf\xa3"

    def test_get_clip_empty_payload(self, service, http_session):
        """Test an empty body yields an empty payload without a content type."""
        http_session.request.return_value = make_response(200, b"")

        result = service.get_clip(GetClipRequest(stream_name="s"))

        assert result.payload == b""
        assert result.content_type is None

    def test_list_fragments(self, service, http_session):
        """Test ListFragments results with timestamps."""
        http_session.request.return_value = make_response(200, json.dumps({
            "Fragments": [{
                "FragmentNumber": "91343852333181432392682062607743920146721123445",
                "FragmentSizeInBytes": 1024,
                "ProducerTimestamp": 1609459200.5,
                "ServerTimestamp": 1609459201,
                "FragmentLengthInMilliseconds": 2000,
            }],
            "NextToken": "token",
        }).encode())

        result = service.list_fragments(ListFragmentsRequest(
            stream_name="s",
            fragment_selector=FragmentSelector(
                fragment_selector_type=FragmentSelectorType.SERVER_TIMESTAMP,
                timestamp_range=TimestampRange(
                    start_timestamp=datetime(2021, 1, 1, tzinfo=timezone.utc),
                    end_timestamp=datetime(2021, 1, 2, tzinfo=timezone.utc),
                ),
            ),
        ))

        _, url, _, _ = sent(http_session)
        assert url == f"{DATA_ENDPOINT}/listFragments"
        fragment = result.fragments[0]
        assert fragment.fragment_size_in_bytes == 1024
        assert fragment.producer_timestamp == datetime(2021, 1, 1, 0, 0, 0, 500000, tzinfo=timezone.utc)
        assert result.next_token == "token"

    def test_get_hls_streaming_session_url(self, service, http_session):
        http_session.request.return_value = make_response(
            200, b'{"HLSStreamingSessionURL":"https://example.com/hls/v1/getHLSMasterPlaylist.m3u8?SessionToken=x"}'
        )

        result = service.get_hls_streaming_session_url(
            GetHLSStreamingSessionURLRequest(stream_name="s", playback_mode=HLSPlaybackMode.LIVE)
        )

        _, url, body, _ = sent(http_session)
        assert url == f"{DATA_ENDPOINT}/getHLSStreamingSessionURL"
        assert body == b'{"StreamName":"s","PlaybackMode":"LIVE"}'
        assert result.hls_streaming_session_url.endswith("SessionToken=x")

    def test_get_dash_streaming_session_url_path(self, service, http_session):
        service.get_dash_streaming_session_url(GetDASHStreamingSessionURLRequest(stream_name="s"))

        _, url, _, _ = sent(http_session)
        assert url == f"{DATA_ENDPOINT}/getDASHStreamingSessionURL"

    def test_get_images(self, service, http_session):
        """Test GetImages with a format config map."""
        http_session.request.return_value = make_response(200, json.dumps({
            "Images": [{"TimeStamp": 1609459200, "Error": "NO_MEDIA"}],
        }).encode())
        request = GetImagesRequest(stream_name="s", format="JPEG", sampling_interval=3000)
        request.add_format_config_entry("JPEGQuality", "80")

        result = service.get_images(request)

        _, url, body, _ = sent(http_session)
        assert url == f"{DATA_ENDPOINT}/getImages"
        assert json.loads(body)["FormatConfig"] == {"JPEGQuality": "80"}
        assert result.images[0].error is ImageError.NO_MEDIA
        assert result.images[0].image_content is None

    def test_error_code_from_header(self, service, http_session):
        """Test REST-JSON errors take their code from x-amzn-ErrorType."""
        http_session.request.return_value = make_response(
            400,
            b'{"Message":"The fragment contains an invalid frame"}',
            {
                "x-amzn-ErrorType": "InvalidMediaFrameException:http://internal.amazon.com/coral/",
                "x-amzn-RequestId": "kvs-req",
            },
        )

        with pytest.raises(InvalidMediaFrameException) as exc_info:
            service.get_clip(GetClipRequest(stream_name="s"))

        assert exc_info.value.error_message == "The fragment contains an invalid frame"
        assert exc_info.value.request_id == "kvs-req"
        assert isinstance(exc_info.value, KinesisVideoArchivedMediaServiceError)

    def test_resource_not_found(self, service, http_session):
        http_session.request.return_value = make_response(
            404, b'{"Message":"Stream not found"}', {"x-amzn-ErrorType": "ResourceNotFoundException"}
        )

        with pytest.raises(ResourceNotFoundException):
            service.list_fragments(ListFragmentsRequest(stream_name="missing"))
