"""
Kinesis Video Streams archived media client.

Unlike the other clients this service speaks REST-JSON: each operation is
POSTed to its own path and no X-Amz-Target header is sent. Requests are
signed for the "kinesisvideo" service. Archived media is served from a
stream-specific data endpoint (returned by the Kinesis Video GetDataEndpoint
API) which has to be passed to set_endpoint before calling.
"""
from models.kinesis_video_archived_media import (
    KINESIS_VIDEO_ARCHIVED_MEDIA_EXCEPTIONS, GetClipRequest, GetClipResult,
    GetDASHStreamingSessionURLRequest, GetDASHStreamingSessionURLResult,
    GetHLSStreamingSessionURLRequest, GetHLSStreamingSessionURLResult,
    GetImagesRequest, GetImagesResult, GetMediaForFragmentListRequest,
    GetMediaForFragmentListResult, KinesisVideoArchivedMediaServiceError,
    ListFragmentsRequest, ListFragmentsResult,
)
from services.base_service import BaseAWSService, Operation

GET_CLIP = Operation("GetClip", "/getClip")
GET_DASH_STREAMING_SESSION_URL = Operation(
    "GetDASHStreamingSessionURL", "/getDASHStreamingSessionURL"
)
GET_HLS_STREAMING_SESSION_URL = Operation(
    "GetHLSStreamingSessionURL", "/getHLSStreamingSessionURL"
)
GET_IMAGES = Operation("GetImages", "/getImages")
GET_MEDIA_FOR_FRAGMENT_LIST = Operation("GetMediaForFragmentList", "/getMediaForFragmentList")
LIST_FRAGMENTS = Operation("ListFragments", "/listFragments")


class KinesisVideoArchivedMediaService(BaseAWSService):
    """Client for archived media of Kinesis video streams."""

    SERVICE_NAME = "AWSKinesisVideoArchivedMedia"
    ENDPOINT_PREFIX = "kinesisvideo"
    SIGNING_NAME = "kinesisvideo"
    BASE_EXCEPTION = KinesisVideoArchivedMediaServiceError
    EXCEPTIONS = KINESIS_VIDEO_ARCHIVED_MEDIA_EXCEPTIONS

    def get_clip(self, request: GetClipRequest) -> GetClipResult:
        """
        Download an MP4 clip of archived media.

        Returns:
            Result whose payload holds the clip bytes
        """
        return self._invoke(GET_CLIP, request, GetClipResult)

    def get_dash_streaming_session_url(
        self,
        request: GetDASHStreamingSessionURLRequest
    ) -> GetDASHStreamingSessionURLResult:
        return self._invoke(
            GET_DASH_STREAMING_SESSION_URL, request, GetDASHStreamingSessionURLResult
        )

    def get_hls_streaming_session_url(
        self,
        request: GetHLSStreamingSessionURLRequest
    ) -> GetHLSStreamingSessionURLResult:
        return self._invoke(
            GET_HLS_STREAMING_SESSION_URL, request, GetHLSStreamingSessionURLResult
        )

    def get_images(self, request: GetImagesRequest) -> GetImagesResult:
        return self._invoke(GET_IMAGES, request, GetImagesResult)

    def get_media_for_fragment_list(
        self,
        request: GetMediaForFragmentListRequest
    ) -> GetMediaForFragmentListResult:
        return self._invoke(GET_MEDIA_FOR_FRAGMENT_LIST, request, GetMediaForFragmentListResult)

    def list_fragments(self, request: ListFragmentsRequest) -> ListFragmentsResult:
        return self._invoke(LIST_FRAGMENTS, request, ListFragmentsResult)
