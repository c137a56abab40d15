"""
Models of the Kinesis Video Streams archived media API.

GetClip and GetMediaForFragmentList return the media itself: their results
take the Content-Type response header and the raw response body instead of
a JSON document.
"""
from datetime import datetime
from typing import Dict, List, Optional, Union

from models.base import AwsEnum, AwsModel, HEADER, PAYLOAD, shape, wire_field
from utils.exceptions import AmazonServiceError


class ClipFragmentSelectorType(AwsEnum):
    PRODUCER_TIMESTAMP = "PRODUCER_TIMESTAMP"
    SERVER_TIMESTAMP = "SERVER_TIMESTAMP"


class ContainerFormat(AwsEnum):
    FRAGMENTED_MP4 = "FRAGMENTED_MP4"
    MPEG_TS = "MPEG_TS"


class DASHDisplayFragmentNumber(AwsEnum):
    ALWAYS = "ALWAYS"
    NEVER = "NEVER"


class DASHDisplayFragmentTimestamp(AwsEnum):
    ALWAYS = "ALWAYS"
    NEVER = "NEVER"


class DASHFragmentSelectorType(AwsEnum):
    PRODUCER_TIMESTAMP = "PRODUCER_TIMESTAMP"
    SERVER_TIMESTAMP = "SERVER_TIMESTAMP"


class DASHPlaybackMode(AwsEnum):
    LIVE = "LIVE"
    LIVE_REPLAY = "LIVE_REPLAY"
    ON_DEMAND = "ON_DEMAND"


class FormatConfigKey(AwsEnum):
    JPEGQuality = "JPEGQuality"


class FragmentSelectorType(AwsEnum):
    PRODUCER_TIMESTAMP = "PRODUCER_TIMESTAMP"
    SERVER_TIMESTAMP = "SERVER_TIMESTAMP"


class HLSDiscontinuityMode(AwsEnum):
    ALWAYS = "ALWAYS"
    NEVER = "NEVER"
    ON_DISCONTINUITY = "ON_DISCONTINUITY"


class HLSDisplayFragmentTimestamp(AwsEnum):
    ALWAYS = "ALWAYS"
    NEVER = "NEVER"


class HLSFragmentSelectorType(AwsEnum):
    PRODUCER_TIMESTAMP = "PRODUCER_TIMESTAMP"
    SERVER_TIMESTAMP = "SERVER_TIMESTAMP"


class HLSPlaybackMode(AwsEnum):
    LIVE = "LIVE"
    LIVE_REPLAY = "LIVE_REPLAY"
    ON_DEMAND = "ON_DEMAND"


class ImageError(AwsEnum):
    NO_MEDIA = "NO_MEDIA"
    MEDIA_ERROR = "MEDIA_ERROR"


class ImageSelectorType(AwsEnum):
    PRODUCER_TIMESTAMP = "PRODUCER_TIMESTAMP"
    SERVER_TIMESTAMP = "SERVER_TIMESTAMP"


class Format(AwsEnum):
    JPEG = "JPEG"
    PNG = "PNG"


# Structures

@shape
class ClipTimestampRange(AwsModel):
    start_timestamp: Optional[datetime] = wire_field("StartTimestamp")
    end_timestamp: Optional[datetime] = wire_field("EndTimestamp")


@shape
class ClipFragmentSelector(AwsModel):
    fragment_selector_type: Optional[Union[ClipFragmentSelectorType, str]] = wire_field("FragmentSelectorType")
    timestamp_range: Optional[ClipTimestampRange] = wire_field("TimestampRange")


@shape
class DASHTimestampRange(AwsModel):
    start_timestamp: Optional[datetime] = wire_field("StartTimestamp")
    end_timestamp: Optional[datetime] = wire_field("EndTimestamp")


@shape
class DASHFragmentSelector(AwsModel):
    fragment_selector_type: Optional[Union[DASHFragmentSelectorType, str]] = wire_field("FragmentSelectorType")
    timestamp_range: Optional[DASHTimestampRange] = wire_field("TimestampRange")


@shape
class HLSTimestampRange(AwsModel):
    start_timestamp: Optional[datetime] = wire_field("StartTimestamp")
    end_timestamp: Optional[datetime] = wire_field("EndTimestamp")


@shape
class HLSFragmentSelector(AwsModel):
    fragment_selector_type: Optional[Union[HLSFragmentSelectorType, str]] = wire_field("FragmentSelectorType")
    timestamp_range: Optional[HLSTimestampRange] = wire_field("TimestampRange")


@shape
class TimestampRange(AwsModel):
    start_timestamp: Optional[datetime] = wire_field("StartTimestamp")
    end_timestamp: Optional[datetime] = wire_field("EndTimestamp")


@shape
class FragmentSelector(AwsModel):
    fragment_selector_type: Optional[Union[FragmentSelectorType, str]] = wire_field("FragmentSelectorType")
    timestamp_range: Optional[TimestampRange] = wire_field("TimestampRange")


@shape
class Fragment(AwsModel):
    fragment_number: Optional[str] = wire_field("FragmentNumber")
    fragment_size_in_bytes: Optional[int] = wire_field("FragmentSizeInBytes")
    producer_timestamp: Optional[datetime] = wire_field("ProducerTimestamp")
    server_timestamp: Optional[datetime] = wire_field("ServerTimestamp")
    fragment_length_in_milliseconds: Optional[int] = wire_field("FragmentLengthInMilliseconds")


@shape
class Image(AwsModel):
    """One extracted frame; ImageContent is base64 text, Error set when no frame was produced."""

    time_stamp: Optional[datetime] = wire_field("TimeStamp")
    error: Optional[Union[ImageError, str]] = wire_field("Error")
    image_content: Optional[str] = wire_field("ImageContent")


# Requests and results

@shape
class GetClipRequest(AwsModel):
    stream_name: Optional[str] = wire_field("StreamName")
    stream_arn: Optional[str] = wire_field("StreamARN")
    clip_fragment_selector: Optional[ClipFragmentSelector] = wire_field("ClipFragmentSelector")


@shape
class GetClipResult(AwsModel):
    content_type: Optional[str] = wire_field("Content-Type", HEADER)
    payload: Optional[bytes] = wire_field("Payload", PAYLOAD)


@shape
class GetDASHStreamingSessionURLRequest(AwsModel):
    stream_name: Optional[str] = wire_field("StreamName")
    stream_arn: Optional[str] = wire_field("StreamARN")
    playback_mode: Optional[Union[DASHPlaybackMode, str]] = wire_field("PlaybackMode")
    display_fragment_timestamp: Optional[Union[DASHDisplayFragmentTimestamp, str]] = wire_field("DisplayFragmentTimestamp")
    display_fragment_number: Optional[Union[DASHDisplayFragmentNumber, str]] = wire_field("DisplayFragmentNumber")
    dash_fragment_selector: Optional[DASHFragmentSelector] = wire_field("DASHFragmentSelector")
    expires: Optional[int] = wire_field("Expires")
    max_manifest_fragment_results: Optional[int] = wire_field("MaxManifestFragmentResults")


@shape
class GetDASHStreamingSessionURLResult(AwsModel):
    dash_streaming_session_url: Optional[str] = wire_field("DASHStreamingSessionURL")


@shape
class GetHLSStreamingSessionURLRequest(AwsModel):
    stream_name: Optional[str] = wire_field("StreamName")
    stream_arn: Optional[str] = wire_field("StreamARN")
    playback_mode: Optional[Union[HLSPlaybackMode, str]] = wire_field("PlaybackMode")
    hls_fragment_selector: Optional[HLSFragmentSelector] = wire_field("HLSFragmentSelector")
    container_format: Optional[Union[ContainerFormat, str]] = wire_field("ContainerFormat")
    discontinuity_mode: Optional[Union[HLSDiscontinuityMode, str]] = wire_field("DiscontinuityMode")
    display_fragment_timestamp: Optional[Union[HLSDisplayFragmentTimestamp, str]] = wire_field("DisplayFragmentTimestamp")
    expires: Optional[int] = wire_field("Expires")
    max_media_playlist_fragment_results: Optional[int] = wire_field("MaxMediaPlaylistFragmentResults")


@shape
class GetHLSStreamingSessionURLResult(AwsModel):
    hls_streaming_session_url: Optional[str] = wire_field("HLSStreamingSessionURL")


@shape
class GetImagesRequest(AwsModel):
    stream_name: Optional[str] = wire_field("StreamName")
    stream_arn: Optional[str] = wire_field("StreamARN")
    image_selector_type: Optional[Union[ImageSelectorType, str]] = wire_field("ImageSelectorType")
    start_timestamp: Optional[datetime] = wire_field("StartTimestamp")
    end_timestamp: Optional[datetime] = wire_field("EndTimestamp")
    sampling_interval: Optional[int] = wire_field("SamplingInterval")
    format: Optional[Union[Format, str]] = wire_field("Format")
    format_config: Optional[Dict[str, str]] = wire_field("FormatConfig")
    width_pixels: Optional[int] = wire_field("WidthPixels")
    height_pixels: Optional[int] = wire_field("HeightPixels")
    max_results: Optional[int] = wire_field("MaxResults")
    next_token: Optional[str] = wire_field("NextToken")

    def add_format_config_entry(self, key: str, value: str) -> "GetImagesRequest":
        return self._add_entry("format_config", key, value)

    def clear_format_config_entries(self) -> "GetImagesRequest":
        return self._clear_entries("format_config")


@shape
class GetImagesResult(AwsModel):
    images: Optional[List[Image]] = wire_field("Images")
    next_token: Optional[str] = wire_field("NextToken")


@shape
class GetMediaForFragmentListRequest(AwsModel):
    stream_name: Optional[str] = wire_field("StreamName")
    stream_arn: Optional[str] = wire_field("StreamARN")
    fragments: Optional[List[str]] = wire_field("Fragments")


@shape
class GetMediaForFragmentListResult(AwsModel):
    content_type: Optional[str] = wire_field("Content-Type", HEADER)
    payload: Optional[bytes] = wire_field("Payload", PAYLOAD)


@shape
class ListFragmentsRequest(AwsModel):
    stream_name: Optional[str] = wire_field("StreamName")
    stream_arn: Optional[str] = wire_field("StreamARN")
    max_results: Optional[int] = wire_field("MaxResults")
    next_token: Optional[str] = wire_field("NextToken")
    fragment_selector: Optional[FragmentSelector] = wire_field("FragmentSelector")


@shape
class ListFragmentsResult(AwsModel):
    fragments: Optional[List[Fragment]] = wire_field("Fragments")
    next_token: Optional[str] = wire_field("NextToken")


# Exceptions

class KinesisVideoArchivedMediaServiceError(AmazonServiceError):
    """Base class of errors returned by Kinesis Video Streams archived media."""


class ClientLimitExceededException(KinesisVideoArchivedMediaServiceError):
    ERROR_CODE = "ClientLimitExceededException"


class InvalidArgumentException(KinesisVideoArchivedMediaServiceError):
    ERROR_CODE = "InvalidArgumentException"


class InvalidCodecPrivateDataException(KinesisVideoArchivedMediaServiceError):
    ERROR_CODE = "InvalidCodecPrivateDataException"


class InvalidMediaFrameException(KinesisVideoArchivedMediaServiceError):
    ERROR_CODE = "InvalidMediaFrameException"


class MissingCodecPrivateDataException(KinesisVideoArchivedMediaServiceError):
    ERROR_CODE = "MissingCodecPrivateDataException"


class NoDataRetentionException(KinesisVideoArchivedMediaServiceError):
    ERROR_CODE = "NoDataRetentionException"


class NotAuthorizedException(KinesisVideoArchivedMediaServiceError):
    ERROR_CODE = "NotAuthorizedException"


class ResourceNotFoundException(KinesisVideoArchivedMediaServiceError):
    ERROR_CODE = "ResourceNotFoundException"


class UnsupportedStreamMediaTypeException(KinesisVideoArchivedMediaServiceError):
    ERROR_CODE = "UnsupportedStreamMediaTypeException"


KINESIS_VIDEO_ARCHIVED_MEDIA_EXCEPTIONS = (
    ClientLimitExceededException,
    InvalidArgumentException,
    InvalidCodecPrivateDataException,
    InvalidMediaFrameException,
    MissingCodecPrivateDataException,
    NoDataRetentionException,
    NotAuthorizedException,
    ResourceNotFoundException,
    UnsupportedStreamMediaTypeException,
)
