"""
Unit tests for JSON marshalling and unmarshalling of models.
"""
import json
import pytest
from datetime import datetime, timezone
from models.cognito_identity_provider import (
    AnalyticsMetadataType, AttributeType, ChallengeNameType,
    DeliveryMediumType, InitiateAuthResult, RespondToAuthChallengeRequest,
    SignUpRequest, UpdateUserAttributesResult,
)
from models.kinesis_video_archived_media import (
    DASHFragmentSelector, DASHFragmentSelectorType, DASHTimestampRange,
    GetClipResult, GetDASHStreamingSessionURLRequest, GetImagesResult,
)
from models.kms import (
    CreateKeyRequest, DescribeKeyResult, EncryptRequest, KeySpec, KeyState,
    Tag,
)
from models.rekognition import (
    DescribeStreamProcessorResult, GetSegmentDetectionResult, Image,
    IndexFacesResult, Reason, TechnicalCueType,
)
from models.transform import (
    marshall, marshall_json, parse_timestamp, to_epoch_seconds, unmarshall,
    unmarshall_json,
)
from utils.exceptions import AmazonClientError


class TestMarshall:
    """Tests for marshall / marshall_json."""

    def test_respond_to_auth_challenge_example(self):
        """Test the canonical RespondToAuthChallenge request body."""
        request = (
            RespondToAuthChallengeRequest()
            .with_values(client_id="abc", challenge_name="SMS_MFA")
            .add_challenge_responses_entry("SMS_MFA_CODE", "123456")
        )

        body = marshall_json(request)

        assert body == (
            b'{"ClientId":"abc","ChallengeName":"SMS_MFA",'
            b'"ChallengeResponses":{"SMS_MFA_CODE":"123456"}}'
        )

    def test_enum_member_marshalls_as_wire_value(self):
        """Test enum members and raw strings produce the same JSON."""
        with_enum = RespondToAuthChallengeRequest(challenge_name=ChallengeNameType.SMS_MFA)
        with_str = RespondToAuthChallengeRequest(challenge_name="SMS_MFA")
        assert marshall(with_enum) == marshall(with_str) == {"ChallengeName": "SMS_MFA"}

    def test_unset_fields_omitted(self):
        """Test None fields never reach the wire."""
        assert marshall(RespondToAuthChallengeRequest()) == {}
        assert marshall_json(RespondToAuthChallengeRequest()) == b"{}"

    def test_empty_map_is_sent(self):
        """Test an empty map differs from an unset one."""
        request = RespondToAuthChallengeRequest(challenge_responses={})
        assert marshall(request) == {"ChallengeResponses": {}}

    def test_nested_structures_and_lists(self):
        """Test nested models and lists of models."""
        request = SignUpRequest(
            client_id="abc",
            username="alice",
            user_attributes=[
                AttributeType(name="email", value="alice@example.com"),
                AttributeType(name="phone_number"),
            ],
            analytics_metadata=AnalyticsMetadataType(analytics_endpoint_id="ep-1"),
        )

        assert marshall(request) == {
            "ClientId": "abc",
            "Username": "alice",
            "UserAttributes": [
                {"Name": "email", "Value": "alice@example.com"},
                {"Name": "phone_number"},
            ],
            "AnalyticsMetadata": {"AnalyticsEndpointId": "ep-1"},
        }

    def test_list_of_tags_and_enums(self):
        """Test list members and enum fields of a KMS request."""
        request = CreateKeyRequest(
            description="test key",
            key_spec=KeySpec.SYMMETRIC_DEFAULT,
            tags=[Tag(tag_key="env", tag_value="dev")],
        )

        assert json.loads(marshall_json(request)) == {
            "Description": "test key",
            "KeySpec": "SYMMETRIC_DEFAULT",
            "Tags": [{"TagKey": "env", "TagValue": "dev"}],
        }

    def test_bytes_marshall_as_base64(self):
        """Test blob members are base64 text on the wire."""
        request = EncryptRequest(key_id="alias/test", plaintext=b"secret")
        assert marshall(request) == {"KeyId": "alias/test", "Plaintext": "c2VjcmV0"}

    def test_datetime_marshalls_as_epoch_seconds(self):
        """Test timestamps are epoch seconds with millisecond precision."""
        request = GetDASHStreamingSessionURLRequest(
            stream_name="cam-1",
            dash_fragment_selector=DASHFragmentSelector(
                fragment_selector_type=DASHFragmentSelectorType.SERVER_TIMESTAMP,
                timestamp_range=DASHTimestampRange(
                    start_timestamp=datetime(2020, 1, 1, tzinfo=timezone.utc),
                    end_timestamp=datetime(2020, 1, 1, 0, 0, 1, 500000, tzinfo=timezone.utc),
                ),
            ),
        )

        assert marshall(request)["DASHFragmentSelector"] == {
            "FragmentSelectorType": "SERVER_TIMESTAMP",
            "TimestampRange": {
                "StartTimestamp": 1577836800.0,
                "EndTimestamp": 1577836801.5,
            },
        }

    def test_naive_datetime_is_utc(self):
        """Test naive datetimes are taken as UTC."""
        assert to_epoch_seconds(datetime(1970, 1, 2)) == 86400.0

    def test_payload_members_not_in_body(self):
        """Test header and payload members are left out of the body."""
        result = GetClipResult(content_type="video/mp4", payload=b"\x00\x01")
        assert marshall(result) == {}


class TestUnmarshall:
    """Tests for unmarshall / unmarshall_json."""

    def test_nested_result(self):
        """Test a KMS DescribeKey response body."""
        body = json.dumps({
            "KeyMetadata": {
                "KeyId": "1234abcd",
                "Arn": "arn:aws:kms:us-east-1:111122223333:key/1234abcd",
                "CreationDate": 1577836800.123,
                "Enabled": True,
                "KeyState": "Enabled",
                "EncryptionAlgorithms": ["SYMMETRIC_DEFAULT"],
            }
        }).encode()

        result = unmarshall_json(DescribeKeyResult, body)

        metadata = result.key_metadata
        assert metadata.key_id == "1234abcd"
        assert metadata.enabled is True
        assert metadata.key_state is KeyState.ENABLED
        assert metadata.encryption_algorithms == ["SYMMETRIC_DEFAULT"]
        assert metadata.creation_date == datetime.fromtimestamp(1577836800.123, tz=timezone.utc)
        assert metadata.description is None

    def test_unknown_members_skipped(self):
        """Test members the model does not declare are ignored."""
        result = unmarshall(InitiateAuthResult, {
            "Session": "s-1",
            "SomethingNew": {"nested": [1, 2, 3]},
        })
        assert result == InitiateAuthResult(session="s-1")

    def test_unknown_enum_value_kept_as_string(self):
        """Test enum values added later survive as raw strings."""
        result = unmarshall(InitiateAuthResult, {"ChallengeName": "PASSKEY_CHALLENGE"})
        assert result.challenge_name == "PASSKEY_CHALLENGE"

    def test_maps_and_nested_results(self):
        """Test a Cognito InitiateAuth response with a challenge."""
        result = unmarshall(InitiateAuthResult, {
            "ChallengeName": "SMS_MFA",
            "Session": "session-token",
            "ChallengeParameters": {"CODE_DELIVERY_DESTINATION": "+*******1234"},
        })
        assert result.challenge_name is ChallengeNameType.SMS_MFA
        assert result.challenge_parameters == {"CODE_DELIVERY_DESTINATION": "+*******1234"}
        assert result.authentication_result is None

    def test_list_of_structures_with_enums(self):
        """Test lists of nested models keep their enum members."""
        result = unmarshall(UpdateUserAttributesResult, {
            "CodeDeliveryDetailsList": [
                {"Destination": "a***@example.com", "DeliveryMedium": "EMAIL", "AttributeName": "email"},
            ]
        })
        details = result.code_delivery_details_list[0]
        assert details.delivery_medium is DeliveryMediumType.EMAIL
        assert details.attribute_name == "email"

    def test_list_of_enums(self):
        """Test enum lists of a Rekognition IndexFaces response."""
        result = unmarshall(IndexFacesResult, {
            "UnindexedFaces": [{"Reasons": ["LOW_SHARPNESS", "SOMETHING_ELSE"]}],
        })
        assert result.unindexed_faces[0].reasons == [Reason.LOW_SHARPNESS, "SOMETHING_ELSE"]

    def test_segment_detection(self):
        """Test shot and technical cue segments."""
        result = unmarshall(GetSegmentDetectionResult, {
            "JobStatus": "SUCCEEDED",
            "Segments": [
                {"Type": "SHOT", "ShotSegment": {"Index": 3, "Confidence": 99}},
                {"Type": "TECHNICAL_CUE", "TechnicalCueSegment": {"Type": "ColorBars", "Confidence": 87.5}},
            ],
        })
        shot, cue = result.segments
        assert shot.shot_segment.index == 3
        assert shot.shot_segment.confidence == 99.0
        assert isinstance(shot.shot_segment.confidence, float)
        assert cue.technical_cue_segment.type is TechnicalCueType.ColorBars

    def test_stream_processor_output(self):
        """Test nested input/output of a stream processor."""
        result = unmarshall(DescribeStreamProcessorResult, {
            "Name": "proc",
            "Output": {"KinesisDataStream": {"Arn": "arn:aws:kinesis:us-east-1:1:stream/out"}},
            "CreationTimestamp": "2021-03-04T05:06:07Z",
        })
        assert result.output.kinesis_data_stream.arn == "arn:aws:kinesis:us-east-1:1:stream/out"
        assert result.creation_timestamp == datetime(2021, 3, 4, 5, 6, 7, tzinfo=timezone.utc)

    def test_images_result(self):
        """Test the Kinesis Video GetImages image list."""
        result = unmarshall(GetImagesResult, {
            "Images": [
                {"TimeStamp": 1600000000, "ImageContent": "aGVsbG8="},
                {"TimeStamp": 1600000001, "Error": "NO_MEDIA"},
            ],
            "NextToken": "next",
        })
        first, second = result.images
        assert first.image_content == "aGVsbG8="
        assert first.time_stamp == datetime.fromtimestamp(1600000000, tz=timezone.utc)
        assert second.error == "NO_MEDIA"
        assert result.next_token == "next"

    def test_base64_blob(self):
        """Test blob members are decoded from base64."""
        result = unmarshall(Image, {"Bytes": "c2VjcmV0"})
        assert result.image_bytes == b"secret"

    def test_invalid_base64_blob(self):
        """Test undecodable blobs are client errors."""
        with pytest.raises(AmazonClientError, match="base64"):
            unmarshall(Image, {"Bytes": "not base64!"})

    def test_non_object_yields_none(self):
        """Test anything but a JSON object unmarshalls to None."""
        assert unmarshall(InitiateAuthResult, None) is None
        assert unmarshall(InitiateAuthResult, ["Session"]) is None
        assert unmarshall(InitiateAuthResult, "Session") is None

    def test_empty_body_yields_empty_model(self):
        """Test empty response bodies produce an empty result."""
        assert unmarshall_json(InitiateAuthResult, b"") == InitiateAuthResult()
        assert unmarshall_json(InitiateAuthResult, b"  ") == InitiateAuthResult()

    def test_invalid_json_body(self):
        """Test malformed bodies raise a client error."""
        with pytest.raises(AmazonClientError, match="InitiateAuthResult"):
            unmarshall_json(InitiateAuthResult, b"{not json")

    def test_json_array_body(self):
        """Test a JSON array body raises a client error."""
        with pytest.raises(AmazonClientError, match="expected a JSON object"):
            unmarshall_json(InitiateAuthResult, b"[]")

    def test_request_survives_round_trip(self):
        """Test marshall followed by unmarshall gives an equal model."""
        request = (
            RespondToAuthChallengeRequest(
                client_id="abc",
                challenge_name=ChallengeNameType.NEW_PASSWORD_REQUIRED,
                session="s",
                analytics_metadata=AnalyticsMetadataType(analytics_endpoint_id="ep"),
            )
            .add_challenge_responses_entry("NEW_PASSWORD", "hunter2")
            .add_client_metadata_entry("app", "web")
        )
        assert unmarshall(RespondToAuthChallengeRequest, marshall(request)) == request

    def test_datetime_and_blob_survive_round_trip(self):
        """Test aware UTC millisecond timestamps and bytes come back unchanged."""
        selector = DASHTimestampRange(
            start_timestamp=datetime(2021, 3, 4, 5, 6, 7, 123000, tzinfo=timezone.utc),
            end_timestamp=datetime(2021, 3, 4, 5, 6, 8, tzinfo=timezone.utc),
        )
        request = EncryptRequest(key_id="alias/test", plaintext=b"\x00\xff\x10secret")

        assert unmarshall_json(DASHTimestampRange, marshall_json(selector)) == selector
        assert unmarshall_json(EncryptRequest, marshall_json(request)) == request

    def test_naive_datetime_comes_back_aware_utc(self):
        """Test a naive datetime is sent as UTC and returned timezone-aware."""
        naive = datetime(2021, 3, 4, 5, 6, 7)

        restored = unmarshall(DASHTimestampRange, marshall(DASHTimestampRange(start_timestamp=naive)))

        assert restored.start_timestamp.tzinfo is timezone.utc
        assert restored.start_timestamp == naive.replace(tzinfo=timezone.utc)

    def test_microseconds_reduced_to_milliseconds(self):
        """Test sub-millisecond precision is lost on the wire."""
        precise = datetime(2021, 3, 4, 5, 6, 7, 123456, tzinfo=timezone.utc)

        restored = unmarshall(DASHTimestampRange, marshall(DASHTimestampRange(start_timestamp=precise)))

        assert restored.start_timestamp == precise.replace(microsecond=123000)


class TestParseTimestamp:
    """Tests for parse_timestamp."""

    def test_epoch_number(self):
        assert parse_timestamp(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_epoch_string(self):
        assert parse_timestamp("86400.5") == datetime(1970, 1, 2, 0, 0, 0, 500000, tzinfo=timezone.utc)

    def test_iso_string_without_offset(self):
        assert parse_timestamp("2020-05-06T07:08:09") == datetime(2020, 5, 6, 7, 8, 9, tzinfo=timezone.utc)

    def test_none(self):
        assert parse_timestamp(None) is None

    @pytest.mark.parametrize("value", [True, {"seconds": 1}])
    def test_invalid(self, value):
        with pytest.raises(ValueError, match="Invalid timestamp"):
            parse_timestamp(value)

    def test_iso_string_with_offset_converted_to_utc(self):
        parsed = parse_timestamp("2020-05-06T09:08:09+02:00")
        assert parsed == datetime(2020, 5, 6, 7, 8, 9, tzinfo=timezone.utc)
        assert parsed.tzinfo is timezone.utc

    @pytest.mark.parametrize("value", [1e20, -1e20, "1e20", float("inf")])
    def test_out_of_range(self, value):
        with pytest.raises(ValueError, match="out of range"):
            parse_timestamp(value)
