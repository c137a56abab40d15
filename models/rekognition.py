"""
Models of the Amazon Rekognition API.
"""
from datetime import datetime
from typing import Dict, List, Optional, Union

from models.base import AwsEnum, AwsModel, shape, wire_field
from utils.exceptions import AmazonServiceError


class Attribute(AwsEnum):
    DEFAULT = "DEFAULT"
    ALL = "ALL"


class EmotionName(AwsEnum):
    HAPPY = "HAPPY"
    SAD = "SAD"
    ANGRY = "ANGRY"
    CONFUSED = "CONFUSED"
    DISGUSTED = "DISGUSTED"
    SURPRISED = "SURPRISED"
    CALM = "CALM"
    UNKNOWN = "UNKNOWN"
    FEAR = "FEAR"


class GenderType(AwsEnum):
    Male = "Male"
    Female = "Female"


class KnownGenderType(AwsEnum):
    Male = "Male"
    Female = "Female"


class QualityFilter(AwsEnum):
    NONE = "NONE"
    AUTO = "AUTO"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Reason(AwsEnum):
    EXCEEDS_MAX_FACES = "EXCEEDS_MAX_FACES"
    EXTREME_POSE = "EXTREME_POSE"
    LOW_BRIGHTNESS = "LOW_BRIGHTNESS"
    LOW_SHARPNESS = "LOW_SHARPNESS"
    LOW_CONFIDENCE = "LOW_CONFIDENCE"
    SMALL_BOUNDING_BOX = "SMALL_BOUNDING_BOX"
    LOW_FACE_QUALITY = "LOW_FACE_QUALITY"


class SegmentType(AwsEnum):
    TECHNICAL_CUE = "TECHNICAL_CUE"
    SHOT = "SHOT"


class StreamProcessorStatus(AwsEnum):
    STOPPED = "STOPPED"
    STARTING = "STARTING"
    RUNNING = "RUNNING"
    FAILED = "FAILED"
    STOPPING = "STOPPING"
    UPDATING = "UPDATING"


class TechnicalCueType(AwsEnum):
    ColorBars = "ColorBars"
    EndCredits = "EndCredits"
    BlackFrames = "BlackFrames"
    OpeningCredits = "OpeningCredits"
    StudioLogo = "StudioLogo"
    Slate = "Slate"
    Content = "Content"


class TextTypes(AwsEnum):
    LINE = "LINE"
    WORD = "WORD"


class VideoJobStatus(AwsEnum):
    IN_PROGRESS = "IN_PROGRESS"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


class BodyPart(AwsEnum):
    FACE = "FACE"
    HEAD = "HEAD"
    LEFT_HAND = "LEFT_HAND"
    RIGHT_HAND = "RIGHT_HAND"


class ProtectiveEquipmentType(AwsEnum):
    FACE_COVER = "FACE_COVER"
    HAND_COVER = "HAND_COVER"
    HEAD_COVER = "HEAD_COVER"


class ContentClassifier(AwsEnum):
    FreeOfPersonallyIdentifiableInformation = "FreeOfPersonallyIdentifiableInformation"
    FreeOfAdultContent = "FreeOfAdultContent"


class FaceAttributes(AwsEnum):
    DEFAULT = "DEFAULT"
    ALL = "ALL"


class CelebrityRecognitionSortBy(AwsEnum):
    ID = "ID"
    TIMESTAMP = "TIMESTAMP"


class ContentModerationSortBy(AwsEnum):
    NAME = "NAME"
    TIMESTAMP = "TIMESTAMP"


class FaceSearchSortBy(AwsEnum):
    INDEX = "INDEX"
    TIMESTAMP = "TIMESTAMP"


class LabelDetectionSortBy(AwsEnum):
    NAME = "NAME"
    TIMESTAMP = "TIMESTAMP"


class PersonTrackingSortBy(AwsEnum):
    INDEX = "INDEX"
    TIMESTAMP = "TIMESTAMP"


class ProjectStatus(AwsEnum):
    CREATING = "CREATING"
    CREATED = "CREATED"
    DELETING = "DELETING"


class ProjectVersionStatus(AwsEnum):
    TRAINING_IN_PROGRESS = "TRAINING_IN_PROGRESS"
    TRAINING_COMPLETED = "TRAINING_COMPLETED"
    TRAINING_FAILED = "TRAINING_FAILED"
    STARTING = "STARTING"
    RUNNING = "RUNNING"
    FAILED = "FAILED"
    STOPPING = "STOPPING"
    STOPPED = "STOPPED"
    DELETING = "DELETING"


class DatasetType(AwsEnum):
    TRAIN = "TRAIN"
    TEST = "TEST"


class DatasetStatus(AwsEnum):
    CREATE_IN_PROGRESS = "CREATE_IN_PROGRESS"
    CREATE_COMPLETE = "CREATE_COMPLETE"
    CREATE_FAILED = "CREATE_FAILED"
    UPDATE_IN_PROGRESS = "UPDATE_IN_PROGRESS"
    UPDATE_COMPLETE = "UPDATE_COMPLETE"
    UPDATE_FAILED = "UPDATE_FAILED"
    DELETE_IN_PROGRESS = "DELETE_IN_PROGRESS"


class DatasetStatusMessageCode(AwsEnum):
    SUCCESS = "SUCCESS"
    SERVICE_ERROR = "SERVICE_ERROR"
    CLIENT_ERROR = "CLIENT_ERROR"


class StreamProcessorParameterToDelete(AwsEnum):
    ConnectedHomeMinConfidence = "ConnectedHomeMinConfidence"
    RegionsOfInterest = "RegionsOfInterest"


# Structures

@shape
class S3Object(AwsModel):
    bucket: Optional[str] = wire_field("Bucket")
    name: Optional[str] = wire_field("Name")
    version: Optional[str] = wire_field("Version")


@shape
class Image(AwsModel):
    """Image given either as raw bytes or as an S3 object."""

    image_bytes: Optional[bytes] = wire_field("Bytes")
    s3_object: Optional[S3Object] = wire_field("S3Object")


@shape
class BoundingBox(AwsModel):
    width: Optional[float] = wire_field("Width")
    height: Optional[float] = wire_field("Height")
    left: Optional[float] = wire_field("Left")
    top: Optional[float] = wire_field("Top")


@shape
class Point(AwsModel):
    x: Optional[float] = wire_field("X")
    y: Optional[float] = wire_field("Y")


@shape
class Landmark(AwsModel):
    type: Optional[str] = wire_field("Type")
    x: Optional[float] = wire_field("X")
    y: Optional[float] = wire_field("Y")


@shape
class Pose(AwsModel):
    roll: Optional[float] = wire_field("Roll")
    yaw: Optional[float] = wire_field("Yaw")
    pitch: Optional[float] = wire_field("Pitch")


@shape
class ImageQuality(AwsModel):
    brightness: Optional[float] = wire_field("Brightness")
    sharpness: Optional[float] = wire_field("Sharpness")


@shape
class AgeRange(AwsModel):
    low: Optional[int] = wire_field("Low")
    high: Optional[int] = wire_field("High")


@shape
class Gender(AwsModel):
    value: Optional[Union[GenderType, str]] = wire_field("Value")
    confidence: Optional[float] = wire_field("Confidence")


@shape
class Smile(AwsModel):
    value: Optional[bool] = wire_field("Value")
    confidence: Optional[float] = wire_field("Confidence")


@shape
class Emotion(AwsModel):
    type: Optional[Union[EmotionName, str]] = wire_field("Type")
    confidence: Optional[float] = wire_field("Confidence")


@shape
class FaceDetail(AwsModel):
    bounding_box: Optional[BoundingBox] = wire_field("BoundingBox")
    age_range: Optional[AgeRange] = wire_field("AgeRange")
    smile: Optional[Smile] = wire_field("Smile")
    gender: Optional[Gender] = wire_field("Gender")
    emotions: Optional[List[Emotion]] = wire_field("Emotions")
    landmarks: Optional[List[Landmark]] = wire_field("Landmarks")
    pose: Optional[Pose] = wire_field("Pose")
    quality: Optional[ImageQuality] = wire_field("Quality")
    confidence: Optional[float] = wire_field("Confidence")


@shape
class ComparedFace(AwsModel):
    bounding_box: Optional[BoundingBox] = wire_field("BoundingBox")
    confidence: Optional[float] = wire_field("Confidence")
    landmarks: Optional[List[Landmark]] = wire_field("Landmarks")
    pose: Optional[Pose] = wire_field("Pose")
    quality: Optional[ImageQuality] = wire_field("Quality")


@shape
class ComparedSourceImageFace(AwsModel):
    bounding_box: Optional[BoundingBox] = wire_field("BoundingBox")
    confidence: Optional[float] = wire_field("Confidence")


@shape
class CompareFacesMatch(AwsModel):
    similarity: Optional[float] = wire_field("Similarity")
    face: Optional[ComparedFace] = wire_field("Face")


@shape
class Face(AwsModel):
    face_id: Optional[str] = wire_field("FaceId")
    bounding_box: Optional[BoundingBox] = wire_field("BoundingBox")
    image_id: Optional[str] = wire_field("ImageId")
    external_image_id: Optional[str] = wire_field("ExternalImageId")
    confidence: Optional[float] = wire_field("Confidence")


@shape
class FaceMatch(AwsModel):
    similarity: Optional[float] = wire_field("Similarity")
    face: Optional[Face] = wire_field("Face")


@shape
class FaceRecord(AwsModel):
    face: Optional[Face] = wire_field("Face")
    face_detail: Optional[FaceDetail] = wire_field("FaceDetail")


@shape
class UnindexedFace(AwsModel):
    reasons: Optional[List[Union[Reason, str]]] = wire_field("Reasons")
    face_detail: Optional[FaceDetail] = wire_field("FaceDetail")


@shape
class Instance(AwsModel):
    bounding_box: Optional[BoundingBox] = wire_field("BoundingBox")
    confidence: Optional[float] = wire_field("Confidence")


@shape
class Parent(AwsModel):
    name: Optional[str] = wire_field("Name")


@shape
class Label(AwsModel):
    name: Optional[str] = wire_field("Name")
    confidence: Optional[float] = wire_field("Confidence")
    instances: Optional[List[Instance]] = wire_field("Instances")
    parents: Optional[List[Parent]] = wire_field("Parents")


@shape
class Geometry(AwsModel):
    bounding_box: Optional[BoundingBox] = wire_field("BoundingBox")
    polygon: Optional[List[Point]] = wire_field("Polygon")


@shape
class TextDetection(AwsModel):
    detected_text: Optional[str] = wire_field("DetectedText")
    type: Optional[Union[TextTypes, str]] = wire_field("Type")
    id: Optional[int] = wire_field("Id")
    parent_id: Optional[int] = wire_field("ParentId")
    confidence: Optional[float] = wire_field("Confidence")
    geometry: Optional[Geometry] = wire_field("Geometry")


@shape
class KnownGender(AwsModel):
    type: Optional[Union[KnownGenderType, str]] = wire_field("Type")


@shape
class ShotSegment(AwsModel):
    index: Optional[int] = wire_field("Index")
    confidence: Optional[float] = wire_field("Confidence")


@shape
class TechnicalCueSegment(AwsModel):
    type: Optional[Union[TechnicalCueType, str]] = wire_field("Type")
    confidence: Optional[float] = wire_field("Confidence")


@shape
class SegmentDetection(AwsModel):
    type: Optional[Union[SegmentType, str]] = wire_field("Type")
    start_timestamp_millis: Optional[int] = wire_field("StartTimestampMillis")
    end_timestamp_millis: Optional[int] = wire_field("EndTimestampMillis")
    duration_millis: Optional[int] = wire_field("DurationMillis")
    start_timecode_smpte: Optional[str] = wire_field("StartTimecodeSMPTE")
    end_timecode_smpte: Optional[str] = wire_field("EndTimecodeSMPTE")
    duration_smpte: Optional[str] = wire_field("DurationSMPTE")
    technical_cue_segment: Optional[TechnicalCueSegment] = wire_field("TechnicalCueSegment")
    shot_segment: Optional[ShotSegment] = wire_field("ShotSegment")


@shape
class SegmentTypeInfo(AwsModel):
    type: Optional[Union[SegmentType, str]] = wire_field("Type")
    model_version: Optional[str] = wire_field("ModelVersion")


@shape
class AudioMetadata(AwsModel):
    codec: Optional[str] = wire_field("Codec")
    duration_millis: Optional[int] = wire_field("DurationMillis")
    sample_rate: Optional[int] = wire_field("SampleRate")
    number_of_channels: Optional[int] = wire_field("NumberOfChannels")


@shape
class VideoMetadata(AwsModel):
    codec: Optional[str] = wire_field("Codec")
    duration_millis: Optional[int] = wire_field("DurationMillis")
    format: Optional[str] = wire_field("Format")
    frame_rate: Optional[float] = wire_field("FrameRate")
    frame_height: Optional[int] = wire_field("FrameHeight")
    frame_width: Optional[int] = wire_field("FrameWidth")


@shape
class KinesisVideoStream(AwsModel):
    arn: Optional[str] = wire_field("Arn")


@shape
class KinesisDataStream(AwsModel):
    arn: Optional[str] = wire_field("Arn")


@shape
class S3Destination(AwsModel):
    bucket: Optional[str] = wire_field("Bucket")
    key_prefix: Optional[str] = wire_field("KeyPrefix")


@shape
class StreamProcessorInput(AwsModel):
    kinesis_video_stream: Optional[KinesisVideoStream] = wire_field("KinesisVideoStream")


@shape
class StreamProcessorOutput(AwsModel):
    """Where a stream processor writes its results: a Kinesis data stream or S3."""

    kinesis_data_stream: Optional[KinesisDataStream] = wire_field("KinesisDataStream")
    s3_destination: Optional[S3Destination] = wire_field("S3Destination")


@shape
class FaceSearchSettings(AwsModel):
    collection_id: Optional[str] = wire_field("CollectionId")
    face_match_threshold: Optional[float] = wire_field("FaceMatchThreshold")


@shape
class ConnectedHomeSettings(AwsModel):
    labels: Optional[List[str]] = wire_field("Labels")
    min_confidence: Optional[float] = wire_field("MinConfidence")


@shape
class ConnectedHomeSettingsForUpdate(AwsModel):
    labels: Optional[List[str]] = wire_field("Labels")
    min_confidence: Optional[float] = wire_field("MinConfidence")


@shape
class StreamProcessorSettings(AwsModel):
    face_search: Optional[FaceSearchSettings] = wire_field("FaceSearch")
    connected_home: Optional[ConnectedHomeSettings] = wire_field("ConnectedHome")


@shape
class StreamProcessorSettingsForUpdate(AwsModel):
    connected_home_for_update: Optional[ConnectedHomeSettingsForUpdate] = wire_field("ConnectedHomeForUpdate")


@shape
class StreamProcessorNotificationChannel(AwsModel):
    sns_topic_arn: Optional[str] = wire_field("SNSTopicArn")


@shape
class StreamProcessorDataSharingPreference(AwsModel):
    opt_in: Optional[bool] = wire_field("OptIn")


@shape
class RegionOfInterest(AwsModel):
    bounding_box: Optional[BoundingBox] = wire_field("BoundingBox")
    polygon: Optional[List[Point]] = wire_field("Polygon")


@shape
class StreamProcessor(AwsModel):
    name: Optional[str] = wire_field("Name")
    status: Optional[Union[StreamProcessorStatus, str]] = wire_field("Status")


@shape
class KinesisVideoStreamStartSelector(AwsModel):
    producer_timestamp: Optional[int] = wire_field("ProducerTimestamp")
    fragment_number: Optional[str] = wire_field("FragmentNumber")


@shape
class StreamProcessingStartSelector(AwsModel):
    kvs_stream_start_selector: Optional[KinesisVideoStreamStartSelector] = wire_field("KVSStreamStartSelector")


@shape
class StreamProcessingStopSelector(AwsModel):
    max_duration_in_seconds: Optional[int] = wire_field("MaxDurationInSeconds")


# Celebrities and moderation

@shape
class Celebrity(AwsModel):
    urls: Optional[List[str]] = wire_field("Urls")
    name: Optional[str] = wire_field("Name")
    id: Optional[str] = wire_field("Id")
    face: Optional[ComparedFace] = wire_field("Face")
    match_confidence: Optional[float] = wire_field("MatchConfidence")
    known_gender: Optional[KnownGender] = wire_field("KnownGender")


@shape
class CelebrityDetail(AwsModel):
    urls: Optional[List[str]] = wire_field("Urls")
    name: Optional[str] = wire_field("Name")
    id: Optional[str] = wire_field("Id")
    confidence: Optional[float] = wire_field("Confidence")
    bounding_box: Optional[BoundingBox] = wire_field("BoundingBox")
    face: Optional[FaceDetail] = wire_field("Face")
    known_gender: Optional[KnownGender] = wire_field("KnownGender")


@shape
class CelebrityRecognition(AwsModel):
    timestamp: Optional[int] = wire_field("Timestamp")
    celebrity: Optional[CelebrityDetail] = wire_field("Celebrity")


@shape
class ModerationLabel(AwsModel):
    confidence: Optional[float] = wire_field("Confidence")
    name: Optional[str] = wire_field("Name")
    parent_name: Optional[str] = wire_field("ParentName")


@shape
class ContentModerationDetection(AwsModel):
    timestamp: Optional[int] = wire_field("Timestamp")
    moderation_label: Optional[ModerationLabel] = wire_field("ModerationLabel")


@shape
class HumanLoopDataAttributes(AwsModel):
    content_classifiers: Optional[List[Union[ContentClassifier, str]]] = wire_field("ContentClassifiers")


@shape
class HumanLoopConfig(AwsModel):
    human_loop_name: Optional[str] = wire_field("HumanLoopName")
    flow_definition_arn: Optional[str] = wire_field("FlowDefinitionArn")
    data_attributes: Optional[HumanLoopDataAttributes] = wire_field("DataAttributes")


@shape
class HumanLoopActivationOutput(AwsModel):
    """Whether a human review loop was started for a moderation request.

    The evaluation results are a JSON document kept as a string.
    """

    human_loop_arn: Optional[str] = wire_field("HumanLoopArn")
    human_loop_activation_reasons: Optional[List[str]] = wire_field("HumanLoopActivationReasons")
    human_loop_activation_conditions_evaluation_results: Optional[str] = wire_field(
        "HumanLoopActivationConditionsEvaluationResults"
    )


# Protective equipment

@shape
class CoversBodyPart(AwsModel):
    confidence: Optional[float] = wire_field("Confidence")
    value: Optional[bool] = wire_field("Value")


@shape
class EquipmentDetection(AwsModel):
    bounding_box: Optional[BoundingBox] = wire_field("BoundingBox")
    confidence: Optional[float] = wire_field("Confidence")
    type: Optional[Union[ProtectiveEquipmentType, str]] = wire_field("Type")
    covers_body_part: Optional[CoversBodyPart] = wire_field("CoversBodyPart")


@shape
class ProtectiveEquipmentBodyPart(AwsModel):
    name: Optional[Union[BodyPart, str]] = wire_field("Name")
    confidence: Optional[float] = wire_field("Confidence")
    equipment_detections: Optional[List[EquipmentDetection]] = wire_field("EquipmentDetections")


@shape
class ProtectiveEquipmentPerson(AwsModel):
    body_parts: Optional[List[ProtectiveEquipmentBodyPart]] = wire_field("BodyParts")
    bounding_box: Optional[BoundingBox] = wire_field("BoundingBox")
    confidence: Optional[float] = wire_field("Confidence")
    id: Optional[int] = wire_field("Id")


@shape
class ProtectiveEquipmentSummarizationAttributes(AwsModel):
    min_confidence: Optional[float] = wire_field("MinConfidence")
    required_equipment_types: Optional[List[Union[ProtectiveEquipmentType, str]]] = wire_field(
        "RequiredEquipmentTypes"
    )


@shape
class ProtectiveEquipmentSummary(AwsModel):
    persons_with_required_equipment: Optional[List[int]] = wire_field("PersonsWithRequiredEquipment")
    persons_without_required_equipment: Optional[List[int]] = wire_field("PersonsWithoutRequiredEquipment")
    persons_indeterminate: Optional[List[int]] = wire_field("PersonsIndeterminate")


# Stored video

@shape
class Video(AwsModel):
    s3_object: Optional[S3Object] = wire_field("S3Object")


@shape
class NotificationChannel(AwsModel):
    """SNS topic that receives the completion status of a video job."""

    sns_topic_arn: Optional[str] = wire_field("SNSTopicArn")
    role_arn: Optional[str] = wire_field("RoleArn")


@shape
class FaceDetection(AwsModel):
    timestamp: Optional[int] = wire_field("Timestamp")
    face: Optional[FaceDetail] = wire_field("Face")


@shape
class PersonDetail(AwsModel):
    index: Optional[int] = wire_field("Index")
    bounding_box: Optional[BoundingBox] = wire_field("BoundingBox")
    face: Optional[FaceDetail] = wire_field("Face")


@shape
class PersonDetection(AwsModel):
    timestamp: Optional[int] = wire_field("Timestamp")
    person: Optional[PersonDetail] = wire_field("Person")


@shape
class PersonMatch(AwsModel):
    timestamp: Optional[int] = wire_field("Timestamp")
    person: Optional[PersonDetail] = wire_field("Person")
    face_matches: Optional[List[FaceMatch]] = wire_field("FaceMatches")


@shape
class LabelDetection(AwsModel):
    timestamp: Optional[int] = wire_field("Timestamp")
    label: Optional[Label] = wire_field("Label")


@shape
class TextDetectionResult(AwsModel):
    timestamp: Optional[int] = wire_field("Timestamp")
    text_detection: Optional[TextDetection] = wire_field("TextDetection")


@shape
class DetectionFilter(AwsModel):
    min_confidence: Optional[float] = wire_field("MinConfidence")
    min_bounding_box_height: Optional[float] = wire_field("MinBoundingBoxHeight")
    min_bounding_box_width: Optional[float] = wire_field("MinBoundingBoxWidth")


@shape
class DetectTextFilters(AwsModel):
    word_filter: Optional[DetectionFilter] = wire_field("WordFilter")
    regions_of_interest: Optional[List[RegionOfInterest]] = wire_field("RegionsOfInterest")


@shape
class StartTextDetectionFilters(AwsModel):
    word_filter: Optional[DetectionFilter] = wire_field("WordFilter")
    regions_of_interest: Optional[List[RegionOfInterest]] = wire_field("RegionsOfInterest")


@shape
class BlackFrame(AwsModel):
    max_pixel_threshold: Optional[float] = wire_field("MaxPixelThreshold")
    min_coverage_percentage: Optional[float] = wire_field("MinCoveragePercentage")


@shape
class StartTechnicalCueDetectionFilter(AwsModel):
    min_segment_confidence: Optional[float] = wire_field("MinSegmentConfidence")
    black_frame: Optional[BlackFrame] = wire_field("BlackFrame")


@shape
class StartShotDetectionFilter(AwsModel):
    min_segment_confidence: Optional[float] = wire_field("MinSegmentConfidence")


@shape
class StartSegmentDetectionFilters(AwsModel):
    technical_cue_filter: Optional[StartTechnicalCueDetectionFilter] = wire_field("TechnicalCueFilter")
    shot_filter: Optional[StartShotDetectionFilter] = wire_field("ShotFilter")


# Custom labels: projects, versions and datasets

@shape
class GroundTruthManifest(AwsModel):
    s3_object: Optional[S3Object] = wire_field("S3Object")


@shape
class Asset(AwsModel):
    ground_truth_manifest: Optional[GroundTruthManifest] = wire_field("GroundTruthManifest")


@shape
class TrainingData(AwsModel):
    assets: Optional[List[Asset]] = wire_field("Assets")


@shape
class TestingData(AwsModel):
    """Test assets, or auto_create to split them off the training data."""

    assets: Optional[List[Asset]] = wire_field("Assets")
    auto_create: Optional[bool] = wire_field("AutoCreate")


@shape
class ValidationData(AwsModel):
    assets: Optional[List[Asset]] = wire_field("Assets")


@shape
class TrainingDataResult(AwsModel):
    input: Optional[TrainingData] = wire_field("Input")
    output: Optional[TrainingData] = wire_field("Output")
    validation: Optional[ValidationData] = wire_field("Validation")


@shape
class TestingDataResult(AwsModel):
    input: Optional[TestingData] = wire_field("Input")
    output: Optional[TestingData] = wire_field("Output")
    validation: Optional[ValidationData] = wire_field("Validation")


@shape
class OutputConfig(AwsModel):
    s3_bucket: Optional[str] = wire_field("S3Bucket")
    s3_key_prefix: Optional[str] = wire_field("S3KeyPrefix")


@shape
class Summary(AwsModel):
    s3_object: Optional[S3Object] = wire_field("S3Object")


@shape
class EvaluationResult(AwsModel):
    f1_score: Optional[float] = wire_field("F1Score")
    summary: Optional[Summary] = wire_field("Summary")


@shape
class ProjectVersionDescription(AwsModel):
    project_version_arn: Optional[str] = wire_field("ProjectVersionArn")
    creation_timestamp: Optional[datetime] = wire_field("CreationTimestamp")
    min_inference_units: Optional[int] = wire_field("MinInferenceUnits")
    status: Optional[Union[ProjectVersionStatus, str]] = wire_field("Status")
    status_message: Optional[str] = wire_field("StatusMessage")
    billable_training_time_in_seconds: Optional[int] = wire_field("BillableTrainingTimeInSeconds")
    training_end_timestamp: Optional[datetime] = wire_field("TrainingEndTimestamp")
    output_config: Optional[OutputConfig] = wire_field("OutputConfig")
    training_data_result: Optional[TrainingDataResult] = wire_field("TrainingDataResult")
    testing_data_result: Optional[TestingDataResult] = wire_field("TestingDataResult")
    evaluation_result: Optional[EvaluationResult] = wire_field("EvaluationResult")
    manifest_summary: Optional[GroundTruthManifest] = wire_field("ManifestSummary")
    kms_key_id: Optional[str] = wire_field("KmsKeyId")


@shape
class DatasetMetadata(AwsModel):
    creation_timestamp: Optional[datetime] = wire_field("CreationTimestamp")
    dataset_type: Optional[Union[DatasetType, str]] = wire_field("DatasetType")
    dataset_arn: Optional[str] = wire_field("DatasetArn")
    status: Optional[Union[DatasetStatus, str]] = wire_field("Status")
    status_message: Optional[str] = wire_field("StatusMessage")
    status_message_code: Optional[Union[DatasetStatusMessageCode, str]] = wire_field("StatusMessageCode")


@shape
class ProjectDescription(AwsModel):
    project_arn: Optional[str] = wire_field("ProjectArn")
    creation_timestamp: Optional[datetime] = wire_field("CreationTimestamp")
    status: Optional[Union[ProjectStatus, str]] = wire_field("Status")
    datasets: Optional[List[DatasetMetadata]] = wire_field("Datasets")


@shape
class DatasetSource(AwsModel):
    """Manifest to import, or an existing dataset to copy."""

    ground_truth_manifest: Optional[GroundTruthManifest] = wire_field("GroundTruthManifest")
    dataset_arn: Optional[str] = wire_field("DatasetArn")


@shape
class DatasetStats(AwsModel):
    labeled_entries: Optional[int] = wire_field("LabeledEntries")
    total_entries: Optional[int] = wire_field("TotalEntries")
    total_labels: Optional[int] = wire_field("TotalLabels")
    error_entries: Optional[int] = wire_field("ErrorEntries")


@shape
class DatasetDescription(AwsModel):
    creation_timestamp: Optional[datetime] = wire_field("CreationTimestamp")
    last_updated_timestamp: Optional[datetime] = wire_field("LastUpdatedTimestamp")
    status: Optional[Union[DatasetStatus, str]] = wire_field("Status")
    status_message: Optional[str] = wire_field("StatusMessage")
    status_message_code: Optional[Union[DatasetStatusMessageCode, str]] = wire_field("StatusMessageCode")
    dataset_stats: Optional[DatasetStats] = wire_field("DatasetStats")


@shape
class DatasetLabelStats(AwsModel):
    entry_count: Optional[int] = wire_field("EntryCount")
    bounding_box_count: Optional[int] = wire_field("BoundingBoxCount")


@shape
class DatasetLabelDescription(AwsModel):
    label_name: Optional[str] = wire_field("LabelName")
    label_stats: Optional[DatasetLabelStats] = wire_field("LabelStats")


@shape
class DatasetChanges(AwsModel):
    """JSON Lines of SageMaker Ground Truth entries to add or update."""

    ground_truth: Optional[bytes] = wire_field("GroundTruth")


@shape
class DistributeDataset(AwsModel):
    arn: Optional[str] = wire_field("Arn")


@shape
class CustomLabel(AwsModel):
    name: Optional[str] = wire_field("Name")
    confidence: Optional[float] = wire_field("Confidence")
    geometry: Optional[Geometry] = wire_field("Geometry")


# Requests and results

@shape
class CompareFacesRequest(AwsModel):
    source_image: Optional[Image] = wire_field("SourceImage")
    target_image: Optional[Image] = wire_field("TargetImage")
    similarity_threshold: Optional[float] = wire_field("SimilarityThreshold")
    quality_filter: Optional[Union[QualityFilter, str]] = wire_field("QualityFilter")


@shape
class CompareFacesResult(AwsModel):
    source_image_face: Optional[ComparedSourceImageFace] = wire_field("SourceImageFace")
    face_matches: Optional[List[CompareFacesMatch]] = wire_field("FaceMatches")
    unmatched_faces: Optional[List[ComparedFace]] = wire_field("UnmatchedFaces")
    source_image_orientation_correction: Optional[str] = wire_field("SourceImageOrientationCorrection")
    target_image_orientation_correction: Optional[str] = wire_field("TargetImageOrientationCorrection")


@shape
class CreateCollectionRequest(AwsModel):
    collection_id: Optional[str] = wire_field("CollectionId")
    tags: Optional[Dict[str, str]] = wire_field("Tags")

    def add_tags_entry(self, key: str, value: str) -> "CreateCollectionRequest":
        return self._add_entry("tags", key, value)

    def clear_tags_entries(self) -> "CreateCollectionRequest":
        return self._clear_entries("tags")


@shape
class CreateCollectionResult(AwsModel):
    status_code: Optional[int] = wire_field("StatusCode")
    collection_arn: Optional[str] = wire_field("CollectionArn")
    face_model_version: Optional[str] = wire_field("FaceModelVersion")


@shape
class DeleteCollectionRequest(AwsModel):
    collection_id: Optional[str] = wire_field("CollectionId")


@shape
class DeleteCollectionResult(AwsModel):
    status_code: Optional[int] = wire_field("StatusCode")


@shape
class DescribeCollectionRequest(AwsModel):
    collection_id: Optional[str] = wire_field("CollectionId")


@shape
class DescribeCollectionResult(AwsModel):
    face_count: Optional[int] = wire_field("FaceCount")
    face_model_version: Optional[str] = wire_field("FaceModelVersion")
    collection_arn: Optional[str] = wire_field("CollectionARN")
    creation_timestamp: Optional[datetime] = wire_field("CreationTimestamp")


@shape
class ListCollectionsRequest(AwsModel):
    next_token: Optional[str] = wire_field("NextToken")
    max_results: Optional[int] = wire_field("MaxResults")


@shape
class ListCollectionsResult(AwsModel):
    collection_ids: Optional[List[str]] = wire_field("CollectionIds")
    next_token: Optional[str] = wire_field("NextToken")
    face_model_versions: Optional[List[str]] = wire_field("FaceModelVersions")


@shape
class DetectFacesRequest(AwsModel):
    image: Optional[Image] = wire_field("Image")
    attributes: Optional[List[Union[Attribute, str]]] = wire_field("Attributes")


@shape
class DetectFacesResult(AwsModel):
    face_details: Optional[List[FaceDetail]] = wire_field("FaceDetails")
    orientation_correction: Optional[str] = wire_field("OrientationCorrection")


@shape
class DetectLabelsRequest(AwsModel):
    image: Optional[Image] = wire_field("Image")
    max_labels: Optional[int] = wire_field("MaxLabels")
    min_confidence: Optional[float] = wire_field("MinConfidence")


@shape
class DetectLabelsResult(AwsModel):
    labels: Optional[List[Label]] = wire_field("Labels")
    orientation_correction: Optional[str] = wire_field("OrientationCorrection")
    label_model_version: Optional[str] = wire_field("LabelModelVersion")


@shape
class DetectTextRequest(AwsModel):
    image: Optional[Image] = wire_field("Image")
    filters: Optional[DetectTextFilters] = wire_field("Filters")


@shape
class DetectTextResult(AwsModel):
    text_detections: Optional[List[TextDetection]] = wire_field("TextDetections")
    text_model_version: Optional[str] = wire_field("TextModelVersion")


@shape
class IndexFacesRequest(AwsModel):
    collection_id: Optional[str] = wire_field("CollectionId")
    image: Optional[Image] = wire_field("Image")
    external_image_id: Optional[str] = wire_field("ExternalImageId")
    detection_attributes: Optional[List[Union[Attribute, str]]] = wire_field("DetectionAttributes")
    max_faces: Optional[int] = wire_field("MaxFaces")
    quality_filter: Optional[Union[QualityFilter, str]] = wire_field("QualityFilter")


@shape
class IndexFacesResult(AwsModel):
    face_records: Optional[List[FaceRecord]] = wire_field("FaceRecords")
    orientation_correction: Optional[str] = wire_field("OrientationCorrection")
    face_model_version: Optional[str] = wire_field("FaceModelVersion")
    unindexed_faces: Optional[List[UnindexedFace]] = wire_field("UnindexedFaces")


@shape
class SearchFacesByImageRequest(AwsModel):
    collection_id: Optional[str] = wire_field("CollectionId")
    image: Optional[Image] = wire_field("Image")
    max_faces: Optional[int] = wire_field("MaxFaces")
    face_match_threshold: Optional[float] = wire_field("FaceMatchThreshold")
    quality_filter: Optional[Union[QualityFilter, str]] = wire_field("QualityFilter")


@shape
class SearchFacesByImageResult(AwsModel):
    searched_face_bounding_box: Optional[BoundingBox] = wire_field("SearchedFaceBoundingBox")
    searched_face_confidence: Optional[float] = wire_field("SearchedFaceConfidence")
    face_matches: Optional[List[FaceMatch]] = wire_field("FaceMatches")
    face_model_version: Optional[str] = wire_field("FaceModelVersion")


@shape
class GetCelebrityInfoRequest(AwsModel):
    id: Optional[str] = wire_field("Id")


@shape
class GetCelebrityInfoResult(AwsModel):
    urls: Optional[List[str]] = wire_field("Urls")
    name: Optional[str] = wire_field("Name")
    known_gender: Optional[KnownGender] = wire_field("KnownGender")


@shape
class GetSegmentDetectionRequest(AwsModel):
    job_id: Optional[str] = wire_field("JobId")
    max_results: Optional[int] = wire_field("MaxResults")
    next_token: Optional[str] = wire_field("NextToken")


@shape
class GetSegmentDetectionResult(AwsModel):
    job_status: Optional[Union[VideoJobStatus, str]] = wire_field("JobStatus")
    status_message: Optional[str] = wire_field("StatusMessage")
    video_metadata: Optional[List[VideoMetadata]] = wire_field("VideoMetadata")
    audio_metadata: Optional[List[AudioMetadata]] = wire_field("AudioMetadata")
    next_token: Optional[str] = wire_field("NextToken")
    segments: Optional[List[SegmentDetection]] = wire_field("Segments")
    selected_segment_types: Optional[List[SegmentTypeInfo]] = wire_field("SelectedSegmentTypes")


@shape
class DescribeStreamProcessorRequest(AwsModel):
    name: Optional[str] = wire_field("Name")


@shape
class DescribeStreamProcessorResult(AwsModel):
    name: Optional[str] = wire_field("Name")
    stream_processor_arn: Optional[str] = wire_field("StreamProcessorArn")
    status: Optional[Union[StreamProcessorStatus, str]] = wire_field("Status")
    status_message: Optional[str] = wire_field("StatusMessage")
    creation_timestamp: Optional[datetime] = wire_field("CreationTimestamp")
    last_update_timestamp: Optional[datetime] = wire_field("LastUpdateTimestamp")
    input: Optional[StreamProcessorInput] = wire_field("Input")
    output: Optional[StreamProcessorOutput] = wire_field("Output")
    role_arn: Optional[str] = wire_field("RoleArn")
    settings: Optional[StreamProcessorSettings] = wire_field("Settings")


@shape
class TagResourceRequest(AwsModel):
    resource_arn: Optional[str] = wire_field("ResourceArn")
    tags: Optional[Dict[str, str]] = wire_field("Tags")

    def add_tags_entry(self, key: str, value: str) -> "TagResourceRequest":
        return self._add_entry("tags", key, value)

    def clear_tags_entries(self) -> "TagResourceRequest":
        return self._clear_entries("tags")


@shape
class TagResourceResult(AwsModel):
    pass


@shape
class UntagResourceRequest(AwsModel):
    resource_arn: Optional[str] = wire_field("ResourceArn")
    tag_keys: Optional[List[str]] = wire_field("TagKeys")


@shape
class UntagResourceResult(AwsModel):
    pass


# Faces in collections

@shape
class DeleteFacesRequest(AwsModel):
    collection_id: Optional[str] = wire_field("CollectionId")
    face_ids: Optional[List[str]] = wire_field("FaceIds")


@shape
class DeleteFacesResult(AwsModel):
    deleted_faces: Optional[List[str]] = wire_field("DeletedFaces")


@shape
class ListFacesRequest(AwsModel):
    collection_id: Optional[str] = wire_field("CollectionId")
    next_token: Optional[str] = wire_field("NextToken")
    max_results: Optional[int] = wire_field("MaxResults")


@shape
class ListFacesResult(AwsModel):
    faces: Optional[List[Face]] = wire_field("Faces")
    next_token: Optional[str] = wire_field("NextToken")
    face_model_version: Optional[str] = wire_field("FaceModelVersion")


@shape
class SearchFacesRequest(AwsModel):
    collection_id: Optional[str] = wire_field("CollectionId")
    face_id: Optional[str] = wire_field("FaceId")
    max_faces: Optional[int] = wire_field("MaxFaces")
    face_match_threshold: Optional[float] = wire_field("FaceMatchThreshold")


@shape
class SearchFacesResult(AwsModel):
    searched_face_id: Optional[str] = wire_field("SearchedFaceId")
    face_matches: Optional[List[FaceMatch]] = wire_field("FaceMatches")
    face_model_version: Optional[str] = wire_field("FaceModelVersion")


# Image analysis

@shape
class RecognizeCelebritiesRequest(AwsModel):
    image: Optional[Image] = wire_field("Image")


@shape
class RecognizeCelebritiesResult(AwsModel):
    celebrity_faces: Optional[List[Celebrity]] = wire_field("CelebrityFaces")
    unrecognized_faces: Optional[List[ComparedFace]] = wire_field("UnrecognizedFaces")
    orientation_correction: Optional[str] = wire_field("OrientationCorrection")


@shape
class DetectModerationLabelsRequest(AwsModel):
    image: Optional[Image] = wire_field("Image")
    min_confidence: Optional[float] = wire_field("MinConfidence")
    human_loop_config: Optional[HumanLoopConfig] = wire_field("HumanLoopConfig")


@shape
class DetectModerationLabelsResult(AwsModel):
    moderation_labels: Optional[List[ModerationLabel]] = wire_field("ModerationLabels")
    moderation_model_version: Optional[str] = wire_field("ModerationModelVersion")
    human_loop_activation_output: Optional[HumanLoopActivationOutput] = wire_field("HumanLoopActivationOutput")


@shape
class DetectProtectiveEquipmentRequest(AwsModel):
    image: Optional[Image] = wire_field("Image")
    summarization_attributes: Optional[ProtectiveEquipmentSummarizationAttributes] = wire_field(
        "SummarizationAttributes"
    )


@shape
class DetectProtectiveEquipmentResult(AwsModel):
    protective_equipment_model_version: Optional[str] = wire_field("ProtectiveEquipmentModelVersion")
    persons: Optional[List[ProtectiveEquipmentPerson]] = wire_field("Persons")
    summary: Optional[ProtectiveEquipmentSummary] = wire_field("Summary")


@shape
class DetectCustomLabelsRequest(AwsModel):
    project_version_arn: Optional[str] = wire_field("ProjectVersionArn")
    image: Optional[Image] = wire_field("Image")
    max_results: Optional[int] = wire_field("MaxResults")
    min_confidence: Optional[float] = wire_field("MinConfidence")


@shape
class DetectCustomLabelsResult(AwsModel):
    custom_labels: Optional[List[CustomLabel]] = wire_field("CustomLabels")


# Stored video jobs

@shape
class StartCelebrityRecognitionRequest(AwsModel):
    video: Optional[Video] = wire_field("Video")
    client_request_token: Optional[str] = wire_field("ClientRequestToken")
    notification_channel: Optional[NotificationChannel] = wire_field("NotificationChannel")
    job_tag: Optional[str] = wire_field("JobTag")


@shape
class StartCelebrityRecognitionResult(AwsModel):
    job_id: Optional[str] = wire_field("JobId")


@shape
class GetCelebrityRecognitionRequest(AwsModel):
    job_id: Optional[str] = wire_field("JobId")
    max_results: Optional[int] = wire_field("MaxResults")
    next_token: Optional[str] = wire_field("NextToken")
    sort_by: Optional[Union[CelebrityRecognitionSortBy, str]] = wire_field("SortBy")


@shape
class GetCelebrityRecognitionResult(AwsModel):
    job_status: Optional[Union[VideoJobStatus, str]] = wire_field("JobStatus")
    status_message: Optional[str] = wire_field("StatusMessage")
    video_metadata: Optional[VideoMetadata] = wire_field("VideoMetadata")
    next_token: Optional[str] = wire_field("NextToken")
    celebrities: Optional[List[CelebrityRecognition]] = wire_field("Celebrities")


@shape
class StartContentModerationRequest(AwsModel):
    video: Optional[Video] = wire_field("Video")
    min_confidence: Optional[float] = wire_field("MinConfidence")
    client_request_token: Optional[str] = wire_field("ClientRequestToken")
    notification_channel: Optional[NotificationChannel] = wire_field("NotificationChannel")
    job_tag: Optional[str] = wire_field("JobTag")


@shape
class StartContentModerationResult(AwsModel):
    job_id: Optional[str] = wire_field("JobId")


@shape
class GetContentModerationRequest(AwsModel):
    job_id: Optional[str] = wire_field("JobId")
    max_results: Optional[int] = wire_field("MaxResults")
    next_token: Optional[str] = wire_field("NextToken")
    sort_by: Optional[Union[ContentModerationSortBy, str]] = wire_field("SortBy")


@shape
class GetContentModerationResult(AwsModel):
    job_status: Optional[Union[VideoJobStatus, str]] = wire_field("JobStatus")
    status_message: Optional[str] = wire_field("StatusMessage")
    video_metadata: Optional[VideoMetadata] = wire_field("VideoMetadata")
    moderation_labels: Optional[List[ContentModerationDetection]] = wire_field("ModerationLabels")
    next_token: Optional[str] = wire_field("NextToken")
    moderation_model_version: Optional[str] = wire_field("ModerationModelVersion")


@shape
class StartFaceDetectionRequest(AwsModel):
    video: Optional[Video] = wire_field("Video")
    client_request_token: Optional[str] = wire_field("ClientRequestToken")
    notification_channel: Optional[NotificationChannel] = wire_field("NotificationChannel")
    face_attributes: Optional[Union[FaceAttributes, str]] = wire_field("FaceAttributes")
    job_tag: Optional[str] = wire_field("JobTag")


@shape
class StartFaceDetectionResult(AwsModel):
    job_id: Optional[str] = wire_field("JobId")


@shape
class GetFaceDetectionRequest(AwsModel):
    job_id: Optional[str] = wire_field("JobId")
    max_results: Optional[int] = wire_field("MaxResults")
    next_token: Optional[str] = wire_field("NextToken")


@shape
class GetFaceDetectionResult(AwsModel):
    job_status: Optional[Union[VideoJobStatus, str]] = wire_field("JobStatus")
    status_message: Optional[str] = wire_field("StatusMessage")
    video_metadata: Optional[VideoMetadata] = wire_field("VideoMetadata")
    next_token: Optional[str] = wire_field("NextToken")
    faces: Optional[List[FaceDetection]] = wire_field("Faces")


@shape
class StartFaceSearchRequest(AwsModel):
    video: Optional[Video] = wire_field("Video")
    client_request_token: Optional[str] = wire_field("ClientRequestToken")
    face_match_threshold: Optional[float] = wire_field("FaceMatchThreshold")
    collection_id: Optional[str] = wire_field("CollectionId")
    notification_channel: Optional[NotificationChannel] = wire_field("NotificationChannel")
    job_tag: Optional[str] = wire_field("JobTag")


@shape
class StartFaceSearchResult(AwsModel):
    job_id: Optional[str] = wire_field("JobId")


@shape
class GetFaceSearchRequest(AwsModel):
    job_id: Optional[str] = wire_field("JobId")
    max_results: Optional[int] = wire_field("MaxResults")
    next_token: Optional[str] = wire_field("NextToken")
    sort_by: Optional[Union[FaceSearchSortBy, str]] = wire_field("SortBy")


@shape
class GetFaceSearchResult(AwsModel):
    job_status: Optional[Union[VideoJobStatus, str]] = wire_field("JobStatus")
    status_message: Optional[str] = wire_field("StatusMessage")
    next_token: Optional[str] = wire_field("NextToken")
    video_metadata: Optional[VideoMetadata] = wire_field("VideoMetadata")
    persons: Optional[List[PersonMatch]] = wire_field("Persons")


@shape
class StartLabelDetectionRequest(AwsModel):
    video: Optional[Video] = wire_field("Video")
    client_request_token: Optional[str] = wire_field("ClientRequestToken")
    min_confidence: Optional[float] = wire_field("MinConfidence")
    notification_channel: Optional[NotificationChannel] = wire_field("NotificationChannel")
    job_tag: Optional[str] = wire_field("JobTag")


@shape
class StartLabelDetectionResult(AwsModel):
    job_id: Optional[str] = wire_field("JobId")


@shape
class GetLabelDetectionRequest(AwsModel):
    job_id: Optional[str] = wire_field("JobId")
    max_results: Optional[int] = wire_field("MaxResults")
    next_token: Optional[str] = wire_field("NextToken")
    sort_by: Optional[Union[LabelDetectionSortBy, str]] = wire_field("SortBy")


@shape
class GetLabelDetectionResult(AwsModel):
    job_status: Optional[Union[VideoJobStatus, str]] = wire_field("JobStatus")
    status_message: Optional[str] = wire_field("StatusMessage")
    video_metadata: Optional[VideoMetadata] = wire_field("VideoMetadata")
    next_token: Optional[str] = wire_field("NextToken")
    labels: Optional[List[LabelDetection]] = wire_field("Labels")
    label_model_version: Optional[str] = wire_field("LabelModelVersion")


@shape
class StartPersonTrackingRequest(AwsModel):
    video: Optional[Video] = wire_field("Video")
    client_request_token: Optional[str] = wire_field("ClientRequestToken")
    notification_channel: Optional[NotificationChannel] = wire_field("NotificationChannel")
    job_tag: Optional[str] = wire_field("JobTag")


@shape
class StartPersonTrackingResult(AwsModel):
    job_id: Optional[str] = wire_field("JobId")


@shape
class GetPersonTrackingRequest(AwsModel):
    job_id: Optional[str] = wire_field("JobId")
    max_results: Optional[int] = wire_field("MaxResults")
    next_token: Optional[str] = wire_field("NextToken")
    sort_by: Optional[Union[PersonTrackingSortBy, str]] = wire_field("SortBy")


@shape
class GetPersonTrackingResult(AwsModel):
    job_status: Optional[Union[VideoJobStatus, str]] = wire_field("JobStatus")
    status_message: Optional[str] = wire_field("StatusMessage")
    video_metadata: Optional[VideoMetadata] = wire_field("VideoMetadata")
    next_token: Optional[str] = wire_field("NextToken")
    persons: Optional[List[PersonDetection]] = wire_field("Persons")


@shape
class StartSegmentDetectionRequest(AwsModel):
    video: Optional[Video] = wire_field("Video")
    client_request_token: Optional[str] = wire_field("ClientRequestToken")
    notification_channel: Optional[NotificationChannel] = wire_field("NotificationChannel")
    job_tag: Optional[str] = wire_field("JobTag")
    filters: Optional[StartSegmentDetectionFilters] = wire_field("Filters")
    segment_types: Optional[List[Union[SegmentType, str]]] = wire_field("SegmentTypes")


@shape
class StartSegmentDetectionResult(AwsModel):
    job_id: Optional[str] = wire_field("JobId")


@shape
class StartTextDetectionRequest(AwsModel):
    video: Optional[Video] = wire_field("Video")
    client_request_token: Optional[str] = wire_field("ClientRequestToken")
    notification_channel: Optional[NotificationChannel] = wire_field("NotificationChannel")
    job_tag: Optional[str] = wire_field("JobTag")
    filters: Optional[StartTextDetectionFilters] = wire_field("Filters")


@shape
class StartTextDetectionResult(AwsModel):
    job_id: Optional[str] = wire_field("JobId")


@shape
class GetTextDetectionRequest(AwsModel):
    job_id: Optional[str] = wire_field("JobId")
    max_results: Optional[int] = wire_field("MaxResults")
    next_token: Optional[str] = wire_field("NextToken")


@shape
class GetTextDetectionResult(AwsModel):
    job_status: Optional[Union[VideoJobStatus, str]] = wire_field("JobStatus")
    status_message: Optional[str] = wire_field("StatusMessage")
    video_metadata: Optional[VideoMetadata] = wire_field("VideoMetadata")
    text_detections: Optional[List[TextDetectionResult]] = wire_field("TextDetections")
    next_token: Optional[str] = wire_field("NextToken")
    text_model_version: Optional[str] = wire_field("TextModelVersion")


# Stream processors

@shape
class CreateStreamProcessorRequest(AwsModel):
    input: Optional[StreamProcessorInput] = wire_field("Input")
    output: Optional[StreamProcessorOutput] = wire_field("Output")
    name: Optional[str] = wire_field("Name")
    settings: Optional[StreamProcessorSettings] = wire_field("Settings")
    role_arn: Optional[str] = wire_field("RoleArn")
    tags: Optional[Dict[str, str]] = wire_field("Tags")
    notification_channel: Optional[StreamProcessorNotificationChannel] = wire_field("NotificationChannel")
    kms_key_id: Optional[str] = wire_field("KmsKeyId")
    regions_of_interest: Optional[List[RegionOfInterest]] = wire_field("RegionsOfInterest")
    data_sharing_preference: Optional[StreamProcessorDataSharingPreference] = wire_field(
        "DataSharingPreference"
    )

    def add_tags_entry(self, key: str, value: str) -> "CreateStreamProcessorRequest":
        return self._add_entry("tags", key, value)

    def clear_tags_entries(self) -> "CreateStreamProcessorRequest":
        return self._clear_entries("tags")


@shape
class CreateStreamProcessorResult(AwsModel):
    stream_processor_arn: Optional[str] = wire_field("StreamProcessorArn")


@shape
class DeleteStreamProcessorRequest(AwsModel):
    name: Optional[str] = wire_field("Name")


@shape
class DeleteStreamProcessorResult(AwsModel):
    pass


@shape
class ListStreamProcessorsRequest(AwsModel):
    next_token: Optional[str] = wire_field("NextToken")
    max_results: Optional[int] = wire_field("MaxResults")


@shape
class ListStreamProcessorsResult(AwsModel):
    next_token: Optional[str] = wire_field("NextToken")
    stream_processors: Optional[List[StreamProcessor]] = wire_field("StreamProcessors")


@shape
class StartStreamProcessorRequest(AwsModel):
    name: Optional[str] = wire_field("Name")
    start_selector: Optional[StreamProcessingStartSelector] = wire_field("StartSelector")
    stop_selector: Optional[StreamProcessingStopSelector] = wire_field("StopSelector")


@shape
class StartStreamProcessorResult(AwsModel):
    session_id: Optional[str] = wire_field("SessionId")


@shape
class StopStreamProcessorRequest(AwsModel):
    name: Optional[str] = wire_field("Name")


@shape
class StopStreamProcessorResult(AwsModel):
    """Empty on success."""


@shape
class UpdateStreamProcessorRequest(AwsModel):
    name: Optional[str] = wire_field("Name")
    settings_for_update: Optional[StreamProcessorSettingsForUpdate] = wire_field("SettingsForUpdate")
    regions_of_interest_for_update: Optional[List[RegionOfInterest]] = wire_field("RegionsOfInterestForUpdate")
    data_sharing_preference_for_update: Optional[StreamProcessorDataSharingPreference] = wire_field(
        "DataSharingPreferenceForUpdate"
    )
    parameters_to_delete: Optional[List[Union[StreamProcessorParameterToDelete, str]]] = wire_field(
        "ParametersToDelete"
    )


@shape
class UpdateStreamProcessorResult(AwsModel):
    pass


# Custom labels

@shape
class CreateProjectRequest(AwsModel):
    project_name: Optional[str] = wire_field("ProjectName")


@shape
class CreateProjectResult(AwsModel):
    project_arn: Optional[str] = wire_field("ProjectArn")


@shape
class DeleteProjectRequest(AwsModel):
    project_arn: Optional[str] = wire_field("ProjectArn")


@shape
class DeleteProjectResult(AwsModel):
    status: Optional[Union[ProjectStatus, str]] = wire_field("Status")


@shape
class DescribeProjectsRequest(AwsModel):
    next_token: Optional[str] = wire_field("NextToken")
    max_results: Optional[int] = wire_field("MaxResults")
    project_names: Optional[List[str]] = wire_field("ProjectNames")


@shape
class DescribeProjectsResult(AwsModel):
    project_descriptions: Optional[List[ProjectDescription]] = wire_field("ProjectDescriptions")
    next_token: Optional[str] = wire_field("NextToken")


@shape
class CreateProjectVersionRequest(AwsModel):
    project_arn: Optional[str] = wire_field("ProjectArn")
    version_name: Optional[str] = wire_field("VersionName")
    output_config: Optional[OutputConfig] = wire_field("OutputConfig")
    training_data: Optional[TrainingData] = wire_field("TrainingData")
    testing_data: Optional[TestingData] = wire_field("TestingData")
    tags: Optional[Dict[str, str]] = wire_field("Tags")
    kms_key_id: Optional[str] = wire_field("KmsKeyId")

    def add_tags_entry(self, key: str, value: str) -> "CreateProjectVersionRequest":
        return self._add_entry("tags", key, value)

    def clear_tags_entries(self) -> "CreateProjectVersionRequest":
        return self._clear_entries("tags")


@shape
class CreateProjectVersionResult(AwsModel):
    project_version_arn: Optional[str] = wire_field("ProjectVersionArn")


@shape
class DeleteProjectVersionRequest(AwsModel):
    project_version_arn: Optional[str] = wire_field("ProjectVersionArn")


@shape
class DeleteProjectVersionResult(AwsModel):
    status: Optional[Union[ProjectVersionStatus, str]] = wire_field("Status")


@shape
class DescribeProjectVersionsRequest(AwsModel):
    project_arn: Optional[str] = wire_field("ProjectArn")
    version_names: Optional[List[str]] = wire_field("VersionNames")
    next_token: Optional[str] = wire_field("NextToken")
    max_results: Optional[int] = wire_field("MaxResults")


@shape
class DescribeProjectVersionsResult(AwsModel):
    project_version_descriptions: Optional[List[ProjectVersionDescription]] = wire_field(
        "ProjectVersionDescriptions"
    )
    next_token: Optional[str] = wire_field("NextToken")


@shape
class StartProjectVersionRequest(AwsModel):
    project_version_arn: Optional[str] = wire_field("ProjectVersionArn")
    min_inference_units: Optional[int] = wire_field("MinInferenceUnits")


@shape
class StartProjectVersionResult(AwsModel):
    status: Optional[Union[ProjectVersionStatus, str]] = wire_field("Status")


@shape
class StopProjectVersionRequest(AwsModel):
    project_version_arn: Optional[str] = wire_field("ProjectVersionArn")


@shape
class StopProjectVersionResult(AwsModel):
    status: Optional[Union[ProjectVersionStatus, str]] = wire_field("Status")


@shape
class CreateDatasetRequest(AwsModel):
    dataset_source: Optional[DatasetSource] = wire_field("DatasetSource")
    dataset_type: Optional[Union[DatasetType, str]] = wire_field("DatasetType")
    project_arn: Optional[str] = wire_field("ProjectArn")


@shape
class CreateDatasetResult(AwsModel):
    dataset_arn: Optional[str] = wire_field("DatasetArn")


@shape
class DeleteDatasetRequest(AwsModel):
    dataset_arn: Optional[str] = wire_field("DatasetArn")


@shape
class DeleteDatasetResult(AwsModel):
    pass


@shape
class DescribeDatasetRequest(AwsModel):
    dataset_arn: Optional[str] = wire_field("DatasetArn")


@shape
class DescribeDatasetResult(AwsModel):
    dataset_description: Optional[DatasetDescription] = wire_field("DatasetDescription")


@shape
class DistributeDatasetEntriesRequest(AwsModel):
    datasets: Optional[List[DistributeDataset]] = wire_field("Datasets")


@shape
class DistributeDatasetEntriesResult(AwsModel):
    """Empty on success. Distribution runs asynchronously; poll DescribeDataset."""


@shape
class ListDatasetEntriesRequest(AwsModel):
    dataset_arn: Optional[str] = wire_field("DatasetArn")
    contains_labels: Optional[List[str]] = wire_field("ContainsLabels")
    labeled: Optional[bool] = wire_field("Labeled")
    source_ref_contains: Optional[str] = wire_field("SourceRefContains")
    has_errors: Optional[bool] = wire_field("HasErrors")
    next_token: Optional[str] = wire_field("NextToken")
    max_results: Optional[int] = wire_field("MaxResults")


@shape
class ListDatasetEntriesResult(AwsModel):
    dataset_entries: Optional[List[str]] = wire_field("DatasetEntries")
    next_token: Optional[str] = wire_field("NextToken")


@shape
class ListDatasetLabelsRequest(AwsModel):
    dataset_arn: Optional[str] = wire_field("DatasetArn")
    next_token: Optional[str] = wire_field("NextToken")
    max_results: Optional[int] = wire_field("MaxResults")


@shape
class ListDatasetLabelsResult(AwsModel):
    dataset_label_descriptions: Optional[List[DatasetLabelDescription]] = wire_field(
        "DatasetLabelDescriptions"
    )
    next_token: Optional[str] = wire_field("NextToken")


@shape
class UpdateDatasetEntriesRequest(AwsModel):
    dataset_arn: Optional[str] = wire_field("DatasetArn")
    changes: Optional[DatasetChanges] = wire_field("Changes")


@shape
class UpdateDatasetEntriesResult(AwsModel):
    """Empty on success. The dataset moves to UPDATE_IN_PROGRESS."""


# Tags

@shape
class ListTagsForResourceRequest(AwsModel):
    resource_arn: Optional[str] = wire_field("ResourceArn")


@shape
class ListTagsForResourceResult(AwsModel):
    tags: Optional[Dict[str, str]] = wire_field("Tags")


# Exceptions

class RekognitionServiceError(AmazonServiceError):
    """Base class of errors returned by Amazon Rekognition."""


class AccessDeniedException(RekognitionServiceError):
    ERROR_CODE = "AccessDeniedException"


class HumanLoopQuotaExceededException(RekognitionServiceError):
    ERROR_CODE = "HumanLoopQuotaExceededException"


class IdempotentParameterMismatchException(RekognitionServiceError):
    ERROR_CODE = "IdempotentParameterMismatchException"


class ImageTooLargeException(RekognitionServiceError):
    ERROR_CODE = "ImageTooLargeException"


class InternalServerError(RekognitionServiceError):
    ERROR_CODE = "InternalServerError"


class InvalidImageFormatException(RekognitionServiceError):
    ERROR_CODE = "InvalidImageFormatException"


class InvalidPaginationTokenException(RekognitionServiceError):
    ERROR_CODE = "InvalidPaginationTokenException"


class InvalidParameterException(RekognitionServiceError):
    ERROR_CODE = "InvalidParameterException"


class InvalidS3ObjectException(RekognitionServiceError):
    ERROR_CODE = "InvalidS3ObjectException"


class LimitExceededException(RekognitionServiceError):
    ERROR_CODE = "LimitExceededException"


class ProvisionedThroughputExceededException(RekognitionServiceError):
    ERROR_CODE = "ProvisionedThroughputExceededException"


class ResourceAlreadyExistsException(RekognitionServiceError):
    ERROR_CODE = "ResourceAlreadyExistsException"


class ResourceInUseException(RekognitionServiceError):
    ERROR_CODE = "ResourceInUseException"


class ResourceNotFoundException(RekognitionServiceError):
    ERROR_CODE = "ResourceNotFoundException"


class ResourceNotReadyException(RekognitionServiceError):
    ERROR_CODE = "ResourceNotReadyException"


class ServiceQuotaExceededException(RekognitionServiceError):
    ERROR_CODE = "ServiceQuotaExceededException"


class ThrottlingException(RekognitionServiceError):
    ERROR_CODE = "ThrottlingException"


class VideoTooLargeException(RekognitionServiceError):
    ERROR_CODE = "VideoTooLargeException"


REKOGNITION_EXCEPTIONS = (
    AccessDeniedException,
    HumanLoopQuotaExceededException,
    IdempotentParameterMismatchException,
    ImageTooLargeException,
    InternalServerError,
    InvalidImageFormatException,
    InvalidPaginationTokenException,
    InvalidParameterException,
    InvalidS3ObjectException,
    LimitExceededException,
    ProvisionedThroughputExceededException,
    ResourceAlreadyExistsException,
    ResourceInUseException,
    ResourceNotFoundException,
    ResourceNotReadyException,
    ServiceQuotaExceededException,
    ThrottlingException,
    VideoTooLargeException,
)
