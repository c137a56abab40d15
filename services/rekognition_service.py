"""
Amazon Rekognition client.
"""
from typing import Optional

from models.rekognition import (
    REKOGNITION_EXCEPTIONS, CompareFacesRequest, CompareFacesResult,
    CreateCollectionRequest, CreateCollectionResult, CreateDatasetRequest,
    CreateDatasetResult, CreateProjectRequest, CreateProjectResult,
    CreateProjectVersionRequest, CreateProjectVersionResult,
    CreateStreamProcessorRequest, CreateStreamProcessorResult,
    DeleteCollectionRequest, DeleteCollectionResult, DeleteDatasetRequest,
    DeleteDatasetResult, DeleteFacesRequest, DeleteFacesResult,
    DeleteProjectRequest, DeleteProjectResult, DeleteProjectVersionRequest,
    DeleteProjectVersionResult, DeleteStreamProcessorRequest,
    DeleteStreamProcessorResult, DescribeCollectionRequest,
    DescribeCollectionResult, DescribeDatasetRequest, DescribeDatasetResult,
    DescribeProjectVersionsRequest, DescribeProjectVersionsResult,
    DescribeProjectsRequest, DescribeProjectsResult,
    DescribeStreamProcessorRequest, DescribeStreamProcessorResult,
    DetectCustomLabelsRequest, DetectCustomLabelsResult, DetectFacesRequest,
    DetectFacesResult, DetectLabelsRequest, DetectLabelsResult,
    DetectModerationLabelsRequest, DetectModerationLabelsResult,
    DetectProtectiveEquipmentRequest, DetectProtectiveEquipmentResult,
    DetectTextRequest, DetectTextResult, DistributeDatasetEntriesRequest,
    DistributeDatasetEntriesResult, GetCelebrityInfoRequest,
    GetCelebrityInfoResult, GetCelebrityRecognitionRequest,
    GetCelebrityRecognitionResult, GetContentModerationRequest,
    GetContentModerationResult, GetFaceDetectionRequest, GetFaceDetectionResult,
    GetFaceSearchRequest, GetFaceSearchResult, GetLabelDetectionRequest,
    GetLabelDetectionResult, GetPersonTrackingRequest, GetPersonTrackingResult,
    GetSegmentDetectionRequest, GetSegmentDetectionResult,
    GetTextDetectionRequest, GetTextDetectionResult, IndexFacesRequest,
    IndexFacesResult, ListCollectionsRequest, ListCollectionsResult,
    ListDatasetEntriesRequest, ListDatasetEntriesResult,
    ListDatasetLabelsRequest, ListDatasetLabelsResult, ListFacesRequest,
    ListFacesResult, ListStreamProcessorsRequest, ListStreamProcessorsResult,
    ListTagsForResourceRequest, ListTagsForResourceResult,
    RecognizeCelebritiesRequest, RecognizeCelebritiesResult,
    RekognitionServiceError, SearchFacesByImageRequest,
    SearchFacesByImageResult, SearchFacesRequest, SearchFacesResult,
    StartCelebrityRecognitionRequest, StartCelebrityRecognitionResult,
    StartContentModerationRequest, StartContentModerationResult,
    StartFaceDetectionRequest, StartFaceDetectionResult, StartFaceSearchRequest,
    StartFaceSearchResult, StartLabelDetectionRequest, StartLabelDetectionResult,
    StartPersonTrackingRequest, StartPersonTrackingResult,
    StartProjectVersionRequest, StartProjectVersionResult,
    StartSegmentDetectionRequest, StartSegmentDetectionResult,
    StartStreamProcessorRequest, StartStreamProcessorResult,
    StartTextDetectionRequest, StartTextDetectionResult,
    StopProjectVersionRequest, StopProjectVersionResult,
    StopStreamProcessorRequest, StopStreamProcessorResult, TagResourceRequest,
    TagResourceResult, UntagResourceRequest, UntagResourceResult,
    UpdateDatasetEntriesRequest, UpdateDatasetEntriesResult,
    UpdateStreamProcessorRequest, UpdateStreamProcessorResult,
)
from services.base_service import BaseAWSService, Operation

COMPARE_FACES = Operation("CompareFaces")
CREATE_COLLECTION = Operation("CreateCollection")
CREATE_DATASET = Operation("CreateDataset")
CREATE_PROJECT = Operation("CreateProject")
CREATE_PROJECT_VERSION = Operation("CreateProjectVersion")
CREATE_STREAM_PROCESSOR = Operation("CreateStreamProcessor")
DELETE_COLLECTION = Operation("DeleteCollection")
DELETE_DATASET = Operation("DeleteDataset")
DELETE_FACES = Operation("DeleteFaces")
DELETE_PROJECT = Operation("DeleteProject")
DELETE_PROJECT_VERSION = Operation("DeleteProjectVersion")
DELETE_STREAM_PROCESSOR = Operation("DeleteStreamProcessor")
DESCRIBE_COLLECTION = Operation("DescribeCollection")
DESCRIBE_DATASET = Operation("DescribeDataset")
DESCRIBE_PROJECT_VERSIONS = Operation("DescribeProjectVersions")
DESCRIBE_PROJECTS = Operation("DescribeProjects")
DESCRIBE_STREAM_PROCESSOR = Operation("DescribeStreamProcessor")
DETECT_CUSTOM_LABELS = Operation("DetectCustomLabels")
DETECT_FACES = Operation("DetectFaces")
DETECT_LABELS = Operation("DetectLabels")
DETECT_MODERATION_LABELS = Operation("DetectModerationLabels")
DETECT_PROTECTIVE_EQUIPMENT = Operation("DetectProtectiveEquipment")
DETECT_TEXT = Operation("DetectText")
DISTRIBUTE_DATASET_ENTRIES = Operation("DistributeDatasetEntries")
GET_CELEBRITY_INFO = Operation("GetCelebrityInfo")
GET_CELEBRITY_RECOGNITION = Operation("GetCelebrityRecognition")
GET_CONTENT_MODERATION = Operation("GetContentModeration")
GET_FACE_DETECTION = Operation("GetFaceDetection")
GET_FACE_SEARCH = Operation("GetFaceSearch")
GET_LABEL_DETECTION = Operation("GetLabelDetection")
GET_PERSON_TRACKING = Operation("GetPersonTracking")
GET_SEGMENT_DETECTION = Operation("GetSegmentDetection")
GET_TEXT_DETECTION = Operation("GetTextDetection")
INDEX_FACES = Operation("IndexFaces")
LIST_COLLECTIONS = Operation("ListCollections")
LIST_DATASET_ENTRIES = Operation("ListDatasetEntries")
LIST_DATASET_LABELS = Operation("ListDatasetLabels")
LIST_FACES = Operation("ListFaces")
LIST_STREAM_PROCESSORS = Operation("ListStreamProcessors")
LIST_TAGS_FOR_RESOURCE = Operation("ListTagsForResource")
RECOGNIZE_CELEBRITIES = Operation("RecognizeCelebrities")
SEARCH_FACES = Operation("SearchFaces")
SEARCH_FACES_BY_IMAGE = Operation("SearchFacesByImage")
START_CELEBRITY_RECOGNITION = Operation("StartCelebrityRecognition")
START_CONTENT_MODERATION = Operation("StartContentModeration")
START_FACE_DETECTION = Operation("StartFaceDetection")
START_FACE_SEARCH = Operation("StartFaceSearch")
START_LABEL_DETECTION = Operation("StartLabelDetection")
START_PERSON_TRACKING = Operation("StartPersonTracking")
START_PROJECT_VERSION = Operation("StartProjectVersion")
START_SEGMENT_DETECTION = Operation("StartSegmentDetection")
START_STREAM_PROCESSOR = Operation("StartStreamProcessor")
START_TEXT_DETECTION = Operation("StartTextDetection")
STOP_PROJECT_VERSION = Operation("StopProjectVersion")
STOP_STREAM_PROCESSOR = Operation("StopStreamProcessor")
TAG_RESOURCE = Operation("TagResource")
UNTAG_RESOURCE = Operation("UntagResource")
UPDATE_DATASET_ENTRIES = Operation("UpdateDatasetEntries")
UPDATE_STREAM_PROCESSOR = Operation("UpdateStreamProcessor")


class RekognitionService(BaseAWSService):
    """Client for Amazon Rekognition image, collection and video APIs."""

    SERVICE_NAME = "AmazonRekognition"
    ENDPOINT_PREFIX = "rekognition"
    SIGNING_NAME = "rekognition"
    TARGET_PREFIX = "RekognitionService"
    BASE_EXCEPTION = RekognitionServiceError
    EXCEPTIONS = REKOGNITION_EXCEPTIONS

    # Image analysis

    def compare_faces(self, request: CompareFacesRequest) -> CompareFacesResult:
        """
        Compare the largest face of the source image with faces of the target.

        Images are sent inline as base64 bytes or referenced in S3.
        """
        return self._invoke(COMPARE_FACES, request, CompareFacesResult)

    def detect_faces(self, request: DetectFacesRequest) -> DetectFacesResult:
        return self._invoke(DETECT_FACES, request, DetectFacesResult)

    def detect_labels(self, request: DetectLabelsRequest) -> DetectLabelsResult:
        return self._invoke(DETECT_LABELS, request, DetectLabelsResult)

    def detect_moderation_labels(
        self,
        request: DetectModerationLabelsRequest
    ) -> DetectModerationLabelsResult:
        """
        Detect unsafe content in an image.

        When a HumanLoopConfig is given the result may carry the activation
        output of an Amazon Augmented AI review.
        """
        return self._invoke(DETECT_MODERATION_LABELS, request, DetectModerationLabelsResult)

    def detect_protective_equipment(
        self,
        request: DetectProtectiveEquipmentRequest
    ) -> DetectProtectiveEquipmentResult:
        return self._invoke(DETECT_PROTECTIVE_EQUIPMENT, request, DetectProtectiveEquipmentResult)

    def detect_text(self, request: DetectTextRequest) -> DetectTextResult:
        return self._invoke(DETECT_TEXT, request, DetectTextResult)

    def recognize_celebrities(
        self,
        request: RecognizeCelebritiesRequest
    ) -> RecognizeCelebritiesResult:
        return self._invoke(RECOGNIZE_CELEBRITIES, request, RecognizeCelebritiesResult)

    def get_celebrity_info(self, request: GetCelebrityInfoRequest) -> GetCelebrityInfoResult:
        return self._invoke(GET_CELEBRITY_INFO, request, GetCelebrityInfoResult)

    # Collections and faces

    def create_collection(self, request: CreateCollectionRequest) -> CreateCollectionResult:
        return self._invoke(CREATE_COLLECTION, request, CreateCollectionResult)

    def delete_collection(self, request: DeleteCollectionRequest) -> DeleteCollectionResult:
        return self._invoke(DELETE_COLLECTION, request, DeleteCollectionResult)

    def describe_collection(self, request: DescribeCollectionRequest) -> DescribeCollectionResult:
        return self._invoke(DESCRIBE_COLLECTION, request, DescribeCollectionResult)

    def list_collections(
        self,
        request: Optional[ListCollectionsRequest] = None
    ) -> ListCollectionsResult:
        """
        List the collection IDs of the account.

        Args:
            request: Paging parameters; omit to fetch the first page

        Returns:
            Result with collection IDs, face model versions and NextToken
        """
        if request is None:
            request = ListCollectionsRequest()
        return self._invoke(LIST_COLLECTIONS, request, ListCollectionsResult)

    def index_faces(self, request: IndexFacesRequest) -> IndexFacesResult:
        return self._invoke(INDEX_FACES, request, IndexFacesResult)

    def delete_faces(self, request: DeleteFacesRequest) -> DeleteFacesResult:
        return self._invoke(DELETE_FACES, request, DeleteFacesResult)

    def list_faces(self, request: ListFacesRequest) -> ListFacesResult:
        return self._invoke(LIST_FACES, request, ListFacesResult)

    def search_faces(self, request: SearchFacesRequest) -> SearchFacesResult:
        """Search a collection for faces matching a face ID already indexed in it."""
        return self._invoke(SEARCH_FACES, request, SearchFacesResult)

    def search_faces_by_image(
        self,
        request: SearchFacesByImageRequest
    ) -> SearchFacesByImageResult:
        return self._invoke(SEARCH_FACES_BY_IMAGE, request, SearchFacesByImageResult)

    # Stored video
    #
    # Start* calls return a JobId. The matching Get* call pages through the
    # results once the job reports SUCCEEDED on its notification channel.

    def start_celebrity_recognition(
        self,
        request: StartCelebrityRecognitionRequest
    ) -> StartCelebrityRecognitionResult:
        return self._invoke(START_CELEBRITY_RECOGNITION, request, StartCelebrityRecognitionResult)

    def get_celebrity_recognition(
        self,
        request: GetCelebrityRecognitionRequest
    ) -> GetCelebrityRecognitionResult:
        return self._invoke(GET_CELEBRITY_RECOGNITION, request, GetCelebrityRecognitionResult)

    def start_content_moderation(
        self,
        request: StartContentModerationRequest
    ) -> StartContentModerationResult:
        return self._invoke(START_CONTENT_MODERATION, request, StartContentModerationResult)

    def get_content_moderation(
        self,
        request: GetContentModerationRequest
    ) -> GetContentModerationResult:
        return self._invoke(GET_CONTENT_MODERATION, request, GetContentModerationResult)

    def start_face_detection(self, request: StartFaceDetectionRequest) -> StartFaceDetectionResult:
        return self._invoke(START_FACE_DETECTION, request, StartFaceDetectionResult)

    def get_face_detection(self, request: GetFaceDetectionRequest) -> GetFaceDetectionResult:
        return self._invoke(GET_FACE_DETECTION, request, GetFaceDetectionResult)

    def start_face_search(self, request: StartFaceSearchRequest) -> StartFaceSearchResult:
        return self._invoke(START_FACE_SEARCH, request, StartFaceSearchResult)

    def get_face_search(self, request: GetFaceSearchRequest) -> GetFaceSearchResult:
        return self._invoke(GET_FACE_SEARCH, request, GetFaceSearchResult)

    def start_label_detection(
        self,
        request: StartLabelDetectionRequest
    ) -> StartLabelDetectionResult:
        return self._invoke(START_LABEL_DETECTION, request, StartLabelDetectionResult)

    def get_label_detection(self, request: GetLabelDetectionRequest) -> GetLabelDetectionResult:
        return self._invoke(GET_LABEL_DETECTION, request, GetLabelDetectionResult)

    def start_person_tracking(
        self,
        request: StartPersonTrackingRequest
    ) -> StartPersonTrackingResult:
        return self._invoke(START_PERSON_TRACKING, request, StartPersonTrackingResult)

    def get_person_tracking(self, request: GetPersonTrackingRequest) -> GetPersonTrackingResult:
        return self._invoke(GET_PERSON_TRACKING, request, GetPersonTrackingResult)

    def start_segment_detection(
        self,
        request: StartSegmentDetectionRequest
    ) -> StartSegmentDetectionResult:
        return self._invoke(START_SEGMENT_DETECTION, request, StartSegmentDetectionResult)

    def get_segment_detection(
        self,
        request: GetSegmentDetectionRequest
    ) -> GetSegmentDetectionResult:
        return self._invoke(GET_SEGMENT_DETECTION, request, GetSegmentDetectionResult)

    def start_text_detection(self, request: StartTextDetectionRequest) -> StartTextDetectionResult:
        return self._invoke(START_TEXT_DETECTION, request, StartTextDetectionResult)

    def get_text_detection(self, request: GetTextDetectionRequest) -> GetTextDetectionResult:
        return self._invoke(GET_TEXT_DETECTION, request, GetTextDetectionResult)

    # Stream processors

    def create_stream_processor(
        self,
        request: CreateStreamProcessorRequest
    ) -> CreateStreamProcessorResult:
        return self._invoke(CREATE_STREAM_PROCESSOR, request, CreateStreamProcessorResult)

    def delete_stream_processor(
        self,
        request: DeleteStreamProcessorRequest
    ) -> DeleteStreamProcessorResult:
        """Delete a stopped stream processor. The result carries no fields."""
        return self._invoke(DELETE_STREAM_PROCESSOR, request, DeleteStreamProcessorResult)

    def describe_stream_processor(
        self,
        request: DescribeStreamProcessorRequest
    ) -> DescribeStreamProcessorResult:
        return self._invoke(DESCRIBE_STREAM_PROCESSOR, request, DescribeStreamProcessorResult)

    def list_stream_processors(
        self,
        request: Optional[ListStreamProcessorsRequest] = None
    ) -> ListStreamProcessorsResult:
        """
        List the stream processors of the account.

        Args:
            request: Paging parameters; omit to fetch the first page

        Returns:
            Result with stream processor names, statuses and NextToken
        """
        if request is None:
            request = ListStreamProcessorsRequest()
        return self._invoke(LIST_STREAM_PROCESSORS, request, ListStreamProcessorsResult)

    def start_stream_processor(
        self,
        request: StartStreamProcessorRequest
    ) -> StartStreamProcessorResult:
        return self._invoke(START_STREAM_PROCESSOR, request, StartStreamProcessorResult)

    def stop_stream_processor(
        self,
        request: StopStreamProcessorRequest
    ) -> StopStreamProcessorResult:
        """Stop a running stream processor. The result carries no fields."""
        return self._invoke(STOP_STREAM_PROCESSOR, request, StopStreamProcessorResult)

    def update_stream_processor(
        self,
        request: UpdateStreamProcessorRequest
    ) -> UpdateStreamProcessorResult:
        """Change settings of a stream processor. The result carries no fields."""
        return self._invoke(UPDATE_STREAM_PROCESSOR, request, UpdateStreamProcessorResult)

    # Custom labels

    def create_project(self, request: CreateProjectRequest) -> CreateProjectResult:
        return self._invoke(CREATE_PROJECT, request, CreateProjectResult)

    def delete_project(self, request: DeleteProjectRequest) -> DeleteProjectResult:
        return self._invoke(DELETE_PROJECT, request, DeleteProjectResult)

    def describe_projects(
        self,
        request: Optional[DescribeProjectsRequest] = None
    ) -> DescribeProjectsResult:
        """
        Describe the Custom Labels projects of the account.

        Args:
            request: Paging and name filter; omit to fetch the first page of
                every project

        Returns:
            Result with project descriptions and NextToken
        """
        if request is None:
            request = DescribeProjectsRequest()
        return self._invoke(DESCRIBE_PROJECTS, request, DescribeProjectsResult)

    def create_project_version(
        self,
        request: CreateProjectVersionRequest
    ) -> CreateProjectVersionResult:
        """Start training a new model version of a project."""
        return self._invoke(CREATE_PROJECT_VERSION, request, CreateProjectVersionResult)

    def delete_project_version(
        self,
        request: DeleteProjectVersionRequest
    ) -> DeleteProjectVersionResult:
        return self._invoke(DELETE_PROJECT_VERSION, request, DeleteProjectVersionResult)

    def describe_project_versions(
        self,
        request: DescribeProjectVersionsRequest
    ) -> DescribeProjectVersionsResult:
        return self._invoke(DESCRIBE_PROJECT_VERSIONS, request, DescribeProjectVersionsResult)

    def start_project_version(
        self,
        request: StartProjectVersionRequest
    ) -> StartProjectVersionResult:
        """Start running a trained model. Billing runs until the version is stopped."""
        return self._invoke(START_PROJECT_VERSION, request, StartProjectVersionResult)

    def stop_project_version(self, request: StopProjectVersionRequest) -> StopProjectVersionResult:
        return self._invoke(STOP_PROJECT_VERSION, request, StopProjectVersionResult)

    def detect_custom_labels(self, request: DetectCustomLabelsRequest) -> DetectCustomLabelsResult:
        return self._invoke(DETECT_CUSTOM_LABELS, request, DetectCustomLabelsResult)

    def create_dataset(self, request: CreateDatasetRequest) -> CreateDatasetResult:
        return self._invoke(CREATE_DATASET, request, CreateDatasetResult)

    def delete_dataset(self, request: DeleteDatasetRequest) -> DeleteDatasetResult:
        """Delete a train or test dataset. The result carries no fields."""
        return self._invoke(DELETE_DATASET, request, DeleteDatasetResult)

    def describe_dataset(self, request: DescribeDatasetRequest) -> DescribeDatasetResult:
        return self._invoke(DESCRIBE_DATASET, request, DescribeDatasetResult)

    def distribute_dataset_entries(
        self,
        request: DistributeDatasetEntriesRequest
    ) -> DistributeDatasetEntriesResult:
        """
        Split the training dataset of a project into a train and a test dataset.

        The call is asynchronous and the result carries no fields; poll
        describe_dataset for the status of both datasets.
        """
        return self._invoke(DISTRIBUTE_DATASET_ENTRIES, request, DistributeDatasetEntriesResult)

    def list_dataset_entries(self, request: ListDatasetEntriesRequest) -> ListDatasetEntriesResult:
        return self._invoke(LIST_DATASET_ENTRIES, request, ListDatasetEntriesResult)

    def list_dataset_labels(self, request: ListDatasetLabelsRequest) -> ListDatasetLabelsResult:
        return self._invoke(LIST_DATASET_LABELS, request, ListDatasetLabelsResult)

    def update_dataset_entries(
        self,
        request: UpdateDatasetEntriesRequest
    ) -> UpdateDatasetEntriesResult:
        """
        Add or update JSON Lines entries of a dataset.

        The entries travel as the GroundTruth blob of DatasetChanges. The
        result carries no fields.
        """
        return self._invoke(UPDATE_DATASET_ENTRIES, request, UpdateDatasetEntriesResult)

    # Tags

    def list_tags_for_resource(
        self,
        request: ListTagsForResourceRequest
    ) -> ListTagsForResourceResult:
        return self._invoke(LIST_TAGS_FOR_RESOURCE, request, ListTagsForResourceResult)

    def tag_resource(self, request: TagResourceRequest) -> TagResourceResult:
        """Add tags to a collection, stream processor or model. The result carries no fields."""
        return self._invoke(TAG_RESOURCE, request, TagResourceResult)

    def untag_resource(self, request: UntagResourceRequest) -> UntagResourceResult:
        """Remove tags by key. The result carries no fields."""
        return self._invoke(UNTAG_RESOURCE, request, UntagResourceResult)
