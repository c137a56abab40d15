"""
Service clients for AWS JSON APIs.

Each client wraps one AWS service: it marshalls request models, signs and
sends them, and returns result models or raises the service's exceptions.
"""
from services.cognito_identity_provider_service import CognitoIdentityProviderService
from services.kinesis_video_archived_media_service import KinesisVideoArchivedMediaService
from services.kms_service import KMSService
from services.rekognition_service import RekognitionService

__all__ = [
    "CognitoIdentityProviderService",
    "KMSService",
    "KinesisVideoArchivedMediaService",
    "RekognitionService",
]
