"""
Models of the Amazon Cognito Identity Provider (user pools) API.
"""
from datetime import datetime
from typing import Dict, List, Optional, Union

from models.base import AwsEnum, AwsModel, shape, wire_field
from utils.exceptions import AmazonServiceError


class AuthFlowType(AwsEnum):
    USER_SRP_AUTH = "USER_SRP_AUTH"
    REFRESH_TOKEN_AUTH = "REFRESH_TOKEN_AUTH"
    REFRESH_TOKEN = "REFRESH_TOKEN"
    CUSTOM_AUTH = "CUSTOM_AUTH"
    ADMIN_NO_SRP_AUTH = "ADMIN_NO_SRP_AUTH"
    USER_PASSWORD_AUTH = "USER_PASSWORD_AUTH"
    ADMIN_USER_PASSWORD_AUTH = "ADMIN_USER_PASSWORD_AUTH"


class ChallengeNameType(AwsEnum):
    SMS_MFA = "SMS_MFA"
    SOFTWARE_TOKEN_MFA = "SOFTWARE_TOKEN_MFA"
    SELECT_MFA_TYPE = "SELECT_MFA_TYPE"
    MFA_SETUP = "MFA_SETUP"
    PASSWORD_VERIFIER = "PASSWORD_VERIFIER"
    CUSTOM_CHALLENGE = "CUSTOM_CHALLENGE"
    DEVICE_SRP_AUTH = "DEVICE_SRP_AUTH"
    DEVICE_PASSWORD_VERIFIER = "DEVICE_PASSWORD_VERIFIER"
    ADMIN_NO_SRP_AUTH = "ADMIN_NO_SRP_AUTH"
    NEW_PASSWORD_REQUIRED = "NEW_PASSWORD_REQUIRED"


class DeliveryMediumType(AwsEnum):
    SMS = "SMS"
    EMAIL = "EMAIL"


class UserPoolMfaType(AwsEnum):
    OFF = "OFF"
    ON = "ON"
    OPTIONAL = "OPTIONAL"


# Structures

@shape
class AnalyticsMetadataType(AwsModel):
    analytics_endpoint_id: Optional[str] = wire_field("AnalyticsEndpointId")


@shape
class UserContextDataType(AwsModel):
    encoded_data: Optional[str] = wire_field("EncodedData")


@shape
class AttributeType(AwsModel):
    name: Optional[str] = wire_field("Name")
    value: Optional[str] = wire_field("Value")


@shape
class MFAOptionType(AwsModel):
    delivery_medium: Optional[Union[DeliveryMediumType, str]] = wire_field("DeliveryMedium")
    attribute_name: Optional[str] = wire_field("AttributeName")


@shape
class NewDeviceMetadataType(AwsModel):
    device_key: Optional[str] = wire_field("DeviceKey")
    device_group_key: Optional[str] = wire_field("DeviceGroupKey")


@shape
class AuthenticationResultType(AwsModel):
    access_token: Optional[str] = wire_field("AccessToken")
    expires_in: Optional[int] = wire_field("ExpiresIn")
    token_type: Optional[str] = wire_field("TokenType")
    refresh_token: Optional[str] = wire_field("RefreshToken")
    id_token: Optional[str] = wire_field("IdToken")
    new_device_metadata: Optional[NewDeviceMetadataType] = wire_field("NewDeviceMetadata")


@shape
class CodeDeliveryDetailsType(AwsModel):
    destination: Optional[str] = wire_field("Destination")
    delivery_medium: Optional[Union[DeliveryMediumType, str]] = wire_field("DeliveryMedium")
    attribute_name: Optional[str] = wire_field("AttributeName")


@shape
class DeviceConfigurationType(AwsModel):
    challenge_required_on_new_device: Optional[bool] = wire_field("ChallengeRequiredOnNewDevice")
    device_only_remembered_on_user_prompt: Optional[bool] = wire_field("DeviceOnlyRememberedOnUserPrompt")


@shape
class UserPoolType(AwsModel):
    id: Optional[str] = wire_field("Id")
    name: Optional[str] = wire_field("Name")
    arn: Optional[str] = wire_field("Arn")
    last_modified_date: Optional[datetime] = wire_field("LastModifiedDate")
    creation_date: Optional[datetime] = wire_field("CreationDate")
    mfa_configuration: Optional[Union[UserPoolMfaType, str]] = wire_field("MfaConfiguration")
    device_configuration: Optional[DeviceConfigurationType] = wire_field("DeviceConfiguration")
    estimated_number_of_users: Optional[int] = wire_field("EstimatedNumberOfUsers")
    user_pool_tags: Optional[Dict[str, str]] = wire_field("UserPoolTags")
    auto_verified_attributes: Optional[List[str]] = wire_field("AutoVerifiedAttributes")


# Requests and results

@shape
class InitiateAuthRequest(AwsModel):
    auth_flow: Optional[Union[AuthFlowType, str]] = wire_field("AuthFlow")
    auth_parameters: Optional[Dict[str, str]] = wire_field("AuthParameters")
    client_metadata: Optional[Dict[str, str]] = wire_field("ClientMetadata")
    client_id: Optional[str] = wire_field("ClientId")
    analytics_metadata: Optional[AnalyticsMetadataType] = wire_field("AnalyticsMetadata")
    user_context_data: Optional[UserContextDataType] = wire_field("UserContextData")

    def add_auth_parameters_entry(self, key: str, value: str) -> "InitiateAuthRequest":
        return self._add_entry("auth_parameters", key, value)

    def clear_auth_parameters_entries(self) -> "InitiateAuthRequest":
        return self._clear_entries("auth_parameters")

    def add_client_metadata_entry(self, key: str, value: str) -> "InitiateAuthRequest":
        return self._add_entry("client_metadata", key, value)

    def clear_client_metadata_entries(self) -> "InitiateAuthRequest":
        return self._clear_entries("client_metadata")


@shape
class InitiateAuthResult(AwsModel):
    challenge_name: Optional[Union[ChallengeNameType, str]] = wire_field("ChallengeName")
    session: Optional[str] = wire_field("Session")
    challenge_parameters: Optional[Dict[str, str]] = wire_field("ChallengeParameters")
    authentication_result: Optional[AuthenticationResultType] = wire_field("AuthenticationResult")


@shape
class RespondToAuthChallengeRequest(AwsModel):
    """
    Answer to an authentication challenge.

    ChallengeResponses holds the answers keyed by parameter name, for
    example SMS_MFA_CODE and USERNAME for the SMS_MFA challenge. Session is
    the value returned by the InitiateAuth call or previous challenge.
    """

    client_id: Optional[str] = wire_field("ClientId")
    challenge_name: Optional[Union[ChallengeNameType, str]] = wire_field("ChallengeName")
    session: Optional[str] = wire_field("Session")
    challenge_responses: Optional[Dict[str, str]] = wire_field("ChallengeResponses")
    analytics_metadata: Optional[AnalyticsMetadataType] = wire_field("AnalyticsMetadata")
    user_context_data: Optional[UserContextDataType] = wire_field("UserContextData")
    client_metadata: Optional[Dict[str, str]] = wire_field("ClientMetadata")

    def add_challenge_responses_entry(self, key: str, value: str) -> "RespondToAuthChallengeRequest":
        return self._add_entry("challenge_responses", key, value)

    def clear_challenge_responses_entries(self) -> "RespondToAuthChallengeRequest":
        return self._clear_entries("challenge_responses")

    def add_client_metadata_entry(self, key: str, value: str) -> "RespondToAuthChallengeRequest":
        return self._add_entry("client_metadata", key, value)

    def clear_client_metadata_entries(self) -> "RespondToAuthChallengeRequest":
        return self._clear_entries("client_metadata")


@shape
class RespondToAuthChallengeResult(AwsModel):
    challenge_name: Optional[Union[ChallengeNameType, str]] = wire_field("ChallengeName")
    session: Optional[str] = wire_field("Session")
    challenge_parameters: Optional[Dict[str, str]] = wire_field("ChallengeParameters")
    authentication_result: Optional[AuthenticationResultType] = wire_field("AuthenticationResult")


@shape
class SignUpRequest(AwsModel):
    client_id: Optional[str] = wire_field("ClientId")
    secret_hash: Optional[str] = wire_field("SecretHash")
    username: Optional[str] = wire_field("Username")
    password: Optional[str] = wire_field("Password")
    user_attributes: Optional[List[AttributeType]] = wire_field("UserAttributes")
    validation_data: Optional[List[AttributeType]] = wire_field("ValidationData")
    analytics_metadata: Optional[AnalyticsMetadataType] = wire_field("AnalyticsMetadata")
    user_context_data: Optional[UserContextDataType] = wire_field("UserContextData")
    client_metadata: Optional[Dict[str, str]] = wire_field("ClientMetadata")

    def add_client_metadata_entry(self, key: str, value: str) -> "SignUpRequest":
        return self._add_entry("client_metadata", key, value)

    def clear_client_metadata_entries(self) -> "SignUpRequest":
        return self._clear_entries("client_metadata")


@shape
class SignUpResult(AwsModel):
    user_confirmed: Optional[bool] = wire_field("UserConfirmed")
    code_delivery_details: Optional[CodeDeliveryDetailsType] = wire_field("CodeDeliveryDetails")
    user_sub: Optional[str] = wire_field("UserSub")


@shape
class ConfirmSignUpRequest(AwsModel):
    client_id: Optional[str] = wire_field("ClientId")
    secret_hash: Optional[str] = wire_field("SecretHash")
    username: Optional[str] = wire_field("Username")
    confirmation_code: Optional[str] = wire_field("ConfirmationCode")
    force_alias_creation: Optional[bool] = wire_field("ForceAliasCreation")
    analytics_metadata: Optional[AnalyticsMetadataType] = wire_field("AnalyticsMetadata")
    user_context_data: Optional[UserContextDataType] = wire_field("UserContextData")
    client_metadata: Optional[Dict[str, str]] = wire_field("ClientMetadata")

    def add_client_metadata_entry(self, key: str, value: str) -> "ConfirmSignUpRequest":
        return self._add_entry("client_metadata", key, value)

    def clear_client_metadata_entries(self) -> "ConfirmSignUpRequest":
        return self._clear_entries("client_metadata")


@shape
class ConfirmSignUpResult(AwsModel):
    pass


@shape
class ForgotPasswordRequest(AwsModel):
    client_id: Optional[str] = wire_field("ClientId")
    secret_hash: Optional[str] = wire_field("SecretHash")
    user_context_data: Optional[UserContextDataType] = wire_field("UserContextData")
    username: Optional[str] = wire_field("Username")
    analytics_metadata: Optional[AnalyticsMetadataType] = wire_field("AnalyticsMetadata")
    client_metadata: Optional[Dict[str, str]] = wire_field("ClientMetadata")

    def add_client_metadata_entry(self, key: str, value: str) -> "ForgotPasswordRequest":
        return self._add_entry("client_metadata", key, value)

    def clear_client_metadata_entries(self) -> "ForgotPasswordRequest":
        return self._clear_entries("client_metadata")


@shape
class ForgotPasswordResult(AwsModel):
    code_delivery_details: Optional[CodeDeliveryDetailsType] = wire_field("CodeDeliveryDetails")


@shape
class ConfirmForgotPasswordRequest(AwsModel):
    client_id: Optional[str] = wire_field("ClientId")
    secret_hash: Optional[str] = wire_field("SecretHash")
    username: Optional[str] = wire_field("Username")
    confirmation_code: Optional[str] = wire_field("ConfirmationCode")
    password: Optional[str] = wire_field("Password")
    analytics_metadata: Optional[AnalyticsMetadataType] = wire_field("AnalyticsMetadata")
    user_context_data: Optional[UserContextDataType] = wire_field("UserContextData")
    client_metadata: Optional[Dict[str, str]] = wire_field("ClientMetadata")

    def add_client_metadata_entry(self, key: str, value: str) -> "ConfirmForgotPasswordRequest":
        return self._add_entry("client_metadata", key, value)

    def clear_client_metadata_entries(self) -> "ConfirmForgotPasswordRequest":
        return self._clear_entries("client_metadata")


@shape
class ConfirmForgotPasswordResult(AwsModel):
    pass


@shape
class ChangePasswordRequest(AwsModel):
    previous_password: Optional[str] = wire_field("PreviousPassword")
    proposed_password: Optional[str] = wire_field("ProposedPassword")
    access_token: Optional[str] = wire_field("AccessToken")


@shape
class ChangePasswordResult(AwsModel):
    pass


@shape
class GetUserRequest(AwsModel):
    access_token: Optional[str] = wire_field("AccessToken")


@shape
class GetUserResult(AwsModel):
    username: Optional[str] = wire_field("Username")
    user_attributes: Optional[List[AttributeType]] = wire_field("UserAttributes")
    mfa_options: Optional[List[MFAOptionType]] = wire_field("MFAOptions")
    preferred_mfa_setting: Optional[str] = wire_field("PreferredMfaSetting")
    user_mfa_setting_list: Optional[List[str]] = wire_field("UserMFASettingList")


@shape
class DeleteUserAttributesRequest(AwsModel):
    user_attribute_names: Optional[List[str]] = wire_field("UserAttributeNames")
    access_token: Optional[str] = wire_field("AccessToken")


@shape
class DeleteUserAttributesResult(AwsModel):
    pass


@shape
class UpdateUserAttributesRequest(AwsModel):
    user_attributes: Optional[List[AttributeType]] = wire_field("UserAttributes")
    access_token: Optional[str] = wire_field("AccessToken")
    client_metadata: Optional[Dict[str, str]] = wire_field("ClientMetadata")

    def add_client_metadata_entry(self, key: str, value: str) -> "UpdateUserAttributesRequest":
        return self._add_entry("client_metadata", key, value)

    def clear_client_metadata_entries(self) -> "UpdateUserAttributesRequest":
        return self._clear_entries("client_metadata")


@shape
class UpdateUserAttributesResult(AwsModel):
    code_delivery_details_list: Optional[List[CodeDeliveryDetailsType]] = wire_field("CodeDeliveryDetailsList")


@shape
class GlobalSignOutRequest(AwsModel):
    access_token: Optional[str] = wire_field("AccessToken")


@shape
class GlobalSignOutResult(AwsModel):
    pass


@shape
class DescribeUserPoolRequest(AwsModel):
    user_pool_id: Optional[str] = wire_field("UserPoolId")


@shape
class DescribeUserPoolResult(AwsModel):
    user_pool: Optional[UserPoolType] = wire_field("UserPool")


# Exceptions

class CognitoIdentityProviderServiceError(AmazonServiceError):
    """Base class of errors returned by Amazon Cognito user pools."""


class AliasExistsException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "AliasExistsException"


class CodeDeliveryFailureException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "CodeDeliveryFailureException"


class CodeMismatchException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "CodeMismatchException"


class ConcurrentModificationException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "ConcurrentModificationException"


class EnableSoftwareTokenMFAException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "EnableSoftwareTokenMFAException"


class ExpiredCodeException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "ExpiredCodeException"


class ForbiddenException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "ForbiddenException"


class InternalErrorException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "InternalErrorException"


class InvalidEmailRoleAccessPolicyException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "InvalidEmailRoleAccessPolicyException"


class InvalidLambdaResponseException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "InvalidLambdaResponseException"


class InvalidParameterException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "InvalidParameterException"


class InvalidPasswordException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "InvalidPasswordException"


class InvalidSmsRoleAccessPolicyException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "InvalidSmsRoleAccessPolicyException"


class InvalidSmsRoleTrustRelationshipException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "InvalidSmsRoleTrustRelationshipException"


class InvalidUserPoolConfigurationException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "InvalidUserPoolConfigurationException"


class LimitExceededException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "LimitExceededException"


class MFAMethodNotFoundException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "MFAMethodNotFoundException"


class NotAuthorizedException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "NotAuthorizedException"


class PasswordResetRequiredException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "PasswordResetRequiredException"


class ResourceNotFoundException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "ResourceNotFoundException"


class SoftwareTokenMFANotFoundException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "SoftwareTokenMFANotFoundException"


class TooManyFailedAttemptsException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "TooManyFailedAttemptsException"


class TooManyRequestsException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "TooManyRequestsException"


class UnexpectedLambdaException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "UnexpectedLambdaException"


class UnsupportedUserStateException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "UnsupportedUserStateException"


class UserLambdaValidationException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "UserLambdaValidationException"


class UserNotConfirmedException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "UserNotConfirmedException"


class UserNotFoundException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "UserNotFoundException"


class UsernameExistsException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "UsernameExistsException"


class UserPoolTaggingException(CognitoIdentityProviderServiceError):
    ERROR_CODE = "UserPoolTaggingException"


COGNITO_IDENTITY_PROVIDER_EXCEPTIONS = (
    AliasExistsException,
    CodeDeliveryFailureException,
    CodeMismatchException,
    ConcurrentModificationException,
    EnableSoftwareTokenMFAException,
    ExpiredCodeException,
    ForbiddenException,
    InternalErrorException,
    InvalidEmailRoleAccessPolicyException,
    InvalidLambdaResponseException,
    InvalidParameterException,
    InvalidPasswordException,
    InvalidSmsRoleAccessPolicyException,
    InvalidSmsRoleTrustRelationshipException,
    InvalidUserPoolConfigurationException,
    LimitExceededException,
    MFAMethodNotFoundException,
    NotAuthorizedException,
    PasswordResetRequiredException,
    ResourceNotFoundException,
    SoftwareTokenMFANotFoundException,
    TooManyFailedAttemptsException,
    TooManyRequestsException,
    UnexpectedLambdaException,
    UnsupportedUserStateException,
    UserLambdaValidationException,
    UserNotConfirmedException,
    UserNotFoundException,
    UsernameExistsException,
    UserPoolTaggingException,
)
