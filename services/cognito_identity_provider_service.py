"""
Amazon Cognito Identity Provider (user pools) client.
"""
from models.cognito_identity_provider import (
    COGNITO_IDENTITY_PROVIDER_EXCEPTIONS, ChangePasswordRequest,
    ChangePasswordResult, CognitoIdentityProviderServiceError,
    ConfirmForgotPasswordRequest, ConfirmForgotPasswordResult,
    ConfirmSignUpRequest, ConfirmSignUpResult, DeleteUserAttributesRequest,
    DeleteUserAttributesResult, DescribeUserPoolRequest,
    DescribeUserPoolResult, ForgotPasswordRequest, ForgotPasswordResult,
    GetUserRequest, GetUserResult, GlobalSignOutRequest, GlobalSignOutResult,
    InitiateAuthRequest, InitiateAuthResult, RespondToAuthChallengeRequest,
    RespondToAuthChallengeResult, SignUpRequest, SignUpResult,
    UpdateUserAttributesRequest, UpdateUserAttributesResult,
)
from services.base_service import BaseAWSService, Operation

CHANGE_PASSWORD = Operation("ChangePassword")
CONFIRM_FORGOT_PASSWORD = Operation("ConfirmForgotPassword")
CONFIRM_SIGN_UP = Operation("ConfirmSignUp")
DELETE_USER_ATTRIBUTES = Operation("DeleteUserAttributes")
DESCRIBE_USER_POOL = Operation("DescribeUserPool")
FORGOT_PASSWORD = Operation("ForgotPassword")
GET_USER = Operation("GetUser")
GLOBAL_SIGN_OUT = Operation("GlobalSignOut")
INITIATE_AUTH = Operation("InitiateAuth")
RESPOND_TO_AUTH_CHALLENGE = Operation("RespondToAuthChallenge")
SIGN_UP = Operation("SignUp")
UPDATE_USER_ATTRIBUTES = Operation("UpdateUserAttributes")


class CognitoIdentityProviderService(BaseAWSService):
    """Client for Amazon Cognito user pools.

    Error responses raise the matching subclass of
    CognitoIdentityProviderServiceError.

    Public app clients call InitiateAuth, SignUp and RespondToAuthChallenge
    unsigned: build the client with AnonymousCredentialsProvider, or set it on
    single requests with with_request_credentials_provider.
    """

    SERVICE_NAME = "AWSCognitoIdentityProvider"
    ENDPOINT_PREFIX = "cognito-idp"
    SIGNING_NAME = "cognito-idp"
    TARGET_PREFIX = "AWSCognitoIdentityProviderService"
    BASE_EXCEPTION = CognitoIdentityProviderServiceError
    EXCEPTIONS = COGNITO_IDENTITY_PROVIDER_EXCEPTIONS

    def change_password(self, request: ChangePasswordRequest) -> ChangePasswordResult:
        return self._invoke(CHANGE_PASSWORD, request, ChangePasswordResult)

    def confirm_forgot_password(
        self,
        request: ConfirmForgotPasswordRequest
    ) -> ConfirmForgotPasswordResult:
        return self._invoke(CONFIRM_FORGOT_PASSWORD, request, ConfirmForgotPasswordResult)

    def confirm_sign_up(self, request: ConfirmSignUpRequest) -> ConfirmSignUpResult:
        return self._invoke(CONFIRM_SIGN_UP, request, ConfirmSignUpResult)

    def delete_user_attributes(
        self,
        request: DeleteUserAttributesRequest
    ) -> DeleteUserAttributesResult:
        return self._invoke(DELETE_USER_ATTRIBUTES, request, DeleteUserAttributesResult)

    def describe_user_pool(self, request: DescribeUserPoolRequest) -> DescribeUserPoolResult:
        return self._invoke(DESCRIBE_USER_POOL, request, DescribeUserPoolResult)

    def forgot_password(self, request: ForgotPasswordRequest) -> ForgotPasswordResult:
        return self._invoke(FORGOT_PASSWORD, request, ForgotPasswordResult)

    def get_user(self, request: GetUserRequest) -> GetUserResult:
        return self._invoke(GET_USER, request, GetUserResult)

    def global_sign_out(self, request: GlobalSignOutRequest) -> GlobalSignOutResult:
        return self._invoke(GLOBAL_SIGN_OUT, request, GlobalSignOutResult)

    def initiate_auth(self, request: InitiateAuthRequest) -> InitiateAuthResult:
        return self._invoke(INITIATE_AUTH, request, InitiateAuthResult)

    def respond_to_auth_challenge(
        self,
        request: RespondToAuthChallengeRequest
    ) -> RespondToAuthChallengeResult:
        """
        Answer a challenge issued by initiate_auth or a previous call.

        Returns:
            Either the next challenge or the authentication result
        """
        return self._invoke(RESPOND_TO_AUTH_CHALLENGE, request, RespondToAuthChallengeResult)

    def sign_up(self, request: SignUpRequest) -> SignUpResult:
        return self._invoke(SIGN_UP, request, SignUpResult)

    def update_user_attributes(
        self,
        request: UpdateUserAttributesRequest
    ) -> UpdateUserAttributesResult:
        return self._invoke(UPDATE_USER_ATTRIBUTES, request, UpdateUserAttributesResult)
