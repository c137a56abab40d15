"""
AWS Key Management Service client.
"""
from typing import Optional

from models.kms import (
    CancelKeyDeletionRequest, CancelKeyDeletionResult,
    ConnectCustomKeyStoreRequest, ConnectCustomKeyStoreResult,
    CreateAliasRequest, CreateCustomKeyStoreRequest, CreateCustomKeyStoreResult,
    CreateGrantRequest, CreateGrantResult, CreateKeyRequest, CreateKeyResult,
    DecryptRequest, DecryptResult, DeleteAliasRequest,
    DeleteCustomKeyStoreRequest, DeleteCustomKeyStoreResult,
    DeleteImportedKeyMaterialRequest, DescribeCustomKeyStoresRequest,
    DescribeCustomKeyStoresResult, DescribeKeyRequest, DescribeKeyResult,
    DisableKeyRequest, DisableKeyRotationRequest,
    DisconnectCustomKeyStoreRequest, DisconnectCustomKeyStoreResult,
    EnableKeyRequest, EnableKeyRotationRequest, EncryptRequest, EncryptResult,
    GenerateDataKeyPairRequest, GenerateDataKeyPairResult,
    GenerateDataKeyPairWithoutPlaintextRequest,
    GenerateDataKeyPairWithoutPlaintextResult, GenerateDataKeyRequest,
    GenerateDataKeyResult, GenerateDataKeyWithoutPlaintextRequest,
    GenerateDataKeyWithoutPlaintextResult, GenerateRandomRequest,
    GenerateRandomResult, GetKeyPolicyRequest, GetKeyPolicyResult,
    GetKeyRotationStatusRequest, GetKeyRotationStatusResult,
    GetParametersForImportRequest, GetParametersForImportResult,
    GetPublicKeyRequest, GetPublicKeyResult, ImportKeyMaterialRequest,
    ImportKeyMaterialResult, KMS_EXCEPTIONS, KMSServiceError,
    ListAliasesRequest, ListAliasesResult, ListGrantsRequest, ListGrantsResult,
    ListKeyPoliciesRequest, ListKeyPoliciesResult, ListKeysRequest,
    ListKeysResult, ListResourceTagsRequest, ListResourceTagsResult,
    ListRetirableGrantsRequest, ListRetirableGrantsResult, PutKeyPolicyRequest,
    ReEncryptRequest, ReEncryptResult, RetireGrantRequest, RevokeGrantRequest,
    ScheduleKeyDeletionRequest, ScheduleKeyDeletionResult, SignRequest,
    SignResult, TagResourceRequest, UntagResourceRequest, UpdateAliasRequest,
    UpdateCustomKeyStoreRequest, UpdateCustomKeyStoreResult,
    UpdateKeyDescriptionRequest, VerifyRequest, VerifyResult,
)
from services.base_service import BaseAWSService, Operation

CANCEL_KEY_DELETION = Operation("CancelKeyDeletion")
CONNECT_CUSTOM_KEY_STORE = Operation("ConnectCustomKeyStore")
CREATE_ALIAS = Operation("CreateAlias")
CREATE_CUSTOM_KEY_STORE = Operation("CreateCustomKeyStore")
CREATE_GRANT = Operation("CreateGrant")
CREATE_KEY = Operation("CreateKey")
DECRYPT = Operation("Decrypt")
DELETE_ALIAS = Operation("DeleteAlias")
DELETE_CUSTOM_KEY_STORE = Operation("DeleteCustomKeyStore")
DELETE_IMPORTED_KEY_MATERIAL = Operation("DeleteImportedKeyMaterial")
DESCRIBE_CUSTOM_KEY_STORES = Operation("DescribeCustomKeyStores")
DESCRIBE_KEY = Operation("DescribeKey")
DISABLE_KEY = Operation("DisableKey")
DISABLE_KEY_ROTATION = Operation("DisableKeyRotation")
DISCONNECT_CUSTOM_KEY_STORE = Operation("DisconnectCustomKeyStore")
ENABLE_KEY = Operation("EnableKey")
ENABLE_KEY_ROTATION = Operation("EnableKeyRotation")
ENCRYPT = Operation("Encrypt")
GENERATE_DATA_KEY = Operation("GenerateDataKey")
GENERATE_DATA_KEY_PAIR = Operation("GenerateDataKeyPair")
GENERATE_DATA_KEY_PAIR_WITHOUT_PLAINTEXT = Operation("GenerateDataKeyPairWithoutPlaintext")
GENERATE_DATA_KEY_WITHOUT_PLAINTEXT = Operation("GenerateDataKeyWithoutPlaintext")
GENERATE_RANDOM = Operation("GenerateRandom")
GET_KEY_POLICY = Operation("GetKeyPolicy")
GET_KEY_ROTATION_STATUS = Operation("GetKeyRotationStatus")
GET_PARAMETERS_FOR_IMPORT = Operation("GetParametersForImport")
GET_PUBLIC_KEY = Operation("GetPublicKey")
IMPORT_KEY_MATERIAL = Operation("ImportKeyMaterial")
LIST_ALIASES = Operation("ListAliases")
LIST_GRANTS = Operation("ListGrants")
LIST_KEY_POLICIES = Operation("ListKeyPolicies")
LIST_KEYS = Operation("ListKeys")
LIST_RESOURCE_TAGS = Operation("ListResourceTags")
LIST_RETIRABLE_GRANTS = Operation("ListRetirableGrants")
PUT_KEY_POLICY = Operation("PutKeyPolicy")
RE_ENCRYPT = Operation("ReEncrypt")
RETIRE_GRANT = Operation("RetireGrant")
REVOKE_GRANT = Operation("RevokeGrant")
SCHEDULE_KEY_DELETION = Operation("ScheduleKeyDeletion")
SIGN = Operation("Sign")
TAG_RESOURCE = Operation("TagResource")
UNTAG_RESOURCE = Operation("UntagResource")
UPDATE_ALIAS = Operation("UpdateAlias")
UPDATE_CUSTOM_KEY_STORE = Operation("UpdateCustomKeyStore")
UPDATE_KEY_DESCRIPTION = Operation("UpdateKeyDescription")
VERIFY = Operation("Verify")


class KMSService(BaseAWSService):
    """Client for AWS KMS.

    Every method sends one request and returns its result, or None for
    operations without output. Error responses raise the matching
    subclass of KMSServiceError; client-side failures raise
    AmazonClientError.
    """

    SERVICE_NAME = "AWSKMS"
    ENDPOINT_PREFIX = "kms"
    SIGNING_NAME = "kms"
    TARGET_PREFIX = "TrentService"
    BASE_EXCEPTION = KMSServiceError
    EXCEPTIONS = KMS_EXCEPTIONS

    # Key lifecycle

    def create_key(self, request: Optional[CreateKeyRequest] = None) -> CreateKeyResult:
        """
        Create a customer master key.

        Args:
            request: Key settings; omit for a symmetric encryption key with
                the default key policy

        Returns:
            Result carrying the KeyMetadata of the new key
        """
        if request is None:
            request = CreateKeyRequest()
        return self._invoke(CREATE_KEY, request, CreateKeyResult)

    def describe_key(self, request: DescribeKeyRequest) -> DescribeKeyResult:
        return self._invoke(DESCRIBE_KEY, request, DescribeKeyResult)

    def enable_key(self, request: EnableKeyRequest) -> None:
        """Set the key state of a CMK to enabled. The service returns no output."""
        self._invoke(ENABLE_KEY, request, None)

    def disable_key(self, request: DisableKeyRequest) -> None:
        """Set the key state of a CMK to disabled. The service returns no output."""
        self._invoke(DISABLE_KEY, request, None)

    def enable_key_rotation(self, request: EnableKeyRotationRequest) -> None:
        """Turn on yearly rotation of the key material. No output."""
        self._invoke(ENABLE_KEY_ROTATION, request, None)

    def disable_key_rotation(self, request: DisableKeyRotationRequest) -> None:
        """Turn off rotation of the key material. No output."""
        self._invoke(DISABLE_KEY_ROTATION, request, None)

    def get_key_rotation_status(self, request: GetKeyRotationStatusRequest) -> GetKeyRotationStatusResult:
        return self._invoke(GET_KEY_ROTATION_STATUS, request, GetKeyRotationStatusResult)

    def schedule_key_deletion(self, request: ScheduleKeyDeletionRequest) -> ScheduleKeyDeletionResult:
        """Schedule deletion of a CMK after a waiting period of 7 to 30 days."""
        return self._invoke(SCHEDULE_KEY_DELETION, request, ScheduleKeyDeletionResult)

    def cancel_key_deletion(self, request: CancelKeyDeletionRequest) -> CancelKeyDeletionResult:
        """Cancel a scheduled deletion. The key is left disabled."""
        return self._invoke(CANCEL_KEY_DELETION, request, CancelKeyDeletionResult)

    def update_key_description(self, request: UpdateKeyDescriptionRequest) -> None:
        """Replace the description of a CMK. No output."""
        self._invoke(UPDATE_KEY_DESCRIPTION, request, None)

    def list_keys(self, request: Optional[ListKeysRequest] = None) -> ListKeysResult:
        """
        List the CMKs in the caller's account and region.

        Args:
            request: Paging parameters; omit for the first page

        Returns:
            One page of keys; follow next_marker while truncated is set
        """
        if request is None:
            request = ListKeysRequest()
        return self._invoke(LIST_KEYS, request, ListKeysResult)

    # Aliases

    def create_alias(self, request: CreateAliasRequest) -> None:
        """
        Create a friendly name for a CMK.

        Args:
            request: Alias name, which must start with "alias/", and target key

        Raises:
            AlreadyExistsException: If the alias is already in use
        """
        self._invoke(CREATE_ALIAS, request, None)

    def update_alias(self, request: UpdateAliasRequest) -> None:
        """Point an existing alias at a different CMK. No output."""
        self._invoke(UPDATE_ALIAS, request, None)

    def delete_alias(self, request: DeleteAliasRequest) -> None:
        """Delete an alias. The CMK it points to is not affected."""
        self._invoke(DELETE_ALIAS, request, None)

    def list_aliases(self, request: Optional[ListAliasesRequest] = None) -> ListAliasesResult:
        """
        List aliases in the caller's account and region.

        Args:
            request: Optional key filter and paging; omit for the first page
                of every alias

        Returns:
            One page of aliases
        """
        if request is None:
            request = ListAliasesRequest()
        return self._invoke(LIST_ALIASES, request, ListAliasesResult)

    # Cryptographic operations

    def encrypt(self, request: EncryptRequest) -> EncryptResult:
        return self._invoke(ENCRYPT, request, EncryptResult)

    def decrypt(self, request: DecryptRequest) -> DecryptResult:
        """
        Decrypt ciphertext produced by Encrypt, GenerateDataKey or their variants.

        Raises:
            InvalidCiphertextException: If the ciphertext or its encryption
                context does not verify
        """
        return self._invoke(DECRYPT, request, DecryptResult)

    def re_encrypt(self, request: ReEncryptRequest) -> ReEncryptResult:
        """Decrypt and encrypt again under another CMK without exposing the plaintext."""
        return self._invoke(RE_ENCRYPT, request, ReEncryptResult)

    def generate_data_key(self, request: GenerateDataKeyRequest) -> GenerateDataKeyResult:
        return self._invoke(GENERATE_DATA_KEY, request, GenerateDataKeyResult)

    def generate_data_key_without_plaintext(
        self,
        request: GenerateDataKeyWithoutPlaintextRequest
    ) -> GenerateDataKeyWithoutPlaintextResult:
        return self._invoke(
            GENERATE_DATA_KEY_WITHOUT_PLAINTEXT, request, GenerateDataKeyWithoutPlaintextResult
        )

    def generate_data_key_pair(self, request: GenerateDataKeyPairRequest) -> GenerateDataKeyPairResult:
        return self._invoke(GENERATE_DATA_KEY_PAIR, request, GenerateDataKeyPairResult)

    def generate_data_key_pair_without_plaintext(
        self,
        request: GenerateDataKeyPairWithoutPlaintextRequest
    ) -> GenerateDataKeyPairWithoutPlaintextResult:
        return self._invoke(
            GENERATE_DATA_KEY_PAIR_WITHOUT_PLAINTEXT, request, GenerateDataKeyPairWithoutPlaintextResult
        )

    def generate_random(self, request: Optional[GenerateRandomRequest] = None) -> GenerateRandomResult:
        """
        Return random bytes.

        Args:
            request: Byte count and optional custom key store; omit to let
                the service pick the default length

        Returns:
            Result whose plaintext holds the random bytes
        """
        if request is None:
            request = GenerateRandomRequest()
        return self._invoke(GENERATE_RANDOM, request, GenerateRandomResult)

    def get_public_key(self, request: GetPublicKeyRequest) -> GetPublicKeyResult:
        """Download the DER-encoded public key of an asymmetric CMK."""
        return self._invoke(GET_PUBLIC_KEY, request, GetPublicKeyResult)

    def sign(self, request: SignRequest) -> SignResult:
        return self._invoke(SIGN, request, SignResult)

    def verify(self, request: VerifyRequest) -> VerifyResult:
        """
        Verify a signature made with an asymmetric CMK.

        Raises:
            KMSInvalidSignatureException: If the signature does not verify
        """
        return self._invoke(VERIFY, request, VerifyResult)

    # Grants

    def create_grant(self, request: CreateGrantRequest) -> CreateGrantResult:
        return self._invoke(CREATE_GRANT, request, CreateGrantResult)

    def list_grants(self, request: ListGrantsRequest) -> ListGrantsResult:
        return self._invoke(LIST_GRANTS, request, ListGrantsResult)

    def list_retirable_grants(self, request: ListRetirableGrantsRequest) -> ListRetirableGrantsResult:
        return self._invoke(LIST_RETIRABLE_GRANTS, request, ListRetirableGrantsResult)

    def retire_grant(self, request: RetireGrantRequest) -> None:
        """Retire a grant by token, or by key id and grant id. No output."""
        self._invoke(RETIRE_GRANT, request, None)

    def revoke_grant(self, request: RevokeGrantRequest) -> None:
        """Revoke a grant on a key. No output."""
        self._invoke(REVOKE_GRANT, request, None)

    # Key policies and tags

    def get_key_policy(self, request: GetKeyPolicyRequest) -> GetKeyPolicyResult:
        return self._invoke(GET_KEY_POLICY, request, GetKeyPolicyResult)

    def put_key_policy(self, request: PutKeyPolicyRequest) -> None:
        """
        Attach a key policy.

        Raises:
            MalformedPolicyDocumentException: If the policy is not valid
        """
        self._invoke(PUT_KEY_POLICY, request, None)

    def list_key_policies(self, request: ListKeyPoliciesRequest) -> ListKeyPoliciesResult:
        """List key policy names. The only name KMS returns is "default"."""
        return self._invoke(LIST_KEY_POLICIES, request, ListKeyPoliciesResult)

    def tag_resource(self, request: TagResourceRequest) -> None:
        """Add or overwrite tags on a CMK. No output."""
        self._invoke(TAG_RESOURCE, request, None)

    def untag_resource(self, request: UntagResourceRequest) -> None:
        """Remove tags from a CMK by key. No output."""
        self._invoke(UNTAG_RESOURCE, request, None)

    def list_resource_tags(self, request: ListResourceTagsRequest) -> ListResourceTagsResult:
        return self._invoke(LIST_RESOURCE_TAGS, request, ListResourceTagsResult)

    # Imported key material

    def get_parameters_for_import(self, request: GetParametersForImportRequest) -> GetParametersForImportResult:
        """Return the wrapping public key and import token for ImportKeyMaterial."""
        return self._invoke(GET_PARAMETERS_FOR_IMPORT, request, GetParametersForImportResult)

    def import_key_material(self, request: ImportKeyMaterialRequest) -> ImportKeyMaterialResult:
        return self._invoke(IMPORT_KEY_MATERIAL, request, ImportKeyMaterialResult)

    def delete_imported_key_material(self, request: DeleteImportedKeyMaterialRequest) -> None:
        """Delete imported key material; the key moves to PendingImport. No output."""
        self._invoke(DELETE_IMPORTED_KEY_MATERIAL, request, None)

    # Custom key stores

    def create_custom_key_store(self, request: CreateCustomKeyStoreRequest) -> CreateCustomKeyStoreResult:
        return self._invoke(CREATE_CUSTOM_KEY_STORE, request, CreateCustomKeyStoreResult)

    def connect_custom_key_store(self, request: ConnectCustomKeyStoreRequest) -> ConnectCustomKeyStoreResult:
        """Start connecting a custom key store to its CloudHSM cluster. Returns an empty result."""
        return self._invoke(CONNECT_CUSTOM_KEY_STORE, request, ConnectCustomKeyStoreResult)

    def disconnect_custom_key_store(
        self,
        request: DisconnectCustomKeyStoreRequest
    ) -> DisconnectCustomKeyStoreResult:
        return self._invoke(DISCONNECT_CUSTOM_KEY_STORE, request, DisconnectCustomKeyStoreResult)

    def update_custom_key_store(self, request: UpdateCustomKeyStoreRequest) -> UpdateCustomKeyStoreResult:
        return self._invoke(UPDATE_CUSTOM_KEY_STORE, request, UpdateCustomKeyStoreResult)

    def delete_custom_key_store(self, request: DeleteCustomKeyStoreRequest) -> DeleteCustomKeyStoreResult:
        """
        Delete a disconnected custom key store.

        Raises:
            CustomKeyStoreHasCMKsException: If keys still live in the store
        """
        return self._invoke(DELETE_CUSTOM_KEY_STORE, request, DeleteCustomKeyStoreResult)

    def describe_custom_key_stores(
        self,
        request: DescribeCustomKeyStoresRequest
    ) -> DescribeCustomKeyStoresResult:
        return self._invoke(DESCRIBE_CUSTOM_KEY_STORES, request, DescribeCustomKeyStoresResult)
