"""
Models of the AWS Key Management Service API.
"""
from datetime import datetime
from typing import Dict, List, Optional, Union

from models.base import AwsEnum, AwsModel, shape, wire_field
from utils.exceptions import AmazonServiceError


class KeyState(AwsEnum):
    CREATING = "Creating"
    ENABLED = "Enabled"
    DISABLED = "Disabled"
    PENDING_DELETION = "PendingDeletion"
    PENDING_IMPORT = "PendingImport"
    PENDING_REPLICA_DELETION = "PendingReplicaDeletion"
    UNAVAILABLE = "Unavailable"
    UPDATING = "Updating"


class KeyUsageType(AwsEnum):
    SIGN_VERIFY = "SIGN_VERIFY"
    ENCRYPT_DECRYPT = "ENCRYPT_DECRYPT"
    GENERATE_VERIFY_MAC = "GENERATE_VERIFY_MAC"


class OriginType(AwsEnum):
    AWS_KMS = "AWS_KMS"
    EXTERNAL = "EXTERNAL"
    AWS_CLOUDHSM = "AWS_CLOUDHSM"
    EXTERNAL_KEY_STORE = "EXTERNAL_KEY_STORE"


class KeySpec(AwsEnum):
    RSA_2048 = "RSA_2048"
    RSA_3072 = "RSA_3072"
    RSA_4096 = "RSA_4096"
    ECC_NIST_P256 = "ECC_NIST_P256"
    ECC_NIST_P384 = "ECC_NIST_P384"
    ECC_NIST_P521 = "ECC_NIST_P521"
    ECC_SECG_P256K1 = "ECC_SECG_P256K1"
    SYMMETRIC_DEFAULT = "SYMMETRIC_DEFAULT"
    HMAC_224 = "HMAC_224"
    HMAC_256 = "HMAC_256"
    HMAC_384 = "HMAC_384"
    HMAC_512 = "HMAC_512"
    SM2 = "SM2"


class EncryptionAlgorithmSpec(AwsEnum):
    SYMMETRIC_DEFAULT = "SYMMETRIC_DEFAULT"
    RSAES_OAEP_SHA_1 = "RSAES_OAEP_SHA_1"
    RSAES_OAEP_SHA_256 = "RSAES_OAEP_SHA_256"
    SM2PKE = "SM2PKE"


class DataKeySpec(AwsEnum):
    AES_256 = "AES_256"
    AES_128 = "AES_128"


class MultiRegionKeyType(AwsEnum):
    PRIMARY = "PRIMARY"
    REPLICA = "REPLICA"


class ConnectionStateType(AwsEnum):
    CONNECTED = "CONNECTED"
    CONNECTING = "CONNECTING"
    FAILED = "FAILED"
    DISCONNECTED = "DISCONNECTED"
    DISCONNECTING = "DISCONNECTING"


class KeyManagerType(AwsEnum):
    AWS = "AWS"
    CUSTOMER = "CUSTOMER"


class ExpirationModelType(AwsEnum):
    KEY_MATERIAL_EXPIRES = "KEY_MATERIAL_EXPIRES"
    KEY_MATERIAL_DOES_NOT_EXPIRE = "KEY_MATERIAL_DOES_NOT_EXPIRE"


class AlgorithmSpec(AwsEnum):
    RSAES_PKCS1_V1_5 = "RSAES_PKCS1_V1_5"
    RSAES_OAEP_SHA_1 = "RSAES_OAEP_SHA_1"
    RSAES_OAEP_SHA_256 = "RSAES_OAEP_SHA_256"


class WrappingKeySpec(AwsEnum):
    RSA_2048 = "RSA_2048"


class CustomerMasterKeySpec(AwsEnum):
    RSA_2048 = "RSA_2048"
    RSA_3072 = "RSA_3072"
    RSA_4096 = "RSA_4096"
    ECC_NIST_P256 = "ECC_NIST_P256"
    ECC_NIST_P384 = "ECC_NIST_P384"
    ECC_NIST_P521 = "ECC_NIST_P521"
    ECC_SECG_P256K1 = "ECC_SECG_P256K1"
    SYMMETRIC_DEFAULT = "SYMMETRIC_DEFAULT"


class DataKeyPairSpec(AwsEnum):
    RSA_2048 = "RSA_2048"
    RSA_3072 = "RSA_3072"
    RSA_4096 = "RSA_4096"
    ECC_NIST_P256 = "ECC_NIST_P256"
    ECC_NIST_P384 = "ECC_NIST_P384"
    ECC_NIST_P521 = "ECC_NIST_P521"
    ECC_SECG_P256K1 = "ECC_SECG_P256K1"


class SigningAlgorithmSpec(AwsEnum):
    RSASSA_PSS_SHA_256 = "RSASSA_PSS_SHA_256"
    RSASSA_PSS_SHA_384 = "RSASSA_PSS_SHA_384"
    RSASSA_PSS_SHA_512 = "RSASSA_PSS_SHA_512"
    RSASSA_PKCS1_V1_5_SHA_256 = "RSASSA_PKCS1_V1_5_SHA_256"
    RSASSA_PKCS1_V1_5_SHA_384 = "RSASSA_PKCS1_V1_5_SHA_384"
    RSASSA_PKCS1_V1_5_SHA_512 = "RSASSA_PKCS1_V1_5_SHA_512"
    ECDSA_SHA_256 = "ECDSA_SHA_256"
    ECDSA_SHA_384 = "ECDSA_SHA_384"
    ECDSA_SHA_512 = "ECDSA_SHA_512"


class MessageType(AwsEnum):
    RAW = "RAW"
    DIGEST = "DIGEST"


class GrantOperation(AwsEnum):
    DECRYPT = "Decrypt"
    ENCRYPT = "Encrypt"
    GENERATE_DATA_KEY = "GenerateDataKey"
    GENERATE_DATA_KEY_WITHOUT_PLAINTEXT = "GenerateDataKeyWithoutPlaintext"
    RE_ENCRYPT_FROM = "ReEncryptFrom"
    RE_ENCRYPT_TO = "ReEncryptTo"
    SIGN = "Sign"
    VERIFY = "Verify"
    GET_PUBLIC_KEY = "GetPublicKey"
    CREATE_GRANT = "CreateGrant"
    RETIRE_GRANT = "RetireGrant"
    DESCRIBE_KEY = "DescribeKey"
    GENERATE_DATA_KEY_PAIR = "GenerateDataKeyPair"
    GENERATE_DATA_KEY_PAIR_WITHOUT_PLAINTEXT = "GenerateDataKeyPairWithoutPlaintext"


class ConnectionErrorCodeType(AwsEnum):
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    CLUSTER_NOT_FOUND = "CLUSTER_NOT_FOUND"
    NETWORK_ERRORS = "NETWORK_ERRORS"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    INSUFFICIENT_CLOUDHSM_HSMS = "INSUFFICIENT_CLOUDHSM_HSMS"
    USER_LOCKED_OUT = "USER_LOCKED_OUT"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    USER_LOGGED_IN = "USER_LOGGED_IN"
    SUBNET_NOT_FOUND = "SUBNET_NOT_FOUND"


# Structures

@shape
class Tag(AwsModel):
    tag_key: Optional[str] = wire_field("TagKey")
    tag_value: Optional[str] = wire_field("TagValue")


@shape
class MultiRegionKey(AwsModel):
    arn: Optional[str] = wire_field("Arn")
    region: Optional[str] = wire_field("Region")


@shape
class MultiRegionConfiguration(AwsModel):
    multi_region_key_type: Optional[Union[MultiRegionKeyType, str]] = wire_field("MultiRegionKeyType")
    primary_key: Optional[MultiRegionKey] = wire_field("PrimaryKey")
    replica_keys: Optional[List[MultiRegionKey]] = wire_field("ReplicaKeys")


@shape
class KeyMetadata(AwsModel):
    """Details of a CMK as returned by CreateKey and DescribeKey."""

    aws_account_id: Optional[str] = wire_field("AWSAccountId")
    key_id: Optional[str] = wire_field("KeyId")
    arn: Optional[str] = wire_field("Arn")
    creation_date: Optional[datetime] = wire_field("CreationDate")
    enabled: Optional[bool] = wire_field("Enabled")
    description: Optional[str] = wire_field("Description")
    key_usage: Optional[Union[KeyUsageType, str]] = wire_field("KeyUsage")
    key_state: Optional[Union[KeyState, str]] = wire_field("KeyState")
    deletion_date: Optional[datetime] = wire_field("DeletionDate")
    valid_to: Optional[datetime] = wire_field("ValidTo")
    origin: Optional[Union[OriginType, str]] = wire_field("Origin")
    custom_key_store_id: Optional[str] = wire_field("CustomKeyStoreId")
    cloud_hsm_cluster_id: Optional[str] = wire_field("CloudHsmClusterId")
    expiration_model: Optional[Union[ExpirationModelType, str]] = wire_field("ExpirationModel")
    key_manager: Optional[Union[KeyManagerType, str]] = wire_field("KeyManager")
    customer_master_key_spec: Optional[Union[CustomerMasterKeySpec, str]] = wire_field("CustomerMasterKeySpec")
    key_spec: Optional[Union[KeySpec, str]] = wire_field("KeySpec")
    encryption_algorithms: Optional[List[Union[EncryptionAlgorithmSpec, str]]] = wire_field("EncryptionAlgorithms")
    signing_algorithms: Optional[List[Union[SigningAlgorithmSpec, str]]] = wire_field("SigningAlgorithms")
    multi_region: Optional[bool] = wire_field("MultiRegion")
    multi_region_configuration: Optional[MultiRegionConfiguration] = wire_field("MultiRegionConfiguration")
    pending_deletion_window_in_days: Optional[int] = wire_field("PendingDeletionWindowInDays")


@shape
class KeyListEntry(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    key_arn: Optional[str] = wire_field("KeyArn")


@shape
class AliasListEntry(AwsModel):
    alias_name: Optional[str] = wire_field("AliasName")
    alias_arn: Optional[str] = wire_field("AliasArn")
    target_key_id: Optional[str] = wire_field("TargetKeyId")
    creation_date: Optional[datetime] = wire_field("CreationDate")
    last_updated_date: Optional[datetime] = wire_field("LastUpdatedDate")


@shape
class CustomKeyStoresListEntry(AwsModel):
    custom_key_store_id: Optional[str] = wire_field("CustomKeyStoreId")
    custom_key_store_name: Optional[str] = wire_field("CustomKeyStoreName")
    cloud_hsm_cluster_id: Optional[str] = wire_field("CloudHsmClusterId")
    trust_anchor_certificate: Optional[str] = wire_field("TrustAnchorCertificate")
    connection_state: Optional[Union[ConnectionStateType, str]] = wire_field("ConnectionState")
    connection_error_code: Optional[Union[ConnectionErrorCodeType, str]] = wire_field("ConnectionErrorCode")
    creation_date: Optional[datetime] = wire_field("CreationDate")


@shape
class GrantConstraints(AwsModel):
    """Encryption context a grant applies to. Exact match or subset."""

    encryption_context_subset: Optional[Dict[str, str]] = wire_field("EncryptionContextSubset")
    encryption_context_equals: Optional[Dict[str, str]] = wire_field("EncryptionContextEquals")

    def add_encryption_context_subset_entry(self, key: str, value: str) -> "GrantConstraints":
        return self._add_entry("encryption_context_subset", key, value)

    def clear_encryption_context_subset_entries(self) -> "GrantConstraints":
        return self._clear_entries("encryption_context_subset")

    def add_encryption_context_equals_entry(self, key: str, value: str) -> "GrantConstraints":
        return self._add_entry("encryption_context_equals", key, value)

    def clear_encryption_context_equals_entries(self) -> "GrantConstraints":
        return self._clear_entries("encryption_context_equals")


@shape
class GrantListEntry(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    grant_id: Optional[str] = wire_field("GrantId")
    name: Optional[str] = wire_field("Name")
    creation_date: Optional[datetime] = wire_field("CreationDate")
    grantee_principal: Optional[str] = wire_field("GranteePrincipal")
    retiring_principal: Optional[str] = wire_field("RetiringPrincipal")
    issuing_account: Optional[str] = wire_field("IssuingAccount")
    operations: Optional[List[Union[GrantOperation, str]]] = wire_field("Operations")
    constraints: Optional[GrantConstraints] = wire_field("Constraints")


# Requests and results

@shape
class CancelKeyDeletionRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")


@shape
class CancelKeyDeletionResult(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")


@shape
class CreateAliasRequest(AwsModel):
    alias_name: Optional[str] = wire_field("AliasName")
    target_key_id: Optional[str] = wire_field("TargetKeyId")


@shape
class CreateKeyRequest(AwsModel):
    policy: Optional[str] = wire_field("Policy")
    description: Optional[str] = wire_field("Description")
    key_usage: Optional[Union[KeyUsageType, str]] = wire_field("KeyUsage")
    key_spec: Optional[Union[KeySpec, str]] = wire_field("KeySpec")
    origin: Optional[Union[OriginType, str]] = wire_field("Origin")
    custom_key_store_id: Optional[str] = wire_field("CustomKeyStoreId")
    bypass_policy_lockout_safety_check: Optional[bool] = wire_field("BypassPolicyLockoutSafetyCheck")
    tags: Optional[List[Tag]] = wire_field("Tags")
    multi_region: Optional[bool] = wire_field("MultiRegion")


@shape
class CreateKeyResult(AwsModel):
    key_metadata: Optional[KeyMetadata] = wire_field("KeyMetadata")


@shape
class DecryptRequest(AwsModel):
    ciphertext_blob: Optional[bytes] = wire_field("CiphertextBlob")
    encryption_context: Optional[Dict[str, str]] = wire_field("EncryptionContext")
    grant_tokens: Optional[List[str]] = wire_field("GrantTokens")
    key_id: Optional[str] = wire_field("KeyId")
    encryption_algorithm: Optional[Union[EncryptionAlgorithmSpec, str]] = wire_field("EncryptionAlgorithm")

    def add_encryption_context_entry(self, key: str, value: str) -> "DecryptRequest":
        return self._add_entry("encryption_context", key, value)

    def clear_encryption_context_entries(self) -> "DecryptRequest":
        return self._clear_entries("encryption_context")


@shape
class DecryptResult(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    plaintext: Optional[bytes] = wire_field("Plaintext")
    encryption_algorithm: Optional[Union[EncryptionAlgorithmSpec, str]] = wire_field("EncryptionAlgorithm")


@shape
class DeleteAliasRequest(AwsModel):
    alias_name: Optional[str] = wire_field("AliasName")


@shape
class DescribeKeyRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    grant_tokens: Optional[List[str]] = wire_field("GrantTokens")


@shape
class DescribeKeyResult(AwsModel):
    key_metadata: Optional[KeyMetadata] = wire_field("KeyMetadata")


@shape
class DisableKeyRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")


@shape
class EnableKeyRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")


@shape
class DisableKeyRotationRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")


@shape
class EnableKeyRotationRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")


@shape
class EncryptRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    plaintext: Optional[bytes] = wire_field("Plaintext")
    encryption_context: Optional[Dict[str, str]] = wire_field("EncryptionContext")
    grant_tokens: Optional[List[str]] = wire_field("GrantTokens")
    encryption_algorithm: Optional[Union[EncryptionAlgorithmSpec, str]] = wire_field("EncryptionAlgorithm")

    def add_encryption_context_entry(self, key: str, value: str) -> "EncryptRequest":
        return self._add_entry("encryption_context", key, value)

    def clear_encryption_context_entries(self) -> "EncryptRequest":
        return self._clear_entries("encryption_context")


@shape
class EncryptResult(AwsModel):
    ciphertext_blob: Optional[bytes] = wire_field("CiphertextBlob")
    key_id: Optional[str] = wire_field("KeyId")
    encryption_algorithm: Optional[Union[EncryptionAlgorithmSpec, str]] = wire_field("EncryptionAlgorithm")


@shape
class GenerateDataKeyRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    encryption_context: Optional[Dict[str, str]] = wire_field("EncryptionContext")
    number_of_bytes: Optional[int] = wire_field("NumberOfBytes")
    key_spec: Optional[Union[DataKeySpec, str]] = wire_field("KeySpec")
    grant_tokens: Optional[List[str]] = wire_field("GrantTokens")

    def add_encryption_context_entry(self, key: str, value: str) -> "GenerateDataKeyRequest":
        return self._add_entry("encryption_context", key, value)

    def clear_encryption_context_entries(self) -> "GenerateDataKeyRequest":
        return self._clear_entries("encryption_context")


@shape
class GenerateDataKeyResult(AwsModel):
    ciphertext_blob: Optional[bytes] = wire_field("CiphertextBlob")
    plaintext: Optional[bytes] = wire_field("Plaintext")
    key_id: Optional[str] = wire_field("KeyId")


@shape
class GenerateRandomRequest(AwsModel):
    number_of_bytes: Optional[int] = wire_field("NumberOfBytes")
    custom_key_store_id: Optional[str] = wire_field("CustomKeyStoreId")


@shape
class GenerateRandomResult(AwsModel):
    plaintext: Optional[bytes] = wire_field("Plaintext")


@shape
class GetKeyPolicyRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    policy_name: Optional[str] = wire_field("PolicyName")


@shape
class GetKeyPolicyResult(AwsModel):
    policy: Optional[str] = wire_field("Policy")


@shape
class GetKeyRotationStatusRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")


@shape
class GetKeyRotationStatusResult(AwsModel):
    key_rotation_enabled: Optional[bool] = wire_field("KeyRotationEnabled")


@shape
class ListAliasesRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    limit: Optional[int] = wire_field("Limit")
    marker: Optional[str] = wire_field("Marker")


@shape
class ListAliasesResult(AwsModel):
    aliases: Optional[List[AliasListEntry]] = wire_field("Aliases")
    next_marker: Optional[str] = wire_field("NextMarker")
    truncated: Optional[bool] = wire_field("Truncated")


@shape
class ListKeysRequest(AwsModel):
    limit: Optional[int] = wire_field("Limit")
    marker: Optional[str] = wire_field("Marker")


@shape
class ListKeysResult(AwsModel):
    keys: Optional[List[KeyListEntry]] = wire_field("Keys")
    next_marker: Optional[str] = wire_field("NextMarker")
    truncated: Optional[bool] = wire_field("Truncated")


@shape
class ScheduleKeyDeletionRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    pending_window_in_days: Optional[int] = wire_field("PendingWindowInDays")


@shape
class ScheduleKeyDeletionResult(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    deletion_date: Optional[datetime] = wire_field("DeletionDate")
    key_state: Optional[Union[KeyState, str]] = wire_field("KeyState")
    pending_window_in_days: Optional[int] = wire_field("PendingWindowInDays")


@shape
class DescribeCustomKeyStoresRequest(AwsModel):
    custom_key_store_id: Optional[str] = wire_field("CustomKeyStoreId")
    custom_key_store_name: Optional[str] = wire_field("CustomKeyStoreName")
    limit: Optional[int] = wire_field("Limit")
    marker: Optional[str] = wire_field("Marker")


@shape
class DescribeCustomKeyStoresResult(AwsModel):
    custom_key_stores: Optional[List[CustomKeyStoresListEntry]] = wire_field("CustomKeyStores")
    next_marker: Optional[str] = wire_field("NextMarker")
    truncated: Optional[bool] = wire_field("Truncated")


@shape
class TagResourceRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    tags: Optional[List[Tag]] = wire_field("Tags")


@shape
class UntagResourceRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    tag_keys: Optional[List[str]] = wire_field("TagKeys")


# Custom key stores

@shape
class ConnectCustomKeyStoreRequest(AwsModel):
    custom_key_store_id: Optional[str] = wire_field("CustomKeyStoreId")


@shape
class ConnectCustomKeyStoreResult(AwsModel):
    """
    Empty on success.

    Connecting is asynchronous; poll DescribeCustomKeyStores for ConnectionState.
    """


@shape
class CreateCustomKeyStoreRequest(AwsModel):
    custom_key_store_name: Optional[str] = wire_field("CustomKeyStoreName")
    cloud_hsm_cluster_id: Optional[str] = wire_field("CloudHsmClusterId")
    trust_anchor_certificate: Optional[str] = wire_field("TrustAnchorCertificate")
    key_store_password: Optional[str] = wire_field("KeyStorePassword")


@shape
class CreateCustomKeyStoreResult(AwsModel):
    custom_key_store_id: Optional[str] = wire_field("CustomKeyStoreId")


@shape
class DeleteCustomKeyStoreRequest(AwsModel):
    custom_key_store_id: Optional[str] = wire_field("CustomKeyStoreId")


@shape
class DeleteCustomKeyStoreResult(AwsModel):
    """Empty on success."""


@shape
class DisconnectCustomKeyStoreRequest(AwsModel):
    custom_key_store_id: Optional[str] = wire_field("CustomKeyStoreId")


@shape
class DisconnectCustomKeyStoreResult(AwsModel):
    """Empty on success. The key store moves to DISCONNECTED."""


@shape
class UpdateCustomKeyStoreRequest(AwsModel):
    custom_key_store_id: Optional[str] = wire_field("CustomKeyStoreId")
    new_custom_key_store_name: Optional[str] = wire_field("NewCustomKeyStoreName")
    key_store_password: Optional[str] = wire_field("KeyStorePassword")
    cloud_hsm_cluster_id: Optional[str] = wire_field("CloudHsmClusterId")


@shape
class UpdateCustomKeyStoreResult(AwsModel):
    """Empty on success."""


# Grants

@shape
class CreateGrantRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    grantee_principal: Optional[str] = wire_field("GranteePrincipal")
    retiring_principal: Optional[str] = wire_field("RetiringPrincipal")
    operations: Optional[List[Union[GrantOperation, str]]] = wire_field("Operations")
    constraints: Optional[GrantConstraints] = wire_field("Constraints")
    grant_tokens: Optional[List[str]] = wire_field("GrantTokens")
    name: Optional[str] = wire_field("Name")


@shape
class CreateGrantResult(AwsModel):
    grant_token: Optional[str] = wire_field("GrantToken")
    grant_id: Optional[str] = wire_field("GrantId")


@shape
class ListGrantsRequest(AwsModel):
    limit: Optional[int] = wire_field("Limit")
    marker: Optional[str] = wire_field("Marker")
    key_id: Optional[str] = wire_field("KeyId")


@shape
class ListGrantsResult(AwsModel):
    grants: Optional[List[GrantListEntry]] = wire_field("Grants")
    next_marker: Optional[str] = wire_field("NextMarker")
    truncated: Optional[bool] = wire_field("Truncated")


@shape
class ListRetirableGrantsRequest(AwsModel):
    limit: Optional[int] = wire_field("Limit")
    marker: Optional[str] = wire_field("Marker")
    retiring_principal: Optional[str] = wire_field("RetiringPrincipal")


@shape
class ListRetirableGrantsResult(AwsModel):
    grants: Optional[List[GrantListEntry]] = wire_field("Grants")
    next_marker: Optional[str] = wire_field("NextMarker")
    truncated: Optional[bool] = wire_field("Truncated")


@shape
class RetireGrantRequest(AwsModel):
    """Retire a grant, identified by its token or by key id and grant id."""

    grant_token: Optional[str] = wire_field("GrantToken")
    key_id: Optional[str] = wire_field("KeyId")
    grant_id: Optional[str] = wire_field("GrantId")


@shape
class RevokeGrantRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    grant_id: Optional[str] = wire_field("GrantId")


# Data keys and re-encryption

@shape
class GenerateDataKeyWithoutPlaintextRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    encryption_context: Optional[Dict[str, str]] = wire_field("EncryptionContext")
    key_spec: Optional[Union[DataKeySpec, str]] = wire_field("KeySpec")
    number_of_bytes: Optional[int] = wire_field("NumberOfBytes")
    grant_tokens: Optional[List[str]] = wire_field("GrantTokens")

    def add_encryption_context_entry(self, key: str, value: str) -> "GenerateDataKeyWithoutPlaintextRequest":
        return self._add_entry("encryption_context", key, value)

    def clear_encryption_context_entries(self) -> "GenerateDataKeyWithoutPlaintextRequest":
        return self._clear_entries("encryption_context")


@shape
class GenerateDataKeyWithoutPlaintextResult(AwsModel):
    """Only the encrypted copy of the data key; decrypt it when the key is needed."""

    ciphertext_blob: Optional[bytes] = wire_field("CiphertextBlob")
    key_id: Optional[str] = wire_field("KeyId")


@shape
class GenerateDataKeyPairRequest(AwsModel):
    encryption_context: Optional[Dict[str, str]] = wire_field("EncryptionContext")
    key_id: Optional[str] = wire_field("KeyId")
    key_pair_spec: Optional[Union[DataKeyPairSpec, str]] = wire_field("KeyPairSpec")
    grant_tokens: Optional[List[str]] = wire_field("GrantTokens")

    def add_encryption_context_entry(self, key: str, value: str) -> "GenerateDataKeyPairRequest":
        return self._add_entry("encryption_context", key, value)

    def clear_encryption_context_entries(self) -> "GenerateDataKeyPairRequest":
        return self._clear_entries("encryption_context")


@shape
class GenerateDataKeyPairResult(AwsModel):
    private_key_ciphertext_blob: Optional[bytes] = wire_field("PrivateKeyCiphertextBlob")
    private_key_plaintext: Optional[bytes] = wire_field("PrivateKeyPlaintext")
    public_key: Optional[bytes] = wire_field("PublicKey")
    key_id: Optional[str] = wire_field("KeyId")
    key_pair_spec: Optional[Union[DataKeyPairSpec, str]] = wire_field("KeyPairSpec")


@shape
class GenerateDataKeyPairWithoutPlaintextRequest(AwsModel):
    encryption_context: Optional[Dict[str, str]] = wire_field("EncryptionContext")
    key_id: Optional[str] = wire_field("KeyId")
    key_pair_spec: Optional[Union[DataKeyPairSpec, str]] = wire_field("KeyPairSpec")
    grant_tokens: Optional[List[str]] = wire_field("GrantTokens")

    def add_encryption_context_entry(
        self, key: str, value: str
    ) -> "GenerateDataKeyPairWithoutPlaintextRequest":
        return self._add_entry("encryption_context", key, value)

    def clear_encryption_context_entries(self) -> "GenerateDataKeyPairWithoutPlaintextRequest":
        return self._clear_entries("encryption_context")


@shape
class GenerateDataKeyPairWithoutPlaintextResult(AwsModel):
    private_key_ciphertext_blob: Optional[bytes] = wire_field("PrivateKeyCiphertextBlob")
    public_key: Optional[bytes] = wire_field("PublicKey")
    key_id: Optional[str] = wire_field("KeyId")
    key_pair_spec: Optional[Union[DataKeyPairSpec, str]] = wire_field("KeyPairSpec")


@shape
class ReEncryptRequest(AwsModel):
    ciphertext_blob: Optional[bytes] = wire_field("CiphertextBlob")
    source_encryption_context: Optional[Dict[str, str]] = wire_field("SourceEncryptionContext")
    source_key_id: Optional[str] = wire_field("SourceKeyId")
    destination_key_id: Optional[str] = wire_field("DestinationKeyId")
    destination_encryption_context: Optional[Dict[str, str]] = wire_field("DestinationEncryptionContext")
    source_encryption_algorithm: Optional[Union[EncryptionAlgorithmSpec, str]] = wire_field(
        "SourceEncryptionAlgorithm"
    )
    destination_encryption_algorithm: Optional[Union[EncryptionAlgorithmSpec, str]] = wire_field(
        "DestinationEncryptionAlgorithm"
    )
    grant_tokens: Optional[List[str]] = wire_field("GrantTokens")

    def add_source_encryption_context_entry(self, key: str, value: str) -> "ReEncryptRequest":
        return self._add_entry("source_encryption_context", key, value)

    def clear_source_encryption_context_entries(self) -> "ReEncryptRequest":
        return self._clear_entries("source_encryption_context")

    def add_destination_encryption_context_entry(self, key: str, value: str) -> "ReEncryptRequest":
        return self._add_entry("destination_encryption_context", key, value)

    def clear_destination_encryption_context_entries(self) -> "ReEncryptRequest":
        return self._clear_entries("destination_encryption_context")


@shape
class ReEncryptResult(AwsModel):
    ciphertext_blob: Optional[bytes] = wire_field("CiphertextBlob")
    source_key_id: Optional[str] = wire_field("SourceKeyId")
    key_id: Optional[str] = wire_field("KeyId")
    source_encryption_algorithm: Optional[Union[EncryptionAlgorithmSpec, str]] = wire_field(
        "SourceEncryptionAlgorithm"
    )
    destination_encryption_algorithm: Optional[Union[EncryptionAlgorithmSpec, str]] = wire_field(
        "DestinationEncryptionAlgorithm"
    )


# Asymmetric keys

@shape
class GetPublicKeyRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    grant_tokens: Optional[List[str]] = wire_field("GrantTokens")


@shape
class GetPublicKeyResult(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    public_key: Optional[bytes] = wire_field("PublicKey")
    customer_master_key_spec: Optional[Union[CustomerMasterKeySpec, str]] = wire_field("CustomerMasterKeySpec")
    key_spec: Optional[Union[KeySpec, str]] = wire_field("KeySpec")
    key_usage: Optional[Union[KeyUsageType, str]] = wire_field("KeyUsage")
    encryption_algorithms: Optional[List[Union[EncryptionAlgorithmSpec, str]]] = wire_field("EncryptionAlgorithms")
    signing_algorithms: Optional[List[Union[SigningAlgorithmSpec, str]]] = wire_field("SigningAlgorithms")


@shape
class SignRequest(AwsModel):
    """
    Sign a message with an asymmetric CMK.

    With message_type DIGEST the message is an already computed digest;
    with RAW (the default) KMS hashes it first.
    """

    key_id: Optional[str] = wire_field("KeyId")
    message: Optional[bytes] = wire_field("Message")
    message_type: Optional[Union[MessageType, str]] = wire_field("MessageType")
    grant_tokens: Optional[List[str]] = wire_field("GrantTokens")
    signing_algorithm: Optional[Union[SigningAlgorithmSpec, str]] = wire_field("SigningAlgorithm")


@shape
class SignResult(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    signature: Optional[bytes] = wire_field("Signature")
    signing_algorithm: Optional[Union[SigningAlgorithmSpec, str]] = wire_field("SigningAlgorithm")


@shape
class VerifyRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    message: Optional[bytes] = wire_field("Message")
    message_type: Optional[Union[MessageType, str]] = wire_field("MessageType")
    signature: Optional[bytes] = wire_field("Signature")
    signing_algorithm: Optional[Union[SigningAlgorithmSpec, str]] = wire_field("SigningAlgorithm")
    grant_tokens: Optional[List[str]] = wire_field("GrantTokens")


@shape
class VerifyResult(AwsModel):
    """A signature that does not verify raises KMSInvalidSignatureException instead."""

    key_id: Optional[str] = wire_field("KeyId")
    signature_valid: Optional[bool] = wire_field("SignatureValid")
    signing_algorithm: Optional[Union[SigningAlgorithmSpec, str]] = wire_field("SigningAlgorithm")


# Imported key material

@shape
class GetParametersForImportRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    wrapping_algorithm: Optional[Union[AlgorithmSpec, str]] = wire_field("WrappingAlgorithm")
    wrapping_key_spec: Optional[Union[WrappingKeySpec, str]] = wire_field("WrappingKeySpec")


@shape
class GetParametersForImportResult(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    import_token: Optional[bytes] = wire_field("ImportToken")
    public_key: Optional[bytes] = wire_field("PublicKey")
    parameters_valid_to: Optional[datetime] = wire_field("ParametersValidTo")


@shape
class ImportKeyMaterialRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    import_token: Optional[bytes] = wire_field("ImportToken")
    encrypted_key_material: Optional[bytes] = wire_field("EncryptedKeyMaterial")
    valid_to: Optional[datetime] = wire_field("ValidTo")
    expiration_model: Optional[Union[ExpirationModelType, str]] = wire_field("ExpirationModel")


@shape
class ImportKeyMaterialResult(AwsModel):
    """Empty on success. The key leaves PendingImport once the material is in place."""


@shape
class DeleteImportedKeyMaterialRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")


# Policies, tags and key settings

@shape
class ListKeyPoliciesRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    limit: Optional[int] = wire_field("Limit")
    marker: Optional[str] = wire_field("Marker")


@shape
class ListKeyPoliciesResult(AwsModel):
    policy_names: Optional[List[str]] = wire_field("PolicyNames")
    next_marker: Optional[str] = wire_field("NextMarker")
    truncated: Optional[bool] = wire_field("Truncated")


@shape
class PutKeyPolicyRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    policy_name: Optional[str] = wire_field("PolicyName")
    policy: Optional[str] = wire_field("Policy")
    bypass_policy_lockout_safety_check: Optional[bool] = wire_field("BypassPolicyLockoutSafetyCheck")


@shape
class ListResourceTagsRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    limit: Optional[int] = wire_field("Limit")
    marker: Optional[str] = wire_field("Marker")


@shape
class ListResourceTagsResult(AwsModel):
    tags: Optional[List[Tag]] = wire_field("Tags")
    next_marker: Optional[str] = wire_field("NextMarker")
    truncated: Optional[bool] = wire_field("Truncated")


@shape
class UpdateAliasRequest(AwsModel):
    alias_name: Optional[str] = wire_field("AliasName")
    target_key_id: Optional[str] = wire_field("TargetKeyId")


@shape
class UpdateKeyDescriptionRequest(AwsModel):
    key_id: Optional[str] = wire_field("KeyId")
    description: Optional[str] = wire_field("Description")


# Exceptions

class KMSServiceError(AmazonServiceError):
    """Base class of errors returned by AWS KMS."""


class AlreadyExistsException(KMSServiceError):
    ERROR_CODE = "AlreadyExistsException"


class CloudHsmClusterInUseException(KMSServiceError):
    ERROR_CODE = "CloudHsmClusterInUseException"


class CloudHsmClusterInvalidConfigurationException(KMSServiceError):
    ERROR_CODE = "CloudHsmClusterInvalidConfigurationException"


class CloudHsmClusterNotActiveException(KMSServiceError):
    ERROR_CODE = "CloudHsmClusterNotActiveException"


class CloudHsmClusterNotFoundException(KMSServiceError):
    ERROR_CODE = "CloudHsmClusterNotFoundException"


class CloudHsmClusterNotRelatedException(KMSServiceError):
    ERROR_CODE = "CloudHsmClusterNotRelatedException"


class CustomKeyStoreHasCMKsException(KMSServiceError):
    ERROR_CODE = "CustomKeyStoreHasCMKsException"


class CustomKeyStoreInvalidStateException(KMSServiceError):
    ERROR_CODE = "CustomKeyStoreInvalidStateException"


class CustomKeyStoreNameInUseException(KMSServiceError):
    ERROR_CODE = "CustomKeyStoreNameInUseException"


class CustomKeyStoreNotFoundException(KMSServiceError):
    ERROR_CODE = "CustomKeyStoreNotFoundException"


class DependencyTimeoutException(KMSServiceError):
    ERROR_CODE = "DependencyTimeoutException"


class DisabledException(KMSServiceError):
    ERROR_CODE = "DisabledException"


class ExpiredImportTokenException(KMSServiceError):
    ERROR_CODE = "ExpiredImportTokenException"


class IncorrectKeyException(KMSServiceError):
    ERROR_CODE = "IncorrectKeyException"


class IncorrectKeyMaterialException(KMSServiceError):
    ERROR_CODE = "IncorrectKeyMaterialException"


class IncorrectTrustAnchorException(KMSServiceError):
    ERROR_CODE = "IncorrectTrustAnchorException"


class InvalidAliasNameException(KMSServiceError):
    ERROR_CODE = "InvalidAliasNameException"


class InvalidArnException(KMSServiceError):
    ERROR_CODE = "InvalidArnException"


class InvalidCiphertextException(KMSServiceError):
    ERROR_CODE = "InvalidCiphertextException"


class InvalidGrantIdException(KMSServiceError):
    ERROR_CODE = "InvalidGrantIdException"


class InvalidGrantTokenException(KMSServiceError):
    ERROR_CODE = "InvalidGrantTokenException"


class InvalidImportTokenException(KMSServiceError):
    ERROR_CODE = "InvalidImportTokenException"


class InvalidKeyUsageException(KMSServiceError):
    ERROR_CODE = "InvalidKeyUsageException"


class InvalidMarkerException(KMSServiceError):
    ERROR_CODE = "InvalidMarkerException"


class KMSInternalException(KMSServiceError):
    ERROR_CODE = "KMSInternalException"


class KMSInvalidSignatureException(KMSServiceError):
    ERROR_CODE = "KMSInvalidSignatureException"


class KMSInvalidStateException(KMSServiceError):
    ERROR_CODE = "KMSInvalidStateException"


class KeyUnavailableException(KMSServiceError):
    ERROR_CODE = "KeyUnavailableException"


class LimitExceededException(KMSServiceError):
    ERROR_CODE = "LimitExceededException"


class MalformedPolicyDocumentException(KMSServiceError):
    ERROR_CODE = "MalformedPolicyDocumentException"


class NotFoundException(KMSServiceError):
    ERROR_CODE = "NotFoundException"


class TagException(KMSServiceError):
    ERROR_CODE = "TagException"


class UnsupportedOperationException(KMSServiceError):
    ERROR_CODE = "UnsupportedOperationException"


KMS_EXCEPTIONS = (
    AlreadyExistsException,
    CloudHsmClusterInUseException,
    CloudHsmClusterInvalidConfigurationException,
    CloudHsmClusterNotActiveException,
    CloudHsmClusterNotFoundException,
    CloudHsmClusterNotRelatedException,
    CustomKeyStoreHasCMKsException,
    CustomKeyStoreInvalidStateException,
    CustomKeyStoreNameInUseException,
    CustomKeyStoreNotFoundException,
    DependencyTimeoutException,
    DisabledException,
    ExpiredImportTokenException,
    IncorrectKeyException,
    IncorrectKeyMaterialException,
    IncorrectTrustAnchorException,
    InvalidAliasNameException,
    InvalidArnException,
    InvalidCiphertextException,
    InvalidGrantIdException,
    InvalidGrantTokenException,
    InvalidImportTokenException,
    InvalidKeyUsageException,
    InvalidMarkerException,
    KMSInternalException,
    KMSInvalidSignatureException,
    KMSInvalidStateException,
    KeyUnavailableException,
    LimitExceededException,
    MalformedPolicyDocumentException,
    NotFoundException,
    TagException,
    UnsupportedOperationException,
)
