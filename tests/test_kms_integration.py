"""
Integration tests for KMSService against moto's KMS backend.

Requests go through the real marshalling, SigV4 signing and requests
transport; moto intercepts them at the HTTP adapter.
"""
import pytest
from moto import mock_aws
import os
import sys

# Add parent directory to path to import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from config import ClientConfig
from models.kms import (
    CreateAliasRequest, CreateKeyRequest, DescribeKeyRequest,
    DisableKeyRequest, EncryptRequest, DecryptRequest, KeyState,
    ListAliasesRequest, NotFoundException, ScheduleKeyDeletionRequest, Tag,
)
from services.credentials import StaticCredentialsProvider
from services.kms_service import KMSService


@pytest.fixture
def kms_service():
    """KMS client with fixed credentials and no custom endpoint."""
    service = KMSService(
        credentials_provider=StaticCredentialsProvider("testing", "testing"),
        config=ClientConfig(region="us-east-1", max_error_retry=0),
    )
    yield service
    service.shutdown()


@pytest.mark.integration
@mock_aws()
def test_create_and_describe_key(kms_service):
    """Test a key created through the client can be described."""
    created = kms_service.create_key(CreateKeyRequest(
        description="integration key",
        tags=[Tag(tag_key="env", tag_value="test")],
    ))
    key_id = created.key_metadata.key_id

    described = kms_service.describe_key(DescribeKeyRequest(key_id=key_id))

    assert described.key_metadata.key_id == key_id
    assert described.key_metadata.description == "integration key"
    assert described.key_metadata.key_state is KeyState.ENABLED
    assert described.key_metadata.creation_date is not None


@pytest.mark.integration
@mock_aws()
def test_create_key_without_request(kms_service):
    """Test the no-argument overload creates a default key."""
    created = kms_service.create_key()

    keys = kms_service.list_keys()

    assert created.key_metadata.key_id in [k.key_id for k in keys.keys]


@pytest.mark.integration
@mock_aws()
def test_describe_unknown_key_raises_not_found(kms_service):
    """Test the typed exception for an unknown key."""
    with pytest.raises(NotFoundException) as exc_info:
        kms_service.describe_key(
            DescribeKeyRequest(key_id="00000000-0000-0000-0000-000000000000")
        )

    assert exc_info.value.error_code == "NotFoundException"
    assert exc_info.value.status_code == 400


@pytest.mark.integration
@mock_aws()
def test_encrypt_decrypt_round_trip(kms_service):
    """Test blobs survive base64 encoding in both directions."""
    key_id = kms_service.create_key().key_metadata.key_id

    encrypted = kms_service.encrypt(
        EncryptRequest(key_id=key_id, plaintext=b"attack at dawn")
        .add_encryption_context_entry("purpose", "test")
    )
    decrypted = kms_service.decrypt(
        DecryptRequest(ciphertext_blob=encrypted.ciphertext_blob)
        .add_encryption_context_entry("purpose", "test")
    )

    assert decrypted.plaintext == b"attack at dawn"


@pytest.mark.integration
@mock_aws()
def test_alias_and_key_lifecycle(kms_service):
    """Test void operations and response metadata."""
    key_id = kms_service.create_key().key_metadata.key_id
    alias_request = CreateAliasRequest(alias_name="alias/integration", target_key_id=key_id)

    assert kms_service.create_alias(alias_request) is None
    assert kms_service.get_cached_response_metadata(alias_request) is not None

    aliases = kms_service.list_aliases(ListAliasesRequest(key_id=key_id))
    assert "alias/integration" in [a.alias_name for a in aliases.aliases]

    kms_service.disable_key(DisableKeyRequest(key_id=key_id))
    scheduled = kms_service.schedule_key_deletion(
        ScheduleKeyDeletionRequest(key_id=key_id, pending_window_in_days=7)
    )
    assert scheduled.key_id.endswith(key_id)
    assert scheduled.deletion_date is not None
