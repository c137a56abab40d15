"""
Unit tests for model base behaviour: map entries, equality, hashing and enums.
"""
import pytest
from models.base import BODY, HEADER, wire_field
from models.cognito_identity_provider import (
    ChallengeNameType, RespondToAuthChallengeRequest, DeviceConfigurationType,
)
from models.kms import EncryptRequest, KeyState, Tag
from models.rekognition import Reason, TechnicalCueType


class TestMapEntries:
    """Tests for add_X_entry / clear_X_entries."""

    def test_add_entry_initialises_map(self):
        """Test the first add creates the map."""
        request = RespondToAuthChallengeRequest()
        assert request.challenge_responses is None

        request.add_challenge_responses_entry("USERNAME", "alice")

        assert request.challenge_responses == {"USERNAME": "alice"}

    def test_add_entry_returns_self(self):
        """Test add_X_entry chains."""
        request = RespondToAuthChallengeRequest()
        returned = (
            request
            .add_challenge_responses_entry("USERNAME", "alice")
            .add_challenge_responses_entry("SMS_MFA_CODE", "123456")
        )
        assert returned is request
        assert request.challenge_responses == {
            "USERNAME": "alice",
            "SMS_MFA_CODE": "123456",
        }

    def test_add_entry_duplicate_key(self):
        """Test adding a key twice raises and keeps the first value."""
        request = RespondToAuthChallengeRequest()
        request.add_client_metadata_entry("source", "web")

        with pytest.raises(ValueError, match=r"Duplicated keys \(source\) are provided."):
            request.add_client_metadata_entry("source", "mobile")

        assert request.client_metadata == {"source": "web"}

    def test_clear_entries_resets_to_none(self):
        """Test clear_X_entries leaves the map unset, not empty."""
        request = EncryptRequest().add_encryption_context_entry("purpose", "test")

        returned = request.clear_encryption_context_entries()

        assert returned is request
        assert request.encryption_context is None

    def test_add_after_clear(self):
        """Test the map can be rebuilt after clearing."""
        request = EncryptRequest().add_encryption_context_entry("a", "1")
        request.clear_encryption_context_entries()
        request.add_encryption_context_entry("a", "2")
        assert request.encryption_context == {"a": "2"}


class TestEqualityAndHash:
    """Tests for field-wise equality and hashing."""

    def test_equal_models(self):
        """Test models with the same fields are equal and hash alike."""
        first = Tag(tag_key="env", tag_value="prod")
        second = Tag(tag_key="env", tag_value="prod")
        assert first == second
        assert hash(first) == hash(second)

    def test_unequal_models(self):
        """Test one differing field breaks equality."""
        assert Tag(tag_key="env", tag_value="prod") != Tag(tag_key="env", tag_value="dev")

    def test_different_types_not_equal(self):
        """Test models of different classes never compare equal."""
        assert DeviceConfigurationType() != Tag()

    def test_hash_with_maps_and_nested_models(self):
        """Test models holding dicts are hashable and usable in sets."""
        first = RespondToAuthChallengeRequest(client_id="abc").add_challenge_responses_entry("k", "v")
        second = RespondToAuthChallengeRequest(client_id="abc").add_challenge_responses_entry("k", "v")
        assert len({first, second}) == 1

    def test_empty_models_equal(self):
        """Test unset models are equal."""
        assert DeviceConfigurationType() == DeviceConfigurationType()
        assert hash(DeviceConfigurationType()) == hash(DeviceConfigurationType())


class TestWithValues:
    """Tests for with_values chaining."""

    def test_with_values_sets_fields(self):
        """Test with_values sets fields and returns the instance."""
        request = RespondToAuthChallengeRequest()
        returned = request.with_values(client_id="abc", challenge_name=ChallengeNameType.SMS_MFA)
        assert returned is request
        assert request.client_id == "abc"
        assert request.challenge_name is ChallengeNameType.SMS_MFA

    def test_with_values_unknown_field(self):
        """Test with_values rejects names that are not fields."""
        with pytest.raises(AttributeError, match="no field 'clientId'"):
            RespondToAuthChallengeRequest().with_values(clientId="abc")


class TestAwsEnum:
    """Tests for AwsEnum.from_value."""

    def test_from_value(self):
        """Test wire values map to members."""
        assert KeyState.from_value("PendingDeletion") is KeyState.PENDING_DELETION
        assert TechnicalCueType.from_value("ColorBars") is TechnicalCueType.ColorBars
        assert Reason.from_value("LOW_SHARPNESS") is Reason.LOW_SHARPNESS

    @pytest.mark.parametrize("value", [None, ""])
    def test_from_value_empty(self, value):
        """Test empty values are rejected."""
        with pytest.raises(ValueError, match="Value cannot be null or empty!"):
            KeyState.from_value(value)

    def test_from_value_unknown(self):
        """Test unknown values are rejected."""
        with pytest.raises(ValueError, match="Cannot create enum from Melting value!"):
            KeyState.from_value("Melting")

    def test_str_is_wire_value(self):
        """Test str() renders the wire value."""
        assert str(ChallengeNameType.NEW_PASSWORD_REQUIRED) == "NEW_PASSWORD_REQUIRED"


class TestWireField:
    """Tests for wire_field declarations."""

    def test_unknown_location(self):
        """Test wire_field rejects unknown locations."""
        with pytest.raises(ValueError, match="Unknown field location"):
            wire_field("Foo", "query")

    def test_metadata(self):
        """Test wire_field records wire name and location."""
        field = wire_field("Content-Type", HEADER)
        assert field.default is None
        assert field.metadata["wire_name"] == "Content-Type"
        assert field.metadata["location"] == HEADER
        assert wire_field("Foo").metadata["location"] == BODY
