"""
Base classes for request, result and structure models.

Models are plain dataclasses. Every field defaults to None, meaning unset,
and carries its wire name in the field metadata.
"""
import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Hashable, Optional

WIRE_NAME = "wire_name"
LOCATION = "location"

# Where a field lives in the HTTP exchange
BODY = "body"
HEADER = "header"
PAYLOAD = "payload"

# Models compare and hash through AwsModel, so the generated __eq__ is disabled
shape = dataclass(eq=False)


def wire_field(wire_name: str, location: str = BODY) -> Any:
    """
    Declare a model field.

    Args:
        wire_name: Member name on the wire (JSON key or HTTP header)
        location: BODY, HEADER or PAYLOAD

    Returns:
        A dataclass field defaulting to None
    """
    if location not in (BODY, HEADER, PAYLOAD):
        raise ValueError(f"Unknown field location: {location}")
    return dataclasses.field(
        default=None,
        metadata={WIRE_NAME: wire_name, LOCATION: location},
    )


class AwsEnum(str, Enum):
    """String-valued enumeration of an API model."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_value(cls, value: Optional[str]) -> "AwsEnum":
        """
        Look up the member for a wire value.

        Raises:
            ValueError: If value is empty or not a member of this enum
        """
        if value is None or value == "":
            raise ValueError("Value cannot be null or empty!")
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Cannot create enum from {value} value!") from None


def _freeze(value: Any) -> Hashable:
    if isinstance(value, dict):
        return frozenset((k, _freeze(v)) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, bytearray):
        return bytes(value)
    return value


class AwsModel:
    """Common behaviour of every model dataclass."""

    # Not a dataclass field, so it never reaches the wire or equality
    request_credentials_provider = None

    def _field_values(self) -> tuple:
        return tuple(getattr(self, f.name) for f in dataclasses.fields(self))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._field_values() == other._field_values()

    def __hash__(self) -> int:
        return hash((type(self).__name__, _freeze(self._field_values())))

    def with_values(self, **values: Any) -> "AwsModel":
        """
        Set several fields and return this instance for chaining.

        Raises:
            AttributeError: If a name is not a field of this model
        """
        names = {f.name for f in dataclasses.fields(self)}
        for name, value in values.items():
            if name not in names:
                raise AttributeError(
                    f"{type(self).__name__} has no field '{name}'"
                )
            setattr(self, name, value)
        return self

    def with_request_credentials_provider(self, provider: Any) -> "AwsModel":
        """
        Resolve credentials for calls made with this request from provider.

        Overrides the provider of the client for this request only. Use
        AnonymousCredentialsProvider to send the call unsigned.
        """
        self.request_credentials_provider = provider
        return self

    def _add_entry(self, field_name: str, key: Any, value: Any) -> "AwsModel":
        entries: Optional[Dict[Any, Any]] = getattr(self, field_name)
        if entries is None:
            entries = {}
            setattr(self, field_name, entries)
        if key in entries:
            raise ValueError(f"Duplicated keys ({key}) are provided.")
        entries[key] = value
        return self

    def _clear_entries(self, field_name: str) -> "AwsModel":
        setattr(self, field_name, None)
        return self
