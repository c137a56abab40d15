"""
Marshalling between models and the JSON wire format.

The projection is driven by each model's field metadata (wire names and
locations) and type annotations, so models need no per-class marshaller.
"""
import base64
import binascii
import dataclasses
import json
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from functools import lru_cache
from typing import (
    Any, Dict, Iterable, List, Mapping, Optional, Tuple, Type, Union,
    get_args, get_origin, get_type_hints,
)
from dateutil import parser as date_parser
from logger_config import get_logger
from models.base import AwsModel, BODY, LOCATION, WIRE_NAME
from utils.exceptions import AmazonClientError, AmazonServiceError, ErrorType

logger = get_logger(__name__)

_NoneType = type(None)


@dataclass(frozen=True)
class _WireMember:
    name: str
    wire_name: str
    location: str
    type_hint: Any


@lru_cache(maxsize=None)
def _members(model_cls: Type[AwsModel]) -> Tuple[_WireMember, ...]:
    hints = get_type_hints(model_cls)
    return tuple(
        _WireMember(
            name=f.name,
            wire_name=f.metadata[WIRE_NAME],
            location=f.metadata[LOCATION],
            type_hint=hints.get(f.name, Any),
        )
        for f in dataclasses.fields(model_cls)
        if WIRE_NAME in f.metadata
    )


def members_at(model_cls: Type[AwsModel], location: str) -> Tuple[_WireMember, ...]:
    """Return the wire members of model_cls declared at a location."""
    return tuple(m for m in _members(model_cls) if m.location == location)


@lru_cache(maxsize=None)
def _body_index(model_cls: Type[AwsModel]) -> Dict[str, _WireMember]:
    return {m.wire_name: m for m in members_at(model_cls, BODY)}


def to_epoch_seconds(value: datetime) -> float:
    """
    Convert a datetime to epoch seconds for the wire.

    The wire carries millisecond precision, so microseconds are rounded to
    the nearest millisecond. A naive datetime is read as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return round(value.timestamp(), 3)


def _from_epoch_seconds(value: float) -> datetime:
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError) as e:
        raise ValueError(f"Timestamp out of range: {value!r}") from e


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse an epoch-seconds number or an ISO-8601 string as a UTC datetime.

    The result is always timezone-aware and in UTC. An ISO-8601 string
    without an offset is read as UTC.

    Raises:
        ValueError: If value is not a timestamp or is out of range
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Invalid timestamp: {value!r}")
    if isinstance(value, (int, float)):
        return _from_epoch_seconds(value)
    if isinstance(value, str):
        try:
            seconds = float(value)
        except ValueError:
            parsed = date_parser.isoparse(value)
            if parsed.tzinfo is None:
                return parsed.replace(tzinfo=timezone.utc)
            return parsed.astimezone(timezone.utc)
        return _from_epoch_seconds(seconds)
    raise ValueError(f"Invalid timestamp: {value!r}")


def marshall(model: AwsModel) -> Dict[str, Any]:
    """
    Project a model onto a JSON object keyed by wire names.

    Unset fields are omitted. Header and payload members are left to the
    caller. Datetimes go out as epoch seconds with millisecond precision and
    bytes as base64; see to_epoch_seconds.

    Args:
        model: Populated request or structure model

    Returns:
        JSON-ready dictionary
    """
    document: Dict[str, Any] = {}
    for member in members_at(type(model), BODY):
        value = getattr(model, member.name)
        if value is None:
            continue
        document[member.wire_name] = _marshall_value(value)
    return document


def _marshall_value(value: Any) -> Any:
    if isinstance(value, AwsModel):
        return marshall(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return to_epoch_seconds(value)
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, Mapping):
        return {
            str(_marshall_value(k)): _marshall_value(v)
            for k, v in value.items()
            if v is not None
        }
    if isinstance(value, (list, tuple)):
        return [_marshall_value(v) for v in value if v is not None]
    return value


def marshall_json(model: AwsModel) -> bytes:
    """Marshall a model to a UTF-8 JSON document."""
    return json.dumps(marshall(model), separators=(",", ":")).encode("utf-8")


def unmarshall(model_cls: Type[AwsModel], data: Any) -> Optional[AwsModel]:
    """
    Build a model from a decoded JSON object.

    Unknown members are skipped. A non-object input yields None.
    Timestamps come back as timezone-aware UTC datetimes.

    Args:
        model_cls: Model class to populate
        data: Decoded JSON value

    Returns:
        Populated model, or None
    """
    if not isinstance(data, Mapping):
        return None
    index = _body_index(model_cls)
    values: Dict[str, Any] = {}
    for wire_name, raw in data.items():
        member = index.get(wire_name)
        if member is None:
            continue
        values[member.name] = _unmarshall_value(member.type_hint, raw)
    return model_cls(**values)


def _unwrap_optional(type_hint: Any) -> Any:
    if get_origin(type_hint) is Union:
        # Enum fields are annotated Union[SomeEnum, str]; the first member decodes
        args = [a for a in get_args(type_hint) if a is not _NoneType]
        return args[0]
    return type_hint


def _unmarshall_value(type_hint: Any, raw: Any) -> Any:
    if raw is None:
        return None
    type_hint = _unwrap_optional(type_hint)
    origin = get_origin(type_hint)

    if origin is list:
        if not isinstance(raw, list):
            return None
        (item_type,) = get_args(type_hint) or (Any,)
        return [_unmarshall_value(item_type, item) for item in raw]

    if origin is dict:
        if not isinstance(raw, Mapping):
            return None
        args = get_args(type_hint)
        value_type = args[1] if len(args) == 2 else Any
        return {k: _unmarshall_value(value_type, v) for k, v in raw.items()}

    if not isinstance(type_hint, type):
        return raw
    if issubclass(type_hint, AwsModel):
        return unmarshall(type_hint, raw)
    if issubclass(type_hint, Enum):
        try:
            return type_hint(raw)
        except ValueError:
            # Values added to the API after this client was written
            return raw
    if issubclass(type_hint, datetime):
        return parse_timestamp(raw)
    if issubclass(type_hint, bytes):
        try:
            return base64.b64decode(raw)
        except (binascii.Error, TypeError) as e:
            raise AmazonClientError(f"Unable to decode base64 blob: {e}") from e
    if type_hint is float and isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return float(raw)
    return raw


def unmarshall_json(model_cls: Type[AwsModel], content: bytes) -> AwsModel:
    """
    Build a model from a JSON response body.

    An empty body yields an empty model.

    Raises:
        AmazonClientError: If the body is not a JSON object
    """
    if not content or not content.strip():
        return model_cls()
    try:
        data = json.loads(content)
    except ValueError as e:
        raise AmazonClientError(
            f"Unable to unmarshall response ({e}) into {model_cls.__name__}"
        ) from e
    if not isinstance(data, Mapping):
        raise AmazonClientError(
            f"Unable to unmarshall response into {model_cls.__name__}: "
            f"expected a JSON object"
        )
    return unmarshall(model_cls, data)


@dataclass
class JsonErrorResponse:
    """An HTTP error response decoded far enough to pick an exception type."""

    status_code: int
    error_code: Optional[str]
    message: Optional[str]
    request_id: Optional[str]
    data: Dict[str, Any]

    @classmethod
    def from_http(
        cls,
        status_code: int,
        headers: Mapping[str, str],
        content: bytes
    ) -> "JsonErrorResponse":
        """
        Decode an error response.

        The error code comes from the x-amzn-ErrorType header when present,
        otherwise from the __type or code members of the body.
        """
        data: Dict[str, Any] = {}
        if content:
            try:
                decoded = json.loads(content)
                if isinstance(decoded, dict):
                    data = decoded
            except ValueError:
                logger.debug(f"Error response body is not JSON (status {status_code})")

        error_code = _error_code_from_header(headers.get("x-amzn-ErrorType"))
        if error_code is None:
            error_type = data.get("__type")
            if isinstance(error_type, str) and error_type:
                error_code = error_type.rsplit("#", 1)[-1]
            else:
                error_code = data.get("code") or data.get("Code")

        message = (
            data.get("message")
            or data.get("Message")
            or data.get("errorMessage")
        )
        return cls(
            status_code=status_code,
            error_code=error_code,
            message=message,
            request_id=headers.get("x-amzn-RequestId"),
            data=data,
        )


def _error_code_from_header(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    return value.split(":", 1)[0] or None


class JsonErrorUnmarshaller:
    """Map wire error codes to the exception classes of one service.

    Exception classes are registered in order; a code may be registered
    once. Unknown codes produce the fallback class with the wire code kept.
    """

    def __init__(
        self,
        exception_classes: Iterable[Type[AmazonServiceError]],
        fallback: Type[AmazonServiceError] = AmazonServiceError,
        service_name: Optional[str] = None
    ):
        self.fallback = fallback
        self.service_name = service_name
        self._by_code: Dict[str, Type[AmazonServiceError]] = {}
        for exception_cls in exception_classes:
            code = exception_cls.ERROR_CODE
            if not code:
                raise ValueError(f"{exception_cls.__name__} declares no ERROR_CODE")
            if code in self._by_code:
                raise ValueError(f"Error code {code} registered twice")
            self._by_code[code] = exception_cls

    @property
    def error_codes(self) -> List[str]:
        return list(self._by_code)

    def match(self, error_code: Optional[str]) -> Optional[Type[AmazonServiceError]]:
        if error_code is None:
            return None
        return self._by_code.get(error_code)

    def unmarshall(self, error: JsonErrorResponse) -> AmazonServiceError:
        exception_cls = self.match(error.error_code) or self.fallback
        return exception_cls(
            error.message or f"{error.error_code or 'Unknown'} error",
            error_code=error.error_code,
            status_code=error.status_code,
            request_id=error.request_id,
            service_name=self.service_name,
            error_type=ErrorType.from_status_code(error.status_code),
            response_data=error.data,
        )
