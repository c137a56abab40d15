"""
Per-call request metrics and execution context.
"""
import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Optional


class Field(Enum):
    """Timed phases of a single client call."""

    CLIENT_EXECUTE_TIME = "ClientExecuteTime"
    REQUEST_MARSHALL_TIME = "RequestMarshallTime"
    CREDENTIALS_REQUEST_TIME = "CredentialsRequestTime"
    REQUEST_SIGNING_TIME = "RequestSigningTime"
    HTTP_REQUEST_TIME = "HttpRequestTime"
    RESPONSE_PROCESSING_TIME = "ResponseProcessingTime"


class AwsRequestMetrics:
    """Collects timing events for one request.

    An event is started and ended by field; ending an event that was never
    started is ignored. Durations are reported in milliseconds.
    """

    def __init__(self) -> None:
        self._started: Dict[Field, float] = {}
        self._durations: Dict[Field, float] = {}

    def start_event(self, event: Field) -> None:
        self._started[event] = time.perf_counter()

    def end_event(self, event: Field) -> None:
        started = self._started.pop(event, None)
        if started is None:
            return
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        self._durations[event] = self._durations.get(event, 0.0) + elapsed_ms

    @contextmanager
    def timed(self, event: Field) -> Iterator[None]:
        self.start_event(event)
        try:
            yield
        finally:
            self.end_event(event)

    def duration(self, event: Field) -> Optional[float]:
        return self._durations.get(event)

    def as_dict(self) -> Dict[str, float]:
        return {event.value: round(ms, 3) for event, ms in self._durations.items()}


@dataclass
class ExecutionContext:
    """State owned by one client call, passed explicitly down the call path."""

    operation_name: str
    service_name: str
    correlation_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    metrics: AwsRequestMetrics = field(default_factory=AwsRequestMetrics)
