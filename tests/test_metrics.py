"""
Unit tests for request metrics and the execution context.
"""
from unittest.mock import patch
from utils.metrics import AwsRequestMetrics, ExecutionContext, Field


class TestAwsRequestMetrics:
    """Tests for AwsRequestMetrics."""

    @patch('utils.metrics.time.perf_counter', side_effect=[1.0, 1.25])
    def test_start_end_event(self, mock_clock):
        metrics = AwsRequestMetrics()

        metrics.start_event(Field.HTTP_REQUEST_TIME)
        metrics.end_event(Field.HTTP_REQUEST_TIME)

        assert metrics.duration(Field.HTTP_REQUEST_TIME) == 250.0
        assert metrics.as_dict() == {"HttpRequestTime": 250.0}

    @patch('utils.metrics.time.perf_counter', side_effect=[0.0, 0.001, 1.0, 1.002])
    def test_timed_accumulates(self, mock_clock):
        """Test repeated events add up."""
        metrics = AwsRequestMetrics()

        with metrics.timed(Field.REQUEST_SIGNING_TIME):
            pass
        with metrics.timed(Field.REQUEST_SIGNING_TIME):
            pass

        assert round(metrics.duration(Field.REQUEST_SIGNING_TIME), 3) == 3.0

    def test_end_without_start_ignored(self):
        metrics = AwsRequestMetrics()
        metrics.end_event(Field.CLIENT_EXECUTE_TIME)
        assert metrics.duration(Field.CLIENT_EXECUTE_TIME) is None
        assert metrics.as_dict() == {}

    def test_timed_records_on_exception(self):
        """Test a failing block still records its duration."""
        metrics = AwsRequestMetrics()
        try:
            with metrics.timed(Field.HTTP_REQUEST_TIME):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert metrics.duration(Field.HTTP_REQUEST_TIME) is not None


class TestExecutionContext:
    """Tests for ExecutionContext."""

    def test_fresh_state_per_call(self):
        first = ExecutionContext(operation_name="DescribeKey", service_name="AWSKMS")
        second = ExecutionContext(operation_name="DescribeKey", service_name="AWSKMS")

        assert first.correlation_id != second.correlation_id
        assert first.metrics is not second.metrics
