"""
Client decorators for execution context, logging and error reporting.
"""
import functools
from typing import Callable, Any
from logger_config import get_logger
from utils.exceptions import AmazonClientError, AmazonServiceError
from utils.metrics import ExecutionContext, Field

logger = get_logger(__name__)


def client_execution(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator for the invocation path of a service client.

    Provides:
    - A fresh ExecutionContext per call, passed to the wrapped function
    - Correlation ids on every log line of the call
    - ClientExecuteTime measurement and metric logging
    - Logging of failures, which are re-raised unchanged

    The wrapped function is called as
    ``func(service, operation, request, result_cls, context)``.

    Args:
        func: The invocation function to decorate

    Returns:
        Decorated function taking ``(service, operation, request, result_cls)``
    """
    @functools.wraps(func)
    def wrapper(service: Any, operation: Any, request: Any, result_cls: Any = None) -> Any:
        context = ExecutionContext(
            operation_name=operation.name,
            service_name=service.SERVICE_NAME,
        )
        log_extra = {"correlation_id": context.correlation_id}
        call_name = f"{service.SERVICE_NAME}.{operation.name}"

        logger.debug(f"{call_name} invoked", extra=log_extra)
        context.metrics.start_event(Field.CLIENT_EXECUTE_TIME)

        try:
            result = func(service, operation, request, result_cls, context)
            logger.debug(f"{call_name} completed successfully", extra=log_extra)
            return result

        except AmazonServiceError as e:
            # Error responses are expected outcomes; the caller decides
            logger.warning(
                f"{call_name} failed with {e.error_code} "
                f"(status {e.status_code}): {e.error_message}",
                extra=log_extra
            )
            raise

        except AmazonClientError as e:
            logger.error(
                f"{call_name} client error: {e.message}",
                extra=log_extra,
                exc_info=True
            )
            raise

        finally:
            context.metrics.end_event(Field.CLIENT_EXECUTE_TIME)
            logger.debug(
                f"{call_name} request metrics: {context.metrics.as_dict()}",
                extra=log_extra
            )

    return wrapper
