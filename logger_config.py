"""
Logging configuration for the service clients.

Every record carries a correlation id so the log lines of a single
client call can be grouped together.
"""
import logging
import os
import sys

LOGGER_NAMESPACE = "aws_json_clients"


class CorrelationIdFilter(logging.Filter):
    """Default the correlation_id attribute for records logged without one."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = "-"
        return True


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Module name, nested under the client logger namespace

    Returns:
        Configured logger instance
    """
    logger_name = f"{LOGGER_NAMESPACE}.{name}" if name else LOGGER_NAMESPACE
    logger = logging.getLogger(logger_name)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    logger.setLevel(getattr(logging, log_level, logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logger.level)
    handler.addFilter(CorrelationIdFilter())

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    # Prevent propagation to root logger to avoid duplicate logs
    logger.propagate = False

    return logger
