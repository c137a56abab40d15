"""
Configuration module for client settings read from the environment.

This module validates the environment once and provides a type-safe
configuration object shared by every service client.
"""
import os
from dataclasses import dataclass
from typing import Optional

SDK_VERSION = "1.0.0"

DEFAULT_REGION = "us-east-1"


@dataclass
class ClientConfig:
    """Type-safe client configuration with validated environment variables."""

    region: str = DEFAULT_REGION
    protocol: str = "https"
    endpoint_url: Optional[str] = None
    connection_timeout: float = 15.0
    socket_timeout: float = 15.0
    max_error_retry: int = 3
    user_agent: str = f"aws-json-clients/{SDK_VERSION}"
    profile_name: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Create ClientConfig instance from environment variables.

        Raises:
            ValueError: If an environment variable holds an invalid value.
        """
        region = (
            os.environ.get("AWS_REGION")
            or os.environ.get("AWS_DEFAULT_REGION")
            or DEFAULT_REGION
        )

        protocol = os.environ.get("AWS_SDK_PROTOCOL", "https").lower()
        if protocol not in {"http", "https"}:
            raise ValueError(
                f"AWS_SDK_PROTOCOL must be http or https, got: {protocol}"
            )

        connection_timeout = _float_from_env("AWS_SDK_CONNECTION_TIMEOUT", 15.0)
        socket_timeout = _float_from_env("AWS_SDK_SOCKET_TIMEOUT", 15.0)
        max_error_retry = _int_from_env("AWS_SDK_MAX_ERROR_RETRY", 3)

        user_agent = os.environ.get(
            "AWS_SDK_USER_AGENT", f"aws-json-clients/{SDK_VERSION}"
        )
        log_level = os.environ.get("LOG_LEVEL", "INFO").upper()

        # Validate log level
        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if log_level not in valid_log_levels:
            raise ValueError(
                f"LOG_LEVEL must be one of {valid_log_levels}, got: {log_level}"
            )

        return cls(
            region=region,
            protocol=protocol,
            endpoint_url=os.environ.get("AWS_ENDPOINT_URL") or None,
            connection_timeout=connection_timeout,
            socket_timeout=socket_timeout,
            max_error_retry=max_error_retry,
            user_agent=user_agent,
            profile_name=os.environ.get("AWS_PROFILE") or None,
            log_level=log_level,
        )


def _float_from_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got: {raw}") from e
    if value <= 0:
        raise ValueError(f"{name} must be positive, got: {raw}")
    return value


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got: {raw}") from e
    if value < 0:
        raise ValueError(f"{name} must not be negative, got: {raw}")
    return value


# Global config instance - built on first use
_config: Optional[ClientConfig] = None


def get_config() -> ClientConfig:
    """
    Get the global configuration instance.

    Returns:
        ClientConfig: The validated configuration object

    Raises:
        ValueError: If an environment variable holds an invalid value.
    """
    global _config
    if _config is None:
        _config = ClientConfig.from_env()
    return _config
